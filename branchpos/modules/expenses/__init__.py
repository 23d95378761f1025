from .controller import ExpenseController

__all__ = ["ExpenseController"]
