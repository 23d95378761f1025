from .controller import ReportsController

__all__ = ["ReportsController"]
