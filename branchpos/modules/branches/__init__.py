from .controller import BranchController

__all__ = ["BranchController"]
