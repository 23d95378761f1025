from .controller import DashboardController

__all__ = ["DashboardController"]
