from .controller import ReturnController

__all__ = ["ReturnController"]
