from .controller import SerialController

__all__ = ["SerialController"]
