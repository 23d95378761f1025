from .controller import UserController

__all__ = ["UserController"]
