from .controller import RefundController

__all__ = ["RefundController"]
