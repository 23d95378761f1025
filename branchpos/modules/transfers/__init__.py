from .controller import TransferController

__all__ = ["TransferController"]
