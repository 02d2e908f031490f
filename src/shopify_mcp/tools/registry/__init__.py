from .base import OperationRegistry

__all__ = ["OperationRegistry"]
