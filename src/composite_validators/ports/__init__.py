from .validation import IValidator

__all__ = ["IValidator"]
