"""Terminal point-of-sale: sale registration, file storage and sales reports."""

__version__ = "0.1.0"
__all__ = ["__version__"]