"""A printf-style formatter with a fixed set of conversions and flags."""

__version__ = "0.1.0"
__all__ = ["__version__"]