"""Solar position and sky gradient engine for weather display backgrounds."""

__all__ = ["__version__"]

__version__ = "0.1.0"
