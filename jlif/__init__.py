"""Find, format, colorize and filter JSON in line-oriented text streams."""

__version__ = "1.0.0"
__all__ = ["__version__"]