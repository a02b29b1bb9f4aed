"""A command-line task manager keeping named task lists as text files."""

__version__ = "0.1.0"
__all__ = ["__version__"]