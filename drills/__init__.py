"""Small array, string, search, digit and number exercises."""

__version__ = "0.1.0"
__all__ = ["arrays", "digits", "numbers", "searching", "sorting", "strings"]