"""Validation results, validator interfaces and built-in validators for user answers."""

__version__ = "0.1.0"
__all__ = ["builtin", "validation"]