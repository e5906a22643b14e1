"""Bidi character types, Arabic joining, run lists and bidi mark removal."""

__version__ = "1.0.4"
__all__ = ["types", "joining_types", "info", "joining", "runs", "legacy"]