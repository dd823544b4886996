"""Two-stack sorting puzzle solver, its command line, and small string and formatting helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "textops", "cstrings", "cformat", "stacks", "parsing", "sorting", "cli"]