"""Two-stack integer sorting puzzle: stack operations, input checks, sorting and small C-style helpers."""

__version__ = "0.1.0"