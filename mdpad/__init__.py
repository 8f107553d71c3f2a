"""mdpad: a single-window markdown editor."""

__version__ = "0.1.0"
