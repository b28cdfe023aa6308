"""Double Strike: capture-only chess puzzle generator."""

__version__ = "0.1.0"
