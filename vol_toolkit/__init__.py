"""Extract Sierra Driver's Education '98/'99 .vol archives."""

__version__ = "0.1.0"
