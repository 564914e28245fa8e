"""Vector helpers, binary array files, progress display, value formatting and JSON parameters."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "formatting",
    "params",
    "progress",
    "vectors",
]