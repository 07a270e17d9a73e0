"""Logging helpers scoped to the 'jsclean' logger tree."""
__all__ = [
    "factory",
    "helpers",
]
