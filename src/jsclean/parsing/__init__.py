"""Command-line parsing for jsclean."""
__all__ = ["parser"]
