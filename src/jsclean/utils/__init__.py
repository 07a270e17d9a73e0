"""Small shared helpers (paths, suffix filters)."""
__all__ = ["paths", "suffixes"]
