"""Filesystem collaborators: file discovery and in-place cleaning."""
__all__ = ["file_service", "walker"]
