# src/jsclean/utils/paths.py
"""
paths – Small, centralized path helpers for jsclean.

Provides:
  • is_hidden_path(Path)         – dot-segment detection
  • is_within_dir(path, parent)  – containment check
  • backup_path(Path)            – sibling '.bak' location for a source file
"""

from __future__ import annotations

from pathlib import Path

from jsclean.constants import BACKUP_SUFFIX


def is_hidden_path(p: Path) -> bool:
    """Return True if *p* has any hidden segment (leading-dot component).

    '.' and '..' are navigation, not hidden names.
    """
    return any(part.startswith(".") and part not in (".", "..") for part in p.parts)


def is_within_dir(path: Path, parent: Path) -> bool:
    """Return True if *path* is contained inside *parent*."""
    try:
        path.resolve().relative_to(Path(parent).resolve())
        return True
    except ValueError:
        return False


def backup_path(p: Path) -> Path:
    """Return '<file>.bak' next to *p* ('app.js' → 'app.js.bak')."""
    return p.with_name(p.name + BACKUP_SUFFIX)
