from __future__ import annotations
"""Suffix utilities for include filters.

Semantics:
    * Tokens WITHOUT a dot are bare extensions and get a dot prefix:
      "js" -> ".js".
    * Tokens WITH a dot are filename tails and are kept as-is:
      ".mjs" stays ".mjs", "app.min.js" stays "app.min.js".
    * Matching uses `str.endswith(...)` over the basename.

When no suffix is given on the CLI, the JS family from
`jsclean.constants.JS_SUFFIXES` is used.
"""

from typing import Sequence, Set

from jsclean.constants import BACKUP_SUFFIX, JS_SUFFIXES


def normalize_suffixes(suffixes: Sequence[str] | None) -> list[str]:
    """Normalize suffix tokens from CLI."""
    if not suffixes:
        return []
    out: list[str] = []
    for raw in suffixes:
        s = (raw or "").strip()
        if not s:
            continue
        if "." in s:
            out.append(s)
        else:
            out.append(f".{s}")
    return out


def compute_suffix_filter(include: Sequence[str] | None) -> Set[str]:
    """Return the include set, falling back to the JS family."""
    return set(normalize_suffixes(include)) or set(JS_SUFFIXES)


def is_suffix_allowed(filename: str, include: Set[str]) -> bool:
    """Return True if a filename ends with an included suffix and is not a backup."""
    if filename.endswith(BACKUP_SUFFIX):
        return False
    return any(filename.endswith(s) for s in include)
