from __future__ import annotations
"""Cleaner protocol definitions."""

from typing import Optional, Protocol, runtime_checkable

from jsclean.core.models import CleanResult


@runtime_checkable
class CleanerProtocol(Protocol):
    """Text-in/text-out cleaner for one language.

    Methods:
        clean: Return the cleaned text together with per-run statistics.
        strip: Return only the cleaned text.
    """

    def clean(self, source: str) -> CleanResult:
        ...

    def strip(self, source: str, *, filename: Optional[str] = None) -> str:
        ...
