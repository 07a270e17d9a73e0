from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from jsclean.constants import CALL_REPLACEMENT, CONSOLE_METHODS, REFERENCE_REPLACEMENT


@dataclass(frozen=True)
class CleanOptions:
    """Switches for a single cleaning pass."""
    strip_comments: bool = True
    erase_console: bool = True
    elide_comment_lines: bool = True
    console_methods: Sequence[str] = CONSOLE_METHODS
    keep_methods: Sequence[str] = ()
    call_replacement: str = CALL_REPLACEMENT
    reference_replacement: str = REFERENCE_REPLACEMENT

    def erasable_methods(self) -> frozenset[str]:
        keep = set(self.keep_methods)
        return frozenset(m for m in self.console_methods if m not in keep)


@dataclass
class CleanStats:
    comments_removed: int = 0
    lines_elided: int = 0
    console_calls: int = 0
    console_refs: int = 0
    regex_literals: int = 0

    def merge(self, other: 'CleanStats') -> None:
        self.comments_removed += other.comments_removed
        self.lines_elided += other.lines_elided
        self.console_calls += other.console_calls
        self.console_refs += other.console_refs
        self.regex_literals += other.regex_literals

    def as_dict(self) -> dict[str, int]:
        return {
            'comments_removed': self.comments_removed,
            'lines_elided': self.lines_elided,
            'console_calls': self.console_calls,
            'console_refs': self.console_refs,
            'regex_literals': self.regex_literals,
        }


@dataclass(frozen=True)
class CleanResult:
    text: str
    stats: CleanStats = field(default_factory=CleanStats)


@dataclass(frozen=True)
class FileOutcome:
    path: Path
    bytes_in: int
    bytes_out: int
    changed: bool
    stats: CleanStats
    backup: Path | None = None
    output: bytes | None = None
