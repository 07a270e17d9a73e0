from __future__ import annotations

"""
Run report for a CLI invocation.

Aggregates per-file outcomes (sizes, change flag, cleaning statistics), the
time spent per stage and the per-file errors that did not stop the run.
"""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from jsclean.core.models import CleanStats, FileOutcome


@dataclass
class RunReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    files_total: int = 0
    files_changed: int = 0
    files_failed: int = 0

    bytes_in: int = 0
    bytes_out: int = 0

    stats: CleanStats = field(default_factory=CleanStats)

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {
            "discovery": 0.0,
            "read": 0.0,
            "clean": 0.0,
            "write": 0.0,
        }
    )

    files: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.files_failed == 0

    def add_outcome(self, outcome: FileOutcome) -> None:
        self.files_total += 1
        self.files.append(str(outcome.path))
        self.bytes_in += outcome.bytes_in
        self.bytes_out += outcome.bytes_out
        if outcome.changed:
            self.files_changed += 1
        self.stats.merge(outcome.stats)

    def add_failure(self, path: Path, message: str) -> None:
        self.files_total += 1
        self.files_failed += 1
        self.files.append(str(path))
        self.errors.append(f"{path}: {message}")

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "files_total": self.files_total,
                "files_changed": self.files_changed,
                "files_failed": self.files_failed,
                "bytes_in": self.bytes_in,
                "bytes_out": self.bytes_out,
                "stats": self.stats.as_dict(),
                "time_by_stage": self.time_by_stage,
                "files": self.files,
                "errors": self.errors,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: RunReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
