from __future__ import annotations

"""Public surface for jsclean.core: data models, protocols and the run report."""

from jsclean.core.interfaces import CleanerProtocol, LoggerFactoryProtocol, LoggerLikeProtocol
from jsclean.core.models import CleanOptions, CleanResult, CleanStats, FileOutcome
from jsclean.core.report import RunReport, StageTimer

__all__ = [
    "CleanerProtocol",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "CleanOptions",
    "CleanResult",
    "CleanStats",
    "FileOutcome",
    "RunReport",
    "StageTimer",
]
