from __future__ import annotations
"""File collaborator around the in-memory cleaner.

Reads a file as bytes, keeps a verbatim '<file>.bak' copy, cleans the
content and writes the result back in place. The cleaner itself never touches
the filesystem; everything here is plain buffer-in/buffer-out around it.

Bytes are decoded as latin-1 so every input byte maps to exactly one
character and the file round-trips unchanged outside the removed spans,
whatever its actual ASCII-compatible encoding.
"""
from pathlib import Path
from typing import Callable, Optional

from jsclean.core.interfaces.cleaner import CleanerProtocol
from jsclean.core.interfaces.logging import LoggerLikeProtocol
from jsclean.core.models import CleanOptions, FileOutcome
from jsclean.core.report import RunReport, StageTimer
from jsclean.logging.helpers import get_logger, log_context, trace_io
from jsclean.processing.cleaner_registry import LanguageCleanerRegistry
from jsclean.utils.paths import backup_path

_CODEC = 'latin-1'


class FileCleaningService:
    def __init__(
        self,
        *,
        options: Optional[CleanOptions] = None,
        registry: Optional[LanguageCleanerRegistry] = None,
        backup: bool = True,
        write: bool = True,
        report: Optional[RunReport] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('io.files')
        self._registry = registry or LanguageCleanerRegistry.default(options)
        self._backup = backup
        self._write = write
        self._report = report or RunReport()

    @property
    def report(self) -> RunReport:
        return self._report

    def _cleaner_for(self, path: Path) -> CleanerProtocol:
        cleaner = self._registry.for_suffix(path.suffix)
        if cleaner is None:
            # Explicitly named files are treated as JavaScript.
            cleaner = self._registry.for_suffix('.js')
        if cleaner is None:
            raise LookupError(f'no cleaner registered for {path.suffix or path.name!r}')
        return cleaner

    def process(self, path: Path) -> FileOutcome:
        """Clean a single file in place. Raises OSError on I/O failures."""
        path = Path(path)
        self._log.info('Processing: %s ...', path)

        with StageTimer(self._report, 'read'):
            raw = path.read_bytes()
        trace_io(self._log, 'read', path=str(path), size=len(raw))

        backup: Optional[Path] = None
        if self._backup and self._write:
            backup = backup_path(path)
            with StageTimer(self._report, 'write'):
                backup.write_bytes(raw)
            trace_io(self._log, 'backup written', path=str(backup))

        with StageTimer(self._report, 'clean'):
            result = self._cleaner_for(path).clean(raw.decode(_CODEC))
            cleaned = result.text.encode(_CODEC)

        changed = cleaned != raw
        ctx = log_context(
            path=str(path),
            bytes_in=len(raw),
            bytes_out=len(cleaned),
            changed=changed,
            **result.stats.as_dict(),
        )
        if self._write and changed:
            with StageTimer(self._report, 'write'):
                path.write_bytes(cleaned)
            self._log.info('Done. Saved to %s', path, extra=ctx)
        elif self._write:
            self._log.info('Done. %s unchanged', path, extra=ctx)
        else:
            self._log.debug('Done. %s not written', path, extra=ctx)

        return FileOutcome(
            path=path,
            bytes_in=len(raw),
            bytes_out=len(cleaned),
            changed=changed,
            stats=result.stats,
            backup=backup,
            output=None if self._write else cleaned,
        )

    def process_many(self, paths, *, sink: Optional[Callable[[FileOutcome], None]] = None) -> RunReport:
        """Process *paths* in order; failures are logged and recorded, not raised.

        *sink*, when given, receives every successful outcome (used by --stdout).
        """
        for p in paths:
            try:
                outcome = self.process(p)
            except OSError as exc:
                reason = str(exc.strerror or exc)
                self._log.error('Error: %s: %s', p, reason, extra=log_context(path=str(p), errno=exc.errno))
                self._report.add_failure(Path(p), reason)
                continue
            self._report.add_outcome(outcome)
            if sink is not None:
                sink(outcome)
        return self._report
