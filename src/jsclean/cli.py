from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence

from jsclean.constants import DEFAULT_TARGET
from jsclean.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from jsclean.core.models import CleanOptions, FileOutcome
from jsclean.core.report import RunReport, StageTimer
from jsclean.io.file_service import FileCleaningService
from jsclean.io.walker import SourceWalker
from jsclean.logging.factory import DefaultLoggerFactory
from jsclean.logging.helpers import get_logger, log_context
from jsclean.parsing.parser import _build_parser


logger: LoggerLikeProtocol = get_logger('jsclean')
_factory: Optional[LoggerFactoryProtocol] = None


def _configure_logging(enable_json: bool, level: int = logging.INFO) -> LoggerFactoryProtocol:
    """Configure process-wide logging, either JSON or plain text.

    A call with the same mode as the previous one reuses its factory; a
    different mode reconfigures the shared base handler.
    """
    global logger, _factory
    mode = (bool(enable_json), level)
    if _factory is not None and getattr(_configure_logging, '_configured_mode', None) == mode:
        return _factory
    _factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    logger = _factory.get_logger('jsclean')
    setattr(_configure_logging, '_configured_mode', mode)
    return _factory


def _log_level(ns: argparse.Namespace) -> int:
    if ns.verbose:
        return logging.DEBUG
    if ns.quiet:
        return logging.WARNING
    return logging.INFO


def _options_from_ns(ns: argparse.Namespace) -> CleanOptions:
    return CleanOptions(
        strip_comments=not ns.keep_comments,
        erase_console=not ns.keep_console,
        elide_comment_lines=not ns.keep_comment_lines,
        keep_methods=tuple(ns.keep_methods or ()),
    )


def _resolve_targets(ns: argparse.Namespace, parser: argparse.ArgumentParser) -> List[Path]:
    if ns.paths:
        return [Path(p) for p in ns.paths]
    default = Path(DEFAULT_TARGET)
    if default.is_file():
        logger.info('no PATH given, using ./%s', DEFAULT_TARGET)
        return [default]
    parser.error(f'no PATH given and ./{DEFAULT_TARGET} not found')


def _write_stdout(outcome: FileOutcome) -> None:
    data = outcome.output or b''
    buf = getattr(sys.stdout, 'buffer', None)
    if buf is not None:
        buf.write(data)
        buf.flush()
    else:
        sys.stdout.write(data.decode('utf-8', errors='replace'))


class JsClean:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> RunReport:
        """Run the tool with an argv-like sequence and return the run report."""
        parser = _build_parser()
        ns = parser.parse_args(list(argv))

        json_logs = ns.json_logs or os.getenv('JSCLEAN_JSON_LOGS') == '1'
        factory = _configure_logging(json_logs, _log_level(ns))

        report = RunReport()
        targets = []
        for t in _resolve_targets(ns, parser):
            if t.exists():
                targets.append(t)
            else:
                logger.error('Error: %s: file not found', t, extra=log_context(path=str(t)))
                report.add_failure(t, 'file not found')

        with StageTimer(report, 'discovery'):
            files = SourceWalker(logger=factory.get_logger('io.walker')).gather_files(
                targets,
                [Path(d) for d in (ns.exclude_path or [])],
                ns.suffix,
            )
        if not files:
            logger.warning('⚠  no JavaScript files found')

        write = not (ns.dry_run or ns.to_stdout)
        service = FileCleaningService(
            options=_options_from_ns(ns),
            backup=not ns.no_backup,
            write=write,
            report=report,
            logger=factory.get_logger('io.files'),
        )
        service.process_many(files, sink=_write_stdout if ns.to_stdout else None)
        report.finish()

        logger.info(
            '✔ %d file(s), %d changed, %d failed – %d comments, %d console calls removed',
            report.files_total,
            report.files_changed,
            report.files_failed,
            report.stats.comments_removed,
            report.stats.console_calls + report.stats.console_refs,
            extra=log_context(
                files_total=report.files_total,
                files_changed=report.files_changed,
                files_failed=report.files_failed,
                **report.stats.as_dict(),
            ),
        )

        if ns.report_path:
            Path(ns.report_path).write_text(report.to_json(), encoding='utf-8')
            logger.info('report written → %s', ns.report_path)

        return report


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `jsclean` console script."""
    try:
        report = JsClean.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0 if report.ok else 1)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
