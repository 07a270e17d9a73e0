from __future__ import annotations

"""Logger naming, output mode and structured context for jsclean.

Every jsclean logger lives under the `jsclean` base logger, which owns a
single stderr handler. The handler prints either `LEVEL: message` lines or one
JSON object per record. Structured data travels on the record as `context`
(pass `extra=log_context(...)`) and shows up as the `ctx` field of JSON
output; plain output ignores it.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from jsclean.core.interfaces.logging import LoggerLikeProtocol

BASE_LOGGER = "jsclean"
PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_ENV = "JSCLEAN_TRACE_IO"


def _package_version() -> str:
    # Imported late: jsclean/__init__ pulls in the CLI, which imports this module.
    try:
        from jsclean import __version__
    except ImportError:
        return "unknown"
    return str(__version__)


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: `ts, level, module, msg, version[, ctx]`.

    `ts` is UTC with millisecond precision and a trailing `Z`. `ctx` is present
    only when the record carries a non-empty `context` dict.
    """

    def __init__(self) -> None:
        super().__init__()
        self.version = _package_version()

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self.version,
        }
        context = getattr(record, "context", None)
        if isinstance(context, dict) and context:
            payload["ctx"] = context
        return json.dumps(payload, ensure_ascii=False, default=str)


def _formatter_for(json_logs: bool) -> logging.Formatter:
    return JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Point the `jsclean` base logger at *stream* in the requested mode.

    The first call installs the handler. Later calls reuse it and switch its
    formatter, level and stream, so the last configuration wins.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    base.propagate = False

    target = stream or sys.stderr
    handler = next((h for h in base.handlers if isinstance(h, logging.StreamHandler)), None)
    if handler is None:
        handler = logging.StreamHandler(target)
        base.addHandler(handler)
    elif handler.stream is not target:
        handler.setStream(target)

    fmt = handler.formatter
    if fmt is None or isinstance(fmt, JsonLogFormatter) != bool(json_logs):
        handler.setFormatter(_formatter_for(json_logs))
    return base


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return `jsclean.<name>`; names already under `jsclean` are kept as is."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def log_context(**ctx: Any) -> Dict[str, Dict[str, Any]]:
    """Build the `extra` mapping that attaches *ctx* to a record."""
    return {"context": ctx}


def is_trace_io_enabled() -> bool:
    return os.getenv(TRACE_ENV) == "1"


def trace_io(logger: LoggerLikeProtocol, message: str, **ctx: Any) -> None:
    """Debug-level I/O trace, emitted only when JSCLEAN_TRACE_IO=1."""
    if not is_trace_io_enabled() or not logger.isEnabledFor(logging.DEBUG):
        return
    if ctx:
        logger.debug("%s %r", message, ctx, extra=log_context(**ctx))
    else:
        logger.debug("%s", message)
