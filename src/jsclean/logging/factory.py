from __future__ import annotations

import logging
from typing import Optional, TextIO

from jsclean.core.interfaces.logging import LoggerLikeProtocol
from jsclean.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """Scoped `jsclean.*` loggers behind one base handler.

    The base logger is (re)configured on the first `get_logger` call, so the
    most recently used factory decides the output mode and level.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self.json_logs = bool(json_logs)
        self.level = int(level)
        self._stream = stream
        self._base: Optional[logging.Logger] = None

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        if self._base is None:
            self._base = setup_base_logger(json_logs=self.json_logs, level=self.level, stream=self._stream)
        return get_logger(name)
