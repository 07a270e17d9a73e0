from __future__ import annotations

"""Logger surfaces the cleaner and its file collaborators depend on.

A plain `logging.Logger` satisfies `LoggerLikeProtocol`. Structured context is
passed as `extra={'context': {...}}` and rendered by the JSON formatter.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def isEnabledFor(self, level: int) -> bool: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Source of `jsclean.*` loggers that share one output configuration."""

    json_logs: bool

    def get_logger(self, name: str) -> LoggerLikeProtocol: ...
