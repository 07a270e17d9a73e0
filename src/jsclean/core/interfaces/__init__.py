from .cleaner import CleanerProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol

__all__ = [
    'CleanerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
]
