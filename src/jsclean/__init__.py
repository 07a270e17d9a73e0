from __future__ import annotations

from jsclean.cli import JsClean, main
from jsclean.core.models import CleanOptions, CleanResult, CleanStats
from jsclean.core.report import RunReport
from jsclean.processing.cleaner_registry import LanguageCleanerRegistry
from jsclean.processing.js_cleaner import JsCleaner, LexState, strip_js, transform
from jsclean.processing.regex_context import is_regex_start

__version__ = '1.0.0'


__all__ = [
    'JsClean',
    'JsCleaner',
    'LexState',
    'CleanOptions',
    'CleanResult',
    'CleanStats',
    'RunReport',
    'LanguageCleanerRegistry',
    'is_regex_start',
    'main',
    'strip_js',
    'transform',
]
