from __future__ import annotations
"""
LanguageCleanerRegistry

Suffix-keyed lookup of cleaners so the file service does not hard-code which
files are JavaScript.

Cleaners can be registered eagerly or lazily: a lazy entry holds a builder
that is invoked on first access, after which the built cleaner is cached.
The default registry maps the JS family ('.js', '.mjs', '.cjs', '.jsx') to a
`JsCleaner` configured with the given options.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from jsclean.constants import JS_SUFFIXES
from jsclean.core.interfaces.cleaner import CleanerProtocol
from jsclean.core.models import CleanOptions
from jsclean.processing.js_cleaner import JsCleaner


@dataclass(frozen=True)
class _CleanerRegItem:
    cleaner: CleanerProtocol
    priority: int = 0


def _normalize(suffix: str) -> str:
    sufx = suffix if suffix.startswith('.') else f'.{suffix}'
    return sufx.lower()


class LanguageCleanerRegistry:
    def __init__(self) -> None:
        self._by_suffix: Dict[str, _CleanerRegItem] = {}
        self._lazy_builders: Dict[str, tuple[Callable[[], CleanerProtocol], int]] = {}

    @classmethod
    def default(cls, options: Optional[CleanOptions] = None) -> 'LanguageCleanerRegistry':
        """Build a registry with one shared JsCleaner for the JS family."""
        reg = cls()
        shared: Dict[str, JsCleaner] = {}

        def _build() -> CleanerProtocol:
            if 'js' not in shared:
                shared['js'] = JsCleaner(options)
            return shared['js']

        for suf in JS_SUFFIXES:
            reg.register_lazy(suf, builder=_build, priority=0)
        return reg

    def register(self, suffix: str, cleaner: CleanerProtocol, *, priority: int = 0) -> None:
        key = _normalize(suffix)
        prev = self._by_suffix.get(key)
        if prev is None or priority >= prev.priority:
            self._by_suffix[key] = _CleanerRegItem(cleaner=cleaner, priority=priority)
        self._lazy_builders.pop(key, None)

    def register_lazy(self, suffix: str, *, builder: Callable[[], CleanerProtocol], priority: int = 0) -> None:
        self._lazy_builders[_normalize(suffix)] = (builder, priority)

    def suffixes(self) -> list[str]:
        return sorted(set(self._by_suffix) | set(self._lazy_builders))

    def for_suffix(self, suffix: str) -> Optional[CleanerProtocol]:
        key = (suffix or '').lower()
        item = self._by_suffix.get(key)
        if item:
            return item.cleaner
        lazy = self._lazy_builders.get(key)
        if lazy:
            builder, prio = lazy
            cleaner = builder()
            self.register(key, cleaner, priority=prio)
            return cleaner
        return None
