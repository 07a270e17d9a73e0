from __future__ import annotations

"""Detection and erasure helpers for `console.<method>` usages.

Two shapes are recognized in code mode:

    console.log(a, b)      -> call form, replaced by a neutral expression and
                              the whole argument list is discarded
    register(console.log)  -> reference form, only the member expression is
                              replaced by a no-op function

The argument list is skipped with `ArgumentListTracker`, which counts
parentheses while ignoring those that appear inside quoted or template
strings. The tracker knows nothing about regex literals: a quote inside a
regex argument, as in `console.log(/'/)`, opens a string that never closes,
and everything up to the end of the input is discarded with the call.
"""

from dataclasses import dataclass
from typing import Container, Optional

from jsclean.constants import CONSOLE_PREFIX, WHITESPACE
from jsclean.processing.regex_context import is_word_char

_QUOTES = ("'", '"', '`')


@dataclass(frozen=True)
class ConsoleMatch:
    """A recognized console usage.

    Attributes:
        start: Index of the 'c' of `console`.
        method: Matched method name.
        end: Index just past the consumed text. For the call form this is the
            position after the opening '(', otherwise after the method name.
        is_call: True when an argument list follows.
    """
    start: int
    method: str
    end: int
    is_call: bool


def match_console(text: str, index: int, methods: Container[str]) -> Optional[ConsoleMatch]:
    """Return a ConsoleMatch if *text* has an erasable console usage at *index*."""
    if not text.startswith(CONSOLE_PREFIX, index):
        return None
    if index > 0 and (is_word_char(text[index - 1]) or text[index - 1] == '.'):
        return None

    name_start = index + len(CONSOLE_PREFIX)
    name_end = name_start
    n = len(text)
    while name_end < n and is_word_char(text[name_end]):
        name_end += 1
    method = text[name_start:name_end]
    if not method or method not in methods:
        return None

    j = name_end
    while j < n and text[j] in WHITESPACE:
        j += 1
    if j < n and text[j] == '(':
        return ConsoleMatch(start=index, method=method, end=j + 1, is_call=True)
    return ConsoleMatch(start=index, method=method, end=name_end, is_call=False)


@dataclass
class ArgumentListTracker:
    """Balanced-parenthesis tracker for a discarded argument list.

    Depth starts at 1 because the opening '(' was consumed by the matcher.
    """
    depth: int = 1
    quote: str = ''
    escaped: bool = False

    @property
    def closed(self) -> bool:
        return self.depth <= 0

    def feed(self, ch: str) -> bool:
        """Consume one character; return True once the call is closed."""
        if self.quote:
            if self.escaped:
                self.escaped = False
            elif ch == '\\':
                self.escaped = True
            elif ch == self.quote:
                self.quote = ''
            return False

        if ch in _QUOTES:
            self.quote = ch
        elif ch == '(':
            self.depth += 1
        elif ch == ')':
            self.depth -= 1
        return self.closed
