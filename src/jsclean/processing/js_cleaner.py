from __future__ import annotations

"""JavaScript comment and console-call stripper.

Deterministic single-pass state machine over the source text:

    CODE | STRING_SQ | STRING_DQ | STRING_TEMPLATE | REGEX
         | LINE_COMMENT | BLOCK_COMMENT | CONSOLE_ARGS

Behavior:
    - String, template and regex literals are copied verbatim, delimiters and
      escapes included, so `//`, `/*` or `console.` inside them survive.
    - Block comments keep their line breaks and collapse to one space, so
      `a/*x*/b` becomes `a b`.
    - A line comment that is alone on its line takes the whole line with it.
      A trailing comment leaves the code and the newline in place.
    - `console.<method>(...)` becomes `void 0`; a bare `console.<method>`
      reference becomes `(() => {})`.

Malformed input never raises: an unterminated regex ends at the line break,
and an unterminated string or comment simply runs to the end of the input.
"""

from enum import Enum, auto
from typing import Callable, Dict, List, Optional

from jsclean.core.interfaces.logging import LoggerLikeProtocol
from jsclean.core.models import CleanOptions, CleanResult, CleanStats
from jsclean.logging.helpers import get_logger, log_context
from jsclean.processing.console_calls import ArgumentListTracker, ConsoleMatch, match_console
from jsclean.processing.line_elision import retract_comment_indent
from jsclean.processing.regex_context import is_regex_start


class LexState(Enum):
    CODE = auto()
    STRING_SQ = auto()
    STRING_DQ = auto()
    STRING_TEMPLATE = auto()
    REGEX = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    CONSOLE_ARGS = auto()


_OPENERS: Dict[str, LexState] = {
    "'": LexState.STRING_SQ,
    '"': LexState.STRING_DQ,
    '`': LexState.STRING_TEMPLATE,
}
_CLOSERS: Dict[LexState, str] = {state: quote for quote, state in _OPENERS.items()}


class _Scanner:
    """One pass over one buffer. Not reusable."""

    def __init__(self, text: str, options: CleanOptions) -> None:
        self.text = text
        self.n = len(text)
        self.i = 0
        self.out: List[str] = []
        self.state = LexState.CODE
        self.stats = CleanStats()

        self._opts = options
        self._methods = options.erasable_methods() if options.erase_console else frozenset()
        self._args: Optional[ArgumentListTracker] = None
        self._whole_line = False

        self._handlers: Dict[LexState, Callable[[], None]] = {
            LexState.CODE: self._code,
            LexState.STRING_SQ: self._string,
            LexState.STRING_DQ: self._string,
            LexState.STRING_TEMPLATE: self._string,
            LexState.REGEX: self._regex,
            LexState.LINE_COMMENT: self._line_comment,
            LexState.BLOCK_COMMENT: self._block_comment,
            LexState.CONSOLE_ARGS: self._console_args,
        }

    def run(self) -> CleanResult:
        while self.i < self.n:
            self._handlers[self.state]()
        return CleanResult(text=''.join(self.out), stats=self.stats)

    # ------------------------------------------------------------------ code
    def _code(self) -> None:
        text, i = self.text, self.i
        ch = text[i]

        if ch == 'c' and self._methods:
            m = match_console(text, i, self._methods)
            if m is not None:
                self._erase_console(m)
                return

        if ch in _OPENERS:
            self.state = _OPENERS[ch]
            self.out.append(ch)
            self.i += 1
            return

        if ch == '/':
            nxt = text[i + 1] if i + 1 < self.n else ''
            if nxt == '/':
                self._open_line_comment()
            elif nxt == '*':
                self._open_block_comment()
            else:
                if is_regex_start(text, i):
                    self.state = LexState.REGEX
                    self.stats.regex_literals += 1
                self.out.append(ch)
                self.i += 1
            return

        self.out.append(ch)
        self.i += 1

    def _erase_console(self, m: ConsoleMatch) -> None:
        if m.is_call:
            self.out.extend(self._opts.call_replacement)
            self.stats.console_calls += 1
            self._args = ArgumentListTracker()
            self.state = LexState.CONSOLE_ARGS
        else:
            self.out.extend(self._opts.reference_replacement)
            self.stats.console_refs += 1
        self.i = m.end

    def _open_line_comment(self) -> None:
        self.i += 2
        self.state = LexState.LINE_COMMENT
        if not self._opts.strip_comments:
            self.out.extend('//')
            return
        self.stats.comments_removed += 1
        self._whole_line = self._opts.elide_comment_lines and retract_comment_indent(self.out)

    def _open_block_comment(self) -> None:
        self.i += 2
        self.state = LexState.BLOCK_COMMENT
        if not self._opts.strip_comments:
            self.out.extend('/*')
            return
        self.stats.comments_removed += 1

    # -------------------------------------------------------------- literals
    def _string(self) -> None:
        ch = self.text[self.i]
        self.out.append(ch)
        self.i += 1
        if ch == '\\':
            if self.i < self.n:
                self.out.append(self.text[self.i])
                self.i += 1
        elif ch == _CLOSERS[self.state]:
            self.state = LexState.CODE

    def _regex(self) -> None:
        ch = self.text[self.i]
        if ch == '\n':
            # Unterminated literal; the newline is handled as code.
            self.state = LexState.CODE
            return
        self.out.append(ch)
        self.i += 1
        if ch == '\\':
            if self.i < self.n:
                self.out.append(self.text[self.i])
                self.i += 1
        elif ch == '/':
            self.state = LexState.CODE

    # -------------------------------------------------------------- comments
    def _line_comment(self) -> None:
        text, start = self.text, self.i
        nl = text.find('\n', start)
        keep = not self._opts.strip_comments
        if nl < 0:
            if keep:
                self.out.extend(text[start:])
            self.i = self.n
            return

        if keep:
            self.out.extend(text[start:nl + 1])
        elif self._whole_line:
            self.stats.lines_elided += 1
        else:
            eol = nl - 1 if nl > start and text[nl - 1] == '\r' else nl
            self.out.extend(text[eol:nl + 1])

        self._whole_line = False
        self.i = nl + 1
        self.state = LexState.CODE

    def _block_comment(self) -> None:
        text, start = self.text, self.i
        end = text.find('*/', start)
        stop = self.n if end < 0 else end
        if not self._opts.strip_comments:
            self.out.extend(text[start:stop + 2 if end >= 0 else stop])
        else:
            self.out.extend(c for c in text[start:stop] if c in '\r\n')
            if end >= 0:
                self.out.append(' ')
        self.i = self.n if end < 0 else end + 2
        self.state = LexState.CODE

    # ----------------------------------------------------------- console args
    def _console_args(self) -> None:
        ch = self.text[self.i]
        self.i += 1
        if self._args is not None and self._args.feed(ch):
            self._args = None
            self.state = LexState.CODE


class JsCleaner:
    """Reusable cleaner bound to a set of options.

    Each call to `clean` runs an independent scanner, so one instance can be
    shared across files.
    """

    def __init__(self, options: Optional[CleanOptions] = None, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._options = options or CleanOptions()
        self._log = logger or get_logger('processing.js')

    def clean(self, source: str) -> CleanResult:
        result = _Scanner(source, self._options).run()
        self._log.debug(
            'cleaned %d chars: %d comments, %d console calls, %d console refs',
            len(source),
            result.stats.comments_removed,
            result.stats.console_calls,
            result.stats.console_refs,
            extra=log_context(chars=len(source), **result.stats.as_dict()),
        )
        return result

    def strip(self, source: str, *, filename: Optional[str] = None) -> str:
        return self.clean(source).text


def strip_js(source: str, options: Optional[CleanOptions] = None) -> str:
    """Return *source* without comments and console calls."""
    return _Scanner(source, options or CleanOptions()).run().text


def transform(data: bytes, options: Optional[CleanOptions] = None) -> bytes:
    """Byte-level entry point.

    Bytes are mapped one-to-one onto code points (latin-1), which keeps every
    ASCII delimiter recognizable and round-trips UTF-8 or any other ASCII
    superset unchanged.
    """
    return strip_js(data.decode('latin-1'), options).encode('latin-1')
