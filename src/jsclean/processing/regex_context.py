from __future__ import annotations

"""Regex-literal vs. division disambiguation for a bare '/' in code.

The decision looks only at input that was already consumed: the last
significant character before the slash and, when that character ends a word,
the word itself.

Notes:
    - A '/' following ')' is always treated as division, so
      `if (ok) /re/.test(s)` is misread. This is a known limitation of the
      lookback; resolving it would require tracking what opened the
      parenthesis.
    - Characters are classified with ASCII rules only, bytes above 0x7F never
      form part of a word here.
"""

import string

from jsclean.constants import (
    REGEX_PRECEDING_KEYWORDS,
    REGEX_PRECEDING_PUNCT,
    WHITESPACE,
)

_WORD_CHARS = frozenset(string.ascii_letters + string.digits + '_$')


def is_word_char(ch: str) -> bool:
    """Return True for identifier/number characters (ASCII alnum, '_' or '$')."""
    return ch in _WORD_CHARS


def previous_word(text: str, end: int) -> str:
    """Return the word ending at index *end* (inclusive), scanning backward."""
    start = end
    while start >= 0 and text[start] in _WORD_CHARS:
        start -= 1
    return text[start + 1:end + 1]


def is_regex_start(text: str, index: int) -> bool:
    """Decide whether the '/' at *index* opens a regex literal.

    Args:
        text: Full input buffer.
        index: Position of an unclassified '/' in code mode.

    Returns:
        True for a regex literal, False for a division operator.
    """
    i = index - 1
    while i >= 0 and text[i] in WHITESPACE:
        i -= 1
    if i < 0:
        return True

    last = text[i]
    if last in REGEX_PRECEDING_PUNCT:
        return True
    if last in _WORD_CHARS:
        return previous_word(text, i) in REGEX_PRECEDING_KEYWORDS
    return False
