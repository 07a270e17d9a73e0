from __future__ import annotations

from typing import List

from jsclean.constants import INLINE_WHITESPACE


def retract_comment_indent(out: List[str]) -> bool:
    """Drop the indentation of a whole-line comment from the output tail.

    Scans *out* backward from its end to the previous line break (or the start
    of the output). If only horizontal whitespace is found, that whitespace is
    truncated in place and True is returned: the comment owns its line and the
    caller must not emit the terminating newline. Otherwise *out* is left
    untouched and False is returned.
    """
    j = len(out) - 1
    while j >= 0 and out[j] in INLINE_WHITESPACE:
        j -= 1
    if j >= 0 and out[j] not in ('\n', '\r'):
        return False
    del out[j + 1:]
    return True
