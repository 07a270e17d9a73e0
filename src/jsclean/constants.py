from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates lexical tables and defaults so the scanner, the CLI and
the tests share a single source of truth.
"""

# Characters treated as whitespace by the backward lookback (C-locale isspace).
WHITESPACE: str = ' \t\n\r\v\f'

# Horizontal whitespace inspected by the whole-line-comment elider.
INLINE_WHITESPACE: str = ' \t\v\f'

# Last significant character before '/' that forces a regex literal.
REGEX_PRECEDING_PUNCT: frozenset[str] = frozenset('(=,:!&|?{};')

# Keywords after which '/' opens a regex literal. Fixed set, do not extend.
REGEX_PRECEDING_KEYWORDS: frozenset[str] = frozenset({
    'return',
    'case',
    'throw',
    'delete',
    'void',
    'typeof',
    'await',
    'yield',
})

CONSOLE_PREFIX: str = 'console.'
CONSOLE_METHODS: tuple[str, ...] = ('log', 'warn', 'error', 'info', 'debug')

# Neutral replacements for erased console usages.
CALL_REPLACEMENT: str = 'void 0'
REFERENCE_REPLACEMENT: str = '(() => {})'

# Files handled by default when walking directories.
JS_SUFFIXES: tuple[str, ...] = ('.js', '.mjs', '.cjs', '.jsx')

BACKUP_SUFFIX: str = '.bak'

# Processed when the CLI is invoked without paths.
DEFAULT_TARGET: str = '_worker.js'
