"""Public API surface for jsclean.processing."""
__all__ = [
    "cleaner_registry",
    "console_calls",
    "js_cleaner",
    "line_elision",
    "regex_context",
]
