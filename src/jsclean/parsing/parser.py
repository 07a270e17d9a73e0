# jsclean/parsing/parser.py
from __future__ import annotations

import argparse

from jsclean.constants import CONSOLE_METHODS, DEFAULT_TARGET, JS_SUFFIXES


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    p = argparse.ArgumentParser(
        prog="jsclean",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTIONS] [PATH ...]",
        description=(
            "jsclean – strip comments and console calls from JavaScript in place\n"
            "Strings, template literals, regex literals and divisions are left "
            "untouched. A '<file>.bak' copy is written before each rewrite."
        ),
    )

    g_loc = p.add_argument_group("Discovery")
    g_cln = p.add_argument_group("Cleaning")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Discovery
    # -----------------------
    g_loc.add_argument(
        "paths",
        metavar="PATH",
        nargs="*",
        help=(
            "Files or directories to clean. Directories are walked recursively. "
            f"Without PATH, ./{DEFAULT_TARGET} is cleaned when it exists."
        ),
    )
    g_loc.add_argument(
        "-s",
        "--suffix",
        metavar="SUF",
        action="append",
        dest="suffix",
        help=(
            "Only pick files ending with SUF while walking directories. Repeatable. "
            f"Defaults to {' '.join(JS_SUFFIXES)}. Explicit files are always cleaned."
        ),
    )
    g_loc.add_argument(
        "-A",
        "--exclude-path",
        metavar="DIR",
        action="append",
        dest="exclude_path",
        help="Exclude a directory subtree from discovery. Repeatable.",
    )

    # -----------------------
    # Cleaning
    # -----------------------
    g_cln.add_argument(
        "--keep-comments",
        action="store_true",
        dest="keep_comments",
        help="Leave // and /* */ comments in place.",
    )
    g_cln.add_argument(
        "--keep-console",
        action="store_true",
        dest="keep_console",
        help="Leave console calls in place.",
    )
    g_cln.add_argument(
        "-k",
        "--keep-method",
        metavar="NAME",
        action="append",
        dest="keep_methods",
        choices=CONSOLE_METHODS,
        help="Keep console.NAME usages (e.g. -k error -k warn). Repeatable.",
    )
    g_cln.add_argument(
        "--keep-comment-lines",
        action="store_true",
        dest="keep_comment_lines",
        help="Keep the (now empty) line of a whole-line // comment.",
    )

    # -----------------------
    # Output
    # -----------------------
    g_out.add_argument(
        "--no-backup",
        action="store_true",
        dest="no_backup",
        help="Do not write '<file>.bak' before rewriting.",
    )
    g_out.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="Clean in memory and report, but do not write any file.",
    )
    g_out.add_argument(
        "--stdout",
        action="store_true",
        dest="to_stdout",
        help="Print cleaned sources to stdout instead of rewriting them (implies --dry-run).",
    )
    g_out.add_argument(
        "--report",
        metavar="FILE",
        dest="report_path",
        help="Write a JSON run report to FILE.",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (also JSCLEAN_JSON_LOGS=1).",
    )
    verbosity = g_misc.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        dest="quiet",
        help="Only log warnings and errors.",
    )
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Log debug details.",
    )
    return p
