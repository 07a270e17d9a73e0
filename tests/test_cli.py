#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CLI and file-collaborator test-suite for *jsclean*.

• Discovery: directories, suffix filters, hidden entries, exclusions.
• Rewriting: in-place output, '.bak' backups, dry-run and --stdout modes.
• Failures: missing files are reported and mapped to exit code 1.
"""
from __future__ import annotations

import contextlib
import io
import json
import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path
from typing import Iterator, List

PROJECT_SRC = Path(__file__).resolve().parents[1] / "src"
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))

from jsclean import JsClean, main  # noqa: E402
from jsclean.io.walker import SourceWalker  # noqa: E402

# --------------------------------------------------------------------------- #
#  Fixtures                                                                   #
# --------------------------------------------------------------------------- #
TOOLS_DIR = Path(__file__).resolve().parent / "tools"
BUILD_SCRIPT = TOOLS_DIR / "build_fixtures.py"

MAIN_JS_CLEAN = (
    'import { api } from "./api.js";\n'
    "\n"
    "const base = `https://${host}/v1`; \n"
    "void 0;\n"
    "export function ratio(a, b) {\n"
    "    return a / b;  \n"
    "}\n"
)


@contextlib.contextmanager
def _fixture_tree() -> Iterator[Path]:
    """Build a fresh fixture tree in a temporary directory."""
    with tempfile.TemporaryDirectory() as td:
        subprocess.check_call([sys.executable, str(BUILD_SCRIPT), td], stdout=subprocess.DEVNULL)
        yield Path(td)


@contextlib.contextmanager
def _inside(path: Path) -> Iterator[None]:
    """Temporarily switch CWD to *path*."""
    cwd = Path.cwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(cwd)


def _run(args: List[str]):
    return JsClean.run(["-q", *args])


# --------------------------------------------------------------------------- #
#  1. Discovery                                                               #
# --------------------------------------------------------------------------- #
class DiscoveryTests(unittest.TestCase):
    def test_directory_walk_uses_js_family(self) -> None:
        with _fixture_tree() as root:
            files = SourceWalker().gather_files([root / "app"])
            names = sorted(p.name for p in files)
            self.assertEqual(names, ["api.mjs", "clean.cjs", "lib.js", "main.js"])

    def test_exclude_path(self) -> None:
        with _fixture_tree() as root:
            files = SourceWalker().gather_files([root / "app"], [root / "app" / "vendor"])
            self.assertNotIn("lib.js", [p.name for p in files])

    def test_suffix_filter(self) -> None:
        with _fixture_tree() as root:
            files = SourceWalker().gather_files([root / "app"], suffixes=["txt"])
            self.assertEqual([p.name for p in files], ["notes.txt"])

    def test_explicit_files_keep_argument_order(self) -> None:
        with _fixture_tree() as root:
            app = root / "app"
            files = SourceWalker().gather_files([app / "main.js", app / "api.mjs", app / "main.js"])
            self.assertEqual([p.name for p in files], ["main.js", "api.mjs"])

    def test_directory_files_are_sorted_after_earlier_arguments(self) -> None:
        with _fixture_tree() as root:
            app = root / "app"
            files = SourceWalker().gather_files([app / "clean.cjs", app])
            self.assertEqual([p.name for p in files], ["clean.cjs", "api.mjs", "main.js", "lib.js"])

    def test_explicit_file_beats_filters(self) -> None:
        with _fixture_tree() as root:
            target = root / "app" / "notes.txt"
            self.assertEqual(SourceWalker().gather_files([target]), [target.resolve()])


# --------------------------------------------------------------------------- #
#  2. Rewriting                                                               #
# --------------------------------------------------------------------------- #
class RewriteTests(unittest.TestCase):
    def test_file_is_cleaned_in_place_with_backup(self) -> None:
        with _fixture_tree() as root:
            target = root / "app" / "main.js"
            original = target.read_bytes()
            report = _run([str(target)])

            self.assertTrue(report.ok)
            self.assertEqual(report.files_changed, 1)
            self.assertEqual(target.read_text(encoding="utf-8"), MAIN_JS_CLEAN)
            self.assertEqual((root / "app" / "main.js.bak").read_bytes(), original)

    def test_regex_file_is_untouched(self) -> None:
        with _fixture_tree() as root:
            target = root / "app" / "clean.cjs"
            original = target.read_text(encoding="utf-8")
            report = _run(["--no-backup", str(target)])
            self.assertEqual(report.files_changed, 0)
            self.assertEqual(target.read_text(encoding="utf-8"), original)

    def test_no_backup(self) -> None:
        with _fixture_tree() as root:
            _run(["--no-backup", str(root / "app" / "main.js")])
            self.assertFalse((root / "app" / "main.js.bak").exists())

    def test_dry_run_writes_nothing(self) -> None:
        with _fixture_tree() as root:
            target = root / "app" / "main.js"
            original = target.read_bytes()
            report = _run(["-n", str(target)])
            self.assertEqual(report.files_changed, 1)
            self.assertEqual(target.read_bytes(), original)
            self.assertFalse((root / "app" / "main.js.bak").exists())

    def test_stdout_mode(self) -> None:
        with _fixture_tree() as root:
            target = root / "app" / "main.js"
            original = target.read_bytes()
            buf = io.StringIO()
            with contextlib.redirect_stdout(buf):
                _run(["--stdout", str(target)])
            self.assertEqual(buf.getvalue(), MAIN_JS_CLEAN)
            self.assertEqual(target.read_bytes(), original)

    def test_keep_method(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            target = Path(td) / "x.js"
            target.write_text("console.error(e);\nconsole.log(e);\n", encoding="utf-8")
            _run(["-k", "error", "--no-backup", str(target)])
            self.assertEqual(target.read_text(encoding="utf-8"), "console.error(e);\nvoid 0;\n")

    def test_keep_comments(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            target = Path(td) / "x.js"
            target.write_text("// keep\nconsole.log(e); /* too */\n", encoding="utf-8")
            _run(["--keep-comments", "--no-backup", str(target)])
            self.assertEqual(target.read_text(encoding="utf-8"), "// keep\nvoid 0; /* too */\n")

    def test_directory_run_and_report(self) -> None:
        with _fixture_tree() as root:
            report_path = root / "report.json"
            report = _run(["-A", str(root / "app" / "vendor"), "--report", str(report_path), str(root / "app")])
            self.assertEqual(report.files_total, 3)
            data = json.loads(report_path.read_text(encoding="utf-8"))
            self.assertEqual(data["files_total"], 3)
            self.assertEqual(data["files_changed"], 2)
            self.assertEqual(data["stats"]["console_calls"], 2)
            self.assertEqual(data["errors"], [])
            self.assertIn("clean", data["time_by_stage"])

    def test_default_worker_target(self) -> None:
        with tempfile.TemporaryDirectory() as td, _inside(Path(td)):
            Path("_worker.js").write_text("x(); // c\n", encoding="utf-8")
            report = _run([])
            self.assertEqual(report.files_changed, 1)
            self.assertEqual(Path("_worker.js").read_text(encoding="utf-8"), "x(); \n")
            self.assertTrue(Path("_worker.js.bak").exists())


# --------------------------------------------------------------------------- #
#  3. Failures & exit codes                                                   #
# --------------------------------------------------------------------------- #
class ExitCodeTests(unittest.TestCase):
    def test_missing_file_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            missing = Path(td) / "nope.js"
            report = _run([str(missing)])
            self.assertFalse(report.ok)
            self.assertEqual(report.files_failed, 1)
            self.assertIn("nope.js", report.errors[0])

    def test_main_exit_codes(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            good = Path(td) / "ok.js"
            good.write_text("a();\n", encoding="utf-8")
            with self.assertRaises(SystemExit) as cm:
                main(["-q", str(good)])
            self.assertEqual(cm.exception.code, 0)

            with self.assertRaises(SystemExit) as cm:
                main(["-q", str(good), str(Path(td) / "missing.js")])
            self.assertEqual(cm.exception.code, 1)

    def test_no_path_and_no_default_is_usage_error(self) -> None:
        with tempfile.TemporaryDirectory() as td, _inside(Path(td)):
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as cm:
                    main(["-q"])
            self.assertEqual(cm.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
