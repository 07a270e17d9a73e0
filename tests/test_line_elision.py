from __future__ import annotations

import sys
import unittest
from pathlib import Path

PROJECT_SRC = Path(__file__).resolve().parents[1] / "src"
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))

from jsclean.processing.line_elision import retract_comment_indent  # noqa: E402


class LineElisionTests(unittest.TestCase):
    def test_indentation_only_is_retracted(self) -> None:
        out = list("a;\n  \t")
        self.assertTrue(retract_comment_indent(out))
        self.assertEqual("".join(out), "a;\n")

    def test_code_before_comment_is_kept(self) -> None:
        out = list("a;\nlet x = 1; ")
        self.assertFalse(retract_comment_indent(out))
        self.assertEqual("".join(out), "a;\nlet x = 1; ")

    def test_empty_output(self) -> None:
        out: list[str] = []
        self.assertTrue(retract_comment_indent(out))
        self.assertEqual(out, [])

    def test_start_of_output(self) -> None:
        out = list("\t \t")
        self.assertTrue(retract_comment_indent(out))
        self.assertEqual(out, [])

    def test_crlf_boundary(self) -> None:
        out = list("x\r\n\t")
        self.assertTrue(retract_comment_indent(out))
        self.assertEqual("".join(out), "x\r\n")

    def test_line_ending_right_before(self) -> None:
        out = list("x;\n")
        self.assertTrue(retract_comment_indent(out))
        self.assertEqual("".join(out), "x;\n")


if __name__ == "__main__":
    unittest.main()
