#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Crea / refresca el árbol de *fixtures* empleado por la
test-suite de jsclean.

Uso:
    python build_fixtures.py DIR

Idempotente y 100 % Python.
"""
from __future__ import annotations

import shutil
import sys
import textwrap
from pathlib import Path


# ────────────────────────── utilidades ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


# ───────────────────── archivos fuente ─────────────────────
def _populate_sources(root: Path) -> None:
    app = root / "app"

    _write(app / "main.js", """
        // entry point
        import { api } from "./api.js";

        const base = `https://${host}/v1`; // endpoint
        console.log("booting", base);
        export function ratio(a, b) {
            return a / b; /* plain division */
        }
    """)

    _write(app / "api.mjs", """
        export const api = (path) => fetch(path).then((r) => {
            console.debug("status", r.status);
            return r.json();
        });
    """)

    _write(app / "clean.cjs", """
        module.exports = { pattern: /\\/\\/+/g };
    """)

    _write(app / "notes.txt", "// not javascript\n")
    _write(app / "old.js.bak", "// stale backup\n")
    _write(app / ".hidden" / "secret.js", "// secret\n")
    _write(app / "vendor" / "lib.js", "// vendored\nconsole.log(1);\n")


# ──────────────────────────── main ────────────────────────────
def main(argv: list[str]) -> None:  # pragma: no cover
    if len(argv) != 1:
        print("usage: build_fixtures.py DIR", file=sys.stderr)
        raise SystemExit(2)
    root = Path(argv[0]).resolve()
    if (root / "app").exists():
        shutil.rmtree(root / "app")
    _populate_sources(root)


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
