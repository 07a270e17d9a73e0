from __future__ import annotations
import os
from pathlib import Path
from typing import List, Optional, Sequence, Set

from jsclean.core.interfaces.logging import LoggerLikeProtocol
from jsclean.logging.helpers import get_logger, log_context, trace_io
from jsclean.utils.paths import is_hidden_path, is_within_dir
from jsclean.utils.suffixes import compute_suffix_filter, is_suffix_allowed


class SourceWalker:
    """Expand CLI paths into the list of files to clean.

    Explicit files are always taken, whatever their suffix. Directories are
    walked recursively; hidden entries, excluded subtrees, backups and files
    outside the suffix filter are skipped.

    The result follows the order of *add_path*: an explicit file stays where it
    was named and a directory contributes its files sorted. A file reached
    twice is kept at its first position only, so its '.bak' copy is never
    overwritten with already-cleaned content.
    """

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('io.walker')

    def gather_files(
        self,
        add_path: Sequence[Path],
        exclude_dirs: Sequence[Path] = (),
        suffixes: Optional[Sequence[str]] = None,
    ) -> List[Path]:
        files: List[Path] = []
        seen: Set[Path] = set()
        include = compute_suffix_filter(suffixes)
        ex_dirs = {Path(d).resolve() for d in exclude_dirs}

        def _dir_excluded(path: Path) -> bool:
            return any(is_within_dir(path, ex) for ex in ex_dirs)

        def _take(path: Path) -> None:
            if path not in seen:
                seen.add(path)
                files.append(path)

        for root in add_path:
            root = Path(root)
            if root.is_file():
                _take(root.resolve())
                continue
            if not root.exists():
                self._log.error('⚠  %s does not exist – skipped', root, extra=log_context(path=str(root)))
                continue
            found: List[Path] = []
            for dirpath, dirnames, filenames in os.walk(root):
                dirnames[:] = [d for d in dirnames if not d.startswith('.') and not _dir_excluded(Path(dirpath, d))]
                for fn in filenames:
                    fp = Path(dirpath, fn)
                    if is_hidden_path(fp.relative_to(root)) or _dir_excluded(fp):
                        continue
                    if is_suffix_allowed(fn, include):
                        found.append(fp.resolve())
            for fp in sorted(found, key=str):
                _take(fp)
            self._log.debug('walked %s', root, extra=log_context(path=str(root), files=len(found)))

        trace_io(self._log, 'gathered files', count=len(files), suffixes=sorted(include))
        return files
