"""Expand rule patterns against the source root."""

from __future__ import annotations

import glob
from pathlib import Path
from typing import Iterator

from copy_configs.models import MatchResult


class PatternMatcher:
    """Shell-style glob expansion rooted at the source directory.

    Hidden files and directories are part of the expansion, so ``.env*``
    matches ``.env`` and ``.env.local``. ``**`` spans directories. A pattern
    ending in ``/`` only matches directories. No match is an empty result,
    never an error.
    """

    def __init__(self, source_root: Path) -> None:
        self.source_root = source_root

    def match(self, pattern: str) -> Iterator[MatchResult]:
        found = glob.iglob(
            pattern,
            root_dir=self.source_root,
            recursive=True,
            include_hidden=True,
        )
        directory_only = pattern.endswith("/")
        for relative in sorted(found):
            relative = relative.rstrip("/")
            if not relative or relative == ".":
                continue
            source_path = self.source_root / relative
            if directory_only:
                is_dir = source_path.is_dir()
            else:
                is_dir = source_path.is_dir() and not source_path.is_symlink()
            yield MatchResult(
                relative_path=relative, source_path=source_path, is_dir=is_dir
            )
