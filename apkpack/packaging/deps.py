"""
Rebuild input collection.

aapt must rerun whenever any file under the asset or resource directories is
added or modified, so every such file becomes a dependency of the packaging
invocations.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path

AAPT_IGNORE_FILENAMES: tuple[str, ...] = (
    ".svn",
    ".git",
    ".ds_store",
    "*.scc",
    ".*",
    "CVS",
    "thumbs.db",
    "picasa.ini",
    "*~",
)


class IgnoreMatcher:
    """Matches path segments against aapt-style ignore patterns.

    Supported shapes are ``*suffix``, ``prefix*`` and exact names. Matching
    ignores case, as aapt does.
    """

    def __init__(self, patterns: Iterable[str] = AAPT_IGNORE_FILENAMES) -> None:
        self._prefixes: list[str] = []
        self._suffixes: list[str] = []
        self._exact: set[str] = set()
        for pattern in patterns:
            pattern = pattern.lower()
            if pattern.startswith("*"):
                self._suffixes.append(pattern[1:])
            elif pattern.endswith("*"):
                self._prefixes.append(pattern[:-1])
            else:
                self._exact.add(pattern)

    def matches(self, name: str) -> bool:
        """Whether a single file or directory name is ignored."""
        name = name.lower()
        if name in self._exact:
            return True
        if any(name.startswith(p) for p in self._prefixes):
            return True
        return any(name.endswith(s) for s in self._suffixes)


def walk_files(directory: Path, matcher: IgnoreMatcher) -> list[Path]:
    """All non-ignored files under directory, in sorted walk order.

    Symlinked subdirectories are followed; a directory reached twice through
    links is walked once.
    """
    files: list[Path] = []
    visited: set[tuple[int, int]] = set()
    for root, dirnames, filenames in os.walk(directory, followlinks=True):
        st = os.stat(root)
        key = (st.st_dev, st.st_ino)
        if key in visited:
            dirnames[:] = []
            continue
        visited.add(key)
        # prune in place so ignored trees are never entered
        dirnames[:] = sorted(d for d in dirnames if not matcher.matches(d))
        for filename in sorted(filenames):
            if not matcher.matches(filename):
                files.append(Path(root) / filename)
    return files


def collect_deps(
    dirs: Iterable[Path],
    ignore_patterns: Sequence[str] = AAPT_IGNORE_FILENAMES,
) -> tuple[list[Path], bool]:
    """Collect the files under each directory, in directory order.

    Args:
        dirs: Resolved directories.
        ignore_patterns: Names excluded at any depth.

    Returns:
        The collected files and whether at least one was found.
    """
    matcher = IgnoreMatcher(ignore_patterns)
    files: list[Path] = []
    for directory in dirs:
        files.extend(walk_files(directory, matcher))
    return files, bool(files)
