"""Filesystem primitives used to expand workspace globs."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path, PurePosixPath


logger = logging.getLogger(__name__)


EXCLUDES = {"node_modules", ".git"}

_STAR_RUN = re.compile(r"\*{2,}")


def _to_glob(pattern: str) -> str | None:
    """Return a pattern ``Path.glob`` accepts, or None if it cannot match under base.

    ``**`` is only recursive as a whole segment; inside a segment it behaves
    like ``*``.
    """
    pure = PurePosixPath(pattern)
    if pure.is_absolute() or ".." in pure.parts or not pure.parts:
        return None
    parts = [part if part == "**" else _STAR_RUN.sub("*", part) for part in pure.parts]
    return "/".join(parts)


def glob_directories(patterns: Iterable[str], base: Path) -> list[str]:
    """Expand glob patterns under base and return the directories they match.

    Results are POSIX paths relative to base, in first-seen order, without
    duplicates. ``*`` matches a single path segment and ``**`` zero or more.
    The base directory itself and anything inside node_modules or .git are
    never returned.
    """
    seen: set[str] = set()
    found: list[str] = []

    for pattern in patterns:
        glob = _to_glob(pattern) if pattern else None
        if glob is None:
            logger.debug("Skipping pattern outside of %s: %r", base, pattern)
            continue
        for path in base.glob(glob):
            if not is_directory(path):
                continue
            rel_path = path.relative_to(base)
            if any(part in EXCLUDES for part in rel_path.parts):
                continue
            rel = rel_path.as_posix()
            if rel == "." or rel in seen:
                continue
            seen.add(rel)
            found.append(rel)

    return found


def is_directory(path: Path) -> bool:
    """Return True only if path currently exists and is a directory.

    Missing paths, broken symlinks and paths that cannot be stat'ed all
    answer False.
    """
    try:
        return path.is_dir()
    except OSError:
        return False
