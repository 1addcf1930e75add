"""Split workspace patterns into includes and excludes and resolve exclusions.

Exclude patterns are written at arbitrary glob granularity (``pkgs/x/**``,
``**/fixtures``) while include expansion returns whatever level it matched.
Rather than evaluating negation against a glob AST, each exclude pattern is
expanded in a couple of syntactic variants (trailing glob stripped, and as
written) and the union of their matches is used as an exclusion set. A
candidate is excluded when it equals a member or lives beneath one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from .config import EXCLUDE_SUFFIXES, NEGATION_MARKER
from .discovery import glob_directories


logger = logging.getLogger(__name__)


def _normalise(pattern: str) -> str:
    """Collapse ``.`` segments and redundant slashes.

    Patterns naming the root itself (``.``, ``./``) normalise to ``""``.
    """
    if not pattern:
        return ""
    normalised = PurePosixPath(pattern).as_posix()
    return "" if normalised == "." else normalised


def classify_patterns(patterns: Iterable[str]) -> tuple[list[str], list[str]]:
    """Return ``(includes, excludes)``; excludes have the ``!`` removed."""
    includes: list[str] = []
    excludes: list[str] = []

    for raw in patterns:
        if raw.startswith(NEGATION_MARKER):
            pattern = _normalise(raw[len(NEGATION_MARKER) :])
            target = excludes
        else:
            pattern = _normalise(raw)
            target = includes
        if pattern:
            target.append(pattern)

    return includes, excludes


def exclusion_variants(pattern: str) -> list[str]:
    """Return the pattern with its trailing glob stripped, plus the original."""
    variants: list[str] = []
    for suffix in EXCLUDE_SUFFIXES:
        if pattern.endswith(suffix):
            stripped = pattern[: -len(suffix)]
            if stripped:
                variants.append(stripped)
            break
    variants.append(pattern)
    return variants


def resolve_exclusions(excludes: Iterable[str], root: Path) -> set[str]:
    """Expand every exclude variant under root and union the matches."""
    exclusions: set[str] = set()
    for pattern in excludes:
        exclusions.update(glob_directories(exclusion_variants(pattern), root))
    logger.debug("Resolved %d excluded path(s) under %s", len(exclusions), root)
    return exclusions


def is_excluded(path: str, exclusions: Iterable[str]) -> bool:
    """True if path is an exclusion or is nested beneath one.

    Nesting is checked on whole segments: ``packages/excluded-extra`` is not
    beneath ``packages/excluded``.
    """
    return any(path == base or path.startswith(f"{base}/") for base in exclusions)
