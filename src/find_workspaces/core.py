"""Core resolution entrypoints.

This module MUST NOT print or configure logging so it can be used by both the
command line wrapper and other build tools as a library.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import resolve_root
from .discovery import glob_directories, is_directory
from .parsers.package_json import parse as parse_package_json
from .parsers.pnpm_workspace import parse as parse_pnpm_workspace
from .patterns import classify_patterns, is_excluded, resolve_exclusions


logger = logging.getLogger(__name__)


def collect_patterns(root: Path) -> list[str]:
    """Concatenate raw patterns from pnpm-workspace.yaml and package.json."""
    return parse_pnpm_workspace(root) + parse_package_json(root)


def resolve_inclusions(includes: list[str], exclusions: set[str], root: Path) -> list[Path]:
    """Expand include patterns and keep the non-excluded directories."""
    directories: list[Path] = []
    for rel in glob_directories(includes, root):
        if is_excluded(rel, exclusions):
            logger.debug("Excluded %s", rel)
            continue
        candidate = root / rel
        if not is_directory(candidate):
            logger.debug("Skipping non-directory match %s", candidate)
            continue
        directories.append(candidate)
    return directories


def find_workspaces(root: str | os.PathLike[str] | None = None) -> list[str]:
    """Return the absolute paths of all workspace directories under root.

    Params:
        root: monorepo root; defaults to FIND_WORKSPACES_ROOT or the current
            working directory

    Returns: root first, then every matched workspace directory sorted.

    Raises:
        ManifestError: if a manifest exists but cannot be read or decoded.
    """
    root_path = resolve_root(root)

    includes, excludes = classify_patterns(collect_patterns(root_path))
    if not includes:
        logger.debug("No include patterns under %s", root_path)
        return [str(root_path)]

    exclusions = resolve_exclusions(excludes, root_path)

    workspaces = {str(path) for path in resolve_inclusions(includes, exclusions, root_path)}
    workspaces.discard(str(root_path))
    return [str(root_path), *sorted(workspaces)]
