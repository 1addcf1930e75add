"""Parse pnpm-workspace.yaml to capture workspace patterns."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from ..config import PNPM_WORKSPACE_FILE
from ..models import string_patterns
from . import ManifestError, read_manifest


logger = logging.getLogger(__name__)


def parse(root: Path) -> list[str]:
    """Return the ``packages`` patterns from pnpm-workspace.yaml under root.

    A missing file, an empty document or a document without a ``packages``
    sequence all yield an empty list.
    """
    path = root / PNPM_WORKSPACE_FILE
    text = read_manifest(path)
    if text is None:
        return []

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ManifestError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        return []

    packages = data.get("packages")
    if not isinstance(packages, list):
        return []

    patterns = string_patterns(packages)
    logger.debug("Read %d pattern(s) from %s", len(patterns), path)
    return patterns
