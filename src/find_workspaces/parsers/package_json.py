"""Parse package.json and extract workspace patterns."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..config import PACKAGE_JSON_FILE
from ..models import decode_workspaces_field
from . import ManifestError, read_manifest


logger = logging.getLogger(__name__)


def parse(root: Path) -> list[str]:
    """Return workspace patterns declared by package.json under root.

    Both npm/yarn shapes are supported: ``"workspaces": [...]`` and
    ``"workspaces": {"packages": [...]}``.
    """
    path = root / PACKAGE_JSON_FILE
    text = read_manifest(path)
    if text is None:
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        return []

    workspaces = decode_workspaces_field(data.get("workspaces"))
    patterns = workspaces.patterns
    logger.debug(
        "Read %d pattern(s) from %s (%s)", len(patterns), path, type(workspaces).__name__
    )
    return patterns
