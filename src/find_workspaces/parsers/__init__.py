"""Workspace manifest readers."""

from __future__ import annotations

import logging
from pathlib import Path


logger = logging.getLogger(__name__)


class ManifestError(RuntimeError):
    """Raised when a workspace manifest exists but cannot be read or decoded."""


def read_manifest(path: Path) -> str | None:
    """Return the manifest text, or None if the file does not exist."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No manifest at %s", path)
        return None
    except UnicodeDecodeError as exc:
        raise ManifestError(f"Failed to decode {path}: {exc}") from exc
    except OSError as exc:
        raise ManifestError(f"Failed to read {path}: {exc}") from exc


__all__ = [
    "ManifestError",
    "read_manifest",
]
