"""Manifest names, pattern syntax constants and root resolution."""

from __future__ import annotations

import os
from pathlib import Path


PNPM_WORKSPACE_FILE = "pnpm-workspace.yaml"
PACKAGE_JSON_FILE = "package.json"

NEGATION_MARKER = "!"

# Checked in order; only the first matching suffix is stripped.
EXCLUDE_SUFFIXES = ("/**/*", "/**", "/*")

ROOT_ENV_VAR = "FIND_WORKSPACES_ROOT"


def resolve_root(root: str | os.PathLike[str] | None = None) -> Path:
    """Resolve the workspace root as an absolute path.

    Priority:
    1. Explicit root argument
    2. FIND_WORKSPACES_ROOT environment variable
    3. Current working directory
    """
    if root is not None:
        return Path(root).resolve()

    env_root = os.environ.get(ROOT_ENV_VAR)
    if env_root:
        return Path(env_root).resolve()

    return Path.cwd().resolve()
