"""find-workspaces core package.

Resolves the workspace directories a monorepo root declares through
pnpm-workspace.yaml and package.json. Callable from the command line wrapper
and directly from other build tooling.
"""

from .core import find_workspaces
from .parsers import ManifestError

__all__ = [
    "ManifestError",
    "find_workspaces",
]
