from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    root = tmp_path.resolve() / "repo"
    root.mkdir()
    return root


def make_dirs(root: Path, *paths: str) -> None:
    for rel in paths:
        (root / rel).mkdir(parents=True, exist_ok=True)


def write_pnpm_workspace(root: Path, patterns: list[str]) -> None:
    lines = ["packages:"] + [f'  - "{pattern}"' for pattern in patterns]
    (root / "pnpm-workspace.yaml").write_text("\n".join(lines) + "\n", encoding="utf-8")


def write_package_json(root: Path, data: object) -> None:
    (root / "package.json").write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
