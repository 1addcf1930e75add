"""Decoded shapes of the package.json ``workspaces`` field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True)
class SequenceForm:
    """``"workspaces": ["packages/*"]``"""

    items: tuple[str, ...]

    @property
    def patterns(self) -> list[str]:
        return list(self.items)


@dataclass(frozen=True)
class ObjectForm:
    """``"workspaces": {"packages": ["packages/*"], "nohoist": [...]}``

    ``items`` is None when the object has no ``packages`` sequence.
    """

    items: tuple[str, ...] | None = None

    @property
    def patterns(self) -> list[str]:
        return list(self.items or ())


@dataclass(frozen=True)
class EmptyForm:
    """Field absent or of an unrecognised shape."""

    @property
    def patterns(self) -> list[str]:
        return []


WorkspacesField: TypeAlias = SequenceForm | ObjectForm | EmptyForm


def string_patterns(values: list[Any]) -> list[str]:
    """Keep only the string entries of a decoded pattern list."""
    return [value for value in values if isinstance(value, str)]


def decode_workspaces_field(value: Any) -> WorkspacesField:
    """Inspect a decoded ``workspaces`` value and return the matching variant."""
    if isinstance(value, list):
        return SequenceForm(tuple(string_patterns(value)))

    if isinstance(value, dict):
        packages = value.get("packages")
        if isinstance(packages, list):
            return ObjectForm(tuple(string_patterns(packages)))
        return ObjectForm()

    return EmptyForm()
