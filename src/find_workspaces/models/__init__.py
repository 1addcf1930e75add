"""Data models for decoded workspace manifests."""

from __future__ import annotations

from .workspaces_field import (
    EmptyForm,
    ObjectForm,
    SequenceForm,
    WorkspacesField,
    decode_workspaces_field,
    string_patterns,
)

__all__ = [
    "EmptyForm",
    "ObjectForm",
    "SequenceForm",
    "WorkspacesField",
    "decode_workspaces_field",
    "string_patterns",
]
