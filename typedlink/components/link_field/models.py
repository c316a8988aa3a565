"""
Link field component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from typedlink.domain.entities import LinkFieldConfig, LinkValue

# --- Validation Errors ---


@dataclass(frozen=True)
class LinkValidationError:
    """Link validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class NormalizeLinkInput:
    """Input for normalizing a raw field value."""

    raw: Any
    config: LinkFieldConfig = field(default_factory=LinkFieldConfig)


@dataclass(frozen=True)
class ValidateLinkInput:
    """Input for validating a normalized link."""

    link: LinkValue
    config: LinkFieldConfig = field(default_factory=LinkFieldConfig)
    field_name: str | None = None


@dataclass(frozen=True)
class PrepareInputInput:
    """Input for computing what an edit widget should present."""

    link: LinkValue
    config: LinkFieldConfig = field(default_factory=LinkFieldConfig)


@dataclass(frozen=True)
class SerializeLinkInput:
    """Input for serializing a link for storage."""

    link: LinkValue | None


# --- Output Models ---


@dataclass(frozen=True)
class NormalizeLinkOutput:
    """Output from normalize operation."""

    link: LinkValue
    is_empty: bool


@dataclass(frozen=True)
class ValidateLinkOutput:
    """Output from validate operation."""

    errors: tuple[LinkValidationError, ...]
    is_valid: bool


@dataclass(frozen=True)
class InputState:
    """
    What an edit widget presents for a link.

    Advisory only; nothing here is persisted.
    """

    link: LinkValue
    kind: str | None
    kind_names: dict[str, str]
    single_kind: str | None = None
    settings: dict[str, dict[str, Any]] = field(default_factory=dict)


@dataclass(frozen=True)
class SerializeLinkOutput:
    """Output from serialize operation."""

    payload: str
