"""
Link kinds component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from typedlink.domain.entities import LinkFieldConfig

# --- Errors ---


class KindRegistrationError(ValueError):
    """Raised when a kind cannot be registered."""


# --- Input Models ---


@dataclass(frozen=True)
class DescribeKindsInput:
    """Input for listing registered kinds against a field configuration."""

    config: LinkFieldConfig = field(default_factory=LinkFieldConfig)


# --- Output Models ---


@dataclass(frozen=True)
class KindDescriptor:
    """One registered kind as seen by a field."""

    name: str
    display_name: str
    allowed: bool
    settings: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DescribeKindsOutput:
    """Output from describe operation."""

    kinds: tuple[KindDescriptor, ...]
    total: int
