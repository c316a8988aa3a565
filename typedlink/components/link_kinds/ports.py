"""
Link kinds component - Port interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol


class KindHandlerPort(Protocol):
    """Capability implemented once per link kind."""

    def normalize_value(self, raw: Any) -> Any | None:
        """Turn the raw per-kind payload into the stored value, or None."""
        ...

    def is_valid(self, value: Any, settings: dict[str, Any] | None = None) -> bool:
        """Check that a stored value is well formed for this kind."""
        ...

    def display_name(self) -> str:
        """Human readable kind name."""
        ...

    def default_settings(self) -> dict[str, Any]:
        """Per-kind settings before field overrides."""
        ...


class KindRegistryPort(Protocol):
    """Read side of the kind registry used by the link field core."""

    def get(self, name: str) -> KindHandlerPort | None:
        """Handler for a kind name, or None if unregistered."""
        ...

    def list_kinds(self) -> dict[str, KindHandlerPort]:
        """All kinds in registration order."""
        ...
