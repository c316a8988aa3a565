"""
Link kinds - registry, built-in kind handlers and allowed-kind resolution.

Functional Core - pure logic, except KindRegistry which is populated once at
startup and only read afterwards.

Key behaviors:
- Registration order is iteration and display order
- Allowed kinds are always a subset of the registry
- Effective kind settings are handler defaults overlaid by field overrides
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import Any
from urllib.parse import urlparse

from typedlink.domain.entities import LinkFieldConfig

from .models import KindRegistrationError
from .ports import KindHandlerPort, KindRegistryPort

logger = logging.getLogger(__name__)


# --- Registry ---


class KindRegistry:
    """
    Ordered mapping of kind name to handler.

    Constructed at startup and passed explicitly into normalize/validate calls.
    """

    def __init__(self, handlers: dict[str, KindHandlerPort] | None = None) -> None:
        self._handlers: dict[str, KindHandlerPort] = {}
        for name, handler in (handlers or {}).items():
            self.register(name, handler)

    def register(
        self,
        name: str,
        handler: KindHandlerPort,
        *,
        replace: bool = False,
    ) -> None:
        """Register a handler under a unique kind name."""
        if not isinstance(name, str) or not name.strip():
            raise KindRegistrationError("Kind name must be a non-empty string")
        if name in self._handlers and not replace:
            raise KindRegistrationError(f"Kind '{name}' is already registered")

        self._handlers[name] = handler
        logger.debug("Registered link kind %s (%s)", name, type(handler).__name__)

    def unregister(self, name: str) -> None:
        self._handlers.pop(name, None)

    def get(self, name: str) -> KindHandlerPort | None:
        return self._handlers.get(name)

    def list_kinds(self) -> dict[str, KindHandlerPort]:
        """Ordered copy of all registered kinds."""
        return dict(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._handlers))

    def __len__(self) -> int:
        return len(self._handlers)


# --- Built-in Kinds ---


class InputKind:
    """
    Kind whose value is a single line of text typed by the editor.

    Subclasses set a prefix to strip and override _check for their format.
    """

    strip_prefix: str | None = None

    def __init__(self, label: str) -> None:
        self._label = label

    def normalize_value(self, raw: Any) -> str | None:
        if not isinstance(raw, str):
            return None

        value = raw.strip()
        if self.strip_prefix and value.lower().startswith(self.strip_prefix):
            value = value[len(self.strip_prefix) :].strip()

        return value or None

    def is_valid(self, value: Any, settings: dict[str, Any] | None = None) -> bool:
        if not isinstance(value, str) or not value.strip():
            return False
        if (settings or {}).get("disable_validation"):
            return True
        return self._check(value.strip(), settings or {})

    def _check(self, value: str, settings: dict[str, Any]) -> bool:
        return True

    def display_name(self) -> str:
        return self._label

    def default_settings(self) -> dict[str, Any]:
        return {"disable_validation": False}


class UrlKind(InputKind):
    """External URL (http or https)."""

    def __init__(self, label: str = "URL") -> None:
        super().__init__(label)

    def _check(self, value: str, settings: dict[str, Any]) -> bool:
        if settings.get("allow_aliases") and (
            value.startswith("@") or (value.startswith("/") and not value.startswith("//"))
        ):
            return True
        try:
            parsed = urlparse(value)
        except ValueError:
            return False
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)

    def default_settings(self) -> dict[str, Any]:
        return {"disable_validation": False, "allow_aliases": False}


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class EmailKind(InputKind):
    """Email address, stored without the mailto: prefix."""

    strip_prefix = "mailto:"

    def __init__(self, label: str = "Mail") -> None:
        super().__init__(label)

    def _check(self, value: str, settings: dict[str, Any]) -> bool:
        return bool(EMAIL_PATTERN.match(value))


TEL_PATTERN = re.compile(r"^\+?[0-9\s\-().\/]+$")


class TelKind(InputKind):
    """Telephone number, stored without the tel: prefix."""

    strip_prefix = "tel:"

    def __init__(self, label: str = "Telephone") -> None:
        super().__init__(label)

    def _check(self, value: str, settings: dict[str, Any]) -> bool:
        return bool(TEL_PATTERN.match(value)) and any(c.isdigit() for c in value)


class CustomKind(InputKind):
    """Free-form target, anything non-empty."""

    def __init__(self, label: str = "Custom") -> None:
        super().__init__(label)


class EntryKind:
    """
    Internal content reference.

    The editor's element picker posts a list of ids; the first one wins.
    """

    def __init__(self, label: str = "Entry") -> None:
        self._label = label

    def normalize_value(self, raw: Any) -> int | None:
        if isinstance(raw, (list, tuple)):
            raw = raw[0] if raw else None

        if isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            return raw if raw > 0 else None
        if isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdecimal():
            ref = int(raw.strip())
            return ref if ref > 0 else None
        return None

    def is_valid(self, value: Any, settings: dict[str, Any] | None = None) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and value > 0

    def display_name(self) -> str:
        return self._label

    def default_settings(self) -> dict[str, Any]:
        return {"sources": "*"}


def create_default_registry() -> KindRegistry:
    """Registry with the built-in kinds in display order."""
    registry = KindRegistry()
    registry.register("url", UrlKind())
    registry.register("email", EmailKind())
    registry.register("tel", TelKind())
    registry.register("custom", CustomKind())
    registry.register("entry", EntryKind())
    return registry


# --- Allowed Kinds ---


def allowed_kinds(
    config: LinkFieldConfig,
    registry: KindRegistryPort,
) -> dict[str, KindHandlerPort]:
    """
    Kinds a field may use, in registry order.

    Recomputed on every call so later registrations are observed.
    """
    kinds = registry.list_kinds()
    if config.allows_every_kind:
        return kinds

    names = config.allowed_kind_names
    return {name: handler for name, handler in kinds.items() if name in names}


def is_allowed_kind(
    name: Any,
    config: LinkFieldConfig,
    registry: KindRegistryPort,
) -> bool:
    if not isinstance(name, str):
        return False
    return name in allowed_kinds(config, registry)


def kind_settings(
    name: str,
    handler: KindHandlerPort,
    config: LinkFieldConfig,
) -> dict[str, Any]:
    """Handler defaults overlaid by the field's per-kind overrides."""
    settings = dict(handler.default_settings())
    settings.update(config.kind_settings.get(name, {}))
    return settings
