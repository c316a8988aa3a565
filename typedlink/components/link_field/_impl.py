"""
Link field - Normalization and validation of typed link values.

Functional Core - pure business logic.

Key behaviors:
- A LinkValue passes through normalization unchanged
- Stored JSON that cannot be parsed degrades to the field defaults
- Custom text and target are only taken from input when the field allows them
- A kind the field does not allow is cleared together with its value
- The validator reports errors; the normalizer never raises on bad input
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from typedlink.components.link_kinds import allowed_kinds, is_allowed_kind, kind_settings
from typedlink.domain.entities import LinkFieldConfig, LinkValue

from .models import InputState, LinkValidationError
from .ports import KindHandlerPort, KindRegistryPort

logger = logging.getLogger(__name__)

# Keys a stored payload may carry; anything else is ignored
STORED_KEYS = ("customText", "target", "type", "value")

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})


# --- Coercion Helpers ---


def _as_kind(raw: Any) -> str | None:
    if isinstance(raw, str) and raw:
        return raw
    return None


def _as_text(raw: Any) -> str | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    return None


def _as_flag(raw: Any) -> bool | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw.strip().lower() in _TRUE_STRINGS
    return bool(raw)


# --- Normalization ---


def _parse_stored(raw: str) -> dict[str, Any]:
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        logger.debug("Unparseable stored link payload, using field defaults")
        return {}

    if not isinstance(data, dict):
        return {}
    return {key: data[key] for key in STORED_KEYS if key in data}


def _from_stored(raw: str, config: LinkFieldConfig) -> dict[str, Any]:
    """Attributes from a serialized payload. The value is already normalized."""
    data = _parse_stored(raw)
    attrs: dict[str, Any] = {}

    if config.allow_custom_text and "customText" in data:
        attrs["custom_text"] = _as_text(data["customText"])
    if config.allow_target and "target" in data:
        attrs["target"] = _as_flag(data["target"])
    if "type" in data:
        attrs["kind"] = _as_kind(data["type"])
    if "value" in data:
        attrs["value"] = data["value"]

    return attrs


def _from_submitted(
    raw: Mapping[str, Any],
    config: LinkFieldConfig,
    registry: KindRegistryPort,
) -> dict[str, Any]:
    """Attributes from submitted form data; the kind's handler reads raw[kind]."""
    kind = _as_kind(raw.get("type"))

    custom_text = None
    if config.allow_custom_text and raw.get("customText") is not None:
        custom_text = _as_text(raw["customText"])

    target = None
    if config.allow_target and raw.get("target") is not None:
        target = _as_flag(raw["target"])

    value = None
    handler = registry.get(kind) if kind is not None else None
    if handler is not None:
        value = handler.normalize_value(raw.get(kind))

    return {
        "custom_text": custom_text,
        "target": target,
        "kind": kind,
        "value": value,
    }


def normalize_link(
    raw: Any,
    config: LinkFieldConfig,
    registry: KindRegistryPort,
) -> LinkValue:
    """
    Turn a raw field value into a canonical LinkValue.

    Accepts a LinkValue (returned as is), a stored JSON string or a submitted
    mapping. Anything else yields a link with only the field defaults.
    """
    if isinstance(raw, LinkValue):
        return raw

    attrs: dict[str, Any] = {"default_text": config.default_text}

    if isinstance(raw, str):
        attrs.update(_from_stored(raw, config))
    elif isinstance(raw, Mapping):
        attrs.update(_from_submitted(raw, config, registry))

    # A value never outlives its kind
    kind = attrs.get("kind")
    if kind is None or not is_allowed_kind(kind, config, registry):
        if kind is not None:
            logger.debug("Clearing link kind %r: not allowed for this field", kind)
        attrs["kind"] = None
        attrs["value"] = None

    return LinkValue(**attrs)


def is_empty_value(value: Any) -> bool:
    """Field-level emptiness; anything that is not a LinkValue counts as empty."""
    if isinstance(value, LinkValue):
        return value.is_empty()
    return True


def serialize_link(link: LinkValue | None) -> str:
    """Compact JSON with the stored keys only."""
    if link is None:
        link = LinkValue()
    return link.model_dump_json(by_alias=True)


# --- Validation ---


def validate_link(
    link: LinkValue,
    config: LinkFieldConfig,
    registry: KindRegistryPort,
    field_name: str | None = None,
) -> list[LinkValidationError]:
    """
    Validate a normalized link against its field.

    An empty link is never an error here; required-ness is decided by the host.
    """
    if link.is_empty():
        return []

    handler = allowed_kinds(config, registry).get(link.kind or "")
    if handler is None:
        return [
            LinkValidationError(
                code="kind_not_allowed",
                message=f"Link type '{link.kind}' is not allowed",
                field=field_name,
            )
        ]

    settings = kind_settings(link.kind or "", handler, config)
    if not handler.is_valid(link.value, settings):
        return [
            LinkValidationError(
                code="invalid_value",
                message=f"Invalid value for link type '{handler.display_name()}'",
                field=field_name,
            )
        ]

    return []


# --- Input State ---


def select_default_kind(
    link: LinkValue,
    config: LinkFieldConfig,
    registry: KindRegistryPort,
) -> str | None:
    """Kind to present: the field default for an empty link, when allowed."""
    if (
        link.is_empty()
        and config.default_kind_name
        and is_allowed_kind(config.default_kind_name, config, registry)
    ):
        return config.default_kind_name
    return link.kind


def prepare_input_state(
    link: LinkValue,
    config: LinkFieldConfig,
    registry: KindRegistryPort,
) -> InputState:
    """Compute the presented link for an edit widget without touching the input."""
    kinds = allowed_kinds(config, registry)

    presented = link
    if kinds and presented.kind not in kinds:
        presented = presented.model_copy(update={"kind": next(iter(kinds)), "value": None})

    kind = select_default_kind(presented, config, registry)
    if kind != presented.kind:
        presented = presented.model_copy(update={"kind": kind})

    return InputState(
        link=presented,
        kind=kind,
        kind_names={name: handler.display_name() for name, handler in kinds.items()},
        single_kind=next(iter(kinds)) if len(kinds) == 1 else None,
        settings={name: kind_settings(name, handler, config) for name, handler in kinds.items()},
    )


# --- Link Field Service ---


class LinkField:
    """
    Link field bound to its configuration and the kind registry.

    One instance per field definition.
    """

    def __init__(
        self,
        config: LinkFieldConfig,
        registry: KindRegistryPort,
        handle: str | None = None,
    ) -> None:
        """Initialize field."""
        self._config = config
        self._registry = registry
        self._handle = handle

    @property
    def config(self) -> LinkFieldConfig:
        return self._config

    @property
    def handle(self) -> str | None:
        return self._handle

    def normalize(self, raw: Any) -> LinkValue:
        return normalize_link(raw, self._config, self._registry)

    def validate(self, link: LinkValue) -> list[LinkValidationError]:
        return validate_link(link, self._config, self._registry, field_name=self._handle)

    def is_empty(self, value: Any) -> bool:
        return is_empty_value(value)

    def serialize(self, link: LinkValue | None) -> str:
        return serialize_link(link)

    def allowed_kinds(self) -> dict[str, KindHandlerPort]:
        return allowed_kinds(self._config, self._registry)

    def kind_settings(self, name: str) -> dict[str, Any]:
        """Effective settings for a registered kind; empty if unregistered."""
        handler = self._registry.get(name)
        if handler is None:
            return {}
        return kind_settings(name, handler, self._config)

    def prepare_input(self, link: LinkValue) -> InputState:
        return prepare_input_state(link, self._config, self._registry)
