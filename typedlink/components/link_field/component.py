"""
Link field component - Typed link values for content fields.

Shell Layer - entry points taking input models and returning output models.

Invariants:
- I1: A kind outside the field's allowed set never survives normalization
- I2: Normalizing a LinkValue returns the same object
- I3: An empty link always validates
- I4: Custom text and target only come from input when the field allows them
"""

from __future__ import annotations

from ._impl import (
    normalize_link,
    prepare_input_state,
    serialize_link,
    validate_link,
)
from .models import (
    InputState,
    NormalizeLinkInput,
    NormalizeLinkOutput,
    PrepareInputInput,
    SerializeLinkInput,
    SerializeLinkOutput,
    ValidateLinkInput,
    ValidateLinkOutput,
)
from .ports import KindRegistryPort


def run_normalize(
    inp: NormalizeLinkInput,
    *,
    registry: KindRegistryPort,
) -> NormalizeLinkOutput:
    """
    Normalize a raw field value.

    Args:
        inp: Raw value and field configuration.
        registry: Kind registry.

    Returns:
        NormalizeLinkOutput with the canonical link.
    """
    link = normalize_link(inp.raw, inp.config, registry)
    return NormalizeLinkOutput(link=link, is_empty=link.is_empty())


def run_validate(
    inp: ValidateLinkInput,
    *,
    registry: KindRegistryPort,
) -> ValidateLinkOutput:
    """
    Validate a normalized link.

    Args:
        inp: Link, field configuration and optional field name for errors.
        registry: Kind registry.

    Returns:
        ValidateLinkOutput with errors (empty if valid).
    """
    errors = validate_link(inp.link, inp.config, registry, field_name=inp.field_name)
    return ValidateLinkOutput(errors=tuple(errors), is_valid=len(errors) == 0)


def run_prepare_input(
    inp: PrepareInputInput,
    *,
    registry: KindRegistryPort,
) -> InputState:
    """Compute what an edit widget presents for a link."""
    return prepare_input_state(inp.link, inp.config, registry)


def run_serialize(inp: SerializeLinkInput) -> SerializeLinkOutput:
    """Serialize a link for storage."""
    return SerializeLinkOutput(payload=serialize_link(inp.link))


def run(
    inp: NormalizeLinkInput | ValidateLinkInput | PrepareInputInput | SerializeLinkInput,
    *,
    registry: KindRegistryPort,
) -> NormalizeLinkOutput | ValidateLinkOutput | InputState | SerializeLinkOutput:
    """
    Main entry point for the link field component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, NormalizeLinkInput):
        return run_normalize(inp, registry=registry)
    elif isinstance(inp, ValidateLinkInput):
        return run_validate(inp, registry=registry)
    elif isinstance(inp, PrepareInputInput):
        return run_prepare_input(inp, registry=registry)
    elif isinstance(inp, SerializeLinkInput):
        return run_serialize(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp).__name__}")
