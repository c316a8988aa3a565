"""
Link field component - Normalization and validation of typed link values.
"""

from ._impl import (
    LinkField,
    is_empty_value,
    normalize_link,
    prepare_input_state,
    select_default_kind,
    serialize_link,
    validate_link,
)
from .component import (
    run,
    run_normalize,
    run_prepare_input,
    run_serialize,
    run_validate,
)
from .models import (
    InputState,
    LinkValidationError,
    NormalizeLinkInput,
    NormalizeLinkOutput,
    PrepareInputInput,
    SerializeLinkInput,
    SerializeLinkOutput,
    ValidateLinkInput,
    ValidateLinkOutput,
)
from .ports import KindHandlerPort, KindRegistryPort

__all__ = [
    # Entry points
    "run",
    "run_normalize",
    "run_validate",
    "run_prepare_input",
    "run_serialize",
    # Input models
    "NormalizeLinkInput",
    "ValidateLinkInput",
    "PrepareInputInput",
    "SerializeLinkInput",
    # Output models
    "NormalizeLinkOutput",
    "ValidateLinkOutput",
    "InputState",
    "SerializeLinkOutput",
    "LinkValidationError",
    # Ports
    "KindHandlerPort",
    "KindRegistryPort",
    # Core functions
    "LinkField",
    "is_empty_value",
    "normalize_link",
    "prepare_input_state",
    "select_default_kind",
    "serialize_link",
    "validate_link",
]
