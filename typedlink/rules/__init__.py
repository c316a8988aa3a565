"""
Field definitions - YAML configuration for link fields.
"""

from .loader import (
    DEFAULT_FIELDS_PATH,
    FieldDefinitionsError,
    load_field_definitions,
    parse_field_definitions,
)
from .models import EXPECTED_SCHEMA_VERSION, FieldDefinitions

__all__ = [
    "DEFAULT_FIELDS_PATH",
    "EXPECTED_SCHEMA_VERSION",
    "FieldDefinitions",
    "FieldDefinitionsError",
    "load_field_definitions",
    "parse_field_definitions",
]
