"""
Link kinds component - Kind handlers, registry and allowed-kind resolution.
"""

from ._impl import (
    CustomKind,
    EmailKind,
    EntryKind,
    InputKind,
    KindRegistry,
    TelKind,
    UrlKind,
    allowed_kinds,
    create_default_registry,
    is_allowed_kind,
    kind_settings,
)
from .component import run_describe
from .models import (
    DescribeKindsInput,
    DescribeKindsOutput,
    KindDescriptor,
    KindRegistrationError,
)
from .ports import KindHandlerPort, KindRegistryPort

__all__ = [
    # Entry points
    "run_describe",
    # Models
    "DescribeKindsInput",
    "DescribeKindsOutput",
    "KindDescriptor",
    "KindRegistrationError",
    # Ports
    "KindHandlerPort",
    "KindRegistryPort",
    # Registry and resolution
    "KindRegistry",
    "create_default_registry",
    "allowed_kinds",
    "is_allowed_kind",
    "kind_settings",
    # Built-in kinds
    "InputKind",
    "UrlKind",
    "EmailKind",
    "TelKind",
    "CustomKind",
    "EntryKind",
]
