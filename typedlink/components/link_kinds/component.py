"""
Link kinds component - Kind catalogue for field settings.

Lists every registered kind with its display name, whether a field allows it
and the settings the field would use for it.
"""

from __future__ import annotations

from ._impl import allowed_kinds, kind_settings
from .models import DescribeKindsInput, DescribeKindsOutput, KindDescriptor
from .ports import KindRegistryPort


def run_describe(
    inp: DescribeKindsInput,
    *,
    registry: KindRegistryPort,
) -> DescribeKindsOutput:
    """
    Describe registered kinds for a field.

    Args:
        inp: Input carrying the field configuration.
        registry: Kind registry.

    Returns:
        DescribeKindsOutput in registry order.
    """
    allowed = allowed_kinds(inp.config, registry)

    kinds = tuple(
        KindDescriptor(
            name=name,
            display_name=handler.display_name(),
            allowed=name in allowed,
            settings=kind_settings(name, handler, inp.config),
        )
        for name, handler in registry.list_kinds().items()
    )
    return DescribeKindsOutput(kinds=kinds, total=len(kinds))
