"""
Link field component - Port interfaces.

The core only reads the kind registry; registration happens elsewhere.
"""

from __future__ import annotations

from typedlink.components.link_kinds.ports import KindHandlerPort, KindRegistryPort

__all__ = ["KindHandlerPort", "KindRegistryPort"]
