"""Domain entities for link fields."""

from .entities import WILDCARD, LinkFieldConfig, LinkValue

__all__ = ["WILDCARD", "LinkFieldConfig", "LinkValue"]
