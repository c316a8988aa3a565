"""
Field definitions loader.

Loads per-field link configuration from YAML and validates it. A broken
definitions file must halt startup rather than silently allow every kind.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import EXPECTED_SCHEMA_VERSION, FieldDefinitions

logger = logging.getLogger(__name__)

# Default definitions file (relative to project root)
DEFAULT_FIELDS_PATH = "link_fields.yaml"


class FieldDefinitionsError(Exception):
    """Raised when a field definitions file fails validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Field definitions invalid: {'; '.join(errors)}")


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def _resolve_path(path: Path | str | None) -> Path:
    if path is not None:
        return Path(path)

    env_path = os.environ.get("LINK_FIELDS_PATH")
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_FIELDS_PATH


def parse_field_definitions(data: Any) -> FieldDefinitions:
    """
    Validate already-parsed definitions.

    Raises:
        FieldDefinitionsError: If the structure or schema version is wrong.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FieldDefinitionsError(["Field definitions must be a mapping"])

    version = data.get("schema_version", EXPECTED_SCHEMA_VERSION)
    if version != EXPECTED_SCHEMA_VERSION:
        raise FieldDefinitionsError(
            [
                f"Invalid schema_version: expected {EXPECTED_SCHEMA_VERSION}, "
                f"got {version}"
            ]
        )

    try:
        return FieldDefinitions.model_validate(data)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = ".".join(str(part) for part in error.get("loc", ())) or "_schema"
            errors.append(f"{loc}: {error.get('msg', 'Invalid value')}")
        raise FieldDefinitionsError(errors) from e


def load_field_definitions(path: Path | str | None = None) -> FieldDefinitions:
    """
    Load field definitions from disk.

    Args:
        path: Definitions file. Falls back to LINK_FIELDS_PATH, then the
            project root default.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        FieldDefinitionsError: If the file is not valid YAML or fails validation.
    """
    fields_path = _resolve_path(path)

    if not fields_path.exists():
        raise FileNotFoundError(f"Field definitions not found at: {fields_path}")

    with open(fields_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise FieldDefinitionsError([f"Invalid YAML syntax: {e}"]) from e

    definitions = parse_field_definitions(data)
    logger.info(
        "Loaded %d link field definitions from %s", len(definitions.link_fields), fields_path
    )
    return definitions
