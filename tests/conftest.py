from typing import Any

import pytest

from typedlink.components.link_kinds import KindRegistry, create_default_registry
from typedlink.domain.entities import LinkFieldConfig


class FakeKind:
    """Kind handler accepting any non-empty string."""

    def __init__(self, label: str, valid: set[str] | None = None) -> None:
        self._label = label
        self._valid = valid
        self.calls: list[Any] = []

    def normalize_value(self, raw: Any) -> Any | None:
        self.calls.append(raw)
        return raw if isinstance(raw, str) and raw else None

    def is_valid(self, value: Any, settings: dict[str, Any] | None = None) -> bool:
        if self._valid is not None:
            return value in self._valid
        return isinstance(value, str) and bool(value)

    def display_name(self) -> str:
        return self._label

    def default_settings(self) -> dict[str, Any]:
        return {"placeholder": "", "strict": False}


@pytest.fixture
def fake_registry() -> KindRegistry:
    """Registry of fake kinds: url, email, custom."""
    return KindRegistry(
        {
            "url": FakeKind("URL", valid={"https://example.com"}),
            "email": FakeKind("Mail"),
            "custom": FakeKind("Custom"),
        }
    )


@pytest.fixture
def registry() -> KindRegistry:
    """Registry with the built-in kinds."""
    return create_default_registry()


@pytest.fixture
def config() -> LinkFieldConfig:
    return LinkFieldConfig(
        allow_custom_text=True,
        allowed_kind_names="*",
        allow_target=False,
        default_text="",
    )
