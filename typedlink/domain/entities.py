from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

WILDCARD: Literal["*"] = "*"

# --- Link Value ---

class LinkValue(BaseModel):
    """
    Canonical link value.

    Storage keys (by_alias): type, value, customText, target.
    Built once per normalization; use model_copy(update=...) for a changed value.
    """

    kind: str | None = Field(default=None, alias="type")
    value: Any = None
    custom_text: str | None = Field(default=None, alias="customText")
    target: bool | None = None
    default_text: str = Field(default="", exclude=True)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def is_empty(self) -> bool:
        return _is_unset(self.kind) or _is_unset(self.value)

    @property
    def text(self) -> str:
        """Display text: custom text when given, otherwise the field default."""
        if self.custom_text:
            return self.custom_text
        return self.default_text


def _is_unset(v: Any) -> bool:
    return v is None or v == ""

# --- Field Configuration ---

class LinkFieldConfig(BaseModel):
    allow_custom_text: bool = Field(default=True, alias="allowCustomText")
    allowed_kind_names: Literal["*"] | frozenset[str] = Field(
        default=WILDCARD, alias="allowedLinkNames"
    )
    allow_target: bool = Field(default=False, alias="allowTarget")
    default_kind_name: str = Field(default="", alias="defaultLinkName")
    default_text: str = Field(default="", alias="defaultText")
    kind_settings: Mapping[str, Mapping[str, Any]] = Field(
        default_factory=dict, alias="typeSettings", validate_default=True
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("allowed_kind_names", mode="before")
    @classmethod
    def _promote_names(cls, v: Any) -> Any:
        # A lone kind name means a singleton set
        if isinstance(v, str):
            return v if v == WILDCARD else frozenset({v})
        if isinstance(v, (list, tuple, set)):
            return frozenset(v)
        return v

    @field_validator("default_kind_name", "default_text", mode="before")
    @classmethod
    def _none_as_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("kind_settings")
    @classmethod
    def _freeze_settings(cls, v: Mapping[str, Mapping[str, Any]]) -> Any:
        return MappingProxyType({name: MappingProxyType(dict(s)) for name, s in v.items()})

    @property
    def allows_every_kind(self) -> bool:
        return self.allowed_kind_names == WILDCARD
