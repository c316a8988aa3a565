from pydantic import BaseModel, ConfigDict, Field

from typedlink.domain.entities import LinkFieldConfig

EXPECTED_SCHEMA_VERSION = 1


class FieldDefinitions(BaseModel):
    schema_version: int = EXPECTED_SCHEMA_VERSION
    link_fields: dict[str, LinkFieldConfig] = Field(default_factory=dict, alias="fields")

    model_config = ConfigDict(populate_by_name=True)

    def get(self, handle: str) -> LinkFieldConfig | None:
        return self.link_fields.get(handle)
