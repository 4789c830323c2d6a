"""Base model classes shared by brand configuration models."""

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class BaseModel(PydanticBaseModel):
    """Base model with common configuration.

    Brand documents are authored in camelCase JSON; attributes are snake_case.
    Instances are frozen: a resolved configuration is replaced, never edited.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_document(self) -> dict:
        """Dump back to the camelCase document shape."""
        return self.model_dump(by_alias=True, mode="json")


class ExtensibleModel(BaseModel):
    """Base model that keeps unknown keys as extra attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )
