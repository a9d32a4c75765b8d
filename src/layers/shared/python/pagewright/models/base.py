"""Base Pydantic model with camelCase wire serialization."""

from typing import Any, Self

from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PipelineModel(PydanticBaseModel):
    """Base model for every value flowing through the page pipeline.

    Upstream producers (the brief generator, the intake UI) speak camelCase
    JSON while Python callers use snake_case attribute names, so both are
    accepted on input. Instances are frozen: the pipeline hands values out
    by reference and must be able to return them unchanged.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=False,
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase wire format.

        None values are dropped so that absent optional fields never show up
        as explicit nulls in rendered content.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate a wire-format mapping into a model instance."""
        return cls.model_validate(data)
