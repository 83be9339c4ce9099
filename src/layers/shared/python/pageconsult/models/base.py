"""Base Pydantic models with camelCase JSON serialization."""

from typing import Any

from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseModel(PydanticBaseModel):
    """Base model for design intelligence values.

    Values are immutable once built. Attributes are snake_case in Python and
    camelCase on the wire, which is what the page renderer expects.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict using camelCase field names.

        Unset optional fields are dropped so absent evidence stays absent
        rather than showing up as null.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
