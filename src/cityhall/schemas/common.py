# src/cityhall/schemas/common.py

"""Common Pydantic configuration shared by all API schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema whose JSON field names are camelCase.

    Python code uses snake_case attribute names; requests may use either
    form, and responses are always serialized with the camelCase aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
