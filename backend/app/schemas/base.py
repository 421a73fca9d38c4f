"""Base schema with camelCase wire names.

The Roblox client reads and writes camelCase JSON keys; Python code uses
snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """BaseModel serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        coerce_numbers_to_str=True,
    )
