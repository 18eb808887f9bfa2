from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def reject_null(value: Any) -> Any:
    """
    For partial updates: a field may be omitted but not sent as null
    when the stored record requires a value.
    """
    if value is None:
        raise ValueError("may not be null")
    return value
