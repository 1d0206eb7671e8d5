from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel


# Matches the String(255) key columns (ids, owner id).
KEY_MAX_LENGTH = 255

KeyStr = Annotated[str, Field(min_length=1, max_length=KEY_MAX_LENGTH)]

# Signed 32-bit, the portable range of an SQL INTEGER column.
Int32 = Annotated[StrictInt, Field(ge=-(2**31), le=2**31 - 1)]


def reject_null(v: Any) -> Any:
    if v is None:
        raise ValueError("may be omitted but not null")
    return v


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys (``rawText``) while keeping snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
