"""Shared Pydantic base schema and field types."""

import re
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from travlr.core.constants import MAX_CODE_LENGTH, MIN_CODE_LENGTH


class APIModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python.

    Input is accepted under either name.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def normalize_code(value: Any) -> Any:
    """Trim and upper-case a resource code."""
    if isinstance(value, str):
        return value.strip().upper()
    return value


def normalize_price(value: Any) -> Any:
    """Turn price strings like ``"$1,299.00"`` into floats.

    Strings with no parseable number are passed through unchanged so the
    float validator reports them.
    """
    if isinstance(value, str):
        digits = re.sub(r"[^0-9.]", "", value)
        try:
            return float(digits)
        except ValueError:
            return value
    return value


def strip_items(value: Any) -> Any:
    """Trim each string of a list."""
    if isinstance(value, list):
        return [item.strip() if isinstance(item, str) else item for item in value]
    return value


Code = Annotated[
    str,
    BeforeValidator(normalize_code),
    Field(min_length=MIN_CODE_LENGTH, max_length=MAX_CODE_LENGTH),
]

Price = Annotated[
    float,
    BeforeValidator(normalize_price),
    Field(ge=0, allow_inf_nan=False),
]

TrimmedList = Annotated[list[str], BeforeValidator(strip_items)]
