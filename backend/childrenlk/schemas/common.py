"""Shared building blocks for request and response schemas."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

from childrenlk.services.validation import PHONE_VALIDATION_MESSAGE, is_valid_phone

# Blank strings count as missing
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def check_phone(value: str) -> str:
    if not is_valid_phone(value):
        raise ValueError(PHONE_VALIDATION_MESSAGE)
    return value.strip()


def _check_optional_phone(value: str | None) -> str | None:
    if value is None:
        return None
    return check_phone(value)


OptionalStr = Annotated[str | None, AfterValidator(_blank_to_none)]

Phone = Annotated[str, AfterValidator(check_phone)]

# Blank clears the phone; anything else must be a valid +94 number
OptionalPhone = Annotated[str | None, AfterValidator(_blank_to_none), AfterValidator(_check_optional_phone)]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; snake_case input is accepted too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(CamelModel):
    success: bool = True
    id: str | None = None
