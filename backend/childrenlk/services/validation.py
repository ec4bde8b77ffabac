"""Field format rules shared by submission, profile and organization forms."""

import re
from uuid import UUID

# +94 followed by exactly 9 digits, e.g. +94771234567
PHONE_REGEX = re.compile(r"^\+94\d{9}$")

PHONE_VALIDATION_MESSAGE = "Phone must start with +94 followed by 9 digits (e.g. +94771234567)"


def is_valid_phone(phone) -> bool:
    if not phone or not isinstance(phone, str):
        return False
    return PHONE_REGEX.match(phone.strip()) is not None


def parse_uuid(value) -> UUID | None:
    """UUID from a path segment, or None when it is not one."""
    try:
        return UUID(str(value))
    except ValueError:
        return None
