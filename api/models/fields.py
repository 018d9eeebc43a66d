# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Reusable annotated field types shared by the request schemas.

The NIF rule runs in two stages: a structural check (exactly 9 digits)
followed by the checksum check. Each stage reports its own error type so
forms can show actionable feedback.
"""

import re
import uuid
from typing import Annotated, Any, Optional
from pydantic import AfterValidator, BeforeValidator
from pydantic_core import PydanticCustomError

from domain.nif import NIF_PATTERN, NifCheck, check_nif

NIF_FORMAT_MESSAGE = "NIF must be 9 digits"
NIF_CHECKSUM_MESSAGE = "NIF has an invalid identifier checksum"

POSTAL_CODE_PATTERN = re.compile(r'^[0-9]{4}-[0-9]{3}$')
EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')


def validate_nif_format(value: str) -> str:
    """Structural stage: exactly 9 ASCII digits."""
    if not NIF_PATTERN.fullmatch(value):
        raise PydanticCustomError("nif_format", NIF_FORMAT_MESSAGE)
    return value


def validate_nif_checksum(value: str) -> str:
    """Semantic stage: leading digit and check digit."""
    result = check_nif(value)
    if result is NifCheck.VALID:
        return value
    if result is NifCheck.BAD_FORMAT:
        raise PydanticCustomError("nif_format", NIF_FORMAT_MESSAGE)
    # Leading-digit and check-digit failures share the user-facing message
    raise PydanticCustomError(
        "nif_checksum",
        NIF_CHECKSUM_MESSAGE,
        {"reason": result.value}
    )


def validate_postal_code(value: str) -> str:
    """Portuguese postal code, e.g. 1000-001."""
    if not POSTAL_CODE_PATTERN.fullmatch(value):
        raise ValueError("Invalid postal code (format: 1234-567)")
    return value


def validate_email(value: str) -> str:
    """Validate email format and normalize to lowercase."""
    if not EMAIL_PATTERN.fullmatch(value.lower()):
        raise ValueError("Invalid email format")
    return value.lower()


def validate_uuid(value: str) -> str:
    """Accept any RFC 4122 UUID string."""
    try:
        uuid.UUID(value)
    except ValueError:
        raise ValueError("Invalid UUID") from None
    return value


def parse_query_flag(value: Any) -> Optional[bool]:
    """Query-string flags are true only for the literal "true"."""
    if value is None:
        return None
    return value is True or value == "true"


Nif = Annotated[
    str,
    AfterValidator(validate_nif_format),
    AfterValidator(validate_nif_checksum),
]
"""Portuguese tax identification number (format + checksum)."""

PostalCode = Annotated[str, AfterValidator(validate_postal_code)]
Email = Annotated[str, AfterValidator(validate_email)]
UuidStr = Annotated[str, AfterValidator(validate_uuid)]
QueryFlag = Annotated[Optional[bool], BeforeValidator(parse_query_flag)]
