# SPDX-License-Identifier: Apache-2.0

"""
NIF (Portuguese tax identification number) validation.

A NIF has 9 decimal digits. The first digit identifies the kind of entity
and must be one of 1, 2, 3, 5, 6, 8 or 9. The last digit is a mod-11
check digit over the first eight, weighted 9 down to 2.

All functions here are pure and hold no state, so they can be called from
any number of threads without coordination.
"""

import re
from enum import Enum
from typing import Any

NIF_LENGTH = 9
ALLOWED_LEADING_DIGITS = frozenset({1, 2, 3, 5, 6, 8, 9})

# ASCII only: str.isdigit() and \d also accept other Unicode digits
NIF_PATTERN = re.compile(r'^[0-9]{9}$')
_PREFIX_PATTERN = re.compile(r'^[0-9]{8}$')


class NifCheck(str, Enum):
    """Outcome of a NIF check."""
    VALID = "valid"
    BAD_FORMAT = "bad_format"
    BAD_LEADING_DIGIT = "bad_leading_digit"
    BAD_CHECKSUM = "bad_checksum"


def compute_check_digit(prefix: str) -> int:
    """
    Compute the check digit for an 8-digit NIF prefix.

    Args:
        prefix: The first eight digits of a NIF

    Returns:
        Expected ninth digit (0-9)

    Raises:
        ValueError: If prefix is not exactly 8 ASCII digits
    """
    if not isinstance(prefix, str) or not _PREFIX_PATTERN.fullmatch(prefix):
        raise ValueError(f"NIF prefix must be 8 digits, got {prefix!r}")

    total = sum(int(digit) * (9 - i) for i, digit in enumerate(prefix))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def check_nif(candidate: Any) -> NifCheck:
    """
    Check a candidate NIF and report why it fails, if it does.

    Never raises: anything that is not a 9-digit string is BAD_FORMAT.

    Args:
        candidate: Value to check

    Returns:
        NifCheck reason code
    """
    if not isinstance(candidate, str) or not NIF_PATTERN.fullmatch(candidate):
        return NifCheck.BAD_FORMAT

    if int(candidate[0]) not in ALLOWED_LEADING_DIGITS:
        return NifCheck.BAD_LEADING_DIGIT

    if int(candidate[8]) != compute_check_digit(candidate[:8]):
        return NifCheck.BAD_CHECKSUM

    return NifCheck.VALID


def is_valid_nif(candidate: Any) -> bool:
    """Return True if candidate is a structurally valid NIF."""
    return check_nif(candidate) is NifCheck.VALID
