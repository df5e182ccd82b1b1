"""
Format validation for Chilean RUT strings.

A RUT is a run of digits, optionally grouped with dots every three digits
and optionally followed by a dash and a single check character (0-9 or K).
Validation is lenient about length: once dots and dashes are removed the
text must hold between 1 and 9 digits plus an optional check character.
"""

import re
from typing import Any, Tuple

from .errors import (
    BadShapeError,
    LeadingZeroError,
    MissingCheckCharacterError,
    NotAStringError,
)

DELIMITER = "."
SEPARATOR = "-"
MAX_BODY_DIGITS = 9

# Digits (at most 9) plus an optional check character, after cleaning
CLEAN_RUT_PATTERN = re.compile(r"^\d{1,9}[0-9kK]?$", re.ASCII)

UNGROUPED_BODY_PATTERN = re.compile(r"^\d{1,9}$", re.ASCII)
GROUPED_BODY_PATTERN = re.compile(r"^\d{1,3}(\.\d{3}){0,2}$", re.ASCII)


def clean(rut: str) -> str:
    """
    Remove every delimiter and separator from a RUT string.

    No validation is performed.

    Examples:
        >>> clean("12.345.678-5")
        '123456785'
    """
    return rut.replace(DELIMITER, "").replace(SEPARATOR, "")


def validate_format(rut: Any) -> None:
    """
    Reject malformed RUT input before any other operation runs.

    Checks, in order:
    1. The value is a string
    2. It does not start with zero
    3. Without dots and dashes it is 1-9 digits plus an optional 0-9/K/k

    Args:
        rut: Value claimed to be a RUT

    Raises:
        NotAStringError: If rut is not a string
        LeadingZeroError: If rut starts with "0"
        BadShapeError: If the cleaned text has the wrong shape

    Examples:
        >>> validate_format("12.345.678-5")
        >>> validate_format("012345678")
        Traceback (most recent call last):
        ...
        services.rut.helpers.errors.LeadingZeroError: Invalid RUT format. RUT cannot start with zero.
    """
    if not isinstance(rut, str):
        raise NotAStringError()

    if rut.startswith("0"):
        raise LeadingZeroError()

    if not CLEAN_RUT_PATTERN.fullmatch(clean(rut)):
        raise BadShapeError()


def is_valid_format_without_separator(rut: Any) -> bool:
    """
    Check whether a RUT body has no dash and no check character.

    Accepts plain digits ("12345678") or correctly grouped digits
    ("12.345.678"). Never raises.
    """
    if not isinstance(rut, str):
        return False
    return bool(UNGROUPED_BODY_PATTERN.fullmatch(rut) or GROUPED_BODY_PATTERN.fullmatch(rut))


def split_check_character(rut: str) -> Tuple[str, str]:
    """
    Split a RUT into its digit body and its trailing check character.

    The check character is the one following the dash, or the last character
    when there is no dash. Dots are removed from the body; the check
    character keeps the caller's case.

    Args:
        rut: RUT string in any supported format

    Returns:
        Tuple of (body, check_character)

    Raises:
        RutError: If the format is invalid or no check character is present

    Examples:
        >>> split_check_character("12.345.678-k")
        ('12345678', 'k')
        >>> split_check_character("123456785")
        ('12345678', '5')
    """
    validate_format(rut)

    compact = rut.replace(DELIMITER, "")

    if SEPARATOR in compact:
        body, _, check = compact.rpartition(SEPARATOR)
        if len(check) != 1:
            raise MissingCheckCharacterError()
        if not body or SEPARATOR in body:
            raise BadShapeError()
        return body, check

    if len(compact) < 2:
        raise MissingCheckCharacterError()

    return compact[:-1], compact[-1]
