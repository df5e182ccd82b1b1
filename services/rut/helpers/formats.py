"""
Conversion between the textual representations of a Chilean RUT.

Supported forms:
- grouped + separated: 12.345.678-5
- separated only:      12345678-5
- grouped only:        12.345.678
- bare:                12345678-5 with dots removed (dash kept if present)
- bare, no check:      12345678

Every conversion validates its input first and never recomputes the check
character: the trailing character is taken as supplied by the caller,
keeping its case.
"""

import re
from enum import Enum
from typing import Any, Callable, Dict, Union

from .errors import BadShapeError, MissingCheckCharacterError
from .validation import (
    DELIMITER,
    MAX_BODY_DIGITS,
    SEPARATOR,
    split_check_character,
    validate_format,
)

THOUSANDS_PATTERN = re.compile(r"\B(?=(\d{3})+(?!\d))", re.ASCII)
CHECK_SUFFIX_PATTERN = re.compile(r"-[0-9kK]\Z", re.ASCII)

GROUPED_ONLY_PATTERN = re.compile(r"(?!0)(\d{1,9}|\d{1,3}(\.\d{3}){0,2})", re.ASCII)
SEPARATED_ONLY_PATTERN = re.compile(r"(?!0)\d{1,9}-[0-9kK]", re.ASCII)
GROUPED_SEPARATED_PATTERN = re.compile(r"(?!0)\d{1,3}(\.\d{3}){0,2}-[0-9kK]", re.ASCII)


class RutFormat(str, Enum):
    """Target representation for :func:`convert`."""

    GROUPED_SEPARATED = "grouped-separated"
    SEPARATED_ONLY = "separated-only"
    GROUPED_ONLY = "grouped-only"
    BARE = "bare"
    BARE_NO_CHECK = "bare-no-check"


def group_digits(digits: str) -> str:
    """
    Insert a dot every three digits counting from the right.

    Examples:
        >>> group_digits("12345678")
        '12.345.678'
        >>> group_digits("1234")
        '1.234'
        >>> group_digits("123")
        '123'
    """
    return THOUSANDS_PATTERN.sub(DELIMITER, digits)


def to_grouped_separated(rut: str) -> str:
    """
    Format a RUT with dots and dash: 12.345.678-5

    Without a dash the whole text is treated as digits and only grouped,
    unless the last character has to be a check character: the text is two
    characters long, ends with K, or has one digit more than a body can hold.

    Examples:
        >>> to_grouped_separated("12345678-0")
        '12.345.678-0'
        >>> to_grouped_separated("123456780")
        '123.456.780'
        >>> to_grouped_separated("12")
        '1-2'
        >>> to_grouped_separated("5678k")
        '5.678-k'
    """
    validate_format(rut)

    compact = rut.replace(DELIMITER, "")

    if SEPARATOR in compact:
        body, check = split_check_character(rut)
        return f"{group_digits(body)}{SEPARATOR}{check}"

    if len(compact) == 2 or compact[-1] in "kK" or len(compact) > MAX_BODY_DIGITS:
        return f"{group_digits(compact[:-1])}{SEPARATOR}{compact[-1]}"

    return group_digits(compact)


def to_separated_only(rut: str) -> str:
    """
    Add the dash before the last character if it is missing.

    Existing dots are kept as they are. Text that already has a dash is
    returned unchanged.

    Examples:
        >>> to_separated_only("123456780")
        '12345678-0'
        >>> to_separated_only("1.234.567")
        '1.234.56-7'
        >>> to_separated_only("12.345.678-0")
        '12.345.678-0'
    """
    validate_format(rut)

    if SEPARATOR in rut:
        return rut

    if len(rut.replace(DELIMITER, "")) < 2:
        raise MissingCheckCharacterError()

    text = rut.rstrip(DELIMITER)
    return f"{text[:-1].rstrip(DELIMITER)}{SEPARATOR}{text[-1]}"


def to_grouped_only(rut: str) -> str:
    """
    Remove the dash and the check character after it.

    Examples:
        >>> to_grouped_only("12.345.678-0")
        '12.345.678'
        >>> to_grouped_only("12345678-K")
        '12345678'
        >>> to_grouped_only("12.345.678")
        '12.345.678'
    """
    validate_format(rut)

    if SEPARATOR not in rut:
        return rut

    head, _, tail = rut.rpartition(SEPARATOR)
    if len(tail) != 1:
        raise MissingCheckCharacterError()
    if not head.replace(DELIMITER, "") or SEPARATOR in head:
        raise BadShapeError()

    return head


def to_bare(rut: str) -> str:
    """
    Remove the dots, keeping dash and check character.

    Examples:
        >>> to_bare("12.345.678-0")
        '12345678-0'
        >>> to_bare("1.234.567")
        '1234567'
    """
    validate_format(rut)
    return rut.replace(DELIMITER, "")


def to_bare_no_check(rut: str) -> str:
    """
    Remove the dots and a trailing dash plus check character.

    Examples:
        >>> to_bare_no_check("12.345.678-k")
        '12345678'
        >>> to_bare_no_check("12.345.678")
        '12345678'
    """
    validate_format(rut)
    return CHECK_SUFFIX_PATTERN.sub("", rut.replace(DELIMITER, ""))


_CONVERTERS: Dict[RutFormat, Callable[[str], str]] = {
    RutFormat.GROUPED_SEPARATED: to_grouped_separated,
    RutFormat.SEPARATED_ONLY: to_separated_only,
    RutFormat.GROUPED_ONLY: to_grouped_only,
    RutFormat.BARE: to_bare,
    RutFormat.BARE_NO_CHECK: to_bare_no_check,
}


def convert(rut: str, form: Union[RutFormat, str]) -> str:
    """
    Convert a RUT to the given representation.

    Args:
        rut: RUT string in any supported format
        form: Target form (a RutFormat or its value, e.g. "grouped-separated")

    Returns:
        The converted RUT

    Raises:
        RutError: If the RUT format is invalid
        ValueError: If form is not a known RutFormat
    """
    return _CONVERTERS[RutFormat(form)](rut)


def is_grouped_only(rut: Any) -> bool:
    """
    Check for a dash-less RUT body: 12.345.678

    Undelimited bodies ("12345678") are accepted on purpose, matching
    is_valid_format_without_separator.
    """
    return isinstance(rut, str) and GROUPED_ONLY_PATTERN.fullmatch(rut) is not None


def is_separated_only(rut: Any) -> bool:
    """Check for a RUT with dash and no dots: 12345678-5"""
    return isinstance(rut, str) and SEPARATED_ONLY_PATTERN.fullmatch(rut) is not None


def is_grouped_separated(rut: Any) -> bool:
    """Check for a RUT with dots and dash: 12.345.678-5"""
    return isinstance(rut, str) and GROUPED_SEPARATED_PATTERN.fullmatch(rut) is not None
