"""
Helper utilities for Chilean RUT validation and formatting.

This module provides format validation, módulo 11 check digit calculation
and conversion between the dotted, dashed and bare representations of a RUT.
"""

from .checksum import compute_check_character, is_valid
from .errors import (
    BadShapeError,
    InvalidDigitsError,
    LeadingZeroError,
    MissingCheckCharacterError,
    NotAStringError,
    RutError,
)
from .formats import (
    RutFormat,
    convert,
    group_digits,
    is_grouped_only,
    is_grouped_separated,
    is_separated_only,
    to_bare,
    to_bare_no_check,
    to_grouped_only,
    to_grouped_separated,
    to_separated_only,
)
from .validation import (
    clean,
    is_valid_format_without_separator,
    split_check_character,
    validate_format,
)

__all__ = [
    "validate_format",
    "clean",
    "split_check_character",
    "is_valid_format_without_separator",
    "compute_check_character",
    "is_valid",
    "RutFormat",
    "convert",
    "group_digits",
    "to_grouped_separated",
    "to_separated_only",
    "to_grouped_only",
    "to_bare",
    "to_bare_no_check",
    "is_grouped_only",
    "is_separated_only",
    "is_grouped_separated",
    "RutError",
    "NotAStringError",
    "LeadingZeroError",
    "BadShapeError",
    "InvalidDigitsError",
    "MissingCheckCharacterError",
]
