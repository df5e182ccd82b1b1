"""
Check digit (dígito verificador) calculation for Chilean RUTs.

Implements the official módulo 11 algorithm:
1. Multiply each digit (from right to left) by sequence 2,3,4,5,6,7,2,3,4...
2. Sum all products
3. Calculate 11 - (sum % 11)
4. If result is 11, DV is 0; if 10, DV is K; otherwise DV is the result
"""

from typing import Union

from .errors import BadShapeError, InvalidDigitsError
from .validation import (
    DELIMITER,
    MAX_BODY_DIGITS,
    SEPARATOR,
    split_check_character,
    validate_format,
)

WEIGHTS = (2, 3, 4, 5, 6, 7)


def _modulo_11(body: str) -> str:
    total = sum(
        int(digit) * WEIGHTS[index % len(WEIGHTS)]
        for index, digit in enumerate(reversed(body))
    )

    dv = 11 - (total % 11)

    if dv == 11:
        return "0"
    if dv == 10:
        return "K"
    return str(dv)


def compute_check_character(rut: Union[str, int]) -> str:
    """
    Calculate the check character of a RUT.

    Any check character already attached after the dash is ignored.

    Args:
        rut: RUT body as a string ("12345678", "12.345.678", "12.345.678-5")
            or as an integer (12345678)

    Returns:
        Single character: "0"-"9" or uppercase "K"

    Raises:
        RutError: If the format is invalid or the body is not numeric

    Examples:
        >>> compute_check_character("12.345.678")
        '5'
        >>> compute_check_character(20347878)
        'K'
        >>> compute_check_character("1-k")
        '9'
    """
    if isinstance(rut, int) and not isinstance(rut, bool):
        rut = str(rut)

    validate_format(rut)

    body = rut.replace(DELIMITER, "")
    if SEPARATOR in body:
        body = split_check_character(rut)[0]

    if not body or not body.isdigit():
        raise InvalidDigitsError()

    if len(body) > MAX_BODY_DIGITS:
        raise BadShapeError()

    return _modulo_11(body)


def is_valid(rut: str) -> bool:
    """
    Validate a RUT against its check character.

    The supplied check character is compared case-insensitively.

    Args:
        rut: RUT with check character ("12.345.678-5", "12345678-5", "123456785")

    Returns:
        True if the check character matches the módulo 11 result

    Raises:
        RutError: If the format is invalid or no check character is present

    Examples:
        >>> is_valid("20.347.878-K")
        True
        >>> is_valid("12.345.678-4")
        False
    """
    body, check = split_check_character(rut)
    return compute_check_character(body) == check.upper()
