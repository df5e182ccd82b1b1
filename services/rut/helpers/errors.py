"""
Exception taxonomy for RUT validation, check digit and formatting helpers.

Every helper raises one of these immediately on malformed input; none of
them is caught inside the library.
"""


class RutError(ValueError):
    """Base class for every RUT helper failure."""


class NotAStringError(RutError, TypeError):
    """Input is not textual."""

    def __init__(self, message: str = "Invalid RUT format. RUT must be a string."):
        super().__init__(message)


class LeadingZeroError(RutError):
    """Identifier begins with the digit 0."""

    def __init__(self, message: str = "Invalid RUT format. RUT cannot start with zero."):
        super().__init__(message)


class BadShapeError(RutError):
    """Cleaned identifier does not look like digits plus an optional check character."""

    def __init__(
        self,
        message: str = "Invalid RUT format. RUT must be numeric and have between 1 and 10 digits.",
    ):
        super().__init__(message)


class InvalidDigitsError(RutError):
    """Body handed to the check digit calculation is empty or not numeric."""

    def __init__(self, message: str = "Invalid RUT format. RUT digits must be numeric."):
        super().__init__(message)


class MissingCheckCharacterError(RutError):
    """A check character was required but could not be located."""

    def __init__(self, message: str = "Invalid RUT format. RUT has no check character."):
        super().__init__(message)
