"""Custom exceptions for Mixed Units."""

INVALID_JSON_MESSAGE = "Invalid JSON"


class MixedUnitsError(Exception):
    """Base exception for conversion errors."""


class MalformedInputError(MixedUnitsError):
    """Raised when the input buffer is not a well-formed JSON object.

    The message shown to users is always ``Invalid JSON``; the parser's
    explanation is kept on ``detail``.
    """

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(INVALID_JSON_MESSAGE)


class InvalidValueError(MixedUnitsError):
    """Raised when a single entry's value cannot be read as an amount."""

    def __init__(self, key: str, value: object, message: str):
        self.key = key
        self.value = value
        super().__init__(f"Invalid value for '{key}': {message}")
