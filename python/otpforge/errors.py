"""
OTPForge errors.

Caller mistakes (malformed configuration, malformed tokens) are raised as
OTPException with a stable ErrorCode. A well-formed token that simply does
not match is NOT an error: validators report it as an invalid result.
"""

from enum import Enum
from typing import Union


class ErrorCode(Enum):
    """Stable error kinds for OTP operations."""

    INVALID_SECRET = "INVALID_SECRET"
    INVALID_ALGORITHM = "INVALID_ALGORITHM"
    INVALID_DIGITS = "INVALID_DIGITS"
    INVALID_PERIOD = "INVALID_PERIOD"
    INVALID_COUNTER = "INVALID_COUNTER"
    INVALID_TOKEN = "INVALID_TOKEN"
    # Reserved for callers; validators return is_valid=False instead.
    EXPIRED_TOKEN = "EXPIRED_TOKEN"


class OTPException(ValueError):
    """Raised when OTP parameters or inputs are malformed."""

    def __init__(self, code: Union[ErrorCode, str], message: str):
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message

    def __repr__(self) -> str:
        return f"OTPException({self.code.value}, {self.message!r})"


class DerivationError(RuntimeError):
    """Internal token derivation failure (digest too short to truncate)."""

    pass
