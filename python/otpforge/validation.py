"""
Parameter checks run before any token is derived.

Each check only inspects its input and raises OTPException with a
specific ErrorCode. Generators run them once, at construction, in the
order secret -> algorithm -> digits -> period/counter.
"""

import re
from typing import Union

from otpforge.crypto import decode_secret
from otpforge.errors import ErrorCode, OTPException
from otpforge.types import Algorithm

MIN_DIGITS = 6
MAX_DIGITS = 8

# Counters are packed as 8-byte unsigned big-endian
MAX_COUNTER = 2**64 - 1

_TOKEN_PATTERN = re.compile(r"[0-9]+")


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool)


def validate_secret(secret: str, algorithm: Union[Algorithm, str]) -> bytes:
    """
    Decode a base32 secret and check its length against the algorithm.

    Args:
        secret: Base32 secret text
        algorithm: Algorithm the secret will be used with

    Returns:
        Decoded secret bytes

    Raises:
        OTPException: INVALID_SECRET (or INVALID_ALGORITHM if the
            algorithm itself is unknown)
    """
    key = decode_secret(secret)
    algorithm = validate_algorithm(algorithm)
    if len(key) != algorithm.secret_length:
        raise OTPException(
            ErrorCode.INVALID_SECRET,
            f"Secret must decode to {algorithm.secret_length} bytes for "
            f"{algorithm.value}, got {len(key)}",
        )
    return key


def validate_algorithm(algorithm: Union[Algorithm, str]) -> Algorithm:
    """Resolve an Algorithm member or its (case-insensitive) name."""
    if isinstance(algorithm, Algorithm):
        return algorithm
    if isinstance(algorithm, str):
        try:
            return Algorithm(algorithm.upper())
        except ValueError:
            pass
    names = ", ".join(a.value for a in Algorithm)
    raise OTPException(
        ErrorCode.INVALID_ALGORITHM, f"Algorithm must be one of: {names}"
    )


def validate_digits(digits: int) -> None:
    if not _is_int(digits) or digits < MIN_DIGITS or digits > MAX_DIGITS:
        raise OTPException(
            ErrorCode.INVALID_DIGITS,
            f"Digits must be an integer between {MIN_DIGITS} and {MAX_DIGITS}",
        )


def validate_period(period: int) -> None:
    if not _is_int(period) or period <= 0:
        raise OTPException(
            ErrorCode.INVALID_PERIOD, "Period must be a positive integer"
        )


def validate_counter(counter: int) -> None:
    if not _is_int(counter) or counter < 0:
        raise OTPException(
            ErrorCode.INVALID_COUNTER, "Counter must be a non-negative integer"
        )
    if counter > MAX_COUNTER:
        raise OTPException(
            ErrorCode.INVALID_COUNTER, "Counter must fit in 8 bytes"
        )


def validate_window(window: int) -> None:
    if not _is_int(window) or window < 0:
        raise OTPException(
            ErrorCode.INVALID_COUNTER, "Window must be a non-negative integer"
        )


def validate_token(token: str, digits: int) -> None:
    """
    Check a caller-supplied token before it is compared.

    Args:
        token: Token as entered by the user
        digits: Configured token length

    Raises:
        OTPException: INVALID_TOKEN if empty, non-numeric or wrong length
    """
    if not isinstance(token, str) or not token:
        raise OTPException(ErrorCode.INVALID_TOKEN, "Token must be a non-empty string")

    if not _TOKEN_PATTERN.fullmatch(token):
        raise OTPException(ErrorCode.INVALID_TOKEN, "Token must contain only digits")

    if len(token) != digits:
        raise OTPException(
            ErrorCode.INVALID_TOKEN, f"Token must be exactly {digits} digits long"
        )
