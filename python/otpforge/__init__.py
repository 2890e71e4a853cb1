"""
OTPForge - One-Time Password Library

HMAC-based (RFC 4226) and time-based (RFC 6238) one-time passwords with
SHA1, SHA256 and SHA512, windowed validation and constant-time checks.

Usage:
    from otpforge import TOTP, HOTP, generate_secret

    # Time-based codes
    secret = generate_secret(20)
    totp = TOTP(secret, algorithm="SHA1", digits=6, period=30)
    result = totp.generate()
    check = totp.validate(result.token, window=1)
    if check.is_valid:
        print("accepted, drift:", check.delta)

    # Counter-based codes (caller stores the counter)
    hotp = HOTP(secret, counter=stored_counter)
    check = hotp.validate(user_code, window=3)
    if check:
        stored_counter = check.used_counter + 1

Errors:
    Malformed input raises OTPException (see ErrorCode). A well-formed
    code that does not match returns is_valid=False.
"""

import logging

__version__ = "0.1.0"
__license__ = "MIT"

from otpforge.errors import ErrorCode, OTPException, DerivationError
from otpforge.types import (
    Algorithm,
    TOTPConfig,
    HOTPConfig,
    OTPResult,
    ValidationResult,
)
from otpforge.engine import derive, constant_time_equals
from otpforge.crypto import generate_secret, encode_secret, decode_secret
from otpforge.validation import (
    validate_secret,
    validate_algorithm,
    validate_digits,
    validate_period,
    validate_counter,
    validate_window,
    validate_token,
)
from otpforge.totp import TOTP
from otpforge.hotp import HOTP

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Generators
    "TOTP",
    "HOTP",
    # Types
    "Algorithm",
    "TOTPConfig",
    "HOTPConfig",
    "OTPResult",
    "ValidationResult",
    # Errors
    "ErrorCode",
    "OTPException",
    "DerivationError",
    # Engine
    "derive",
    "constant_time_equals",
    # Secrets
    "generate_secret",
    "encode_secret",
    "decode_secret",
    # Validation
    "validate_secret",
    "validate_algorithm",
    "validate_digits",
    "validate_period",
    "validate_counter",
    "validate_window",
    "validate_token",
]
