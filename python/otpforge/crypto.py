"""
Secret helpers: random secret creation and the base32 text form.

Secrets travel as base32 text (what authenticator apps accept) and are
used as raw bytes for HMAC. Example:
    >>> from otpforge.crypto import generate_secret, decode_secret
    >>> secret = generate_secret(20)
    >>> len(decode_secret(secret))
    20
"""

import base64
import binascii
import logging
import re
import secrets

from otpforge.errors import ErrorCode, OTPException
from otpforge.types import DEFAULT_SECRET_LENGTH, SUPPORTED_SECRET_LENGTHS

logger = logging.getLogger(__name__)

_BASE32_PATTERN = re.compile(r"[A-Za-z2-7]+=*")
_WHITESPACE = re.compile(r"\s+")


def generate_secret(length: int = DEFAULT_SECRET_LENGTH) -> str:
    """
    Generate a random secret for a new OTP enrollment.

    Args:
        length: Secret length in bytes (20, 32 or 64; default: 32)

    Returns:
        Base32 encoded secret (without padding)

    Raises:
        OTPException: INVALID_SECRET if length is not supported
    """
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise OTPException(
            ErrorCode.INVALID_SECRET, "Secret length must be a positive integer"
        )
    if length not in SUPPORTED_SECRET_LENGTHS:
        raise OTPException(
            ErrorCode.INVALID_SECRET, "Secret length must be 20, 32, or 64 bytes"
        )

    try:
        raw = secrets.token_bytes(length)
    except OSError as e:
        raise OTPException(
            ErrorCode.INVALID_SECRET, f"Failed to generate secret: {e}"
        ) from e

    logger.debug("Generated %d-byte secret", length)
    return encode_secret(raw)


def encode_secret(secret: bytes) -> str:
    """
    Convert raw secret bytes to base32 text.

    Args:
        secret: Secret bytes

    Returns:
        Base32 encoded string (without padding)
    """
    return base64.b32encode(secret).decode("ascii").rstrip("=")


def decode_secret(text: str) -> bytes:
    """
    Parse base32 secret text into raw bytes.

    Case-insensitive; whitespace anywhere is ignored and missing
    padding is added back.

    Args:
        text: Base32 encoded secret

    Returns:
        Secret bytes

    Raises:
        OTPException: INVALID_SECRET if the text is empty or not base32
    """
    if not isinstance(text, str) or not text:
        raise OTPException(
            ErrorCode.INVALID_SECRET, "Secret must be a non-empty string"
        )

    clean = _WHITESPACE.sub("", text)
    if not _BASE32_PATTERN.fullmatch(clean):
        raise OTPException(
            ErrorCode.INVALID_SECRET,
            "Secret must be a valid base32-encoded string (A-Z, 2-7)",
        )
    clean = clean.upper()

    clean += "=" * (-len(clean) % 8)
    try:
        return base64.b32decode(clean)
    except binascii.Error as e:
        raise OTPException(
            ErrorCode.INVALID_SECRET, f"Failed to decode base32 secret: {e}"
        ) from e
