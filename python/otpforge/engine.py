"""
OTPForge token engine - HOTP derivation (RFC 4226).

derive() maps (secret, algorithm, counter, digits) to a zero-padded
decimal token. It is a pure function: no state, no I/O, safe to call
concurrently. TOTP and HOTP both delegate to it.

Example:
    >>> from otpforge.engine import derive
    >>> from otpforge.types import Algorithm
    >>> derive(b"12345678901234567890", Algorithm.SHA1, 0, 6)
    '755224'
"""

import hashlib
import hmac
import struct
from typing import Union

from otpforge.errors import DerivationError
from otpforge.types import Algorithm
from otpforge.validation import validate_counter

_HASH_FUNCTIONS = {
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA512: hashlib.sha512,
}


def derive(secret: bytes, algorithm: Algorithm, counter: int, digits: int) -> str:
    """
    HOTP algorithm (RFC 4226).

    Args:
        secret: Raw secret bytes (HMAC key)
        algorithm: Hash function for the HMAC
        counter: Counter value (non-negative)
        digits: Token length

    Returns:
        Token as string (zero-padded to digits)

    Raises:
        OTPException: INVALID_COUNTER if counter is negative or too large
        DerivationError: If the digest cannot be truncated
    """
    validate_counter(counter)

    # Counter as 8-byte big-endian
    counter_bytes = struct.pack(">Q", counter)

    h = hmac.new(secret, counter_bytes, _HASH_FUNCTIONS[algorithm]).digest()

    code = dynamic_truncate(h) % (10**digits)
    return str(code).zfill(digits)


def dynamic_truncate(digest: bytes) -> int:
    """
    Extract a 31-bit integer from an HMAC digest (RFC 4226, section 5.3).

    Args:
        digest: HMAC digest

    Returns:
        Unsigned 31-bit integer

    Raises:
        DerivationError: If digest is shorter than offset + 4 bytes
    """
    if not digest:
        raise DerivationError("Empty digest")

    offset = digest[-1] & 0x0F
    if len(digest) < offset + 4:
        raise DerivationError(
            f"Digest too short for truncation: {len(digest)} bytes, offset {offset}"
        )

    return struct.unpack(">I", digest[offset : offset + 4])[0] & 0x7FFFFFFF


def constant_time_equals(a: Union[str, bytes], b: Union[str, bytes]) -> bool:
    """
    Compare two tokens in time independent of where they first differ.

    Lengths are compared up front: tokens have public, fixed lengths.
    """
    if isinstance(a, str):
        a = a.encode()
    if isinstance(b, str):
        b = b.encode()

    if len(a) != len(b):
        return False

    result = 0
    for x, y in zip(a, b):
        result |= x ^ y
    return result == 0
