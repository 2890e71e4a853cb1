"""
Base class shared by the TOTP and HOTP generators.
"""

from typing import Union

from otpforge.crypto import generate_secret
from otpforge.engine import derive
from otpforge.types import DEFAULT_DIGITS, DEFAULT_SECRET_LENGTH, Algorithm
from otpforge.validation import validate_algorithm, validate_digits, validate_secret


class OTP:
    """
    Holds the validated secret, algorithm and digit count.

    Instances are immutable after construction: the decoded secret is
    kept private and only read-only properties are exposed, so one
    instance can be shared between threads.
    """

    def __init__(
        self,
        secret: str,
        algorithm: Union[Algorithm, str] = Algorithm.SHA1,
        digits: int = DEFAULT_DIGITS,
    ):
        self._key = validate_secret(secret, algorithm)
        self._algorithm = validate_algorithm(algorithm)
        validate_digits(digits)
        self._digits = digits

    @classmethod
    def generate_secret(cls, length: int = DEFAULT_SECRET_LENGTH) -> str:
        """
        Generate random base32 secret for a new enrollment.

        Args:
            length: Secret length in bytes (20, 32 or 64)

        Returns:
            Base32 secret text
        """
        return generate_secret(length)

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def digits(self) -> int:
        return self._digits

    def _token(self, counter: int) -> str:
        return derive(self._key, self._algorithm, counter, self._digits)
