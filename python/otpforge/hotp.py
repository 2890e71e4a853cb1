"""
OTPForge HOTP - HMAC-based One-Time Passwords (RFC 4226).

The counter belongs to the caller: store it, pass it in, and advance it
after a successful validation. Nothing is persisted here.

Example:
    >>> from otpforge.hotp import HOTP
    >>> hotp = HOTP(HOTP.generate_secret(20), counter=0)
    >>> result = hotp.generate()        # token for counter 0
    >>> hotp.validate(result.token, 0)  # ValidationResult(is_valid=True, ...)
"""

import logging
from typing import Optional, Union

from otpforge.engine import constant_time_equals
from otpforge.otp import OTP
from otpforge.types import (
    DEFAULT_DIGITS,
    Algorithm,
    HOTPConfig,
    OTPResult,
    ValidationResult,
)
from otpforge.validation import (
    MAX_COUNTER,
    validate_counter,
    validate_token,
    validate_window,
)

logger = logging.getLogger(__name__)


class HOTP(OTP):
    """Counter-based One-Time Password generator/verifier."""

    def __init__(
        self,
        secret: str,
        algorithm: Union[Algorithm, str] = Algorithm.SHA1,
        digits: int = DEFAULT_DIGITS,
        counter: int = 0,
    ):
        """
        Initialize HOTP generator.

        Args:
            secret: Base32 shared secret (20/32/64 bytes for SHA1/SHA256/SHA512)
            algorithm: 'SHA1', 'SHA256' or 'SHA512'
            digits: OTP length (6 to 8)
            counter: Counter used when a call does not pass one

        Raises:
            OTPException: If any parameter is malformed
        """
        super().__init__(secret, algorithm, digits)
        validate_counter(counter)
        self._counter = counter
        logger.debug(
            "HOTP configured: algorithm=%s digits=%d counter=%d",
            self._algorithm.value,
            digits,
            counter,
        )

    @classmethod
    def from_config(cls, config: HOTPConfig) -> "HOTP":
        return cls(config.secret, config.algorithm, config.digits, config.counter)

    @property
    def counter(self) -> int:
        return self._counter

    def generate(self, counter: Optional[int] = None) -> OTPResult:
        """
        Generate the code for a counter.

        Args:
            counter: Counter value (default: the configured counter)

        Returns:
            OTPResult with the token and the counter to use next
        """
        if counter is None:
            counter = self._counter
        validate_counter(counter)
        return OTPResult(token=self._token(counter), next_counter=counter + 1)

    def validate(
        self,
        token: str,
        counter: Optional[int] = None,
        window: int = 0,
    ) -> ValidationResult:
        """
        Verify a code against a counter.

        With window > 0 the following counters are tried too, in
        ascending order, to recover from codes generated but never used.

        Args:
            token: User-provided code
            counter: Expected counter (default: the configured counter)
            window: Number of counters to look ahead

        Returns:
            ValidationResult; used_counter + 1 is the caller's next counter

        Raises:
            OTPException: INVALID_TOKEN or INVALID_COUNTER on malformed input
        """
        validate_token(token, self._digits)
        if counter is None:
            counter = self._counter
        validate_counter(counter)
        validate_window(window)

        # Look-ahead stops at the largest 8-byte counter
        for delta in range(min(window, MAX_COUNTER - counter) + 1):
            candidate = counter + delta
            if constant_time_equals(token, self._token(candidate)):
                logger.debug("HOTP token accepted at delta %d", delta)
                return ValidationResult(is_valid=True, delta=delta, used_counter=candidate)

        logger.debug("HOTP token rejected (window=%d)", window)
        return ValidationResult(is_valid=False)

    def __repr__(self) -> str:
        return (
            f"HOTP(algorithm={self._algorithm.value}, digits={self._digits}, "
            f"counter={self._counter})"
        )
