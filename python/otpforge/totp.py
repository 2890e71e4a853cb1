"""
OTPForge TOTP - Time-based One-Time Passwords (RFC 6238).

Compatible with Google Authenticator, Authy, Microsoft Authenticator, etc.

Example:
    >>> from otpforge.totp import TOTP
    >>> secret = TOTP.generate_secret(20)
    >>> totp = TOTP(secret)
    >>> result = totp.generate()
    >>> totp.validate(result.token).is_valid  # True
"""

import logging
import math
import time
from typing import Optional, Union

from otpforge.engine import constant_time_equals
from otpforge.errors import ErrorCode, OTPException
from otpforge.otp import OTP
from otpforge.types import (
    DEFAULT_DIGITS,
    DEFAULT_PERIOD,
    DEFAULT_WINDOW,
    Algorithm,
    OTPResult,
    TOTPConfig,
    ValidationResult,
)
from otpforge.validation import validate_period, validate_token, validate_window

logger = logging.getLogger(__name__)

Timestamp = Union[int, float]


class TOTP(OTP):
    """
    Time-based One-Time Password generator/verifier.

    The counter is the number of whole periods elapsed since the Unix
    epoch. Timestamps are in milliseconds, like the default clock.
    """

    def __init__(
        self,
        secret: str,
        algorithm: Union[Algorithm, str] = Algorithm.SHA1,
        digits: int = DEFAULT_DIGITS,
        period: int = DEFAULT_PERIOD,
    ):
        """
        Initialize TOTP generator.

        Args:
            secret: Base32 shared secret (20/32/64 bytes for SHA1/SHA256/SHA512)
            algorithm: 'SHA1' (compatible), 'SHA256' or 'SHA512'
            digits: OTP length (6 to 8)
            period: Time step in seconds (default: 30)

        Raises:
            OTPException: If any parameter is malformed
        """
        super().__init__(secret, algorithm, digits)
        validate_period(period)
        self._period = period
        logger.debug(
            "TOTP configured: algorithm=%s digits=%d period=%d",
            self._algorithm.value,
            digits,
            period,
        )

    @classmethod
    def from_config(cls, config: TOTPConfig) -> "TOTP":
        return cls(config.secret, config.algorithm, config.digits, config.period)

    @property
    def period(self) -> int:
        return self._period

    def generate(self, timestamp: Optional[Timestamp] = None) -> OTPResult:
        """
        Generate TOTP code.

        Args:
            timestamp: Unix time in milliseconds (default: now)

        Returns:
            OTPResult with the token and seconds left in the current step
        """
        now_ms = _now_ms(timestamp)
        token = self._token(self._time_step(now_ms))
        remaining = math.ceil(self._period - (now_ms / 1000) % self._period)
        return OTPResult(token=token, remaining_time=remaining)

    def validate(
        self,
        token: str,
        timestamp: Optional[Timestamp] = None,
        window: int = DEFAULT_WINDOW,
    ) -> ValidationResult:
        """
        Verify TOTP code with time window.

        Checks 2 * window + 1 steps, from the oldest to the newest. The
        first match wins.

        Args:
            token: User-provided code
            timestamp: Unix time in milliseconds to verify against (default: now)
            window: Number of steps to check before/after

        Returns:
            ValidationResult; delta is the matching step minus the current one

        Raises:
            OTPException: INVALID_TOKEN if the token is malformed
        """
        validate_token(token, self._digits)
        validate_window(window)

        current = self._time_step(_now_ms(timestamp))

        # Check current and adjacent steps (handles clock skew)
        for delta in range(-window, window + 1):
            counter = current + delta
            if counter < 0:
                continue
            if constant_time_equals(token, self._token(counter)):
                logger.debug("TOTP token accepted at delta %d", delta)
                return ValidationResult(is_valid=True, delta=delta, used_counter=counter)

        logger.debug("TOTP token rejected (window=%d)", window)
        return ValidationResult(is_valid=False)

    def current_time_step(self, timestamp: Optional[Timestamp] = None) -> int:
        """Counter value for the given (or current) time."""
        return self._time_step(_now_ms(timestamp))

    def _time_step(self, now_ms: Timestamp) -> int:
        return int(now_ms // (self._period * 1000))

    def __repr__(self) -> str:
        return (
            f"TOTP(algorithm={self._algorithm.value}, digits={self._digits}, "
            f"period={self._period})"
        )


def _now_ms(timestamp: Optional[Timestamp]) -> Timestamp:
    if timestamp is None:
        return time.time() * 1000
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        raise TypeError(f"Timestamp must be a number, got {type(timestamp).__name__}")
    if timestamp < 0:
        raise OTPException(
            ErrorCode.INVALID_COUNTER, "Timestamp must not be before the Unix epoch"
        )
    return timestamp
