"""
Configuration records and result types for OTPForge.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30
DEFAULT_WINDOW = 1
DEFAULT_SECRET_LENGTH = 32

# Secret lengths in bytes accepted by generate_secret()
SUPPORTED_SECRET_LENGTHS = (20, 32, 64)


class Algorithm(Enum):
    """HMAC hash functions supported for token derivation."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def secret_length(self) -> int:
        """Exact secret length in bytes for this algorithm."""
        return _SECRET_LENGTHS[self]


_SECRET_LENGTHS = {
    Algorithm.SHA1: 20,
    Algorithm.SHA256: 32,
    Algorithm.SHA512: 64,
}


@dataclass(frozen=True, repr=False)
class TOTPConfig:
    """Time-based OTP configuration. The secret is base32 text."""

    secret: str
    algorithm: Union[Algorithm, str] = Algorithm.SHA1
    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_PERIOD

    def __repr__(self) -> str:
        return (
            f"TOTPConfig(secret=<hidden>, algorithm={self.algorithm!r}, "
            f"digits={self.digits}, period={self.period})"
        )


@dataclass(frozen=True, repr=False)
class HOTPConfig:
    """HMAC-based (counter) OTP configuration. The secret is base32 text."""

    secret: str
    algorithm: Union[Algorithm, str] = Algorithm.SHA1
    digits: int = DEFAULT_DIGITS
    counter: int = 0

    def __repr__(self) -> str:
        return (
            f"HOTPConfig(secret=<hidden>, algorithm={self.algorithm!r}, "
            f"digits={self.digits}, counter={self.counter})"
        )


@dataclass(frozen=True)
class OTPResult:
    """A generated token."""

    token: str
    remaining_time: Optional[int] = None
    next_counter: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {"token": self.token}
        if self.remaining_time is not None:
            data["remaining_time"] = self.remaining_time
        if self.next_counter is not None:
            data["next_counter"] = self.next_counter
        return data


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of checking a token.

    On success, delta is the signed step offset between the matching
    counter and the one implied by the caller's time/counter, and
    used_counter is the matching counter itself. Both are None on failure.
    """

    is_valid: bool
    delta: Optional[int] = None
    used_counter: Optional[int] = None

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: Dict[str, Any] = {"is_valid": self.is_valid}
        if self.is_valid:
            data["delta"] = self.delta
            data["used_counter"] = self.used_counter
        return data
