"""Tests for OTPForge parameter validation."""

import base64

import pytest

from otpforge.errors import ErrorCode, OTPException
from otpforge.types import Algorithm
from otpforge.validation import (
    validate_algorithm,
    validate_counter,
    validate_digits,
    validate_period,
    validate_secret,
    validate_token,
    validate_window,
)


def _b32(length: int) -> str:
    return base64.b32encode(b"k" * length).decode()


class TestValidateSecret:
    """Test validate_secret()."""

    @pytest.mark.parametrize(
        "algorithm, length",
        [(Algorithm.SHA1, 20), (Algorithm.SHA256, 32), (Algorithm.SHA512, 64)],
    )
    def test_accepts_exact_length(self, algorithm, length):
        assert validate_secret(_b32(length), algorithm) == b"k" * length

    @pytest.mark.parametrize(
        "algorithm, length",
        [("SHA1", 10), ("SHA1", 32), ("SHA256", 20), ("SHA256", 64), ("SHA512", 32)],
    )
    def test_rejects_wrong_length(self, algorithm, length):
        with pytest.raises(OTPException) as exc:
            validate_secret(_b32(length), algorithm)
        assert exc.value.code == ErrorCode.INVALID_SECRET

    def test_rejects_empty(self):
        with pytest.raises(OTPException) as exc:
            validate_secret("", "SHA1")
        assert exc.value.code == ErrorCode.INVALID_SECRET


class TestValidateAlgorithm:
    """Test validate_algorithm()."""

    @pytest.mark.parametrize("name", ["SHA1", "sha1", "Sha256", "SHA512"])
    def test_accepts_names(self, name):
        assert validate_algorithm(name) is Algorithm(name.upper())

    def test_accepts_member(self):
        assert validate_algorithm(Algorithm.SHA256) is Algorithm.SHA256

    @pytest.mark.parametrize("name", ["MD5", "SHA384", "", None, 1])
    def test_rejects(self, name):
        with pytest.raises(OTPException) as exc:
            validate_algorithm(name)
        assert exc.value.code == ErrorCode.INVALID_ALGORITHM
        assert "SHA1, SHA256, SHA512" in exc.value.message


class TestValidateNumbers:
    """Test digits, period, counter and window checks."""

    @pytest.mark.parametrize("digits", [6, 7, 8])
    def test_digits_ok(self, digits):
        validate_digits(digits)

    @pytest.mark.parametrize("digits", [5, 9, 0, -6, 6.0, True, "6", None])
    def test_digits_rejected(self, digits):
        with pytest.raises(OTPException) as exc:
            validate_digits(digits)
        assert exc.value.code == ErrorCode.INVALID_DIGITS

    @pytest.mark.parametrize("period", [1, 30, 60, 3600])
    def test_period_ok(self, period):
        validate_period(period)

    @pytest.mark.parametrize("period", [0, -1, 30.0, False, "30"])
    def test_period_rejected(self, period):
        with pytest.raises(OTPException) as exc:
            validate_period(period)
        assert exc.value.code == ErrorCode.INVALID_PERIOD

    @pytest.mark.parametrize("counter", [0, 1, 2**32, 2**64 - 1])
    def test_counter_ok(self, counter):
        validate_counter(counter)

    @pytest.mark.parametrize("counter", [-1, 0.5, 2**64, True, None])
    def test_counter_rejected(self, counter):
        with pytest.raises(OTPException) as exc:
            validate_counter(counter)
        assert exc.value.code == ErrorCode.INVALID_COUNTER

    @pytest.mark.parametrize("window", [-1, 1.0, None])
    def test_window_rejected(self, window):
        with pytest.raises(OTPException) as exc:
            validate_window(window)
        assert exc.value.code == ErrorCode.INVALID_COUNTER


class TestValidateToken:
    """Test validate_token()."""

    @pytest.mark.parametrize("token, digits", [("123456", 6), ("0000000", 7), ("00123456", 8)])
    def test_ok(self, token, digits):
        validate_token(token, digits)

    @pytest.mark.parametrize("token", ["", None, 123456])
    def test_rejects_empty(self, token):
        with pytest.raises(OTPException) as exc:
            validate_token(token, 6)
        assert exc.value.code == ErrorCode.INVALID_TOKEN
        assert exc.value.message == "Token must be a non-empty string"

    @pytest.mark.parametrize("token", ["12345a", "12-456", " 12345", "+12345"])
    def test_rejects_non_digits(self, token):
        with pytest.raises(OTPException) as exc:
            validate_token(token, 6)
        assert exc.value.message == "Token must contain only digits"

    @pytest.mark.parametrize("token", ["12345", "1234567"])
    def test_rejects_length(self, token):
        with pytest.raises(OTPException) as exc:
            validate_token(token, 6)
        assert exc.value.message == "Token must be exactly 6 digits long"
