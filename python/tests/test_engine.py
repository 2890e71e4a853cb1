"""Tests for the OTPForge token engine."""

import hashlib
import hmac

import pytest

from otpforge.engine import constant_time_equals, derive, dynamic_truncate
from otpforge.errors import DerivationError, ErrorCode, OTPException
from otpforge.types import Algorithm

RFC_KEY = b"12345678901234567890"


class TestDerive:
    """Test derive()."""

    def test_known_vector(self):
        """RFC 4226: counter 0."""
        assert derive(RFC_KEY, Algorithm.SHA1, 0, 6) == "755224"

    def test_eight_digits(self):
        """RFC 4226 truncated value 1284755224 for counter 0."""
        assert derive(RFC_KEY, Algorithm.SHA1, 0, 8) == "84755224"

    def test_deterministic(self):
        """Same inputs, same token."""
        for algorithm in Algorithm:
            key = RFC_KEY * 4
            assert derive(key, algorithm, 42, 8) == derive(key, algorithm, 42, 8)

    def test_zero_padded(self):
        """Tokens keep leading zeros."""
        # RFC 6238 SHA1 vector at T = 1111111109
        assert derive(RFC_KEY, Algorithm.SHA1, 1111111109 // 30, 8) == "07081804"

    @pytest.mark.parametrize("digits", [6, 7, 8])
    def test_length(self, digits):
        for counter in range(200):
            token = derive(RFC_KEY, Algorithm.SHA1, counter, digits)
            assert len(token) == digits
            assert token.isdigit()

    def test_matches_reference(self):
        """Derivation matches a direct HMAC computation."""
        key = RFC_KEY + RFC_KEY[:12]
        digest = hmac.new(key, (5).to_bytes(8, "big"), hashlib.sha256).digest()
        offset = digest[-1] & 0x0F
        value = int.from_bytes(digest[offset : offset + 4], "big") & 0x7FFFFFFF
        assert derive(key, Algorithm.SHA256, 5, 6) == str(value % 10**6).zfill(6)

    def test_negative_counter(self):
        with pytest.raises(OTPException) as exc:
            derive(RFC_KEY, Algorithm.SHA1, -1, 6)
        assert exc.value.code == ErrorCode.INVALID_COUNTER


class TestDynamicTruncate:
    """Test dynamic_truncate()."""

    def test_rfc_example(self):
        """RFC 4226 section 5.4 example."""
        digest = bytes.fromhex("1f8698690e02ca16618550ef7f19da8e945b555a")
        assert dynamic_truncate(digest) == 0x50EF7F19

    def test_clears_sign_bit(self):
        """Most significant bit of the first byte is masked."""
        digest = b"\xff\xff\xff\xff" + b"\x00" * 15 + b"\x00"
        assert dynamic_truncate(digest) == 0x7FFFFFFF

    def test_short_digest(self):
        """Digest shorter than offset + 4 fails instead of reading past the end."""
        digest = b"\x00" * 10 + b"\x0f"
        with pytest.raises(DerivationError):
            dynamic_truncate(digest)

    def test_empty_digest(self):
        with pytest.raises(DerivationError):
            dynamic_truncate(b"")

    def test_exact_fit(self):
        """Offset + 4 == len(digest) is allowed."""
        digest = b"\x00" * 15 + b"\x01\x02\x03\x0f"
        # offset 15 reads the last four bytes
        assert len(digest) == 19
        assert dynamic_truncate(digest) == 0x0102030F


class TestConstantTimeEquals:
    """Test constant_time_equals()."""

    def test_equal(self):
        assert constant_time_equals("123456", "123456")

    def test_differs_first(self):
        assert not constant_time_equals("023456", "123456")

    def test_differs_last(self):
        assert not constant_time_equals("123450", "123456")

    def test_length_mismatch(self):
        assert not constant_time_equals("12345", "123456")
        assert not constant_time_equals("1234567", "123456")

    def test_empty(self):
        assert constant_time_equals("", "")

    def test_bytes(self):
        assert constant_time_equals(b"123456", b"123456")
        assert not constant_time_equals(b"123456", b"123457")

    def test_non_ascii_same_length(self):
        """Multi-byte characters do not compare equal to ASCII."""
        assert not constant_time_equals("12345é", "123456")
