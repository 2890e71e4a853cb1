#!/usr/bin/env python3
"""
OTPForge CLI - Command-line interface for one-time passwords.

Usage:
    otpforge secret [--length LENGTH]
    otpforge totp-code <secret> [--algorithm ALG] [--digits N] [--period S] [--time MS]
    otpforge totp-verify <secret> <token> [--window W] [...]
    otpforge hotp-code <secret> --counter N [--algorithm ALG] [--digits N]
    otpforge hotp-verify <secret> <token> --counter N [--window W] [...]

Examples:
    # Generate a new secret for SHA1
    otpforge secret --length 20

    # Current TOTP code
    otpforge totp-code GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ

    # Check a code allowing one step of clock drift
    otpforge totp-verify GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ 287082 --window 1
"""

import argparse
import logging
import sys
from typing import Optional

from otpforge import __version__
from otpforge.crypto import generate_secret
from otpforge.errors import OTPException
from otpforge.hotp import HOTP
from otpforge.totp import TOTP
from otpforge.types import (
    DEFAULT_DIGITS,
    DEFAULT_PERIOD,
    DEFAULT_SECRET_LENGTH,
    DEFAULT_WINDOW,
    SUPPORTED_SECRET_LENGTHS,
    Algorithm,
)

logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _totp_from_args(args: argparse.Namespace) -> TOTP:
    return TOTP(args.secret, args.algorithm, args.digits, args.period)


def _hotp_from_args(args: argparse.Namespace) -> HOTP:
    return HOTP(args.secret, args.algorithm, args.digits, args.counter)


def cmd_secret(args: argparse.Namespace) -> int:
    """Generate a random base32 secret."""
    print(generate_secret(args.length))
    return EXIT_OK


def cmd_totp_code(args: argparse.Namespace) -> int:
    """Generate TOTP code from secret."""
    result = _totp_from_args(args).generate(args.time)
    print(result.token)
    print(f"Expires in {result.remaining_time}s", file=sys.stderr)
    return EXIT_OK


def cmd_totp_verify(args: argparse.Namespace) -> int:
    """Check a TOTP code."""
    result = _totp_from_args(args).validate(args.token, args.time, args.window)
    if result.is_valid:
        print(f"valid (delta={result.delta})")
        return EXIT_OK
    print("invalid")
    return EXIT_INVALID


def cmd_hotp_code(args: argparse.Namespace) -> int:
    """Generate HOTP code from secret and counter."""
    result = _hotp_from_args(args).generate()
    print(result.token)
    return EXIT_OK


def cmd_hotp_verify(args: argparse.Namespace) -> int:
    """Check an HOTP code."""
    result = _hotp_from_args(args).validate(args.token, window=args.window)
    if result.is_valid:
        print(f"valid (counter={result.used_counter}, next={result.used_counter + 1})")
        return EXIT_OK
    print("invalid")
    return EXIT_INVALID


def _add_otp_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("secret", help="Base32 secret")
    parser.add_argument(
        "--algorithm",
        default=Algorithm.SHA1.value,
        choices=[a.value for a in Algorithm],
        type=str.upper,
        help="HMAC hash function (default: SHA1)",
    )
    parser.add_argument(
        "--digits", type=int, default=DEFAULT_DIGITS, help="Code length (6-8)"
    )


def _add_totp_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--period", type=int, default=DEFAULT_PERIOD, help="Time step in seconds"
    )
    parser.add_argument(
        "--time", type=int, default=None, help="Unix time in milliseconds (default: now)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="otpforge",
        description="OTPForge - HOTP/TOTP one-time passwords",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"otpforge {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # secret command
    secret_parser = subparsers.add_parser("secret", help="Generate random secret")
    secret_parser.add_argument(
        "--length",
        type=int,
        default=DEFAULT_SECRET_LENGTH,
        choices=SUPPORTED_SECRET_LENGTHS,
        help="Secret length in bytes",
    )

    # totp-code command
    totp_code_parser = subparsers.add_parser("totp-code", help="Generate TOTP code")
    _add_otp_options(totp_code_parser)
    _add_totp_options(totp_code_parser)

    # totp-verify command
    totp_verify_parser = subparsers.add_parser("totp-verify", help="Verify TOTP code")
    _add_otp_options(totp_verify_parser)
    totp_verify_parser.add_argument("token", help="Code to check")
    _add_totp_options(totp_verify_parser)
    totp_verify_parser.add_argument(
        "--window", type=int, default=DEFAULT_WINDOW, help="Steps to check before/after"
    )

    # hotp-code command
    hotp_code_parser = subparsers.add_parser("hotp-code", help="Generate HOTP code")
    _add_otp_options(hotp_code_parser)
    hotp_code_parser.add_argument("--counter", type=int, required=True, help="Counter value")

    # hotp-verify command
    hotp_verify_parser = subparsers.add_parser("hotp-verify", help="Verify HOTP code")
    _add_otp_options(hotp_verify_parser)
    hotp_verify_parser.add_argument("token", help="Code to check")
    hotp_verify_parser.add_argument("--counter", type=int, required=True, help="Counter value")
    hotp_verify_parser.add_argument(
        "--window", type=int, default=0, help="Counters to look ahead"
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return EXIT_OK

    commands = {
        "secret": cmd_secret,
        "totp-code": cmd_totp_code,
        "totp-verify": cmd_totp_verify,
        "hotp-code": cmd_hotp_code,
        "hotp-verify": cmd_hotp_verify,
    }

    try:
        return commands[args.command](args)
    except OTPException as e:
        logger.debug("%s failed: %s", args.command, e.code.value)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
