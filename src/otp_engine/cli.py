"""Command-line interface for otp-engine."""

import argparse
import logging
import sys
from typing import List, Optional

from otp_engine import api
from otp_engine.errors import OtpError
from otp_engine.request import (
    DEFAULT_ALGORITHM,
    DEFAULT_DIGITS,
    DEFAULT_ENCODING,
    DEFAULT_EPOCH,
    DEFAULT_STEP,
)
from otp_engine.secret import SUPPORTED_ENCODINGS


def hotp_command(args: argparse.Namespace) -> int:
    """Handle the hotp command."""
    try:
        code = api.hotp(
            secret=args.secret,
            counter=args.counter,
            digits=args.digits,
            encoding=args.encoding,
            algorithm=args.algorithm,
        )
        print(code)
        return 0
    except (OtpError, ValueError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1


def totp_command(args: argparse.Namespace) -> int:
    """Handle the totp command."""
    try:
        code = api.totp(
            secret=args.secret,
            time=args.time,
            step=args.step,
            epoch=args.epoch,
            counter=args.counter,
            digits=args.digits,
            encoding=args.encoding,
            algorithm=args.algorithm,
        )
        print(code)
        return 0
    except (OtpError, ValueError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1


def digest_command(args: argparse.Namespace) -> int:
    """Handle the digest command."""
    try:
        raw = api.digest(
            secret=args.secret,
            counter=args.counter,
            encoding=args.encoding,
            algorithm=args.algorithm,
        )
        print(raw.hex())
        return 0
    except (OtpError, ValueError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1


def _add_common_arguments(parser: argparse.ArgumentParser, digits: bool = True) -> None:
    parser.add_argument("secret", help="Shared secret key")
    parser.add_argument(
        "--encoding",
        "-e",
        default=DEFAULT_ENCODING,
        choices=SUPPORTED_ENCODINGS,
        help=f"Secret encoding (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "--algorithm",
        "-a",
        default=DEFAULT_ALGORITHM,
        help=f"HMAC hash algorithm (default: {DEFAULT_ALGORITHM})",
    )
    if digits:
        parser.add_argument(
            "--digits",
            "-d",
            type=int,
            default=DEFAULT_DIGITS,
            help=f"Number of digits in the code (default: {DEFAULT_DIGITS})",
        )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="HOTP/TOTP one-time passcode generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # HOTP command
    hotp_parser = subparsers.add_parser(
        "hotp",
        aliases=["counter"],
        help="Generate a counter-based code (RFC 4226)",
    )
    _add_common_arguments(hotp_parser)
    hotp_parser.add_argument(
        "--counter",
        "-c",
        type=int,
        required=True,
        help="Counter value",
    )

    # TOTP command
    totp_parser = subparsers.add_parser(
        "totp",
        aliases=["time"],
        help="Generate a time-based code (RFC 6238)",
    )
    _add_common_arguments(totp_parser)
    totp_parser.add_argument(
        "--time",
        "-t",
        type=int,
        default=None,
        help="Unix time in seconds (default: now)",
    )
    totp_parser.add_argument(
        "--step",
        "-s",
        type=int,
        default=DEFAULT_STEP,
        help=f"Time step in seconds (default: {DEFAULT_STEP})",
    )
    totp_parser.add_argument(
        "--epoch",
        type=int,
        default=DEFAULT_EPOCH,
        help=f"Unix time in seconds to count steps from (default: {DEFAULT_EPOCH})",
    )
    totp_parser.add_argument(
        "--counter",
        "-c",
        type=int,
        default=None,
        help="Counter value (default: derived from time)",
    )

    # Digest command
    digest_parser = subparsers.add_parser(
        "digest",
        help="Print the raw HMAC digest as hex",
    )
    _add_common_arguments(digest_parser, digits=False)
    digest_parser.add_argument(
        "--counter",
        "-c",
        type=int,
        required=True,
        help="Counter value",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    if args.command in ("hotp", "counter"):
        return hotp_command(args)
    elif args.command in ("totp", "time"):
        return totp_command(args)
    elif args.command == "digest":
        return digest_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
