"""HOTP (RFC 4226) and TOTP (RFC 6238) one-time passcode engine."""

import logging

from otp_engine.api import counter, digest, hotp, time, totp
from otp_engine.errors import (
    DecodingError,
    DigestTooShort,
    MissingCounter,
    MissingSecret,
    OtpError,
    UnsupportedAlgorithm,
)
from otp_engine.request import OtpRequest

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DecodingError",
    "DigestTooShort",
    "MissingCounter",
    "MissingSecret",
    "OtpError",
    "OtpRequest",
    "UnsupportedAlgorithm",
    "counter",
    "digest",
    "hotp",
    "time",
    "totp",
]
