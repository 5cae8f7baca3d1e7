"""Exception types raised by otp-engine."""


class OtpError(Exception):
    """Base class for all otp-engine errors."""


class MissingSecret(OtpError, ValueError):
    """No secret was supplied to an operation that needs one."""


class MissingCounter(OtpError, ValueError):
    """No counter was supplied to HOTP and none could be derived."""


class DecodingError(OtpError, ValueError):
    """The secret text could not be parsed in its declared encoding."""


class UnsupportedAlgorithm(OtpError, ValueError):
    """The hash provider could not resolve the requested algorithm."""


class DigestTooShort(OtpError, IndexError):
    """The digest is too short for dynamic truncation at its offset."""
