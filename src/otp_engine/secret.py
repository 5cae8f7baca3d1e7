"""Secret decoding and key-size normalization."""

import base64
import binascii
import logging
import math
from typing import Union

from otp_engine.errors import DecodingError, MissingSecret


logger = logging.getLogger(__name__)

# Canonical key size in bytes for each algorithm with a known size
KEY_SIZES = {
    "sha1": 20,
    "sha256": 32,
    "sha512": 64,
}

SUPPORTED_ENCODINGS = ("ascii", "hex", "base32", "base64")


def decode_secret(secret: Union[str, bytes], encoding: str = "ascii") -> bytes:
    """
    Decode a secret from its text encoding into raw bytes.

    Args:
        secret: The secret as text, or raw bytes (returned unchanged).
        encoding: One of "ascii", "hex", "base32" or "base64".

    Returns:
        The raw secret bytes.

    Raises:
        DecodingError: If the encoding is unknown or the text is invalid for it.
    """
    if isinstance(secret, (bytes, bytearray, memoryview)):
        return bytes(secret)

    encoding = encoding.lower()
    try:
        if encoding == "ascii":
            return secret.encode("latin-1")
        if encoding == "hex":
            return bytes.fromhex(secret)
        if encoding == "base32":
            return _b32_fix(secret)
        if encoding == "base64":
            return _b64_fix(secret)
    except (ValueError, binascii.Error) as e:
        raise DecodingError(f"Unable to decode secret as {encoding}: {e}") from e

    raise DecodingError(
        f"Unsupported secret encoding {encoding!r}; "
        f"expected one of {', '.join(SUPPORTED_ENCODINGS)}"
    )


def _b32_fix(s: str) -> bytes:
    """Decode Base32 ignoring whitespace, case and missing padding."""
    s = "".join(s.split()).upper().rstrip("=")
    s += "=" * (-len(s) % 8)
    return base64.b32decode(s, casefold=True)


def _b64_fix(s: str) -> bytes:
    """Decode Base64 with missing padding restored."""
    s = "".join(s.split()).rstrip("=")
    s += "=" * (-len(s) % 4)
    return base64.b64decode(s, validate=True)


def normalize_secret(
    secret: Union[str, bytes], encoding: str = "ascii", algorithm: str = "sha1"
) -> bytes:
    """
    Decode a secret and size it to the algorithm's canonical key length.

    The secret bytes are repeated cyclically until at least the key size is
    available, then cut to exactly that size. Longer secrets are cut too.
    Algorithms without a known key size get the decoded bytes unchanged.

    Args:
        secret: The secret as text or raw bytes.
        encoding: Text encoding of the secret (ignored for bytes).
        algorithm: Hash algorithm name, case-insensitive.

    Returns:
        The normalized key bytes.

    Raises:
        MissingSecret: If the secret is empty.
        DecodingError: If the secret cannot be decoded.
    """
    raw = decode_secret(secret, encoding)
    if not raw:
        raise MissingSecret("Secret must not be empty")

    size = KEY_SIZES.get(algorithm.lower())
    if size is None:
        logger.warning(
            "Algorithm %r is not officially supported; "
            "secret length is not normalized and results may differ "
            "from other authenticators",
            algorithm,
        )
        return raw

    if len(raw) == size:
        return raw
    return (raw * math.ceil(size / len(raw)))[:size]
