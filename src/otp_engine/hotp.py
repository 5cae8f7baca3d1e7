"""RFC 4226 HOTP (HMAC-based One-Time Password) building blocks."""

from otp_engine.errors import DigestTooShort


COUNTER_MASK = 0xFFFFFFFFFFFFFFFF


def encode_counter(counter: int) -> bytes:
    """
    Encode a counter as an 8-byte big-endian sequence.

    Counters wider than 64 bits are masked to their low 64 bits.

    Args:
        counter: Non-negative moving counter value.

    Returns:
        The 8-byte counter encoding.

    Raises:
        ValueError: If the counter is negative.
    """
    if counter < 0:
        raise ValueError(f"Counter must be non-negative, got {counter}")
    return (counter & COUNTER_MASK).to_bytes(8, byteorder="big")


def dynamic_truncate(digest: bytes) -> int:
    """
    Extract a 31-bit integer from a digest (RFC 4226, Section 5.3).

    Raises:
        DigestTooShort: If the digest has fewer than offset + 4 bytes.
    """
    if not digest:
        raise DigestTooShort("Digest is empty")

    offset = digest[-1] & 0x0F
    if offset + 4 > len(digest):
        raise DigestTooShort(
            f"Digest of {len(digest)} bytes is too short for truncation "
            f"at offset {offset}"
        )

    return (
        ((digest[offset] & 0x7F) << 24)
        | ((digest[offset + 1] & 0xFF) << 16)
        | ((digest[offset + 2] & 0xFF) << 8)
        | (digest[offset + 3] & 0xFF)
    )


def truncate(digest: bytes, digits: int = 6) -> str:
    """
    Turn a digest into a zero-padded code of ``digits`` decimal characters.

    Digit counts above 10 are allowed; the extra positions are leading zeros.

    Args:
        digest: Raw HMAC digest.
        digits: Number of digits in the output code (default: 6).

    Returns:
        The code string.

    Raises:
        ValueError: If digits is not a positive integer.
        DigestTooShort: If the digest cannot be truncated.
    """
    if digits < 1:
        raise ValueError(f"Digits must be a positive integer, got {digits}")

    binary = dynamic_truncate(digest)
    return str(binary).rjust(digits, "0")[-digits:]
