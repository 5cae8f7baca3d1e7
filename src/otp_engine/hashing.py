"""Keyed-hash digest computation over an injectable HMAC provider."""

import logging
from typing import Callable

from cryptography.exceptions import UnsupportedAlgorithm as _CryptoUnsupported
from cryptography.hazmat.primitives import hashes, hmac

from otp_engine.errors import UnsupportedAlgorithm


logger = logging.getLogger(__name__)

# (algorithm name, key, message) -> raw digest bytes
HmacProvider = Callable[[str, bytes, bytes], bytes]


def _resolve_hash(algorithm: str) -> hashes.HashAlgorithm:
    """Look up a fixed-size hash algorithm by name in the cryptography registry."""
    attr = algorithm.upper().replace("-", "_")
    hash_cls = getattr(hashes, attr, None)
    if not (isinstance(hash_cls, type) and issubclass(hash_cls, hashes.HashAlgorithm)):
        raise UnsupportedAlgorithm(f"Unknown hash algorithm: {algorithm!r}")
    try:
        return hash_cls()
    except TypeError as e:
        # Variable-size hashes (BLAKE2, SHAKE) need a digest size we don't have
        raise UnsupportedAlgorithm(
            f"Hash algorithm {algorithm!r} cannot be used for HMAC: {e}"
        ) from e


def cryptography_hmac(algorithm: str, key: bytes, message: bytes) -> bytes:
    """
    Compute HMAC using the cryptography package.

    Args:
        algorithm: Hash algorithm name, case-insensitive (e.g. "sha1").
        key: HMAC key bytes.
        message: Message bytes.

    Returns:
        The raw HMAC digest.

    Raises:
        UnsupportedAlgorithm: If the algorithm cannot be resolved or used.
    """
    try:
        h = hmac.HMAC(key, _resolve_hash(algorithm))
    except _CryptoUnsupported as e:
        raise UnsupportedAlgorithm(
            f"Hash algorithm {algorithm!r} is not supported by the backend: {e}"
        ) from e
    h.update(message)
    return h.finalize()


def compute_digest(
    key: bytes,
    message: bytes,
    algorithm: str = "sha1",
    provider: HmacProvider = cryptography_hmac,
) -> bytes:
    """Compute the keyed digest of ``message`` with ``key`` through ``provider``."""
    algorithm = algorithm.lower()
    logger.debug("Computing %s HMAC with %d-byte key", algorithm, len(key))
    return provider(algorithm, key, message)
