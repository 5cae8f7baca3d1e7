"""Public digest/HOTP/TOTP operations composing the engine's parts."""

import dataclasses
from typing import Any, Optional

from otp_engine.errors import MissingCounter, MissingSecret
from otp_engine.hashing import HmacProvider, compute_digest, cryptography_hmac
from otp_engine.hotp import encode_counter, truncate
from otp_engine.request import OtpRequest
from otp_engine.secret import normalize_secret
from otp_engine.totp import derive_counter


def _coerce(request: Optional[OtpRequest], options: dict) -> OtpRequest:
    if request is None:
        return OtpRequest.from_options(**options)
    if options:
        raise TypeError("Pass either an OtpRequest or keyword options, not both")
    return request


def _require_secret(request: OtpRequest, operation: str) -> None:
    if request.secret is None or len(request.secret) == 0:
        raise MissingSecret(f"{operation}: missing secret")


def digest(
    request: Optional[OtpRequest] = None,
    /,
    *,
    provider: HmacProvider = cryptography_hmac,
    **options: Any,
) -> bytes:
    """
    Compute the raw HMAC digest of the request's counter.

    Args:
        request: A prebuilt OtpRequest, or None to build one from options.
        provider: Keyed-hash capability (default: cryptography's HMAC).
        **options: OtpRequest fields (secret, counter, encoding, algorithm).

    Returns:
        The digest bytes.

    Raises:
        MissingSecret: If no secret is supplied.
        MissingCounter: If no counter is supplied.
    """
    request = _coerce(request, options)
    _require_secret(request, "digest")
    if request.counter is None:
        raise MissingCounter("digest: missing counter")

    key = normalize_secret(request.secret, request.encoding, request.algorithm)
    return compute_digest(
        key, encode_counter(request.counter), request.algorithm, provider
    )


def hotp(
    request: Optional[OtpRequest] = None,
    /,
    *,
    provider: HmacProvider = cryptography_hmac,
    **options: Any,
) -> str:
    """
    Generate a counter-based one-time passcode (RFC 4226).

    Args:
        request: A prebuilt OtpRequest, or None to build one from options.
        provider: Keyed-hash capability (default: cryptography's HMAC).
        **options: OtpRequest fields (secret, counter, digest, digits,
            encoding, algorithm).

    Returns:
        A zero-padded code of ``digits`` characters.

    Raises:
        MissingSecret: If no secret is supplied.
        MissingCounter: If no counter is supplied.
    """
    request = _coerce(request, options)
    _require_secret(request, "hotp")
    if request.counter is None:
        raise MissingCounter("hotp: missing counter")

    raw = request.digest
    if raw is None:
        raw = digest(request, provider=provider)
    return truncate(raw, request.digits)


def totp(
    request: Optional[OtpRequest] = None,
    /,
    *,
    provider: HmacProvider = cryptography_hmac,
    **options: Any,
) -> str:
    """
    Generate a time-based one-time passcode (RFC 6238).

    The counter is derived from ``time``, ``step`` and ``epoch`` unless one
    is given explicitly, then the HOTP path is used.

    Args:
        request: A prebuilt OtpRequest, or None to build one from options.
        provider: Keyed-hash capability (default: cryptography's HMAC).
        **options: OtpRequest fields (secret, time, step, epoch, counter,
            digits, encoding, algorithm).

    Returns:
        A zero-padded code of ``digits`` characters.

    Raises:
        MissingSecret: If no secret is supplied.
    """
    request = _coerce(request, options)
    _require_secret(request, "totp")
    if request.counter is None:
        request = dataclasses.replace(
            request,
            counter=derive_counter(request.time, request.step, request.epoch),
        )
    return hotp(request, provider=provider)


counter = hotp
time = totp
