"""Per-call OTP request options and the deprecated-alias request builder."""

import warnings
from dataclasses import dataclass, fields
from typing import Any, Optional, Union


DEFAULT_ENCODING = "ascii"
DEFAULT_ALGORITHM = "sha1"
DEFAULT_DIGITS = 6
DEFAULT_STEP = 30
DEFAULT_EPOCH = 0

# Deprecated option name -> canonical field name
DEPRECATED_ALIASES = {
    "key": "secret",
    "length": "digits",
    "initial_time": "epoch",
}


@dataclass(frozen=True)
class OtpRequest:
    """
    Options for a single digest, HOTP or TOTP computation.

    ``counter`` is required for HOTP and derived from ``time``, ``step`` and
    ``epoch`` for TOTP when left unset. ``time`` of None means "now".
    ``digest`` lets HOTP skip the keyed-hash step with a precomputed digest.
    """

    secret: Optional[Union[str, bytes]] = None
    encoding: str = DEFAULT_ENCODING
    algorithm: str = DEFAULT_ALGORITHM
    counter: Optional[int] = None
    digest: Optional[bytes] = None
    digits: int = DEFAULT_DIGITS
    step: Union[int, float] = DEFAULT_STEP
    epoch: Union[int, float] = DEFAULT_EPOCH
    time: Optional[Union[int, float]] = None

    @classmethod
    def from_options(cls, **options: Any) -> "OtpRequest":
        """
        Build a request from keyword options.

        Accepts the deprecated names ``key``, ``length`` and ``initial_time``
        with a DeprecationWarning; the canonical name wins when both are given.
        Options passed as None fall back to the field default.

        Raises:
            TypeError: If an option name is not recognized.
        """
        for alias, canonical in DEPRECATED_ALIASES.items():
            if alias not in options:
                continue
            value = options.pop(alias)
            warnings.warn(
                f"Specifying `{alias}` is deprecated; use `{canonical}` instead.",
                DeprecationWarning,
                stacklevel=2,
            )
            if options.get(canonical) is None:
                options[canonical] = value

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise TypeError(f"Unknown OTP option(s): {', '.join(unknown)}")

        return cls(**{name: value for name, value in options.items() if value is not None})
