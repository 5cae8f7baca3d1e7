"""RFC 6238 TOTP time-step counter derivation."""

import time as _time
from typing import Optional, Union


Seconds = Union[int, float]


def derive_counter(
    time: Optional[Seconds] = None, step: Seconds = 30, epoch: Seconds = 0
) -> int:
    """
    Count the whole time steps elapsed between ``epoch`` and ``time``.

    Args:
        time: Unix time in seconds (default: current wall-clock time).
        step: Time-step duration in seconds (default: 30).
        epoch: Unix time in seconds from which steps are counted (default: 0).

    Returns:
        The HOTP counter for that moment. Negative when time precedes epoch.

    Raises:
        ValueError: If step is not positive.
    """
    if step <= 0:
        raise ValueError(f"Step must be positive, got {step}")

    if time is None:
        time_ms = _time.time_ns() // 1_000_000
    else:
        time_ms = time * 1000
    epoch_ms = epoch * 1000

    return int((time_ms - epoch_ms) // (step * 1000))
