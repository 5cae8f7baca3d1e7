"""Tests for TOTP generation and time-step counter derivation."""

import time as _time

import pytest

from otp_engine import MissingSecret, OtpRequest, hotp, time, totp
from otp_engine.totp import derive_counter


SECRET = "12345678901234567890"

# RFC 6238 test vectors (Appendix B), 8 digits, 30 second step
RFC6238_TEST_VECTORS = [
    # (time, sha1, sha256, sha512)
    (59, "94287082", "46119246", "90693936"),
    (1111111109, "07081804", "68084774", "25091201"),
    (1111111111, "14050471", "67062674", "99943326"),
    (1234567890, "89005924", "91819424", "93441116"),
    (2000000000, "69279037", "90698825", "38618901"),
    (20000000000, "65353130", "77737706", "47863826"),
]


@pytest.mark.parametrize("when,sha1,sha256,sha512", RFC6238_TEST_VECTORS)
def test_rfc6238_test_vectors(when, sha1, sha256, sha512):
    """The 20-byte ASCII seed is normalized to each algorithm's RFC seed."""
    assert totp(secret=SECRET, time=when, digits=8, algorithm="sha1") == sha1
    assert totp(secret=SECRET, time=when, digits=8, algorithm="sha256") == sha256
    assert totp(secret=SECRET, time=when, digits=8, algorithm="sha512") == sha512


def test_time_is_totp_alias():
    assert time is totp
    assert time(secret=SECRET, time=59, step=30, digits=8) == "94287082"


def test_totp_equals_hotp_with_derived_counter():
    code = totp(secret=SECRET, time=1234567890, step=60, epoch=90)
    assert code == hotp(secret=SECRET, counter=derive_counter(1234567890, 60, 90))


def test_totp_epoch_offset():
    assert totp(secret=SECRET, time=159, epoch=100, digits=8) == "94287082"


def test_totp_explicit_counter_wins():
    assert totp(secret=SECRET, time=1234567890, counter=1) == "287082"


def test_totp_does_not_mutate_request():
    request = OtpRequest(secret=SECRET, time=59, digits=8)
    assert totp(request) == "94287082"
    assert request.counter is None


def test_totp_default_time_is_now():
    before = int(_time.time() // 30)
    code = totp(secret=SECRET)
    after = int(_time.time() // 30)
    assert code in {hotp(secret=SECRET, counter=c) for c in range(before, after + 1)}


def test_totp_missing_secret():
    with pytest.raises(MissingSecret):
        totp(time=59)


def test_derive_counter():
    assert derive_counter(0) == 0
    assert derive_counter(29) == 0
    assert derive_counter(30) == 1
    assert derive_counter(59) == 1
    assert derive_counter(1111111109) == 37037036
    assert derive_counter(119, step=60) == 1
    assert derive_counter(159, epoch=100) == 1


def test_derive_counter_fractional_time():
    assert derive_counter(59.999) == 1
    assert derive_counter(60.0) == 2


def test_derive_counter_before_epoch():
    assert derive_counter(10, epoch=20) == -1


def test_derive_counter_default_time():
    before = int(_time.time() // 30)
    derived = derive_counter()
    after = int(_time.time() // 30)
    assert before <= derived <= after


def test_derive_counter_rejects_bad_step():
    with pytest.raises(ValueError, match="positive"):
        derive_counter(59, step=0)


def test_totp_time_before_epoch_fails():
    with pytest.raises(ValueError, match="non-negative"):
        totp(secret=SECRET, time=10, epoch=20)
