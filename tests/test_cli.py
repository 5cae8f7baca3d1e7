"""Tests for the command-line interface."""

from otp_engine.cli import main


SECRET = "12345678901234567890"


def test_hotp_command(capsys):
    assert main(["hotp", SECRET, "--counter", "0"]) == 0
    assert capsys.readouterr().out.strip() == "755224"


def test_counter_alias_with_options(capsys):
    args = ["counter", "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ", "-e", "base32", "-c", "1", "-d", "8"]
    assert main(args) == 0
    assert capsys.readouterr().out.strip() == "94287082"


def test_totp_command(capsys):
    assert main(["totp", SECRET, "--time", "59", "--digits", "8"]) == 0
    assert capsys.readouterr().out.strip() == "94287082"


def test_time_alias_sha256(capsys):
    assert main(["time", SECRET, "-t", "1111111109", "-a", "sha256", "-d", "8"]) == 0
    assert capsys.readouterr().out.strip() == "68084774"


def test_digest_command(capsys):
    assert main(["digest", SECRET, "--counter", "0"]) == 0
    assert (
        capsys.readouterr().out.strip()
        == "cc93cf18508d94934c64b65d8ba7667fb7cde4b0"
    )


def test_invalid_secret(capsys):
    assert main(["hotp", "not base32!", "-e", "base32", "-c", "0"]) == 1
    assert "Unable to decode" in capsys.readouterr().err


def test_unknown_algorithm(capsys):
    assert main(["hotp", SECRET, "-c", "0", "-a", "nope"]) == 1
    assert "Unknown hash algorithm" in capsys.readouterr().err


def test_no_command(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
