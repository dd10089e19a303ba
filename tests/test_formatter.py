"""Tests for size formatting utilities."""

import pytest

from filesize import InvalidFormat, format_size, parse_size


def test_format_size_zero():
    """Test formatting zero bytes."""
    assert format_size(0) == "0.00 B"


def test_format_size_negative():
    """Test that negative sizes are formatted in bytes."""
    assert format_size(-1) == "-1.00 B"


def test_format_size_bytes():
    """Test formatting bytes."""
    assert format_size(500) == "500.00 B"


def test_format_size_kilobytes():
    """Test formatting kibibytes."""
    assert format_size(1024) == "1.00 KiB"
    assert format_size(2048) == "2.00 KiB"


def test_format_size_megabytes():
    """Test formatting mebibytes."""
    assert format_size(1024 * 1024) == "1.00 MiB"
    assert format_size(2 * 1024 * 1024) == "2.00 MiB"


def test_format_size_gigabytes():
    """Test formatting gibibytes."""
    assert format_size(1024 * 1024 * 1024) == "1.00 GiB"
    assert format_size(2 * 1024 * 1024 * 1024) == "2.00 GiB"


def test_format_size_precision():
    """Test formatting with two decimals."""
    assert format_size(1024 * 1024 * 1.5) == "1.50 MiB"
    assert format_size(1024 * 1024 * 1.234) == "1.23 MiB"


def test_format_size_si():
    """Test formatting with SI units."""
    assert format_size(1500, si=True) == "1.50 kB"
    assert format_size(2_500_000, si=True) == "2.50 MB"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("700 MB", 700_000_000),
        ("1474 KiB", 1_509_376),
        ("512B", 512),
    ],
)
def test_parse_size(text, expected):
    """Test parsing size strings to bytes."""
    assert parse_size(text) == expected


def test_parse_size_invalid():
    """Test parsing an invalid size string."""
    with pytest.raises(InvalidFormat, match="Unparseable filesize: 'lots'"):
        parse_size("lots")
