"""Tests for the storage media constants."""

import pytest

import filesize
from filesize import BINARY, SI, Filesize
from filesize.media import CD, DVD, DVD_5, DVD_9, DVD_10, DVD_14, DVD_18, ZIP, Floppy


@pytest.mark.parametrize(
    "size,expected,system",
    [
        (Floppy, 1474 * 1024, BINARY),
        (CD, 700 * 1000**2, SI),
        (DVD_5, 4702989189, BINARY),
        (DVD_9, 8503992442, BINARY),
        (ZIP, 100 * 1000**2, SI),
    ],
)
def test_parsed_constants(size, expected, system):
    """Test the constants parsed from size strings."""
    assert size.to_integer() == expected
    assert size.unit_system is system


def test_dvd_is_dvd_5():
    """Test the DVD alias."""
    assert DVD is DVD_5


def test_combined_constants():
    """Test the constants built from other constants."""
    assert DVD_10.to_integer() == DVD_5.to_integer() * 2
    assert DVD_14.to_integer() == DVD_9.to_integer() + DVD_5.to_integer()
    assert DVD_18.to_integer() == DVD_14.to_integer() * 2
    assert DVD_18.unit_system is BINARY


def test_display():
    """Test the display strings of a few constants."""
    assert str(CD) == "700.00 MB"
    assert str(Floppy) == "1.44 MiB"
    assert str(DVD_5) == "4.38 GiB"


def test_constants_exported_from_package():
    """Test that the constants are available from the package root."""
    assert filesize.CD is CD
    assert filesize.DVD_18 is DVD_18
    assert isinstance(filesize.Floppy, Filesize)
