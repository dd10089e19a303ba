"""Capacities of common storage media."""

from .core import Filesize

# The size of a floppy disk
Floppy = Filesize.parse("1474 KiB")
# The size of a CD
CD = Filesize.parse("700 MB")
# The size of a common DVD
DVD_5 = Filesize.parse("4.38 GiB")
# The same as a DVD 5
DVD = DVD_5
# The size of a single-sided dual-layer DVD
DVD_9 = Filesize.parse("7.92 GiB")
# The size of a double-sided single-layer DVD
DVD_10 = DVD_5 * 2
# The size of a double-sided DVD, combining a DVD 9 and a DVD 5
DVD_14 = DVD_9 + DVD_5
# The size of a double-sided dual-layer DVD
DVD_18 = DVD_14 * 2
# The size of a Zip disk
ZIP = Filesize.parse("100 MB")

__all__ = [
    "Floppy",
    "CD",
    "DVD",
    "DVD_5",
    "DVD_9",
    "DVD_10",
    "DVD_14",
    "DVD_18",
    "ZIP",
]
