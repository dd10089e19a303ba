"""Filesize package.

Parse, convert and format file sizes in SI and binary units.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("filesize")
except PackageNotFoundError:
    # Package is not installed
    __version__ = "0.1.0"

from .core import Filesize
from .errors import FilesizeError, InvalidFormat
from .formatter import format_size, parse_size
from .media import CD, DVD, DVD_5, DVD_9, DVD_10, DVD_14, DVD_18, ZIP, Floppy
from .units import BINARY, SI, UnitMatch, UnitSystem, parse_unit

__all__ = [
    "Filesize",
    "FilesizeError",
    "InvalidFormat",
    "UnitSystem",
    "UnitMatch",
    "SI",
    "BINARY",
    "parse_unit",
    "format_size",
    "parse_size",
    "Floppy",
    "CD",
    "DVD",
    "DVD_5",
    "DVD_9",
    "DVD_10",
    "DVD_14",
    "DVD_18",
    "ZIP",
    "__version__",
]
