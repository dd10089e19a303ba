"""File size formatting utilities."""

from .core import Filesize
from .units import BINARY, SI


def format_size(size_bytes: int, si: bool = False) -> str:
    """
    Format a size in bytes to a human-readable string.

    Args:
        size_bytes: Size in bytes
        si: Use SI units (kB, MB, ...) instead of binary units (KiB, MiB, ...)

    Returns:
        str: Formatted size string (e.g., "1.46 KiB", "1.50 kB", "500.00 B")
    """
    return Filesize(size_bytes, SI if si else BINARY).to_string()


def parse_size(text: str) -> int:
    """
    Parse a human-readable size string to a number of bytes.

    Args:
        text: Size string (e.g., "700 MB", "4.38 GiB")

    Returns:
        int: Size in bytes

    Raises:
        InvalidFormat: If the string is not a valid size
    """
    return Filesize.parse(text).to_integer()
