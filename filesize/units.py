"""Unit systems and unit string matching."""

from dataclasses import dataclass
from re import Pattern
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UnitSystem(BaseModel):
    """A byte counting convention with its ordered prefixes.

    Attributes:
        name: Short identifier ("SI" or "BINARY")
        prefixes: Unit prefixes in ascending order of magnitude
        multiplier: Factor between two consecutive prefixes
        pattern: Case-insensitive pattern matching a full size string;
            group 1 is the numeric literal, group 2 the prefix letter
    """

    model_config = ConfigDict(frozen=True)

    name: str
    prefixes: tuple[str, ...]
    multiplier: int
    pattern: Pattern[str]

    def position(self, prefix: str) -> int:
        """Return the power of the multiplier a prefix stands for.

        Only the first letter of the prefix is compared, ignoring case, so
        "k", "K" and "Ki" all give 1. Unknown or empty prefixes give 0.
        """
        if not prefix:
            return 0
        letters = [p[0].lower() for p in self.prefixes]
        try:
            return letters.index(prefix[0].lower()) + 1
        except ValueError:
            return 0


SI = UnitSystem(
    name="SI",
    prefixes=("k", "M", "G", "T", "P", "E", "Z", "Y"),
    multiplier=1000,
    pattern=r"(?i)([\d,.]+)?\s?([kmgtpezy]?)b",
)

BINARY = UnitSystem(
    name="BINARY",
    prefixes=("Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
    multiplier=1024,
    pattern=r"(?i)([\d,.]+)?\s?(?:([kmgtpezy])i)?b",
)

# Binary is tried first, so a plain "B" is a binary size
UNIT_SYSTEMS = (BINARY, SI)


@dataclass(frozen=True)
class UnitMatch:
    """Result of matching a size string against the unit systems."""

    size: float = 0.0
    prefix: str = ""
    system: Optional[UnitSystem] = None

    @property
    def matched(self) -> bool:
        """Check if one of the unit systems recognized the string."""
        return self.system is not None


def parse_number(literal: Optional[str]) -> float:
    """Convert a numeric literal to a float.

    Commas are grouping separators and are dropped, a period is the decimal
    point. Missing or malformed literals give 0.0.

    Args:
        literal: Digits, commas and periods, or None

    Returns:
        float: The parsed number
    """
    if not literal:
        return 0.0
    try:
        return float(literal.replace(",", ""))
    except ValueError:
        return 0.0


def parse_unit(text: str) -> UnitMatch:
    """Split a size string into its number, prefix and unit system.

    Args:
        text: A size string such as "10 MiB" or "1,024kB"

    Returns:
        UnitMatch: The match; its system is None if nothing matched
    """
    for system in UNIT_SYSTEMS:
        match = system.pattern.fullmatch(text)
        if match:
            return UnitMatch(
                size=parse_number(match.group(1)),
                prefix=match.group(2) or "",
                system=system,
            )
    return UnitMatch()
