"""The Filesize value type."""

import logging
import math
import numbers
import operator
from functools import total_ordering
from typing import Any, Optional, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .errors import InvalidFormat
from .units import BINARY, UnitMatch, UnitSystem, parse_unit

log = logging.getLogger(__name__)

Operand = Union["Filesize", numbers.Number]


@total_ordering
class Filesize:
    """An immutable file size.

    The size is stored as an integer number of bytes. The unit system only
    decides how the size is parsed and displayed, it never changes the
    stored value, and it is ignored when comparing two sizes.
    """

    __slots__ = ("_bytes", "_unit_system")

    def __init__(self, size: Any, unit_system: UnitSystem = BINARY) -> None:
        """
        Initialize the size.

        Args:
            size: A size in bytes, truncated to an integer
            unit_system: Unit system used for conversions (default: BINARY)
        """
        object.__setattr__(self, "_bytes", int(size))
        object.__setattr__(self, "_unit_system", unit_system)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple:
        return (type(self), (self._bytes, self._unit_system))

    @classmethod
    def parse_unit(cls, text: str) -> UnitMatch:
        """Split a size string into number, prefix and unit system."""
        return parse_unit(text)

    @classmethod
    def parse(cls, text: str) -> "Filesize":
        """
        Parse a string describing a file size.

        Args:
            text: A size such as "700 MB", "4.38 GiB" or "512B"

        Returns:
            Filesize: The parsed size, tagged with the matched unit system

        Raises:
            InvalidFormat: If the string matches neither unit system
        """
        match = parse_unit(text)
        if not match.matched:
            log.debug("Unparseable filesize %r", text)
            raise InvalidFormat(text)

        system = match.system
        offset = system.position(match.prefix)
        return cls(match.size * system.multiplier**offset, system)

    @property
    def bytes(self) -> int:
        """The size in bytes."""
        return self._bytes

    @property
    def unit_system(self) -> UnitSystem:
        """The unit system used for conversions."""
        return self._unit_system

    def to_integer(self) -> int:
        """Return the size in bytes."""
        return self._bytes

    def to_number(self, unit: str = "B") -> float:
        """
        Convert the size to a given unit.

        The power comes from the prefix letter of ``unit`` and the base from
        the unit system ``unit`` belongs to, so "MB" divides by 1000**2 and
        "MiB" by 1024**2. Units with no recognized prefix return bytes.

        Args:
            unit: Unit to convert to, e.g. "B", "kB" or "MiB"

        Returns:
            float: The size expressed in that unit
        """
        match = parse_unit(unit)
        prefix = match.prefix
        if prefix == "B" or not prefix:
            return float(self._bytes)

        position = self._unit_system.position(prefix)
        if position < 1:
            return float(self._bytes)

        system = match.system or self._unit_system
        return self._bytes / system.multiplier**position

    def best_unit(self) -> str:
        """Return the unit label used by to_string."""
        system = self._unit_system
        if self._bytes < system.multiplier:
            return "B"

        # floor(log(bytes, multiplier)) without float rounding
        position = 0
        while system.multiplier ** (position + 1) <= self._bytes:
            position += 1
        position = min(position, len(system.prefixes) - 1)
        return system.prefixes[position - 1] + "B"

    def to_string(self) -> str:
        """Format the size in the best matching unit, e.g. "1.46 KiB"."""
        unit = self.best_unit()
        return f"{self.to_number(unit):.2f} {unit}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._bytes}, {self._unit_system.name})"

    def __int__(self) -> int:
        return self._bytes

    def __float__(self) -> float:
        return float(self._bytes)

    def __hash__(self) -> int:
        return hash(self._bytes)

    @staticmethod
    def _operand_bytes(other: Any) -> Optional[int]:
        if isinstance(other, Filesize):
            return other._bytes
        if isinstance(other, (str, bytes, bytearray)):
            return None
        try:
            return operator.index(other)
        except TypeError:
            pass
        try:
            return int(other)
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _compare_value(other: Any) -> Any:
        # Numbers compare exactly so equality agrees with hash()
        if isinstance(other, Filesize):
            return other._bytes
        if isinstance(other, numbers.Number):
            return other
        return Filesize._operand_bytes(other)

    def _new(self, size: Any) -> "Filesize":
        return type(self)(size, self._unit_system)

    def __eq__(self, other: Any) -> bool:
        other_value = self._compare_value(other)
        if other_value is None:
            return NotImplemented
        return self._bytes == other_value

    def __lt__(self, other: Any) -> bool:
        other_value = self._compare_value(other)
        if other_value is None:
            return NotImplemented
        return self._bytes < other_value

    def __add__(self, other: Operand) -> "Filesize":
        other_bytes = self._operand_bytes(other)
        if other_bytes is None:
            return NotImplemented
        return self._new(self._bytes + other_bytes)

    def __sub__(self, other: Operand) -> "Filesize":
        other_bytes = self._operand_bytes(other)
        if other_bytes is None:
            return NotImplemented
        return self._new(self._bytes - other_bytes)

    def __mul__(self, other: Operand) -> "Filesize":
        other_bytes = self._operand_bytes(other)
        if other_bytes is None:
            return NotImplemented
        return self._new(self._bytes * other_bytes)

    def __truediv__(self, other: Operand) -> Union["Filesize", float]:
        """Divide by another size (giving a ratio) or by a number."""
        if isinstance(other, Filesize):
            if other._bytes == 0:
                if self._bytes == 0:
                    return math.nan
                return math.copysign(math.inf, self._bytes)
            return self._bytes / other._bytes
        if isinstance(other, numbers.Number):
            return self._new(self._bytes / float(other))
        other_bytes = self._operand_bytes(other)
        if other_bytes is None:
            return NotImplemented
        return self._new(self._bytes / float(other_bytes))

    # A number on the left is swapped to the right, so 5 - size is size - 5
    # and 10 / size is size / 10.
    __radd__ = __add__
    __rsub__ = __sub__
    __rmul__ = __mul__
    __rtruediv__ = __truediv__

    def __neg__(self) -> "Filesize":
        return self._new(-self._bytes)

    def __abs__(self) -> "Filesize":
        return self._new(abs(self._bytes))

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe the accepted input as a byte count or a size string."""
        return handler(
            core_schema.union_schema(
                [core_schema.int_schema(), core_schema.str_schema()]
            )
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Let pydantic models declare Filesize fields.

        Strings are parsed, integers are taken as bytes, and the field
        serializes to its byte count.
        """
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                int, return_schema=core_schema.int_schema()
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> "Filesize":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(
            f"Expected a Filesize, int or str, got {type(value).__name__}"
        )
