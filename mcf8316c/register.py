"""Bit-field register model shared by every register definition."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any, ClassVar, Dict, Optional

REGISTER_BITS = 32
_REGISTER_MASK = (1 << REGISTER_BITS) - 1


class DisplayEnum(Enum):
    """Enum whose members carry a raw bit pattern and a human-readable label.

    Members are declared as ``NAME = bits, "label"``.
    """

    def __new__(cls, bits: int, label: str):
        member = object.__new__(cls)
        member._value_ = bits
        member.label = label
        return member

    def __str__(self) -> str:
        return self.label

    def __index__(self) -> int:
        return self._value_

    @classmethod
    def from_bits(cls, bits: int) -> "DisplayEnum":
        """Return the member encoded by ``bits``; raise ValueError if there is none."""
        return cls(bits)


class OrderedEnum(DisplayEnum):
    """DisplayEnum ordered by its raw bit pattern unless a subclass says otherwise."""

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value_ < other._value_

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return other.__lt__(self)

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self == other or self.__lt__(other)

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self == other or other.__lt__(self)


class Bits:
    """Descriptor for a field occupying bits ``lsb..=msb`` of a register.

    ``kind`` is ``bool``, ``int``, an enum class, or any class that can be
    built from an ``int`` and converted back with ``operator.index``.
    Enum fields whose bits name no member read as ``None``.
    """

    def __init__(self, lsb: int, msb: int, kind: type) -> None:
        if not 0 <= lsb <= msb < REGISTER_BITS:
            raise ValueError(f"invalid bit range {lsb}..={msb}")
        if kind is bool and msb != lsb:
            raise ValueError("a bool field must be a single bit")
        self.lsb = lsb
        self.msb = msb
        self.kind = kind
        self.width = msb - lsb + 1
        self.mask = ((1 << self.width) - 1) << lsb
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self
        return self._decode((obj.raw_value & self.mask) >> self.lsb)

    def __set__(self, obj: Any, value: Any) -> None:
        bits = self._encode(value)
        obj.raw_value = (obj.raw_value & ~self.mask & _REGISTER_MASK) | (bits << self.lsb)

    def _decode(self, bits: int) -> Any:
        if self.kind is bool:
            return bool(bits)
        if self.kind is int:
            return bits
        if issubclass(self.kind, Enum):
            try:
                return self.kind(bits)
            except ValueError:
                return None
        return self.kind(bits)

    def _encode(self, value: Any) -> int:
        if self.kind is bool:
            if not isinstance(value, bool):
                raise TypeError(f"{self.name} expects a bool, got {value!r}")
            bits = int(value)
        elif self.kind is int:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{self.name} expects an int, got {value!r}")
            bits = value
        else:
            if not isinstance(value, self.kind):
                raise TypeError(
                    f"{self.name} expects {self.kind.__name__}, got {value!r}"
                )
            bits = operator.index(value)
        if not 0 <= bits < (1 << self.width):
            raise ValueError(f"{value!r} does not fit in {self.width} bits of {self.name}")
        return bits


class Register:
    """A 32-bit device register made of ``Bits`` fields."""

    ADDRESS: ClassVar[int]
    DEFAULT: ClassVar[int] = 0

    def __init__(self, raw_value: Optional[int] = None, **kwargs: Any) -> None:
        self.raw_value = self.DEFAULT if raw_value is None else raw_value
        fields = self._fields()
        for name, field_value in kwargs.items():
            if name not in fields:
                raise TypeError(f"{type(self).__name__} has no field {name!r}")
            setattr(self, name, field_value)

    @property
    def raw_value(self) -> int:
        """The stored 32-bit pattern, without any wire adjustments."""
        return self._raw

    @raw_value.setter
    def raw_value(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"raw value must be an int, got {value!r}")
        if not 0 <= value <= _REGISTER_MASK:
            raise ValueError(f"raw value {value:#x} does not fit in 32 bits")
        self._raw = value

    def value(self) -> int:
        """Return the word to send on the bus."""
        return self.raw_value

    @classmethod
    def from_value(cls, value: int) -> "Register":
        """Build a register from a word read from the bus."""
        return cls(value)

    @classmethod
    def _fields(cls) -> Dict[str, Bits]:
        found: Dict[str, Bits] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, Bits):
                    found[name] = attr
        return dict(sorted(found.items(), key=lambda item: -item[1].msb))

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.raw_value == other.raw_value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields())
        return f"{type(self).__name__}({parts})"