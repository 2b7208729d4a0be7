"""Percentages stored as eight-bit values, and the pieces they are split into."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

_BYTE_MAX = 0xFF


@dataclass(frozen=True, order=True)
class PercentAsU8:
    """A percentage where 0 is 0 % and 255 is 100 %."""

    inner: int

    def __post_init__(self) -> None:
        if isinstance(self.inner, bool) or not isinstance(self.inner, int):
            raise TypeError(f"percentage must be an int, got {self.inner!r}")
        if not 0 <= self.inner <= _BYTE_MAX:
            raise ValueError(f"percentage {self.inner} does not fit in 8 bits")

    def __index__(self) -> int:
        return self.inner

    def __float__(self) -> float:
        return self.inner / 2.55

    @classmethod
    def combine_duty_a(cls, high: "DutyAHigh5", low: "DutyALow3") -> "PercentAsU8":
        """Join the five high and three low bits of duty cycle A."""
        return cls((high.inner << 3) | low.inner)

    def split_duty_a(self) -> Tuple["DutyAHigh5", "DutyALow3"]:
        """Split into the five high and three low bits of duty cycle A."""
        return DutyAHigh5(self.inner >> 3), DutyALow3(self.inner & 0x7)

    @classmethod
    def combine_duty_e(cls, high: "DutyEHigh4", low: "DutyELow4") -> "PercentAsU8":
        """Join the four high and four low bits of duty cycle E."""
        return cls((high.inner << 4) | low.inner)

    def split_duty_e(self) -> Tuple["DutyEHigh4", "DutyELow4"]:
        """Split into the four high and four low bits of duty cycle E."""
        return DutyEHigh4(self.inner >> 4), DutyELow4(self.inner & 0xF)

    @classmethod
    def combine_ref_b(cls, high: "RefBHigh7", low: "RefBLow1") -> "PercentAsU8":
        """Join the seven high bits and the low bit of reference B."""
        return cls((high.inner << 1) | low.inner)

    def split_ref_b(self) -> Tuple["RefBHigh7", "RefBLow1"]:
        """Split into the seven high bits and the low bit of reference B."""
        return RefBHigh7(self.inner >> 1), RefBLow1(self.inner & 0x1)


@dataclass(frozen=True)
class _BitChunk:
    """Part of a value that is spread over two registers."""

    WIDTH: ClassVar[int] = 8
    inner: int

    def __post_init__(self) -> None:
        if isinstance(self.inner, bool) or not isinstance(self.inner, int):
            raise TypeError(f"{type(self).__name__} must hold an int, got {self.inner!r}")
        if not 0 <= self.inner < (1 << self.WIDTH):
            raise ValueError(
                f"{type(self).__name__} value {self.inner} does not fit in {self.WIDTH} bits"
            )

    def __index__(self) -> int:
        return self.inner


class DutyAHigh5(_BitChunk):
    """Most significant five bits of duty cycle A."""

    WIDTH = 5


class DutyALow3(_BitChunk):
    """Least significant three bits of duty cycle A."""

    WIDTH = 3


class DutyEHigh4(_BitChunk):
    """Most significant four bits of duty cycle E."""

    WIDTH = 4


class DutyELow4(_BitChunk):
    """Least significant four bits of duty cycle E."""

    WIDTH = 4


class RefBHigh7(_BitChunk):
    """Most significant seven bits of reference B."""

    WIDTH = 7


class RefBLow1(_BitChunk):
    """Least significant bit of reference B."""

    WIDTH = 1