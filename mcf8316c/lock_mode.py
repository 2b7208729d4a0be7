"""Lock detection mode: the raw four-bit code and a friendlier view of it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .register import DisplayEnum

_TRISTATE_LATCHED = "Lock detection causes latched fault; nFAULT active; Gate driver is tristated"
_HIGH_LATCHED = (
    "Lock detection causes latched fault; nFAULT active; Gate driver is in high side "
    "brake mode (All high side FETs are turned ON)"
)
_LOW_LATCHED = (
    "Lock detection causes latched fault; nFAULT active; Gate driver is in low side "
    "brake mode (All low side FETs are turned ON)"
)
_RETRY_PREFIX = (
    "Fault automatically cleared after LCK_RETRY time. Number of retries limited to "
    "AUTO_RETRY_TIMES. If number of retries exceed AUTO_RETRY_TIMES, fault is latched; "
)
_TRISTATE_RETRY = _RETRY_PREFIX + "Gate driver is tristated; nFAULT active"
_HIGH_RETRY = _RETRY_PREFIX + (
    "Gate driver is in high side brake mode (All high side FETs are turned ON)"
)
_LOW_RETRY = _RETRY_PREFIX + (
    "Gate driver is in low side brake mode (All low side FETs are turned ON)"
)
_REPORT = "Lock detetection current limit is in report only but no action is taken; nFAULT active"
_DISABLED = "Lock is disabled"


class LockIlimitDriverMode(Enum):
    """Gate driver state on lock detection."""

    TRISTATE = "tristate"
    HIGH_SIDE_BRAKE = "high_side_brake"
    LOW_SIDE_BRAKE = "low_side_brake"


@dataclass(frozen=True)
class LockEnable:
    """Lock detection enabled, optionally retrying, with the given driver state."""

    auto_retry: bool
    driver_mode: LockIlimitDriverMode


@dataclass(frozen=True)
class LockReport:
    """Lock detection only reports, taking no action."""


@dataclass(frozen=True)
class LockDisable:
    """Lock detection disabled."""


LockMode = Union[LockEnable, LockReport, LockDisable]


class LockModeRaw(DisplayEnum):
    """Raw four-bit lock mode; codes with the same meaning compare equal."""

    TRISTATE_NO_RETRY = 0x0, _TRISTATE_LATCHED
    TRISTATE_NO_RETRY_2 = 0x1, _TRISTATE_LATCHED
    HIGH_SIDE_BRAKE_NO_RETRY = 0x2, _HIGH_LATCHED
    LOW_SIDE_BRAKE_NO_RETRY = 0x3, _LOW_LATCHED
    TRISTATE_AUTO_RETRY = 0x4, _TRISTATE_RETRY
    TRISTATE_AUTO_RETRY_2 = 0x5, _TRISTATE_RETRY
    HIGH_SIDE_BRAKE_AUTO_RETRY = 0x6, _HIGH_RETRY
    LOW_SIDE_BRAKE_AUTO_RETRY = 0x7, _LOW_RETRY
    REPORT = 0x8, _REPORT
    DISABLE = 0x9, _DISABLED
    DISABLE_2 = 0xA, _DISABLED
    DISABLE_3 = 0xB, _DISABLED
    DISABLE_4 = 0xC, _DISABLED
    DISABLE_5 = 0xD, _DISABLED
    DISABLE_6 = 0xE, _DISABLED
    DISABLE_7 = 0xF, _DISABLED

    def mode(self) -> LockMode:
        """Return the meaning of this code."""
        return lock_mode_from_raw(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LockModeRaw):
            return NotImplemented
        return self.mode() == other.mode()

    def __hash__(self) -> int:
        return hash(self.mode())


_DRIVER_FROM_BITS = {
    0x0: LockIlimitDriverMode.TRISTATE,
    0x1: LockIlimitDriverMode.TRISTATE,
    0x2: LockIlimitDriverMode.HIGH_SIDE_BRAKE,
    0x3: LockIlimitDriverMode.LOW_SIDE_BRAKE,
}

_BITS_FROM_DRIVER = {
    LockIlimitDriverMode.TRISTATE: 0x0,
    LockIlimitDriverMode.HIGH_SIDE_BRAKE: 0x2,
    LockIlimitDriverMode.LOW_SIDE_BRAKE: 0x3,
}

_RETRY_BIT = 0x4


def lock_mode_from_raw(raw: LockModeRaw) -> LockMode:
    """Interpret a raw lock mode code."""
    if not isinstance(raw, LockModeRaw):
        raise TypeError(f"expected LockModeRaw, got {raw!r}")
    bits = raw.value
    if bits <= 0x7:
        return LockEnable(
            auto_retry=bool(bits & _RETRY_BIT),
            driver_mode=_DRIVER_FROM_BITS[bits & 0x3],
        )
    if raw is LockModeRaw.REPORT:
        return LockReport()
    return LockDisable()


def lock_mode_to_raw(mode: LockMode) -> LockModeRaw:
    """Return the canonical raw code for a lock mode."""
    if isinstance(mode, LockEnable):
        bits = _BITS_FROM_DRIVER[mode.driver_mode]
        if mode.auto_retry:
            bits |= _RETRY_BIT
        return LockModeRaw(bits)
    if isinstance(mode, LockReport):
        return LockModeRaw.REPORT
    if isinstance(mode, LockDisable):
        return LockModeRaw.DISABLE
    raise TypeError(f"not a lock mode: {mode!r}")