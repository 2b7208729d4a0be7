"""Reference profile registers REF_PROFILES1 to REF_PROFILES6."""

from __future__ import annotations

from .percent import (
    DutyAHigh5,
    DutyALow3,
    DutyEHigh4,
    DutyELow4,
    PercentAsU8,
    RefBHigh7,
    RefBLow1,
)
from .register import Bits, DisplayEnum, OrderedEnum, Register


class RefProfileConfig(DisplayEnum):
    """Configuration for reference profiles."""

    REF_EQ = 0x0, "Reference/Equation"
    LINEAR = 0x1, "Linear Profile"
    STAIRCASE = 0x2, "Staircase Profile"
    FORWARD_REVERSE = 0x3, "Forward-Reverse Profile"


class RefProfiles1(Register):
    """Reference profile settings, part one."""

    ref_profile_config = Bits(29, 30, RefProfileConfig)
    duty_on1 = Bits(21, 28, PercentAsU8)
    duty_off1 = Bits(13, 20, PercentAsU8)
    duty_clamp1 = Bits(5, 12, PercentAsU8)
    # Five most significant bits of duty cycle A
    duty_a = Bits(0, 4, DutyAHigh5)


class RefProfiles2(Register):
    """Reference profile settings, part two."""

    # Three least significant bits of duty cycle A
    duty_a = Bits(28, 30, DutyALow3)
    duty_b = Bits(20, 27, PercentAsU8)
    duty_c = Bits(12, 19, PercentAsU8)
    duty_d = Bits(4, 11, PercentAsU8)
    # Four most significant bits of duty cycle E
    duty_e = Bits(0, 3, DutyEHigh4)


class DutyHysteresis(OrderedEnum):
    """Duty hysteresis."""

    P0 = 0x0, "0%"
    P0_5 = 0x1, "0.5%"
    P1 = 0x2, "1%"
    P2 = 0x3, "2%"


class RefProfiles3(Register):
    """Reference profile settings, part three."""

    # Four least significant bits of duty cycle E
    duty_e = Bits(27, 30, DutyELow4)
    duty_on2 = Bits(19, 26, PercentAsU8)
    duty_off2 = Bits(11, 18, PercentAsU8)
    duty_clamp2 = Bits(3, 10, PercentAsU8)
    duty_hys = Bits(1, 2, DutyHysteresis)


class RefProfiles4(Register):
    """Reference profile settings, part four (percentages of maximum reference)."""

    ref_off1 = Bits(23, 30, PercentAsU8)
    ref_clamp1 = Bits(15, 22, PercentAsU8)
    ref_a = Bits(7, 14, PercentAsU8)
    # Seven most significant bits of reference B
    ref_b = Bits(0, 6, RefBHigh7)


class RefProfiles5(Register):
    """Reference profile settings, part five (percentages of maximum reference)."""

    # Least significant bit of reference B
    ref_b = Bits(30, 30, RefBLow1)
    ref_c = Bits(22, 29, PercentAsU8)
    ref_d = Bits(14, 21, PercentAsU8)
    ref_e = Bits(6, 13, PercentAsU8)


class RefProfiles6(Register):
    """Reference profile settings, part six (percentages of maximum reference)."""

    ref_off2 = Bits(23, 30, PercentAsU8)
    ref_clamp2 = Bits(15, 22, PercentAsU8)