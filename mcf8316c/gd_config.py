"""Gate driver registers GD_CONFIG1 and GD_CONFIG2."""

from __future__ import annotations

from typing import Any

from .register import Bits, DisplayEnum, OrderedEnum, Register

GD_CONFIG1_RESET = 0b_00010000_00100010_10000001_00000000
GD_CONFIG2_RESET = 0b_00000001_01000000_00000000_00000000

_PARITY_BIT = 0x8000_0000
_BUCK_PS_DIS_BIT = 1 << 24


def _with_parity(raw: int) -> int:
    """Set the top bit when needed so the word has an even number of ones."""
    if bin(raw).count("1") % 2 == 1:
        raw |= _PARITY_BIT
    return raw


class SlewRate(DisplayEnum):
    """Gate driver slew rate; codes 0x0 and 0x1 are unused."""

    V125 = 0x2, "125 V/μs"
    V200 = 0x3, "200 V/μs"


class OvercurrentDeglitch(OrderedEnum):
    """Overcurrent protection deglitch time."""

    U0_2 = 0x0, "0.2 μs"
    U0_6 = 0x1, "0.6 μs"
    U1_1 = 0x2, "1.1 μs"
    U1_6 = 0x3, "1.6 μs"


class OvercurrentMode(DisplayEnum):
    """Overcurrent fault mode; codes 0x2 and 0x3 are unused."""

    LATCHED_FAULT = 0x0, "Latched Fault"
    RETRY = 0x1, "Retry"


class CurrentSenseAmplifierGain(OrderedEnum):
    """Current sense amplifier gain, used when dynamic CSA gain is off."""

    VA0_15 = 0x0, "0.15 V/A"
    VA0_3 = 0x1, "0.3 V/A"
    VA0_6 = 0x2, "0.6 V/A"
    VA1_2 = 0x3, "1.2 V/A"


class GdConfig1(Register):
    """Gate driver settings, part one; bit 31 carries even parity on the bus."""

    DEFAULT = GD_CONFIG1_RESET

    slew_rate = Bits(26, 27, SlewRate)
    # False = 34 V overvoltage level, True = 22 V
    ovp_sel = Bits(19, 19, bool)
    ovp_en = Bits(18, 18, bool)
    # Over temperature reporting on nFAULT
    otw_rep = Bits(16, 16, bool)
    ocp_deg = Bits(12, 13, OvercurrentDeglitch)
    # False = 16 A, True = 24 A
    ocp_lvl = Bits(10, 10, bool)
    ocp_mode = Bits(8, 9, OvercurrentMode)
    csa_gain = Bits(0, 1, CurrentSenseAmplifierGain)

    def value(self) -> int:
        """Return the word to send, with the parity bit set when needed."""
        return _with_parity(self.raw_value)


class BuckVoltage(OrderedEnum):
    """Buck regulator voltage, ordered by voltage."""

    V3_3 = 0x0, "3.3 V"
    V5_0 = 0x1, "5.0 V"
    V4_0 = 0x2, "4.0 V"
    V5_7 = 0x3, "5.7 V"

    def to_voltage(self) -> float:
        """Return the voltage in volts."""
        return _BUCK_VOLTS[self]

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_voltage() < other.to_voltage()


_BUCK_VOLTS = {
    BuckVoltage.V3_3: 3.3,
    BuckVoltage.V5_0: 5.0,
    BuckVoltage.V4_0: 4.0,
    BuckVoltage.V5_7: 5.7,
}


class MinOnTime(OrderedEnum):
    """Minimum on time for the low side MOSFET; "auto" compares with nothing."""

    US0 = 0x0, "0µs"
    AUTO = 0x1, "Auto"
    US0_5 = 0x2, "0.5µs"
    US0_75 = 0x3, "0.75µs"
    US1_0 = 0x4, "1.0µs"
    US1_25 = 0x5, "1.25µs"
    US1_5 = 0x6, "1.5µs"
    US2_0 = 0x7, "2.0µs"

    def _comparable(self, other: "MinOnTime") -> bool:
        auto = MinOnTime.AUTO
        return self is not auto and other is not auto

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._comparable(other) and self.value < other.value

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._comparable(other) and self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._comparable(other) and self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._comparable(other) and self.value >= other.value


class GdConfig2(Register):
    """Gate driver settings, part two.

    ``buck_ps_dis`` is write-one-to-clear on the device, so its bit is sent
    inverted; the parity bit is computed before the inversion.
    """

    DEFAULT = GD_CONFIG2_RESET

    # False = buck power sequencing enabled, True = disabled
    buck_ps_dis = Bits(24, 24, bool)
    # False = 600 mA limit, True = 150 mA limit
    buck_cl = Bits(23, 23, bool)
    buck_sel = Bits(21, 22, BuckVoltage)
    min_on_time = Bits(17, 19, MinOnTime)

    def value(self) -> int:
        """Return the word to send: parity set, then the buck_ps_dis bit inverted."""
        return _with_parity(self.raw_value) ^ _BUCK_PS_DIS_BIT