"""Device configuration registers DEVICE_CONFIG1 and DEVICE_CONFIG2."""

from __future__ import annotations

from typing import Any

from .register import Bits, DisplayEnum, OrderedEnum, Register


class DacSoxSel(DisplayEnum):
    """Selects between DAC2 and the SOx channels."""

    DAC_OUT2 = 0x0, "DACOUT2"
    SOA = 0x1, "SOA"
    SOB = 0x2, "SOB"
    SOC = 0x3, "SOC"


class I2cSlewRate(OrderedEnum):
    """Drive strength of the I2C pins, ordered by current."""

    M4_8 = 0x0, "4.8 mA"
    M3_9 = 0x1, "3.9 mA"
    M1_86 = 0x2, "1.86 mA"
    M30_8 = 0x3, "30.8 mA"

    def to_milliamps(self) -> float:
        """Return the drive current in milliamps."""
        return _I2C_MILLIAMPS[self]

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_milliamps() < other.to_milliamps()


_I2C_MILLIAMPS = {
    I2cSlewRate.M4_8: 4.8,
    I2cSlewRate.M3_9: 3.9,
    I2cSlewRate.M1_86: 1.86,
    I2cSlewRate.M30_8: 30.8,
}


class MaxBusVoltage(OrderedEnum):
    """Maximum DC bus voltage; "not defined" compares with nothing."""

    V15 = 0x0, "15 V"
    V30 = 0x1, "30 V"
    V60 = 0x2, "60 V"
    NOT_DEFINED = 0x3, "Not Defined"

    def _comparable(self, other: "MaxBusVoltage") -> bool:
        undefined = MaxBusVoltage.NOT_DEFINED
        return self is not undefined and other is not undefined

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


class DeviceConfig1(Register):
    """Device settings, part one."""

    dac_sox_sel = Bits(28, 29, DacSoxSel)
    # False = DACOUT1/DACOUT2 pins disabled, True = enabled
    dac_enable = Bits(27, 27, bool)
    i2c_target_address = Bits(20, 26, int)
    slew_rate_i2c_pins = Bits(3, 4, I2cSlewRate)
    # Pull-ups on nFAULT and FG
    pullup_enable = Bits(2, 2, bool)
    bus_volt = Bits(0, 1, MaxBusVoltage)


class SleepEntryTime(OrderedEnum):
    """Time the input must stay at or below the sleep threshold before sleeping."""

    US50 = 0x0, "50µs"
    US200 = 0x1, "200µs"
    MS20 = 0x2, "20ms"
    MS200 = 0x3, "200ms"


class ClockSource(DisplayEnum):
    """Clock source; code 0x2 is unused."""

    INTERNAL = 0x0, "Internal Oscillator"
    CRUDE_WDT = 0x1, "Crude Oscillator - WDT"
    EXTERNAL = 0x3, "External Clock Input"


class ExternalClockFrequency(OrderedEnum):
    """External clock frequency."""

    KHZ8 = 0x0, "8 kHz"
    KHZ16 = 0x1, "16 kHz"
    KHZ32 = 0x2, "32 kHz"
    KHZ64 = 0x3, "64 kHz"
    KHZ128 = 0x4, "128 kHz"
    KHZ256 = 0x5, "256 kHz"
    KHZ512 = 0x6, "512 kHz"
    KHZ1024 = 0x7, "1024 kHz"


class ExternalWatchdogConfig(OrderedEnum):
    """Time between watchdog tickles (GPIO/I2C)."""

    X1 = 0x0, "100ms/1s"
    X2 = 0x1, "200ms/2s"
    X5 = 0x2, "500ms/5s"
    X10 = 0x3, "1000ms/10s"


class DeviceConfig2(Register):
    """Device settings, part two."""

    # Speed pin frequency that corresponds to 100 % duty cycle
    input_maximum_freq = Bits(16, 30, int)
    sleep_entry_time = Bits(14, 15, SleepEntryTime)
    dynamic_csa_gain_en = Bits(13, 13, bool)
    dynamic_voltage_gain_en = Bits(12, 12, bool)
    # False = standby mode, True = sleep mode
    dev_mode = Bits(11, 11, bool)
    clk_sel = Bits(9, 10, ClockSource)
    ext_clk_en = Bits(8, 8, bool)
    ext_clk_config = Bits(5, 7, ExternalClockFrequency)
    ext_wdt_en = Bits(4, 4, bool)
    ext_wdt_config = Bits(2, 3, ExternalWatchdogConfig)
    # False = tickle over I2C, True = tickle over GPIO
    ext_wdt_input_mode = Bits(1, 1, bool)
    # False = report only, True = latch with FETs in Hi-Z
    ext_wdt_fault_mode = Bits(0, 0, bool)