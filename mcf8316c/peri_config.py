"""Peripheral register PERI_CONFIG1."""

from __future__ import annotations

from .common import CurrentSelection
from .register import Bits, DisplayEnum, OrderedEnum, Register

PERI_CONFIG1_RESET = 0b01000000_00000000_00000000_00000000


class DirectionPinOverride(DisplayEnum):
    """DIR pin override."""

    HARDWARE = 0x0, "Hardware Pin DIR"
    OVERRIDE_CLOCKWISE = 0x1, "Override DIR pin with clockwise rotation OUTA-OUTB-OUTC"
    OVERRIDE_COUNTER_CLOCKWISE = (
        0x2,
        "Override DIR pin with counter-clockwise rotation OUTA-OUTC-OUTB",
    )
    HARDWARE_2 = 0x3, "Hardware Pin DIR"


class BrakeDeltaLimit(OrderedEnum):
    """Speed difference below which active braking is applied; code 0x0 is unused."""

    P5 = 0x1, "5%"
    P10 = 0x2, "10%"
    P15 = 0x3, "15%"
    P20 = 0x4, "20%"
    P25 = 0x5, "25%"
    P30 = 0x6, "30%"
    P35 = 0x7, "35%"
    P40 = 0x8, "40%"
    P45 = 0x9, "45%"
    P50 = 0xA, "50%"
    P60 = 0xB, "60%"
    P70 = 0xC, "70%"
    P80 = 0xD, "80%"
    P90 = 0xE, "90%"
    P100 = 0xF, "100%"


class ModulationIndexLimit(OrderedEnum):
    """Modulation index below which active braking is applied."""

    P0 = 0x0, "0%"
    P40 = 0x1, "40%"
    P50 = 0x2, "50%"
    P60 = 0x3, "60%"
    P70 = 0x4, "70%"
    P80 = 0x5, "80%"
    P90 = 0x6, "90%"
    P100 = 0x7, "100%"


class PeriConfig1(Register):
    """Peripheral settings."""

    DEFAULT = PERI_CONFIG1_RESET

    # False = spread spectrum modulation enabled, True = disabled
    spread_spectrum_modulation_disable = Bits(30, 30, bool)
    bus_current_limit = Bits(22, 25, CurrentSelection)
    bus_current_limit_en = Bits(21, 21, bool)
    dir_input = Bits(19, 20, DirectionPinOverride)
    # False = stop and run ISD on DIR change, True = reverse drive while running
    dir_change_mode = Bits(18, 18, bool)
    self_test_enable = Bits(17, 17, bool)
    active_brake_speed_delta_limit_entry = Bits(13, 16, BrakeDeltaLimit)
    active_brake_mod_index_limit = Bits(10, 12, ModulationIndexLimit)
    # False = 325 Hz to 100 kHz, True = 10 Hz to 325 Hz
    speed_range_sel = Bits(9, 9, bool)