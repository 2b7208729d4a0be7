"""Hardware pin register PIN_CONFIG."""

from __future__ import annotations

from .register import Bits, DisplayEnum, Register


class FgIdleConfig(DisplayEnum):
    """FG pin state while the motor is stopped."""

    FG_CONFIG = 0x0, "FG state decided by FG_CONFIG"
    FG_HIGH = 0x1, "FG is pulled High"
    FG_LOW = 0x2, "FG is pulled Low"
    FG_HIGH_2 = 0x3, "FG is pulled High"


class FgFaultConfig(DisplayEnum):
    """FG pin state during a fault."""

    FG_LAST = 0x0, "Use last FG Signal when motor is driven before fault"
    FG_HIGH = 0x1, "FG is pulled High"
    FG_LOW = 0x2, "FG is pulled Low"
    FG_CONFIG = 0x3, "FG state decided by FG_CONFIG"


class BrakeInput(DisplayEnum):
    """Brake pin override."""

    PIN = 0x0, "Hardware Pin BRAKE"
    OVERRIDE = 0x1, "Override pin and brake/align according to BRAKE_PIN_MODE"
    OVERRIDE_NO_BRAKE = 0x2, "Override pin and do not brake/align"
    PIN_2 = 0x3, "Hardware Pin BRAKE"


class SpeedMode(DisplayEnum):
    """Source of the motor control input."""

    ANALOG = 0x0, "Controlled by analog voltage on SPEED pin"
    PWM = 0x1, "Controlled by duty cycle (PWM) on SPEED pin"
    I2C = 0x2, "Controlled by DIGITAL_SPEED_CTRL value (I2C)"
    FREQUENCY = 0x3, "Controlled by frequency on SPEED pin"


class PinConfig(Register):
    """Hardware pin settings."""

    # False = Vdc filter enabled, True = disabled
    vdc_filter_disable = Bits(27, 27, bool)
    fg_idle_config = Bits(9, 10, FgIdleConfig)
    fg_fault_config = Bits(7, 8, FgFaultConfig)
    alarm_pin_en = Bits(6, 6, bool)
    # False = low side brake, True = align brake
    brake_pin_mode = Bits(5, 5, bool)
    # False = last commutation angle, True = ALIGN_ANGLE
    align_brake_angle_sel = Bits(4, 4, bool)
    brake_input = Bits(2, 3, BrakeInput)
    speed_mode = Bits(0, 1, SpeedMode)