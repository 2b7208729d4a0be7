"""Reverse drive register REV_DRIVE_CONFIG."""

from __future__ import annotations

from .common import OpenLoopAccelerationA1, OpenLoopAccelerationA2
from .register import Bits, OrderedEnum, Register


class ActiveBrakeCurrentLimit(OrderedEnum):
    """Bus current limit during active braking."""

    A0_5 = 0x0, "0.5 A"
    A1 = 0x1, "1.0 A"
    A2 = 0x2, "2.0 A"
    A3 = 0x3, "3.0 A"
    A4 = 0x4, "4.0 A"
    A5 = 0x5, "5.0 A"
    A6 = 0x6, "6.0 A"
    A7 = 0x7, "7.0 A"


class RevDriveConfig(Register):
    """Reverse drive and active braking settings."""

    rev_drv_open_loop_accel_a1 = Bits(27, 30, OpenLoopAccelerationA1)
    rev_drv_open_loop_accel_a2 = Bits(23, 26, OpenLoopAccelerationA2)
    active_brake_current_limit = Bits(20, 22, ActiveBrakeCurrentLimit)
    # Kp = ACTIVE_BRAKE_KP / 2**7
    active_brake_kp = Bits(10, 19, int)
    # Ki = ACTIVE_BRAKE_KI / 2**9
    active_brake_ki = Bits(0, 9, int)