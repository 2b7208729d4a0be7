"""Enumerations shared by several registers."""

from __future__ import annotations

from .register import OrderedEnum


class CurrentSelection(OrderedEnum):
    """Current selection used in various registers."""

    A0_125 = 0x0, "0.125 A"
    A0_25 = 0x1, "0.25 A"
    A0_5 = 0x2, "0.5 A"
    A1_0 = 0x3, "1.0 A"
    A1_5 = 0x4, "1.5 A"
    A2_0 = 0x5, "2.0 A"
    A2_5 = 0x6, "2.5 A"
    A3_0 = 0x7, "3.0 A"
    A3_5 = 0x8, "3.5 A"
    A4_0 = 0x9, "4.0 A"
    A4_5 = 0xA, "4.5 A"
    A5_0 = 0xB, "5.0 A"
    A5_5 = 0xC, "5.5 A"
    A6_0 = 0xD, "6.0 A"
    A7_0 = 0xE, "7.0 A"
    A8_0 = 0xF, "8.0 A"


class OpenLoopAccelerationA1(OrderedEnum):
    """Acceleration coefficient A1 for open loop control."""

    A0_01 = 0x0, "0.01 Hz/s"
    A0_05 = 0x1, "0.05 Hz/s"
    A1_0 = 0x2, "1.0 Hz/s"
    A2_5 = 0x3, "2.5 Hz/s"
    A5_0 = 0x4, "5.0 Hz/s"
    A10 = 0x5, "10 Hz/s"
    A25 = 0x6, "25 Hz/s"
    A50 = 0x7, "50 Hz/s"
    A75 = 0x8, "75 Hz/s"
    A100 = 0x9, "100 Hz/s"
    A250 = 0xA, "250 Hz/s"
    A500 = 0xB, "500 Hz/s"
    A750 = 0xC, "750 Hz/s"
    A1000 = 0xD, "1000 Hz/s"
    A5000 = 0xE, "5000 Hz/s"
    A10000 = 0xF, "10000 Hz/s"


class OpenLoopAccelerationA2(OrderedEnum):
    """Acceleration coefficient A2 for open loop control."""

    A0 = 0x0, "0.00 Hz/s²"
    A0_05 = 0x1, "0.05 Hz/s²"
    A1_0 = 0x2, "1.0 Hz/s²"
    A2_5 = 0x3, "2.5 Hz/s²"
    A5_0 = 0x4, "5.0 Hz/s²"
    A10 = 0x5, "10 Hz/s²"
    A25 = 0x6, "25 Hz/s²"
    A50 = 0x7, "50 Hz/s²"
    A75 = 0x8, "75 Hz/s²"
    A100 = 0x9, "100 Hz/s²"
    A250 = 0xA, "250 Hz/s²"
    A500 = 0xB, "500 Hz/s²"
    A750 = 0xC, "750 Hz/s²"
    A1000 = 0xD, "1000 Hz/s²"
    A5000 = 0xE, "5000 Hz/s²"
    A10000 = 0xF, "10000 Hz/s²"