"""Motor start-up registers MOTOR_STARTUP1 and MOTOR_STARTUP2."""

from __future__ import annotations

from .common import CurrentSelection, OpenLoopAccelerationA1, OpenLoopAccelerationA2
from .register import Bits, OrderedEnum, Register


class StartupMode(OrderedEnum):
    """Motor start-up method."""

    ALIGN = 0x0, "Align"
    DOUBLE_ALIGN = 0x1, "Double Align"
    IPD = 0x2, "IPD"
    SLOW_FIRST_CYCLE = 0x3, "Slow First Cycle"


class CurrentRampRate(OrderedEnum):
    """Align, slow first cycle and open loop current ramp rate."""

    A0_1 = 0x0, "0.1 A/s"
    A1 = 0x1, "1 A/s"
    A5 = 0x2, "5 A/s"
    A10 = 0x3, "10 A/s"
    A15 = 0x4, "15 A/s"
    A25 = 0x5, "25 A/s"
    A50 = 0x6, "50 A/s"
    A100 = 0x7, "100 A/s"
    A150 = 0x8, "150 A/s"
    A200 = 0x9, "200 A/s"
    A250 = 0xA, "250 A/s"
    A500 = 0xB, "500 A/s"
    A1000 = 0xC, "1000 A/s"
    A2000 = 0xD, "2000 A/s"
    A5000 = 0xE, "5000 A/s"
    NO_LIMIT = 0xF, "No limit"


class AlignTime(OrderedEnum):
    """Align time."""

    MS10 = 0x0, "10 ms"
    MS50 = 0x1, "50 ms"
    MS100 = 0x2, "100 ms"
    MS200 = 0x3, "200 ms"
    MS300 = 0x4, "300 ms"
    MS400 = 0x5, "400 ms"
    MS500 = 0x6, "500 ms"
    MS750 = 0x7, "750 ms"
    S1 = 0x8, "1 s"
    S1_5 = 0x9, "1.5 s"
    S2 = 0xA, "2 s"
    S3 = 0xB, "3 s"
    S4 = 0xC, "4 s"
    S5 = 0xD, "5 s"
    S7_5 = 0xE, "7.5 s"
    S10 = 0xF, "10 s"


class IpdClockFreq(OrderedEnum):
    """Initial position detection clock frequency."""

    HZ50 = 0x0, "50 Hz"
    HZ100 = 0x1, "100 Hz"
    HZ250 = 0x2, "250 Hz"
    HZ500 = 0x3, "500 Hz"
    HZ1000 = 0x4, "1000 Hz"
    HZ2000 = 0x5, "2000 Hz"
    HZ5000 = 0x6, "5000 Hz"
    HZ10000 = 0x7, "10000 Hz"


class IpdCurrentThreshold(OrderedEnum):
    """Initial position detection current threshold; codes above 0x11 are unused."""

    A0_25 = 0x0, "0.25 A"
    A0_5 = 0x1, "0.5 A"
    A0_75 = 0x2, "0.75 A"
    A1_0 = 0x3, "1.0 A"
    A1_25 = 0x4, "1.25 A"
    A1_5 = 0x5, "1.5 A"
    A2_0 = 0x6, "2.0 A"
    A2_5 = 0x7, "2.5 A"
    A3_0 = 0x8, "3.0 A"
    A3_667 = 0x9, "3.667 A"
    A4_0 = 0xA, "4.0 A"
    A4_667 = 0xB, "4.667 A"
    A5_0 = 0xC, "5.0 A"
    A5_333 = 0xD, "5.333 A"
    A6_0 = 0xE, "6.0 A"
    A6_667 = 0xF, "6.667 A"
    A7_333 = 0x10, "7.333 A"
    A8_0 = 0x11, "8.0 A"


class IpdAdvanceAngle(OrderedEnum):
    """Initial position detection advance angle."""

    DEG0 = 0x0, "0°"
    DEG30 = 0x1, "30°"
    DEG60 = 0x2, "60°"
    DEG90 = 0x3, "90°"


class MotorStartup1(Register):
    """Motor start-up settings, part one."""

    mtr_startup = Bits(29, 30, StartupMode)
    align_slow_ramp_rate = Bits(25, 28, CurrentRampRate)
    align_time = Bits(21, 24, AlignTime)
    align_or_slow_current_ilimit = Bits(17, 20, CurrentSelection)
    ipd_clk_freq = Bits(14, 16, IpdClockFreq)
    ipd_curr_thr = Bits(9, 13, IpdCurrentThreshold)
    # False = brake, True = tristate
    ipd_rls_mode = Bits(8, 8, bool)
    ipd_adv_angle = Bits(6, 7, IpdAdvanceAngle)
    ipd_repeat = Bits(4, 5, int)
    # False = limit from OL_ILIMIT, True = limit from ILIMIT
    ol_ilimit_config = Bits(3, 3, bool)
    iq_ramp_en = Bits(2, 2, bool)
    active_brake_en = Bits(1, 1, bool)
    # False = forward drive settings, True = reverse drive settings
    rev_drv_config = Bits(0, 0, bool)


class OpenCloseLoopHandoffThreshold(OrderedEnum):
    """Open to closed loop handoff threshold (% of MAX_SPEED)."""

    P1 = 0x0, "1%"
    P2 = 0x1, "2%"
    P3 = 0x2, "3%"
    P4 = 0x3, "4%"
    P5 = 0x4, "5%"
    P6 = 0x5, "6%"
    P7 = 0x6, "7%"
    P8 = 0x7, "8%"
    P9 = 0x8, "9%"
    P10 = 0x9, "10%"
    P11 = 0xA, "11%"
    P12 = 0xB, "12%"
    P13 = 0xC, "13%"
    P14 = 0xD, "14%"
    P15 = 0xE, "15%"
    P16 = 0xF, "16%"
    P17 = 0x10, "17%"
    P18 = 0x11, "18%"
    P19 = 0x12, "19%"
    P20 = 0x13, "20%"
    P22_5 = 0x14, "22.5%"
    P25 = 0x15, "25%"
    P27_5 = 0x16, "27.5%"
    P30 = 0x17, "30%"
    P32_5 = 0x18, "32.5%"
    P35 = 0x19, "35%"
    P37_5 = 0x1A, "37.5%"
    P40 = 0x1B, "40%"
    P42_5 = 0x1C, "42.5%"
    P45 = 0x1D, "45%"
    P47_5 = 0x1E, "47.5%"
    P50 = 0x1F, "50%"


class AlignAngle(OrderedEnum):
    """Align angle; codes above 0x1C are reserved."""

    DEG0 = 0x0, "0°"
    DEG10 = 0x1, "10°"
    DEG20 = 0x2, "20°"
    DEG30 = 0x3, "30°"
    DEG45 = 0x4, "45°"
    DEG60 = 0x5, "60°"
    DEG70 = 0x6, "70°"
    DEG80 = 0x7, "80°"
    DEG90 = 0x8, "90°"
    DEG110 = 0x9, "110°"
    DEG120 = 0xA, "120°"
    DEG135 = 0xB, "135°"
    DEG150 = 0xC, "150°"
    DEG160 = 0xD, "160°"
    DEG170 = 0xE, "170°"
    DEG180 = 0xF, "180°"
    DEG190 = 0x10, "190°"
    DEG210 = 0x11, "210°"
    DEG225 = 0x12, "225°"
    DEG240 = 0x13, "240°"
    DEG250 = 0x14, "250°"
    DEG260 = 0x15, "260°"
    DEG270 = 0x16, "270°"
    DEG280 = 0x17, "280°"
    DEG290 = 0x18, "290°"
    DEG315 = 0x19, "315°"
    DEG330 = 0x1A, "330°"
    DEG340 = 0x1B, "340°"
    DEG350 = 0x1C, "350°"


class SlowFirstCycleFrequency(OrderedEnum):
    """Frequency of the first cycle during start-up (% of MAX_SPEED)."""

    P1 = 0x0, "1%"
    P2 = 0x1, "2%"
    P3 = 0x2, "3%"
    P5 = 0x3, "5%"
    P7_5 = 0x4, "7.5%"
    P10 = 0x5, "10%"
    P12_5 = 0x6, "12.5%"
    P15 = 0x7, "15%"
    P17_5 = 0x8, "17.5%"
    P20 = 0x9, "20%"
    P25 = 0xA, "25%"
    P30 = 0xB, "30%"
    P35 = 0xC, "35%"
    P40 = 0xD, "40%"
    P45 = 0xE, "45%"
    P50 = 0xF, "50%"


class ThetaErrorRampRate(OrderedEnum):
    """Ramp rate reducing the gap between estimated and open loop theta."""

    D0_01 = 0x0, "0.01°/ms"
    D0_05 = 0x1, "0.05°/ms"
    D0_1 = 0x2, "0.1°/ms"
    D0_15 = 0x3, "0.15°/ms"
    D0_2 = 0x4, "0.2°/ms"
    D0_5 = 0x5, "0.5°/ms"
    D1 = 0x6, "1°/ms"
    D2 = 0x7, "2°/ms"


class MotorStartup2(Register):
    """Motor start-up settings, part two."""

    ol_ilimit = Bits(27, 30, CurrentSelection)
    ol_acc_a1 = Bits(23, 26, OpenLoopAccelerationA1)
    ol_acc_a2 = Bits(19, 22, OpenLoopAccelerationA2)
    # False = use opn_cl_handoff_thr, True = automatic handoff
    auto_handoff_en = Bits(18, 18, bool)
    opn_cl_handoff_thr = Bits(13, 17, OpenCloseLoopHandoffThreshold)
    align_angle = Bits(8, 12, AlignAngle)
    slow_first_cyc_freq = Bits(4, 7, SlowFirstCycleFrequency)
    # False = 0 Hz, True = defined by slow_first_cyc_freq
    first_cycle_freq_sel = Bits(3, 3, bool)
    theta_error_ramp_rate = Bits(0, 2, ThetaErrorRampRate)