"""Internal algorithm registers INT_ALGO_1 and INT_ALGO_2."""

from __future__ import annotations

from .register import Bits, OrderedEnum, Register


class SpeedDeltaLimitExit(OrderedEnum):
    """Speed difference below which active braking stops."""

    P2_5 = 0x0, "2.5%"
    P5 = 0x1, "5%"
    P7_5 = 0x2, "7.5%"
    P10 = 0x3, "10%"


class SpeedPinGlitchFilter(OrderedEnum):
    """Glitch filter applied on the speed pin input."""

    NONE = 0x0, "No Glitch Filter"
    US02 = 0x1, "0.2µs"
    US05 = 0x2, "0.5µs"
    US1 = 0x3, "1µs"


class PersistanceTime(OrderedEnum):
    """Persistence time."""

    MS1 = 0x0, "1ms"
    MS5 = 0x1, "5ms"
    MS50 = 0x2, "50ms"
    MS100 = 0x3, "100ms"


class IsdTimeout(OrderedEnum):
    """Timeout when ISD cannot reliably detect speed or direction."""

    MS500 = 0x0, "500ms"
    MS750 = 0x1, "750ms"
    MS1000 = 0x2, "1000ms"
    MS2000 = 0x3, "2000ms"


class AutoHandoffBemf(OrderedEnum):
    """Minimum BEMF for handoff."""

    MV0 = 0x0, "0mV"
    MV50 = 0x1, "50mV"
    MV100 = 0x2, "100mV"
    MV250 = 0x3, "250mV"
    MV500 = 0x4, "500mV"
    MV1000 = 0x5, "1000mV"
    MV1250 = 0x6, "1250mV"
    MV1500 = 0x7, "1500mV"


class BrakeCurrentPersist(OrderedEnum):
    """Persistence time for current below threshold during current based ISD brake."""

    MS50 = 0x0, "50ms"
    MS100 = 0x1, "100ms"
    MS250 = 0x2, "250ms"
    MS500 = 0x3, "500ms"


class MpetIpdCurrentLimit(OrderedEnum):
    """IPD current limit for MPET."""

    A0_1 = 0x0, "0.1A"
    A0_5 = 0x1, "0.5A"
    A1_0 = 0x2, "1.0A"
    A2_0 = 0x3, "2.0A"


class MpetIpdCount(OrderedEnum):
    """Number of times IPD is executed for MPET."""

    C1 = 0x0, "1"
    C2 = 0x1, "2"
    C4 = 0x2, "4"
    C8 = 0x3, "8"


class MpetOpenLoopCurrentRef(OrderedEnum):
    """Open loop current reference for MPET."""

    A1 = 0x0, "1.0A"
    A2 = 0x1, "2.0A"
    A3 = 0x2, "3.0A"
    A4 = 0x3, "4.0A"
    A5 = 0x4, "5.0A"
    A6 = 0x5, "6.0A"
    A7 = 0x6, "7.0A"
    A8 = 0x7, "8.0A"


class MpetOpenLoopSpeedRef(OrderedEnum):
    """Open loop speed reference for MPET (% of MAX_SPEED)."""

    P15 = 0x0, "15%"
    P25 = 0x1, "25%"
    P35 = 0x2, "35%"
    P50 = 0x3, "50%"


class MpetOpenLoopSlewRate(OrderedEnum):
    """Open loop acceleration for MPET."""

    HZ0_1 = 0x0, "0.1Hz/s"
    HZ0_5 = 0x1, "0.5Hz/s"
    HZ1_0 = 0x2, "1.0Hz/s"
    HZ2_0 = 0x3, "2.0Hz/s"
    HZ3_0 = 0x4, "3.0Hz/s"
    HZ5_0 = 0x5, "5.0Hz/s"
    HZ10_0 = 0x6, "10.0Hz/s"
    HZ20_0 = 0x7, "20.0Hz/s"


class ReverseOpenLoopDeceleration(OrderedEnum):
    """Share of open loop acceleration applied while decelerating in reverse drive."""

    P50 = 0x0, "50%"
    P60 = 0x1, "60%"
    P70 = 0x2, "70%"
    P80 = 0x3, "80%"
    P90 = 0x4, "90%"
    P100 = 0x5, "100%"
    P125 = 0x6, "125%"
    P150 = 0x7, "150%"


class IntAlgo1(Register):
    """Internal algorithm settings, part one."""

    active_brake_speed_delta_limit_exit = Bits(29, 30, SpeedDeltaLimitExit)
    speed_pin_glitch_filter = Bits(27, 28, SpeedPinGlitchFilter)
    fast_isd_en = Bits(26, 26, bool)
    isd_stop_time = Bits(24, 25, PersistanceTime)
    isd_run_time = Bits(22, 23, PersistanceTime)
    isd_timeout = Bits(20, 21, IsdTimeout)
    auto_handoff_min_bemf = Bits(17, 19, AutoHandoffBemf)
    brake_current_persist = Bits(15, 16, BrakeCurrentPersist)
    mpet_ipd_current_limit = Bits(13, 14, MpetIpdCurrentLimit)
    mpet_ipd_freq = Bits(11, 12, MpetIpdCount)
    mpet_open_loop_current_ref = Bits(8, 10, MpetOpenLoopCurrentRef)
    mpet_open_loop_speed_ref = Bits(6, 7, MpetOpenLoopSpeedRef)
    mpet_open_loop_slew_rate = Bits(3, 5, MpetOpenLoopSlewRate)
    rev_drv_open_loop_dec = Bits(0, 2, ReverseOpenLoopDeceleration)


class SlowClosedLoopAcceleration(OrderedEnum):
    """Closed loop acceleration while the estimator is still settling after handoff."""

    HZ0_1 = 0x0, "0.1Hz/s"
    HZ1 = 0x1, "1.0Hz/s"
    HZ2 = 0x2, "2.0Hz/s"
    HZ3 = 0x3, "3.0Hz/s"
    HZ5 = 0x4, "5.0Hz/s"
    HZ10 = 0x5, "10.0Hz/s"
    HZ20 = 0x6, "20.0Hz/s"
    HZ30 = 0x7, "30.0Hz/s"
    HZ40 = 0x8, "40.0Hz/s"
    HZ50 = 0x9, "50.0Hz/s"
    HZ100 = 0xA, "100.0Hz/s"
    HZ200 = 0xB, "200.0Hz/s"
    HZ500 = 0xC, "500.0Hz/s"
    HZ750 = 0xD, "750.0Hz/s"
    HZ1000 = 0xE, "1000.0Hz/s"
    HZ2000 = 0xF, "2000.0Hz/s"


class ActiveBrakeBusCurrentSlewRate(OrderedEnum):
    """Bus current slew rate during active braking."""

    A10 = 0x0, "10A/s"
    A50 = 0x1, "50A/s"
    A100 = 0x2, "100A/s"
    A250 = 0x3, "250A/s"
    A500 = 0x4, "500A/s"
    A1000 = 0x5, "1000A/s"
    A5000 = 0x6, "5000A/s"
    NO_LIMIT = 0x7, "No Limit"


class IntAlgo2(Register):
    """Internal algorithm settings, part two."""

    cl_slow_acc = Bits(6, 9, SlowClosedLoopAcceleration)
    active_brake_bus_current_slew_rate = Bits(3, 5, ActiveBrakeBusCurrentSlewRate)
    # False = normal IPD parameters, True = MPET specific parameters
    mpet_ipd_select = Bits(2, 2, bool)
    # False = normal open loop parameters, True = MPET specific parameters
    mpet_ke_meas_parameter_select = Bits(1, 1, bool)
    ipd_high_resolution_en = Bits(0, 0, bool)