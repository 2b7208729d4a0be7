"""Fault configuration registers FAULT_CONFIG1 and FAULT_CONFIG2."""

from __future__ import annotations

from typing import Any

from .common import CurrentSelection
from .lock_mode import LockModeRaw
from .register import Bits, DisplayEnum, OrderedEnum, Register


class LockIlimitDeglitchTime(OrderedEnum):
    """Lock detection current limit deglitch time; codes 0x0 and 0x1 are unused."""

    MS0_2 = 0x2, "0.2 ms"
    MS0_5 = 0x3, "0.5 ms"
    MS1 = 0x4, "1 ms"
    MS2_5 = 0x5, "2.5 ms"
    MS5 = 0x6, "5 ms"
    MS7_5 = 0x7, "7.5 ms"
    MS10 = 0x8, "10 ms"
    MS25 = 0x9, "25 ms"
    MS50 = 0xA, "50 ms"
    MS75 = 0xB, "75 ms"
    MS100 = 0xC, "100 ms"
    MS200 = 0xD, "200 ms"
    MS500 = 0xE, "500 ms"
    MS1000 = 0xF, "1000 ms"


class LockRetryTime(OrderedEnum):
    """Lock detection retry time."""

    S0_3 = 0x0, "0.3 s"
    S0_5 = 0x1, "0.5 s"
    S1 = 0x2, "1 s"
    S2 = 0x3, "2 s"
    S3 = 0x4, "3 s"
    S4 = 0x5, "4 s"
    S5 = 0x6, "5 s"
    S6 = 0x7, "6 s"
    S7 = 0x8, "7 s"
    S8 = 0x9, "8 s"
    S9 = 0xA, "9 s"
    S10 = 0xB, "10 s"
    S11 = 0xC, "11 s"
    S12 = 0xD, "12 s"
    S13 = 0xE, "13 s"
    S14 = 0xF, "14 s"


class FaultConfig1(Register):
    """Fault settings, part one."""

    ilimit = Bits(27, 30, CurrentSelection)
    hw_lock_ilimit = Bits(23, 26, CurrentSelection)
    lock_ilimit = Bits(19, 22, CurrentSelection)
    lock_ilimit_mode = Bits(15, 18, LockModeRaw)
    lock_limit_deg = Bits(11, 14, LockIlimitDeglitchTime)
    lck_retry = Bits(7, 10, LockRetryTime)
    mtr_lck_mode = Bits(3, 6, LockModeRaw)
    ipd_timeout_fault_en = Bits(2, 2, bool)
    ipd_freq_fault_en = Bits(1, 1, bool)
    saturation_flags_en = Bits(0, 0, bool)


class AbnormalSpeedLockThreshold(OrderedEnum):
    """Abnormal speed lock threshold (% of MAX_SPEED)."""

    P130 = 0x0, "130%"
    P140 = 0x1, "140%"
    P150 = 0x2, "150%"
    P160 = 0x3, "160%"
    P170 = 0x4, "170%"
    P180 = 0x5, "180%"
    P190 = 0x6, "190%"
    P200 = 0x7, "200%"


class AbnormalBemfThreshold(OrderedEnum):
    """Abnormal BEMF lock threshold (% of expected BEMF)."""

    P40 = 0x0, "40%"
    P45 = 0x1, "45%"
    P50 = 0x2, "50%"
    P55 = 0x3, "55%"
    P60 = 0x4, "60%"
    P65 = 0x5, "65%"
    P67_5 = 0x6, "67.5%"
    P70 = 0x7, "70%"


class NoMotorThreshold(DisplayEnum):
    """No motor lock threshold."""

    P0_075 = 0x0, "0.075A"
    P0_075_DUPLICATE = 0x1, "0.075A"
    P0_1 = 0x2, "0.1A"
    P0_125 = 0x3, "0.125A"
    P0_25 = 0x4, "0.25A"
    P0_5 = 0x5, "0.5A"
    P0_75 = 0x6, "0.75A"
    P1_0 = 0x7, "1.0A"


class HwLockIlimitDeglitchTime(OrderedEnum):
    """Hardware lock detection current limit deglitch time."""

    NO_DEGLITCH = 0x0, "0µs (No Deglitch)"
    US1 = 0x1, "1µs"
    US2 = 0x2, "2µs"
    US3 = 0x3, "3µs"
    US4 = 0x4, "4µs"
    US5 = 0x5, "5µs"
    US6 = 0x6, "6µs"
    US7 = 0x7, "7µs"


class MinimumBusVoltage(OrderedEnum):
    """Minimum DC bus voltage for running the motor."""

    NO_LIMIT = 0x0, "No Limit"
    V4_5 = 0x1, "4.5V"
    V5 = 0x2, "5V"
    V5_5 = 0x3, "5.5V"
    V6 = 0x4, "6V"
    V7_5 = 0x5, "7.5V"
    V10 = 0x6, "10V"
    V12_5 = 0x7, "12.5V"


def _no_limit_last(member: OrderedEnum) -> int:
    """Sort key placing the "no limit" code (0) above every other code."""
    return member.value if member.value else 1 << 8


class MaximumBusVoltage(OrderedEnum):
    """Maximum DC bus voltage for running the motor; "no limit" orders highest."""

    NO_LIMIT = 0x0, "No Limit"
    V20 = 0x1, "20V"
    V22_5 = 0x2, "22.5V"
    V25 = 0x3, "25V"
    V27_5 = 0x4, "27.5V"
    V30 = 0x5, "30V"
    V32_5 = 0x6, "32.5V"
    V35 = 0x7, "35V"

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _no_limit_last(self) < _no_limit_last(other)


class AutoRetryTimes(OrderedEnum):
    """Automatic retry attempts; "no limit" orders highest."""

    NO_LIMIT = 0x0, "No Limit"
    RETRY2 = 0x1, "2"
    RETRY3 = 0x2, "3"
    RETRY5 = 0x3, "5"
    RETRY7 = 0x4, "7"
    RETRY10 = 0x5, "10"
    RETRY15 = 0x6, "15"
    RETRY20 = 0x7, "20"

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _no_limit_last(self) < _no_limit_last(other)


class FaultConfig2(Register):
    """Fault settings, part two."""

    lock1_en = Bits(30, 30, bool)
    lock2_en = Bits(29, 29, bool)
    lock3_en = Bits(28, 28, bool)
    lock_abn_speed = Bits(25, 27, AbnormalSpeedLockThreshold)
    abnormal_bemf_thr = Bits(22, 24, AbnormalBemfThreshold)
    no_mtr_thr = Bits(19, 21, NoMotorThreshold)
    hw_lock_ilimit_mode = Bits(15, 18, LockModeRaw)
    hw_lock_ilimit_deg = Bits(12, 14, HwLockIlimitDeglitchTime)
    min_vm_motor = Bits(8, 10, MinimumBusVoltage)
    # False = latch on undervoltage, True = clear automatically when back in bounds
    min_vm_mode = Bits(7, 7, bool)
    max_vm_motor = Bits(4, 6, MaximumBusVoltage)
    # False = latch on overvoltage, True = clear automatically when back in bounds
    max_vm_mode = Bits(3, 3, bool)
    auto_retry_times = Bits(0, 2, AutoRetryTimes)