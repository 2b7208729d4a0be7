# mcf8316c

Typed register definitions for the MCF8316C-Q1 three-phase sensorless FOC
BLDC motor driver. The package encodes and decodes the 32-bit configuration
registers of the device. It has no dependencies.

## Installation

```
pip install mcf8316c
```

## Concepts

Every register is a subclass of `mcf8316c.register.Register`. A register:

- holds its 32-bit pattern in `raw_value`. Setting `raw_value` to a value
  that is not an `int` raises `TypeError`. Setting it to a value outside
  32 bits raises `ValueError`.
- can be built as `MotorStartup1()` (from the register's reset value),
  as `MotorStartup1(0x1234)`, or with fields given by keyword, for example
  `MotorStartup1(mtr_startup=StartupMode.IPD)`.
- has one attribute for each field, declared with `mcf8316c.register.Bits`.
  Reading a field decodes it. Writing a field encodes it into `raw_value`.
  A value of the wrong type raises `TypeError`. A value too wide for the
  field raises `ValueError`.
- has `value()`, which returns the 32-bit word to send to the device.
  `GdConfig1` and `GdConfig2` set an even-parity bit (bit 31) in that word.
  `GdConfig2` also sends its `buck_ps_dis` bit inverted, because the device
  treats that bit as write-one-to-clear.
- has `from_value(word)`, which builds a register from a word read back
  from the device.
- compares equal to another register of the same class when the raw values
  are the same.

A field with a fixed set of values is an enum. The enums derive from
`mcf8316c.register.DisplayEnum`. `str()` of a member gives the label from
the datasheet, for example `"0.5 A"` or `"Double Align"`, and
`from_bits(n)` returns the member for a bit pattern or raises `ValueError`.
Most enums also derive from `OrderedEnum`, so you can sort them by the
quantity they stand for. For a few of them ("no limit", "auto",
"not defined") the order is special. Some fields are only partly defined
in the datasheet. When such a field holds a reserved bit pattern, reading
it returns `None`.

## Example

```python
from mcf8316c.motor_startup import MotorStartup1, StartupMode, AlignTime
from mcf8316c.common import CurrentSelection

reg = MotorStartup1.from_value(0)
reg.mtr_startup = StartupMode.IPD
reg.align_time = AlignTime.MS500
reg.align_or_slow_current_ilimit = CurrentSelection.A1_5

word = reg.value()            # write `word` to the device with your I2C stack

readback = MotorStartup1.from_value(word)
assert readback == reg
print(readback.mtr_startup)   # IPD
```

## Lock modes

The 4-bit lock mode fields use `mcf8316c.lock_mode.LockModeRaw`. Several of
its bit patterns mean the same thing, and those compare equal. For a simpler
view, convert a raw value with `lock_mode_from_raw` (or `LockModeRaw.mode()`).
It returns one of `LockEnable`, `LockReport` or `LockDisable`.
`lock_mode_to_raw` converts back to the canonical code.

```python
from mcf8316c.lock_mode import (
    LockEnable, LockIlimitDriverMode, lock_mode_to_raw, lock_mode_from_raw,
)

raw = lock_mode_to_raw(LockEnable(auto_retry=True,
                                  driver_mode=LockIlimitDriverMode.LOW_SIDE_BRAKE))
assert lock_mode_from_raw(raw) == LockEnable(True, LockIlimitDriverMode.LOW_SIDE_BRAKE)
```

## Percentages and split fields

`mcf8316c.percent.PercentAsU8` stores a percentage as a byte from 0 to 255.
Calling `float()` on it gives the percentage, so 255 gives 100.0. The
datasheet splits a few reference-profile values across two registers. For
those values, `combine_duty_a` / `split_duty_a`, `combine_duty_e` /
`split_duty_e` and `combine_ref_b` / `split_ref_b` join and separate the
parts. The parts are `DutyAHigh5`, `DutyALow3`, `DutyEHigh4`, `DutyELow4`,
`RefBHigh7` and `RefBLow1`.

## Modules

| Module | Contents |
| --- | --- |
| `mcf8316c.register` | `Register`, `Bits`, `DisplayEnum`, `OrderedEnum` |
| `mcf8316c.common` | `CurrentSelection`, `OpenLoopAccelerationA1`, `OpenLoopAccelerationA2` |
| `mcf8316c.lock_mode` | `LockModeRaw`, `LockEnable`, `LockReport`, `LockDisable` |
| `mcf8316c.percent` | `PercentAsU8` and the split parts |
| `mcf8316c.motor_startup` | `MotorStartup1`, `MotorStartup2` |
| `mcf8316c.rev_drive_config` | `RevDriveConfig` |
| `mcf8316c.ref_profiles` | `RefProfiles1` to `RefProfiles6` |
| `mcf8316c.fault_config` | `FaultConfig1`, `FaultConfig2` |
| `mcf8316c.device_config` | `DeviceConfig1`, `DeviceConfig2` |
| `mcf8316c.gd_config` | `GdConfig1`, `GdConfig2` |
| `mcf8316c.pin_config` | `PinConfig` |
| `mcf8316c.peri_config` | `PeriConfig1` |
| `mcf8316c.int_algo` | `IntAlgo1`, `IntAlgo2` |

## What this package does not do

The package only models register contents. It does not:

- define the registers' addresses. The register classes have no `ADDRESS`
  value, so you must look up each address in the datasheet.
- talk to the device or drive an I2C bus.
- build I2C command frames or CRCs.

## Running the tests

```
pip install -e .[test]
pytest
```