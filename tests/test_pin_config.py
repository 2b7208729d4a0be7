import pytest

from mcf8316c.pin_config import (
    BrakeInput,
    FgFaultConfig,
    FgIdleConfig,
    PinConfig,
    SpeedMode,
)


def test_defaults():
    reg = PinConfig()
    assert reg.raw_value == 0
    assert reg.speed_mode is SpeedMode.ANALOG
    assert reg.brake_input is BrakeInput.PIN
    assert reg.fg_idle_config is FgIdleConfig.FG_CONFIG
    assert reg.fg_fault_config is FgFaultConfig.FG_LAST
    assert reg.vdc_filter_disable is False


def test_speed_mode_occupies_low_bits():
    reg = PinConfig(speed_mode=SpeedMode.I2C)
    assert reg.value() == SpeedMode.I2C.value
    assert PinConfig.from_value(reg.value()).speed_mode is SpeedMode.I2C


def test_vdc_filter_bit():
    assert PinConfig.from_value(1 << 27).vdc_filter_disable is True


def test_round_trip_all_fields():
    reg = PinConfig(
        vdc_filter_disable=True,
        fg_idle_config=FgIdleConfig.FG_HIGH_2,
        fg_fault_config=FgFaultConfig.FG_CONFIG,
        alarm_pin_en=True,
        brake_pin_mode=True,
        align_brake_angle_sel=True,
        brake_input=BrakeInput.OVERRIDE_NO_BRAKE,
        speed_mode=SpeedMode.FREQUENCY,
    )
    again = PinConfig.from_value(reg.value())
    assert again == reg
    assert again.fg_idle_config is FgIdleConfig.FG_HIGH_2
    assert again.brake_input is BrakeInput.OVERRIDE_NO_BRAKE
    assert again.alarm_pin_en is True


def test_setting_field_keeps_others():
    reg = PinConfig(alarm_pin_en=True)
    reg.speed_mode = SpeedMode.PWM
    assert reg.alarm_pin_en is True
    assert reg.speed_mode is SpeedMode.PWM


def test_duplicate_codes_share_label_but_differ():
    high = FgIdleConfig.from_bits(1)
    high_2 = FgIdleConfig.from_bits(3)
    assert high is FgIdleConfig.FG_HIGH
    assert high_2 is FgIdleConfig.FG_HIGH_2
    assert str(high) == str(high_2)
    assert high != high_2
    assert str(BrakeInput.from_bits(3)) == "Hardware Pin BRAKE"


def test_labels():
    assert str(SpeedMode.from_bits(1)) == "Controlled by duty cycle (PWM) on SPEED pin"
    assert str(FgFaultConfig.from_bits(2)) == "FG is pulled Low"


def test_wrong_enum_type_rejected():
    with pytest.raises(TypeError):
        PinConfig(fg_idle_config=FgFaultConfig.FG_HIGH)


def test_enums_are_unordered():
    analog = SpeedMode.from_bits(0)
    assert analog is SpeedMode.ANALOG
    with pytest.raises(TypeError):
        analog < SpeedMode.PWM  # noqa: B015