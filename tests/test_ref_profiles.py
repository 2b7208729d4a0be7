import pytest

from mcf8316c.percent import DutyAHigh5, DutyALow3, PercentAsU8, RefBHigh7
from mcf8316c.ref_profiles import (
    DutyHysteresis,
    RefProfileConfig,
    RefProfiles1,
    RefProfiles2,
    RefProfiles3,
    RefProfiles4,
    RefProfiles5,
    RefProfiles6,
)


def test_default_is_zero():
    registers = [
        RefProfiles1(),
        RefProfiles2(),
        RefProfiles3(),
        RefProfiles4(),
        RefProfiles5(),
        RefProfiles6(),
    ]
    assert [reg.raw_value for reg in registers] == [0] * 6
    assert [reg.value() for reg in registers] == [0] * 6


@pytest.mark.parametrize("word", [0, 0x12345678, 0x7FFFFFFF])
def test_from_value_round_trip(word):
    registers = [
        RefProfiles1.from_value(word),
        RefProfiles2.from_value(word),
        RefProfiles3.from_value(word),
        RefProfiles4.from_value(word),
        RefProfiles5.from_value(word),
        RefProfiles6.from_value(word),
    ]
    for reg in registers:
        assert reg.value() == word
        assert reg.from_value(reg.value()) == reg


def test_ref_profile_config_position():
    reg = RefProfiles1.from_value(0x6000_0000)
    assert reg.ref_profile_config is RefProfileConfig.FORWARD_REVERSE
    assert reg.duty_on1 == PercentAsU8(0)


def test_percent_fields_round_trip_and_stay_apart():
    reg = RefProfiles1(
        duty_on1=PercentAsU8(200),
        duty_off1=PercentAsU8(17),
        duty_clamp1=PercentAsU8(255),
    )
    assert reg.duty_on1 == PercentAsU8(200)
    assert reg.duty_off1 == PercentAsU8(17)
    assert reg.duty_clamp1 == PercentAsU8(255)
    assert reg.duty_a == DutyAHigh5(0)
    assert reg.ref_profile_config is RefProfileConfig.REF_EQ


def test_duty_a_spans_two_registers():
    duty = PercentAsU8(0xB5)
    high, low = duty.split_duty_a()
    r1 = RefProfiles1(duty_a=high)
    r2 = RefProfiles2(duty_a=low)
    assert PercentAsU8.combine_duty_a(r1.duty_a, r2.duty_a) == duty


def test_duty_e_spans_two_registers():
    duty = PercentAsU8(0x9C)
    high, low = duty.split_duty_e()
    r2 = RefProfiles2(duty_e=high)
    r3 = RefProfiles3(duty_e=low)
    assert PercentAsU8.combine_duty_e(r2.duty_e, r3.duty_e) == duty


@pytest.mark.parametrize("value", [0, 1, 0x80, 0xFF])
def test_ref_b_spans_two_registers(value):
    ref = PercentAsU8(value)
    high, low = ref.split_ref_b()
    r4 = RefProfiles4(ref_b=high)
    r5 = RefProfiles5(ref_b=low)
    assert PercentAsU8.combine_ref_b(r4.ref_b, r5.ref_b) == ref


def test_ref_b_low_bit_is_top_of_register():
    reg = RefProfiles5.from_value(0x4000_0000)
    assert reg.ref_b.inner == 1
    assert reg.ref_c == PercentAsU8(0)


def test_profiles3_fields():
    reg = RefProfiles3(duty_on2=PercentAsU8(10), duty_hys=DutyHysteresis.P2)
    assert reg.duty_hys is DutyHysteresis.P2
    assert reg.duty_on2 == PercentAsU8(10)
    reg.duty_hys = DutyHysteresis.P0
    assert reg.duty_hys is DutyHysteresis.P0
    assert reg.duty_on2 == PercentAsU8(10)


def test_profiles4_and_6_fields():
    r4 = RefProfiles4(ref_off1=PercentAsU8(1), ref_clamp1=PercentAsU8(2), ref_a=PercentAsU8(3),
                      ref_b=RefBHigh7(127))
    assert (r4.ref_off1, r4.ref_clamp1, r4.ref_a) == (PercentAsU8(1), PercentAsU8(2), PercentAsU8(3))
    assert r4.ref_b == RefBHigh7(127)
    r6 = RefProfiles6(ref_off2=PercentAsU8(255), ref_clamp2=PercentAsU8(128))
    assert r6.ref_off2 == PercentAsU8(255)
    assert r6.ref_clamp2 == PercentAsU8(128)


def test_wrong_field_type_rejected():
    with pytest.raises(TypeError):
        RefProfiles1(duty_on1=50)
    with pytest.raises(TypeError):
        RefProfiles1(duty_a=DutyALow3(1))


def test_unknown_field_rejected():
    with pytest.raises(TypeError):
        RefProfiles6(duty_on1=PercentAsU8(1))


def test_labels():
    assert str(RefProfileConfig.from_bits(0x2)) == "Staircase Profile"
    assert str(RefProfileConfig.from_bits(0x3)) == "Forward-Reverse Profile"
    assert str(DutyHysteresis.from_bits(0x1)) == "0.5%"


def test_profile_config_unordered_hysteresis_ordered():
    with pytest.raises(TypeError):
        RefProfileConfig.from_bits(0x1) < RefProfileConfig.from_bits(0x2)
    assert (
        DutyHysteresis.from_bits(0)
        < DutyHysteresis.from_bits(1)
        < DutyHysteresis.from_bits(2)
        < DutyHysteresis.from_bits(3)
    )
    assert max(DutyHysteresis) is DutyHysteresis.P2