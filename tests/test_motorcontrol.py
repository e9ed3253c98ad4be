import math

import pytest

from emblib.mathutil import UnsignedPerUnit
from emblib.motorcontrol import (
    MotorAngle,
    MotorSpeed,
    Phase3,
    VecAlpha,
    VecAlphaBeta,
    VecDq,
    calculate_sinpwm,
    calculate_svpwm,
    clarke_transform,
    compensate_deadtime_v1,
    compensate_deadtime_v2,
    invclarke_transform,
    invpark_transform,
    park_transform,
    to_eradps,
    to_rpm,
)
from emblib.units import Edeg, Erad, Eradps, Mdeg, Mrad, Rpm


def test_one_revolution_per_second_is_two_pi():
    assert to_eradps(60.0, 1) == pytest.approx(2 * math.pi)


@pytest.mark.parametrize("p", [1, 2, 4, 7])
def test_speed_conversion_round_trip(p):
    assert to_rpm(to_eradps(1234.5, p), p) == pytest.approx(1234.5)


def test_speed_conversion_keeps_units():
    w = to_eradps(Rpm(300.0), 3)
    assert isinstance(w, Eradps)
    back = to_rpm(w, 3)
    assert isinstance(back, Rpm)
    assert back.value == pytest.approx(300.0)


def test_speed_conversion_rejects_wrong_unit():
    with pytest.raises(TypeError):
        to_eradps(Eradps(1.0), 2)
    with pytest.raises(TypeError):
        to_rpm(Rpm(1.0), 2)


def test_motor_speed_round_trip():
    speed = MotorSpeed(4, Rpm(1500.0))
    assert speed.rpm().value == pytest.approx(1500.0)
    assert speed.eradps().value == pytest.approx(to_eradps(1500.0, 4))
    speed.set(Eradps(100.0))
    assert speed.eradps() == Eradps(100.0)
    assert speed.rpm().value == pytest.approx(to_rpm(100.0, 4))


def test_motor_speed_default_is_zero_and_scales():
    assert MotorSpeed(2).eradps() == Eradps(0.0)
    speed = MotorSpeed(2, Eradps(50.0))
    assert (speed * 2).eradps() == Eradps(100.0)
    assert (2 * speed).eradps() == Eradps(100.0)
    assert (speed / 2).eradps() == Eradps(25.0)
    assert (speed * 2).p == 2


def test_motor_speed_rejects_bad_input():
    with pytest.raises(TypeError):
        MotorSpeed(2, Erad(1.0))
    with pytest.raises(ValueError):
        MotorSpeed(0)


@pytest.mark.parametrize(
    "value,reader",
    [
        (Erad(1.25), "erad"),
        (Mrad(0.4), "mrad"),
        (Edeg(45.0), "edeg"),
        (Mdeg(10.0), "mdeg"),
    ],
)
def test_motor_angle_round_trip(value, reader):
    angle = MotorAngle(3, value)
    assert getattr(angle, reader)().value == pytest.approx(value.value)


def test_motor_angle_electrical_is_pole_pairs_times_mechanical():
    angle = MotorAngle(4, Mrad(0.5))
    assert angle.erad().value == pytest.approx(4 * angle.mrad().value)
    assert angle.edeg().value == pytest.approx(4 * angle.mdeg().value)
    assert angle.edeg().value == pytest.approx(math.degrees(angle.erad().value))


def test_motor_angle_rejects_speed():
    with pytest.raises(TypeError):
        MotorAngle(2).set(Rpm(1.0))


@pytest.mark.parametrize("theta", [0.0, 0.3, 1.7, -2.5, 4.0])
def test_park_round_trip(theta):
    v = VecAlphaBeta(0.8, -0.3)
    s, c = math.sin(theta), math.cos(theta)
    back = invpark_transform(park_transform(v, s, c), s, c)
    assert back.alpha == pytest.approx(v.alpha)
    assert back.beta == pytest.approx(v.beta)


def test_park_at_zero_angle_is_identity():
    dq = park_transform(VecAlphaBeta(0.7, 0.2), 0.0, 1.0)
    assert dq == VecDq(0.7, 0.2)


def test_clarke_round_trip_for_balanced_phases():
    a, b, c = 1.0, -0.25, -0.75
    back = invclarke_transform(clarke_transform(a, b, c))
    assert back == pytest.approx((a, b, c))


def test_clarke_forms_agree():
    a, b, c = 0.6, 0.2, -0.8
    three = clarke_transform(a, b, c)
    seq = clarke_transform([a, b, c])
    two = clarke_transform(a, b)
    assert three == seq
    assert two.alpha == pytest.approx(three.alpha)
    assert two.beta == pytest.approx(three.beta)


def test_invclarke_phases_sum_to_zero():
    phases = invclarke_transform(VecAlphaBeta(0.9, -0.4))
    assert sum(phases) == pytest.approx(0.0)
    assert phases[Phase3.A] == 0.9


def test_sinpwm_zero_vector():
    duties = calculate_sinpwm(VecAlphaBeta(0.0, 0.0), 100.0)
    assert duties == (UnsignedPerUnit(0.0),) * 3


def test_svpwm_zero_vector_centres_duty():
    duties = calculate_svpwm(VecAlpha(0.0, 1.0), 100.0)
    assert [d.value for d in duties] == pytest.approx([0.5, 0.5, 0.5])


@pytest.mark.parametrize("theta", [i * 0.37 for i in range(20)] + [-1.0, 7.0])
def test_svpwm_duties_stay_in_unit_interval(theta):
    duties = calculate_svpwm(VecAlpha(1e6, theta), 100.0)
    assert all(0.0 <= d.value <= 1.0 for d in duties)


def test_svpwm_sector_zero_ordering():
    a, b, c = calculate_svpwm(VecAlpha(30.0, 0.2), 100.0)
    assert a.value >= b.value >= c.value


def test_deadtime_v1_follows_current_sign():
    duty = UnsignedPerUnit(0.5)
    out = compensate_deadtime_v1((duty, duty, duty), (5.0, -5.0, 0.05), 0.1, 1e-4, 1e-6)
    assert out[0] > duty
    assert out[1] < duty
    assert out[2] == duty


def test_deadtime_v2_corrects_single_phase():
    duty = UnsignedPerUnit(0.5)
    dutycycles = (duty, duty, duty)
    out = compensate_deadtime_v2(dutycycles, (10.0, -3.0, -4.0), 0.0, 1e-4, 1e-6)
    assert out[0] > duty
    assert out[1:] == (duty, duty)
    out = compensate_deadtime_v2(dutycycles, (3.0, 4.0, -10.0), 0.0, 1e-4, 1e-6)
    assert out[2] < duty
    assert out[:2] == (duty, duty)


def test_deadtime_v2_balanced_currents_unchanged():
    duty = UnsignedPerUnit(0.3)
    out = compensate_deadtime_v2((duty,) * 3, (1.0, 0.0, -1.0), 0.0, 1e-4, 1e-6)
    assert out == (duty,) * 3