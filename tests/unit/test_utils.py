import pytest

from reverseffmi.utils import clamp, cm_to_inches, inches_to_cm, kg_to_lbs, snap_and_clamp, snap_to_step


def test_inch_cm_round_trip() -> None:
    for x in (0.1, 1.0, 60.0, 70.5, 84.0, 152.0, 213.0, 1234.5678):
        assert inches_to_cm(cm_to_inches(x)) == pytest.approx(x, rel=1e-12)
        assert cm_to_inches(inches_to_cm(x)) == pytest.approx(x, rel=1e-12)


def test_conversion_factors() -> None:
    assert inches_to_cm(1.0) == 2.54
    assert cm_to_inches(178.0) == pytest.approx(70.0787, abs=1e-4)
    assert kg_to_lbs(1.0) == 2.20462
    assert kg_to_lbs(100.0) == pytest.approx(220.462)


def test_snap_to_nearest_step() -> None:
    assert snap_to_step(70.08, 60.0, 0.5) == 70.0
    assert snap_to_step(70.3, 60.0, 0.5) == 70.5
    assert snap_to_step(177.6, 152.0, 1.0) == 178.0


def test_snap_ties_round_half_up() -> None:
    # exactly half a step above a grid point goes to the next point
    assert snap_to_step(60.25, 60.0, 0.5) == 60.5
    assert snap_to_step(60.75, 60.0, 0.5) == 61.0
    assert snap_to_step(152.5, 152.0, 1.0) == 153.0
    # towards +inf, also below min
    assert snap_to_step(-0.5, 0.0, 1.0) == 0.0
    assert snap_to_step(-1.5, 0.0, 1.0) == -1.0


def test_snap_is_idempotent_and_on_grid() -> None:
    min_value, step = 15.0, 0.5
    for i in range(400):
        x = 10.0 + i * 0.0537
        once = snap_to_step(x, min_value, step)
        assert snap_to_step(once, min_value, step) == once
        steps = (once - min_value) / step
        assert steps == pytest.approx(round(steps), abs=1e-9)


def test_clamp() -> None:
    assert clamp(5.0, 0.0, 10.0) == 5.0
    assert clamp(-1.0, 0.0, 10.0) == 0.0
    assert clamp(11.0, 0.0, 10.0) == 10.0


def test_snap_then_clamp_stays_in_range_and_on_grid() -> None:
    for x in (-100.0, 59.0, 59.9, 60.0, 72.26, 84.0, 84.4, 500.0):
        v = snap_and_clamp(x, 60.0, 84.0, 0.5)
        assert 60.0 <= v <= 84.0
        assert ((v - 60.0) / 0.5).is_integer()
