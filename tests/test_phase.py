import math
import pytest

from orbit_viewer.physics.phase import OrbitalPhase, advance_phase


def test_advance_default_step():
    assert advance_phase(0.0) == 0.01


def test_advance_is_additive():
    p, s = 1.234, 0.01
    assert math.isclose(advance_phase(advance_phase(p, s), s), advance_phase(p, 2 * s), abs_tol=1e-12)


def test_no_wrap_past_two_pi():
    assert advance_phase(2 * math.pi, 0.5) > 2 * math.pi


def test_phase_cell_starts_at_zero():
    phase = OrbitalPhase()
    assert phase.theta_rad == 0.0
    assert phase.tick == 0


def test_phase_cell_is_replaced_not_mutated():
    phase = OrbitalPhase()
    nxt = phase.advanced(0.25)
    assert phase.theta_rad == 0.0
    assert nxt.theta_rad == 0.25
    assert nxt.tick == 1


def test_phase_cell_rejects_nan():
    with pytest.raises(ValueError, match="Phase must be finite"):
        OrbitalPhase(theta_rad=math.nan)
