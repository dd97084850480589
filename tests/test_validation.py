import math
import pytest

from orbit_viewer.core.config import EngineConfig
from orbit_viewer.core.errors import DomainError
from orbit_viewer.objects.body import Body
from orbit_viewer.physics.orbit import OrbitalElements


def make_elements(**overrides):
    values = dict(e=0.5, i_deg=10.0, w_deg=20.0, node_deg=30.0, q1_au=1.0, q2_au=3.0)
    values.update(overrides)
    return OrbitalElements(**values)


def test_orbital_elements_rejects_parabolic_and_hyperbolic():
    with pytest.raises(DomainError, match="Eccentricity must be in range"):
        make_elements(e=1.0)

    with pytest.raises(DomainError, match="Eccentricity must be in range"):
        make_elements(e=2.3)


def test_orbital_elements_rejects_negative_eccentricity():
    with pytest.raises(ValueError, match="Eccentricity must be in range"):
        make_elements(e=-0.01)


def test_orbital_elements_rejects_non_finite():
    with pytest.raises(DomainError, match="i_deg must be finite"):
        make_elements(i_deg=math.nan)

    with pytest.raises(DomainError, match="q2_au must be finite"):
        make_elements(q2_au=math.inf)


def test_orbital_elements_rejects_negative_distances():
    with pytest.raises(DomainError, match="must be non-negative"):
        make_elements(q1_au=-1.0)


def test_orbital_elements_accepts_valid_values():
    elements = make_elements()
    assert elements.e == 0.5
    assert elements.node_deg == 30.0


def test_orbital_elements_are_immutable():
    elements = make_elements()
    with pytest.raises(AttributeError):
        elements.e = 0.1


def test_body_validates_id_and_name():
    with pytest.raises(ValueError, match="Body ID cannot be empty"):
        Body("  ", "Encke", make_elements())

    with pytest.raises(ValueError, match="Body name cannot be empty"):
        Body("2P", "", make_elements())


def test_engine_config_validates_sample_count():
    with pytest.raises(ValueError, match="Sample count must be at least 2"):
        EngineConfig(sample_count=1)


def test_engine_config_validates_phase_step():
    with pytest.raises(ValueError, match="Phase step must be positive"):
        EngineConfig(phase_step_rad=0.0)

    with pytest.raises(ValueError, match="Phase step must be positive"):
        EngineConfig(phase_step_rad=math.inf)


def test_engine_config_defaults():
    config = EngineConfig()
    assert config.sample_count == 201
    assert config.phase_step_rad == 0.01
    assert config.rotate_focus_marker is True
