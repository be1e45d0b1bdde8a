"""Tests for physics helpers and Keplerian state vectors."""

import math

import pytest

from starforge.engine.errors import InvalidOrbitError
from starforge.engine.orbits import (
    make_orbit,
    relative_state,
    solve_kepler,
    validate_orbit,
    world_state,
)
from starforge.models import OrbitalParameters, PhysicsState
from starforge.utils import (
    AU,
    EARTH_MASS,
    EARTH_RADIUS,
    G,
    SOLAR_MASS,
    SOLAR_RADIUS,
    Vector3,
    equilibrium_temperature,
    luminosity_solar,
    orbital_period,
    radius_from_density,
    schwarzschild_radius,
)


def _dot(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


class TestPhysics:
    """Test scalar astrophysics helpers."""

    def test_earth_orbital_period(self):
        """Test Kepler's third law gives about one year for Earth."""
        period = orbital_period(AU, SOLAR_MASS + EARTH_MASS)
        assert period / 86400 == pytest.approx(365.25, rel=0.005)

    def test_period_zero_for_invalid_input(self):
        """Test that non-positive inputs give a zero period."""
        assert orbital_period(0, SOLAR_MASS) == 0.0
        assert orbital_period(AU, 0) == 0.0

    def test_radius_from_density_earth(self):
        """Test that Earth's mass and mean density give Earth's radius."""
        assert radius_from_density(EARTH_MASS, 5514) == pytest.approx(EARTH_RADIUS, rel=0.01)

    def test_radius_from_density_invalid(self):
        """Test that zero density is rejected."""
        with pytest.raises(ValueError, match="Invalid mass/density"):
            radius_from_density(EARTH_MASS, 0)

    def test_schwarzschild_radius_sun(self):
        """Test the Sun's Schwarzschild radius is about 2.95 km."""
        assert schwarzschild_radius(SOLAR_MASS) == pytest.approx(2954, rel=0.01)

    def test_solar_luminosity(self):
        """Test Stefan-Boltzmann luminosity of the Sun is about 1 L_sun."""
        assert luminosity_solar(SOLAR_RADIUS, 5772) == pytest.approx(1.0, rel=0.01)

    def test_equilibrium_temperature_earth(self):
        """Test the blackbody temperature at 1 AU from the Sun is about 278 K."""
        assert equilibrium_temperature(SOLAR_RADIUS, 5772, 1.0) == pytest.approx(278, abs=5)

    def test_equilibrium_temperature_falls_with_distance(self):
        """Test temperature drops as 1/sqrt(d)."""
        near = equilibrium_temperature(SOLAR_RADIUS, 5772, 1.0)
        far = equilibrium_temperature(SOLAR_RADIUS, 5772, 4.0)
        assert far == pytest.approx(near / 2)


class TestKepler:
    """Test the Kepler solver and state vectors."""

    def test_solve_kepler_satisfies_equation(self):
        """Test that E - e sin E equals M."""
        for e in (0.0, 0.3, 0.7, 0.95):
            for m in (0.1, 1.0, 3.0, 5.5):
                eccentric = solve_kepler(m, e)
                assert eccentric - e * math.sin(eccentric) == pytest.approx(m, abs=1e-9)

    def test_make_orbit_normalizes_angles(self):
        """Test that angles are wrapped into [0, 2 pi)."""
        orbit = make_orbit(AU, 0.1, 0.0, -1.0, 7.0, 2 * math.pi, SOLAR_MASS)
        for angle in (
            orbit.longitude_of_ascending_node,
            orbit.argument_of_periapsis,
            orbit.mean_anomaly,
        ):
            assert 0 <= angle < 2 * math.pi
        assert orbit.period_s == pytest.approx(orbital_period(AU, SOLAR_MASS))

    def test_circular_orbit_state(self):
        """Test radius, speed and perpendicularity for a circular orbit."""
        orbit = make_orbit(AU, 0.0, 0.3, 1.0, 0.5, 2.0, SOLAR_MASS)
        state = relative_state(orbit)

        assert state.position_m.length() == pytest.approx(AU, rel=1e-9)
        assert state.velocity_mps.length() == pytest.approx(
            math.sqrt(G * SOLAR_MASS / AU), rel=1e-9
        )
        assert _dot(state.position_m, state.velocity_mps) == pytest.approx(
            0.0, abs=1e-6 * AU * state.velocity_mps.length()
        )

    def test_state_at_periapsis(self):
        """Test that mean anomaly 0 puts the body at periapsis."""
        orbit = make_orbit(AU, 0.3, 0.0, 0.0, 0.0, 0.0, SOLAR_MASS)
        state = relative_state(orbit)
        assert state.position_m.length() == pytest.approx(0.7 * AU, rel=1e-9)

    def test_vis_viva(self):
        """Test speed matches the vis-viva equation for an eccentric orbit."""
        orbit = make_orbit(2 * AU, 0.4, 0.2, 0.3, 1.1, 2.5, SOLAR_MASS)
        state = relative_state(orbit)
        r = state.position_m.length()
        expected = math.sqrt(G * SOLAR_MASS * (2 / r - 1 / (2 * AU)))
        assert state.velocity_mps.length() == pytest.approx(expected, rel=1e-6)

    def test_zero_inclination_stays_in_plane(self):
        """Test that an uninclined orbit has no Y (up) component."""
        orbit = make_orbit(AU, 0.2, 0.0, 0.7, 1.3, 2.1, SOLAR_MASS)
        state = relative_state(orbit)
        assert state.position_m.y == pytest.approx(0.0, abs=1e-3)
        assert state.velocity_mps.y == pytest.approx(0.0, abs=1e-9)

    def test_zero_period_gives_zero_state(self):
        """Test that a degenerate orbit yields a zero state."""
        orbit = make_orbit(AU, 0.1, 0.0, 0.0, 0.0, 0.0, 0.0)
        state = relative_state(orbit)
        assert state.position_m == Vector3()
        assert state.velocity_mps == Vector3()

    def test_world_state_adds_parent(self):
        """Test that the world state is offset by the parent state."""
        orbit = make_orbit(AU, 0.0, 0.0, 0.0, 0.0, 0.0, SOLAR_MASS)
        parent = PhysicsState(Vector3(1e9, 2e9, 3e9), Vector3(10.0, 20.0, 30.0))
        relative = relative_state(orbit)
        state = world_state(parent, orbit)
        assert state.position_m == parent.position_m + relative.position_m
        assert state.velocity_mps == parent.velocity_mps + relative.velocity_mps


class TestValidateOrbit:
    """Test orbit validation."""

    def test_valid_orbit_passes(self):
        """Test that a normal orbit passes."""
        orbit = make_orbit(AU, 0.1, 0.0, 0.0, 0.0, 0.0, SOLAR_MASS)
        validate_orbit(orbit, SOLAR_RADIUS, "planet-x")

    def test_eccentricity_one_rejected(self):
        """Test that e = 1 is rejected."""
        orbit = OrbitalParameters(AU, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0)
        with pytest.raises(InvalidOrbitError, match="Invalid orbit"):
            validate_orbit(orbit, SOLAR_RADIUS, "planet-x")

    def test_periapsis_inside_parent_rejected(self):
        """Test that a periapsis within 1.1 parent radii is rejected."""
        orbit = make_orbit(1.5 * SOLAR_RADIUS, 0.5, 0.0, 0.0, 0.0, 0.0, SOLAR_MASS)
        with pytest.raises(InvalidOrbitError, match="Periapsis"):
            validate_orbit(orbit, SOLAR_RADIUS, "planet-x")

    def test_zero_period_rejected(self):
        """Test that a massless parent (zero period) is rejected."""
        orbit = make_orbit(AU, 0.1, 0.0, 0.0, 0.0, 0.0, 0.0)
        with pytest.raises(InvalidOrbitError, match="period"):
            validate_orbit(orbit, SOLAR_RADIUS, "planet-x")

    def test_invalid_orbit_is_value_error(self):
        """Test that InvalidOrbitError can be caught as ValueError."""
        assert issubclass(InvalidOrbitError, ValueError)
