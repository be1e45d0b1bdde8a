"""Keplerian orbit construction, validation and epoch-0 state vectors.

World frame is Y-up: orbits with zero inclination lie in the X/Z plane.
"""

import math

from ..models.orbit import OrbitalParameters, PhysicsState
from ..utils.constants import PERIAPSIS_CLEARANCE
from ..utils.physics import normalize_angle, orbital_period
from ..utils.vectors import Vector3
from .errors import InvalidOrbitError

KEPLER_MAX_ITERATIONS = 50
KEPLER_TOLERANCE = 1e-12


def make_orbit(
    semi_major_axis_m: float,
    eccentricity: float,
    inclination: float,
    longitude_of_ascending_node: float,
    argument_of_periapsis: float,
    mean_anomaly: float,
    total_mass_kg: float,
) -> OrbitalParameters:
    """Build orbital elements with the period from Kepler's third law."""
    return OrbitalParameters(
        semi_major_axis_m=semi_major_axis_m,
        eccentricity=eccentricity,
        inclination=inclination,
        longitude_of_ascending_node=normalize_angle(longitude_of_ascending_node),
        argument_of_periapsis=normalize_angle(argument_of_periapsis),
        mean_anomaly=normalize_angle(mean_anomaly),
        period_s=orbital_period(semi_major_axis_m, total_mass_kg),
    )


def validate_orbit(orbit: OrbitalParameters, parent_radius_m: float, object_id: str):
    """Raise InvalidOrbitError unless the orbit is usable around the parent.

    Args:
        orbit: Orbital elements relative to the parent
        parent_radius_m: Physical radius of the parent body
        object_id: Id of the orbiting object, for the error message
    """
    if not orbit.is_valid():
        raise InvalidOrbitError(
            f"Invalid orbit for {object_id}: a={orbit.semi_major_axis_m}, "
            f"e={orbit.eccentricity}"
        )
    if orbit.period_s <= 0:
        raise InvalidOrbitError(f"Invalid period for {object_id}: {orbit.period_s}")
    if orbit.periapsis_m <= parent_radius_m * PERIAPSIS_CLEARANCE:
        raise InvalidOrbitError(
            f"Periapsis of {object_id} ({orbit.periapsis_m:.3e} m) is within "
            f"{PERIAPSIS_CLEARANCE}x parent radius ({parent_radius_m:.3e} m)"
        )


def solve_kepler(mean_anomaly: float, eccentricity: float) -> float:
    """Solve M = E - e sin E for the eccentric anomaly E (Newton-Raphson)."""
    mean_anomaly = normalize_angle(mean_anomaly)
    eccentric = mean_anomaly if eccentricity < 0.8 else math.pi
    for _ in range(KEPLER_MAX_ITERATIONS):
        f = eccentric - eccentricity * math.sin(eccentric) - mean_anomaly
        step = f / (1 - eccentricity * math.cos(eccentric))
        eccentric -= step
        if abs(step) < KEPLER_TOLERANCE:
            break
    return eccentric


def relative_state(orbit: OrbitalParameters) -> PhysicsState:
    """Position and velocity relative to the parent at epoch 0.

    The gravitational parameter is recovered from the period
    (mu = 4 pi^2 a^3 / T^2) so that the velocity always agrees with the
    orbit's own Kepler period. A zero period or degenerate orbit yields a
    zero state.
    """
    a = orbit.semi_major_axis_m
    e = orbit.eccentricity
    semi_latus_rectum = a * (1 - e * e)
    if orbit.period_s <= 0 or semi_latus_rectum <= 0:
        return PhysicsState()

    mu = 4 * math.pi**2 * a**3 / orbit.period_s**2

    eccentric = solve_kepler(orbit.mean_anomaly, e)
    true_anomaly = 2 * math.atan2(
        math.sqrt(1 + e) * math.sin(eccentric / 2),
        math.sqrt(1 - e) * math.cos(eccentric / 2),
    )
    r = a * (1 - e * math.cos(eccentric))

    node = orbit.longitude_of_ascending_node
    peri = orbit.argument_of_periapsis
    inc = orbit.inclination
    u = peri + true_anomaly

    cos_node, sin_node = math.cos(node), math.sin(node)
    cos_u, sin_u = math.cos(u), math.sin(u)
    cos_i, sin_i = math.cos(inc), math.sin(inc)

    # Reference plane is X/Z, Y is the orbit normal for zero inclination
    position = Vector3(
        r * (cos_node * cos_u - sin_node * sin_u * cos_i),
        r * sin_u * sin_i,
        r * (sin_node * cos_u + cos_node * sin_u * cos_i),
    )

    speed = math.sqrt(mu / semi_latus_rectum)
    sin_term = sin_u + e * math.sin(peri)
    cos_term = cos_u + e * math.cos(peri)
    velocity = Vector3(
        -speed * (cos_node * sin_term + sin_node * cos_term * cos_i),
        speed * cos_term * sin_i,
        -speed * (sin_node * sin_term - cos_node * cos_term * cos_i),
    )
    return PhysicsState(position_m=position, velocity_mps=velocity)


def world_state(parent_state: PhysicsState, orbit: OrbitalParameters) -> PhysicsState:
    """Absolute state: parent's world state plus the relative orbital state."""
    return parent_state + relative_state(orbit)
