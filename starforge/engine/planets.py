"""Planet and gas giant generation for a single orbital slot."""

import math

from ..models.celestial import CelestialObject
from ..models.enums import CelestialType
from ..schemas.config import ScaleConfig
from ..utils.constants import AU, EARTH_MASS, TWO_PI
from ..utils.naming import CelestialNamer, slugify
from ..utils.physics import radius_from_density
from ..utils.rng import RandomFn, get_random_in_range
from ..utils.vectors import Vector3
from .classifier import determine_planet_type
from .orbits import make_orbit, validate_orbit, world_state
from .rings import create_ring_system, generate_rings
from .surfaces import create_gas_giant_properties, create_rocky_properties, pick_rocky_subtype

# Rotation period bounds, seconds (5 hours to 2 days)
PLANET_ROTATION_RANGE = (18000.0, 172800.0)
PLANET_MAX_TILT_DEG = 45.0
PLANET_MAX_ECCENTRICITY = 0.1
PLANET_INCLINATION_SPAN = 0.1  # Radians, centered on zero


def axial_tilt_vector(tilt_rad: float) -> Vector3:
    """Rotation axis tilted away from +Y by the given angle."""
    return Vector3(0.0, math.cos(tilt_rad), math.sin(tilt_rad))


def generate_planet(
    random: RandomFn,
    namer: CelestialNamer,
    parent_star: CelestialObject,
    distance_au: float,
    system_seed: str,
    scale: ScaleConfig,
) -> list[CelestialObject]:
    """Generate a planet (rocky or giant) orbiting a star.

    Args:
        random: Seeded random source
        namer: Per-system name registry
        parent_star: Star the planet orbits
        distance_au: Orbit radius around the parent star
        system_seed: Seed of the whole system
        scale: Presentation scaling for ring geometry

    Returns:
        The planet, followed by its ring system when one was generated

    Raises:
        InvalidOrbitError: If the planet's orbit is unusable
    """
    base = determine_planet_type(
        random, distance_au, parent_star.temperature_k, parent_star.radius_m
    )
    mass = (0.1 + random() * 10) * (1 + distance_au / 5) * base.mass_factor * EARTH_MASS
    radius = radius_from_density(mass, base.density)

    name = namer.next_name()
    planet_id = f"planet-{parent_star.id}-{slugify(name)}"

    orbit = make_orbit(
        distance_au * AU,
        random() * PLANET_MAX_ECCENTRICITY,
        (random() - 0.5) * PLANET_INCLINATION_SPAN,
        random() * TWO_PI,
        random() * TWO_PI,
        random() * TWO_PI,
        parent_star.mass_kg + mass,
    )
    validate_orbit(orbit, parent_star.radius_m, planet_id)

    rotation_period = get_random_in_range(*PLANET_ROTATION_RANGE, random)
    tilt = math.radians(random() * PLANET_MAX_TILT_DEG)

    if base.is_gas_giant:
        celestial_type = CelestialType.GAS_GIANT
        properties = create_gas_giant_properties(random, base.zone, base.gas_giant_class)
        albedo = get_random_in_range(0.3, 0.5, random)
    else:
        celestial_type = CelestialType.PLANET
        planet_type = base.planet_type or pick_rocky_subtype(random)
        properties = create_rocky_properties(random, planet_type)
        albedo = get_random_in_range(0.1, 0.4, random)

    planet = CelestialObject(
        id=planet_id,
        name=name,
        type=celestial_type,
        mass_kg=mass,
        radius_m=radius,
        temperature_k=base.temperature_k,
        properties=properties,
        state=world_state(parent_star.state, orbit),
        orbit=orbit,
        parent_id=parent_star.id,
        seed=f"{system_seed}-{planet_id}",
        albedo=albedo,
        rotation_period_s=rotation_period,
        axial_tilt=axial_tilt_vector(tilt),
    )

    visual_radius = scale.scale_size(radius, celestial_type)
    rings = generate_rings(random, base.ring_chance, base.ring_types, visual_radius)
    ring_system = create_ring_system(planet, rings, system_seed)
    if ring_system is None:
        return [planet]
    return [planet, ring_system]
