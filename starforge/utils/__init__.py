"""Utility functions and constants for Starforge."""

from .constants import AU, EARTH_MASS, EARTH_RADIUS, G, SOLAR_MASS, SOLAR_RADIUS
from .naming import CelestialNamer, belt_name, generate_celestial_name, slugify
from .physics import (
    equilibrium_temperature,
    luminosity_solar,
    orbital_period,
    radius_from_density,
    schwarzschild_radius,
)
from .rng import (
    RandomFn,
    SeededRandom,
    create_seeded_source,
    get_random_in_range,
    get_random_item,
)
from .vectors import Vector3

__all__ = [
    "AU",
    "EARTH_MASS",
    "EARTH_RADIUS",
    "G",
    "SOLAR_MASS",
    "SOLAR_RADIUS",
    "CelestialNamer",
    "belt_name",
    "generate_celestial_name",
    "slugify",
    "equilibrium_temperature",
    "luminosity_solar",
    "orbital_period",
    "radius_from_density",
    "schwarzschild_radius",
    "RandomFn",
    "SeededRandom",
    "create_seeded_source",
    "get_random_in_range",
    "get_random_item",
    "Vector3",
]
