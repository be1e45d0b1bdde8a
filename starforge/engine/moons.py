"""Moon generation around planets and gas giants."""

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional

from ..models.celestial import CelestialObject
from ..models.enums import CelestialType, PlanetType
from ..utils.constants import (
    CAPTURED_MOON_CHANCE,
    MAX_MOONS,
    MIN_MOON_HOST_DISTANCE_AU,
    TWO_PI,
)
from ..utils.naming import CelestialNamer, slugify
from ..utils.physics import radius_from_density
from ..utils.rng import RandomFn, get_random_in_range, get_random_item
from .diagnostics import GenerationDiagnostics
from .errors import InvalidOrbitError
from .orbits import make_orbit, validate_orbit, world_state
from .planets import axial_tilt_vector
from .surfaces import create_rocky_properties

logger = logging.getLogger(__name__)

MOON_TYPES = [PlanetType.ROCKY, PlanetType.ICE, PlanetType.BARREN]
MOON_ROTATION_RANGE = (72000.0, 1800000.0)  # 20 hours to ~21 days
MOON_MAX_TILT_DEG = 90.0
# Starting orbit distance, in parent radii, before the first moon's spacing
INITIAL_MOON_DISTANCE_RADII = 1.0


@dataclass
class MoonResult:
    """Outcome of one moon attempt."""

    moon: Optional[CelestialObject]
    distance_radii: float  # Orbit distance the next attempt builds on


def roll_moon_count(random: RandomFn, distance_au: float) -> int:
    """Moon attempts for a planet: 0 inside 0.3 AU, otherwise 0-4."""
    if distance_au < MIN_MOON_HOST_DISTANCE_AU:
        return 0
    return min(MAX_MOONS, int(random() * (MAX_MOONS + 1)))


def generate_moon(
    random: RandomFn,
    namer: CelestialNamer,
    planet: CelestialObject,
    last_distance_radii: float,
    system_seed: str,
    diagnostics: Optional[GenerationDiagnostics] = None,
) -> MoonResult:
    """Attempt to place one moon beyond the previous one.

    A rejected attempt returns no moon and leaves the distance unchanged.
    An orbit that fails validation is recorded in ``diagnostics`` when given.
    """
    if planet.mass_kg <= 0 or planet.radius_m <= 0:
        logger.debug(f"Skipping moon for {planet.id}: invalid parent mass or radius")
        return MoonResult(None, last_distance_radii)

    captured = random() < CAPTURED_MOON_CHANCE
    mass = planet.mass_kg * (0.00001 + random() * (0.0005 if captured else 0.001))
    if captured:
        density = 2500 + random() * 1500
    else:
        density = 1500 + random() * 2000
    radius = radius_from_density(mass, density)

    distance_radii = last_distance_radii + 1.5 + random() * 5
    orbit = make_orbit(
        distance_radii * planet.radius_m,
        random() * (0.2 if captured else 0.05),
        (random() - 0.5) * (0.5 if captured else 0.1),
        random() * TWO_PI,
        random() * TWO_PI,
        random() * TWO_PI,
        planet.mass_kg + mass,
    )
    try:
        validate_orbit(orbit, planet.radius_m, f"moon of {planet.id}")
    except InvalidOrbitError as exc:
        if diagnostics is not None:
            diagnostics.record("moons", None, f"moon of {planet.id} skipped: {exc}")
        else:
            logger.debug(f"Rejected moon: {exc}")
        return MoonResult(None, last_distance_radii)

    moon_type = PlanetType.BARREN if captured else get_random_item(MOON_TYPES, random)
    name = namer.next_name()
    moon_id = f"moon-{planet.id}-{slugify(name)}"

    moon = CelestialObject(
        id=moon_id,
        name=name,
        type=CelestialType.MOON,
        mass_kg=mass,
        radius_m=radius,
        temperature_k=planet.temperature_k,
        properties=create_rocky_properties(
            random, moon_type, is_moon=True, parent_planet=planet.id
        ),
        state=world_state(planet.state, orbit),
        orbit=orbit,
        parent_id=planet.id,
        seed=f"{system_seed}-{moon_id}",
        albedo=get_random_in_range(0.1, 0.6, random),
        rotation_period_s=get_random_in_range(*MOON_ROTATION_RANGE, random),
        axial_tilt=axial_tilt_vector(math.radians(random() * MOON_MAX_TILT_DEG)),
    )
    return MoonResult(moon, distance_radii)


def generate_moons(
    random: RandomFn,
    namer: CelestialNamer,
    planet: CelestialObject,
    distance_au: float,
    system_seed: str,
    diagnostics: Optional[GenerationDiagnostics] = None,
) -> Iterator[CelestialObject]:
    """Lazily yield the accepted moons of a planet, innermost first.

    Args:
        random: Seeded random source
        namer: Per-system name registry
        planet: Host planet or gas giant
        distance_au: Host's orbit radius around its star
        system_seed: Seed of the whole system
        diagnostics: Run log for moons skipped over invalid orbits
    """
    distance_radii = INITIAL_MOON_DISTANCE_RADII
    for _ in range(roll_moon_count(random, distance_au)):
        result = generate_moon(
            random, namer, planet, distance_radii, system_seed, diagnostics
        )
        distance_radii = result.distance_radii
        if result.moon is not None:
            yield result.moon
