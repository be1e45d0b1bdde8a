"""Asteroid belt and Oort cloud generation."""

from ..models.celestial import CelestialObject
from ..models.enums import CelestialType, RockyType
from ..models.orbit import PhysicsState
from ..models.properties import AsteroidFieldProperties, OortCloudProperties
from ..utils.constants import (
    AU,
    OORT_CLOUD_MIN_INNER_AU,
    OORT_CLOUD_OUTER_RANGE_AU,
    ROCKY_TYPE_COLORS,
    ROCKY_TYPE_COMPOSITION,
    TWO_PI,
)
from ..utils.naming import CelestialNamer, belt_name, slugify
from ..utils.rng import RandomFn, get_random_in_range, get_random_item
from .orbits import make_orbit, validate_orbit, world_state

BELT_TYPES = [RockyType.LIGHT_ROCK, RockyType.DARK_ROCK, RockyType.ICE, RockyType.METALLIC]

OORT_CLOUD_COMPOSITION = ["water ice", "methane ice", "ammonia ice", "carbon monoxide ice"]
OORT_CLOUD_TEMPERATURE_K = 5.0


def generate_asteroid_belt(
    random: RandomFn,
    namer: CelestialNamer,
    parent_star: CelestialObject,
    belt_index: int,
    distance_au: float,
    system_seed: str,
) -> CelestialObject:
    """Generate an asteroid belt centered on the given distance from a star.

    Raises:
        InvalidOrbitError: If the belt's orbit is unusable
    """
    name = namer.reserve(belt_name(belt_index))
    belt_id = f"asteroidbelt-{parent_star.id}-{slugify(name)}"
    belt_type = get_random_item(BELT_TYPES, random)

    half_width = 0.2 + random() * 0.8
    inner_au = max(0.0, distance_au - half_width)
    outer_au = distance_au + half_width
    height_au = 0.1 + random() * 0.4
    count = 1000 + int(random() * 4000)

    orbit = make_orbit(
        distance_au * AU,
        random() * 0.05,
        (random() - 0.5) * 0.02,
        random() * TWO_PI,
        random() * TWO_PI,
        random() * TWO_PI,
        parent_star.mass_kg,
    )
    validate_orbit(orbit, parent_star.radius_m, belt_id)

    return CelestialObject(
        id=belt_id,
        name=name,
        type=CelestialType.ASTEROID_FIELD,
        mass_kg=0.0,
        radius_m=outer_au * AU,
        temperature_k=max(2.7, 150.0 - distance_au * 10.0),
        properties=AsteroidFieldProperties(
            inner_radius_au=inner_au,
            outer_radius_au=outer_au,
            height_au=height_au,
            count=count,
            color=ROCKY_TYPE_COLORS[belt_type.value],
            composition=list(ROCKY_TYPE_COMPOSITION[belt_type.value]),
            belt_type=belt_type,
        ),
        state=world_state(parent_star.state, orbit),
        orbit=orbit,
        parent_id=parent_star.id,
        seed=f"{system_seed}-{belt_id}",
    )


def generate_oort_cloud(
    random: RandomFn,
    primary: CelestialObject,
    outermost_au: float,
    system_seed: str,
) -> CelestialObject:
    """Generate a spherical cometary cloud around the main star.

    The cloud has no independent orbit and shares the main star's state.
    """
    inner_au = max(OORT_CLOUD_MIN_INNER_AU, outermost_au * 2)
    outer_au = max(inner_au * 2, get_random_in_range(*OORT_CLOUD_OUTER_RANGE_AU, random))
    cloud_id = f"oortcloud-{primary.id}"
    return CelestialObject(
        id=cloud_id,
        name=f"{primary.name} Oort Cloud",
        type=CelestialType.OORT_CLOUD,
        mass_kg=0.0,
        radius_m=outer_au * AU,
        temperature_k=OORT_CLOUD_TEMPERATURE_K,
        properties=OortCloudProperties(
            inner_radius_au=inner_au,
            outer_radius_au=outer_au,
            composition=list(OORT_CLOUD_COMPOSITION),
            particle_count=5000 + int(random() * 15000),
            particle_color="#a0c0e0",
        ),
        state=PhysicsState(
            position_m=primary.state.position_m,
            velocity_mps=primary.state.velocity_mps,
        ),
        parent_id=primary.id,
        seed=f"{system_seed}-{cloud_id}",
    )
