"""Planetary ring generation and ring-system objects."""

from typing import Optional, Sequence

from ..models.celestial import CelestialObject
from ..models.enums import CelestialType, RockyType
from ..models.orbit import PhysicsState
from ..models.properties import RingProperties, RingSystemProperties
from ..utils.constants import ROCKY_TYPE_COLORS, ROCKY_TYPE_COMPOSITION
from ..utils.rng import RandomFn, get_random_in_range, get_random_item

MAX_RINGS = 3


def generate_rings(
    random: RandomFn,
    ring_chance: float,
    allowed_types: Sequence[RockyType],
    visual_radius: float,
) -> list[RingProperties]:
    """Roll a set of concentric rings around a body.

    Args:
        random: Seeded random source
        ring_chance: Probability that the body has rings at all
        allowed_types: Ring materials permitted for this body
        visual_radius: Body radius in scene units; ring radii are multiples of it

    Returns:
        Rings ordered inside-out, or an empty list
    """
    if not allowed_types or random() >= ring_chance:
        return []

    count = 1 + int(random() * MAX_RINGS)
    rings = []
    inner = visual_radius * get_random_in_range(1.2, 1.5, random)
    for _ in range(count):
        width = visual_radius * get_random_in_range(0.1, 0.7, random)
        ring_type = get_random_item(allowed_types, random)
        rings.append(
            RingProperties(
                inner_radius=inner,
                outer_radius=inner + width,
                density=get_random_in_range(0.3, 1.0, random),
                opacity=get_random_in_range(0.3, 0.8, random),
                color=ROCKY_TYPE_COLORS[ring_type.value],
                tilt=(random() - 0.5) * 0.1,
                rotation_rate=get_random_in_range(0.001, 0.005, random),
                texture="ring_texture",
                composition=list(ROCKY_TYPE_COMPOSITION[ring_type.value]),
                type=ring_type,
            )
        )
        gap = visual_radius * get_random_in_range(0.02, 0.12, random)
        inner = inner + width + gap
    return rings


def create_ring_system(
    planet: CelestialObject, rings: list[RingProperties], system_seed: str
) -> Optional[CelestialObject]:
    """Wrap rings into a RING_SYSTEM object that shares the planet's state."""
    if not rings:
        return None
    ring_id = f"ring-system-{planet.id}"
    return CelestialObject(
        id=ring_id,
        name=f"{planet.name} Rings",
        type=CelestialType.RING_SYSTEM,
        mass_kg=0.0,
        radius_m=planet.radius_m,
        temperature_k=planet.temperature_k,
        properties=RingSystemProperties(rings=rings, parent_id=planet.id),
        state=PhysicsState(
            position_m=planet.state.position_m,
            velocity_mps=planet.state.velocity_mps,
        ),
        parent_id=planet.id,
        seed=f"{system_seed}-{ring_id}",
    )
