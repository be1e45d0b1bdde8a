"""Orbital slot placement and proximity validation.

Candidate orbits are spaced by exponentially distributed steps outward from
the system center. Each candidate is assigned to the nearest star and rejected
when it crowds its parent or passes too close to another star.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from ..models.celestial import CelestialObject
from ..schemas.config import GeneratorConfig
from ..utils.constants import AU
from ..utils.rng import RandomFn

logger = logging.getLogger(__name__)


@dataclass
class OrbitalSlot:
    """A validated orbit candidate."""

    index: int  # Candidate index in the scan
    distance_au: float  # Distance from the system center
    parent_star: CelestialObject
    distance_from_parent_au: float  # Orbit radius around the parent star


def roll_max_slots(random: RandomFn, max_system_modifier: int) -> int:
    """Cap on accepted slots: 5 + floor(u * (modifier + 1))."""
    return 5 + int(random() * (max(0, max_system_modifier) + 1))


def roll_step(random: RandomFn, config: GeneratorConfig) -> float:
    """Exponentially distributed spacing, clamped to the configured bounds."""
    step = -math.log(1 - random()) / config.step_rate
    return min(config.max_step_au, max(config.min_step_au, step))


def star_orbit_radius_au(star: CelestialObject) -> float:
    """Distance of a star's orbit from the system center; 0 for the main star."""
    if star.parent_id is None or star.orbit is None:
        return 0.0
    return star.orbit.semi_major_axis_m / AU


def assign_parent(
    distance_au: float, stars: Sequence[CelestialObject]
) -> tuple[CelestialObject, float]:
    """Pick the star whose own orbit is nearest to the candidate distance.

    Returns:
        Tuple of (parent star, distance from the parent in AU)
    """
    parent = min(stars, key=lambda s: abs(distance_au - star_orbit_radius_au(s)))
    return parent, abs(distance_au - star_orbit_radius_au(parent))


def proximity_violation(
    parent: CelestialObject,
    distance_from_parent_au: float,
    stars: Sequence[CelestialObject],
    config: GeneratorConfig,
) -> Optional[str]:
    """Check a candidate orbit against all stars.

    Returns:
        Reason for rejection, or None if the candidate is acceptable
    """
    orbit_m = distance_from_parent_au * AU
    if orbit_m < parent.radius_m * config.parent_proximity_multiplier:
        return f"too close to parent {parent.id}"

    for other in stars:
        if other.id == parent.id:
            continue
        separation_m = parent.state.position_m.distance_to(other.state.position_m)
        # Closest approach of a circular orbit around the parent to the other star
        closest_m = abs(separation_m - orbit_m)
        if closest_m < other.radius_m * config.other_star_proximity_multiplier:
            return f"passes too close to star {other.id}"
    return None


def iter_orbital_slots(
    random: RandomFn, stars: Sequence[CelestialObject], config: GeneratorConfig
) -> Iterator[OrbitalSlot]:
    """Lazily yield validated orbit slots, innermost first.

    Rejected candidates still advance the running distance. Scanning stops at
    the configured number of candidates or once the distance passes the
    outermost placement radius.
    """
    if not stars:
        return
    distance = config.initial_distance_au
    for index in range(config.total_potential_orbits):
        if index > 0:
            distance += roll_step(random, config)
        if distance > config.max_placement_au:
            logger.debug(f"Slot scan stopped at {distance:.2f} AU (beyond placement limit)")
            return

        parent, distance_from_parent = assign_parent(distance, stars)
        reason = proximity_violation(parent, distance_from_parent, stars, config)
        if reason is not None:
            logger.debug(f"Rejected slot {index} at {distance:.2f} AU: {reason}")
            continue

        yield OrbitalSlot(
            index=index,
            distance_au=distance,
            parent_star=parent,
            distance_from_parent_au=distance_from_parent,
        )
