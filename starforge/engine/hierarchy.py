"""Whole-set validation and correction of the parent/child hierarchy.

The validator runs once over the fully materialized system. It works on
copies, so the objects produced by the generator stages are never mutated.
"""

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..models.celestial import CelestialObject
from ..models.enums import CelestialType
from ..utils.constants import AU
from .diagnostics import GenerationDiagnostics

logger = logging.getLogger(__name__)

STAGE = "hierarchy"

# Types each object type may be parented to
ALLOWED_PARENT_TYPES = {
    CelestialType.STAR: (CelestialType.STAR,),
    CelestialType.PLANET: (CelestialType.STAR,),
    CelestialType.GAS_GIANT: (CelestialType.STAR,),
    CelestialType.ASTEROID_FIELD: (CelestialType.STAR,),
    CelestialType.OORT_CLOUD: (CelestialType.STAR,),
    CelestialType.MOON: (CelestialType.PLANET, CelestialType.GAS_GIANT),
    CelestialType.RING_SYSTEM: (CelestialType.PLANET, CelestialType.GAS_GIANT),
}

PLANET_TYPES = (CelestialType.PLANET, CelestialType.GAS_GIANT)


def _set_parent(obj: CelestialObject, parent_id: Optional[str]):
    obj.parent_id = parent_id
    obj.current_parent_id = parent_id


def _has_valid_kinematics(obj: CelestialObject) -> bool:
    if not obj.state.is_finite():
        return False
    return obj.orbit is None or obj.orbit.is_valid()


def find_best_gravitational_parent(
    obj: CelestialObject, candidates: Sequence[CelestialObject]
) -> Optional[CelestialObject]:
    """Candidate with the strongest pull (mass / distance^2, distance in AU)."""
    allowed = ALLOWED_PARENT_TYPES.get(obj.type, ())
    best, best_score = None, 0.0
    for candidate in candidates:
        if candidate.id == obj.id or candidate.type not in allowed:
            continue
        distance_au = obj.state.position_m.distance_to(candidate.state.position_m) / AU
        if distance_au == 0:
            return candidate
        score = candidate.mass_kg / distance_au**2
        if best is None or score > best_score:
            best, best_score = candidate, score
    return best


def find_nearest_planet(
    obj: CelestialObject, candidates: Sequence[CelestialObject]
) -> Optional[CelestialObject]:
    planets = [c for c in candidates if c.type in PLANET_TYPES and c.id != obj.id]
    if not planets:
        return None
    return min(planets, key=lambda p: obj.state.position_m.distance_to(p.state.position_m))


def validate_and_correct_hierarchy(
    objects: Sequence[CelestialObject],
    diagnostics: Optional[GenerationDiagnostics] = None,
) -> list[CelestialObject]:
    """Validate parent links across the full object set.

    Algorithm:
    1. Drop objects with non-finite state or invalid orbital elements
    2. Make the most massive star the main star and parent all other stars to it
    3. Re-parent moons attached to a star to the nearest planet
    4. Re-parent objects whose parent is missing to the best gravitational
       parent; orphaned ring systems are dropped
    5. Drop anything whose parent chain still does not resolve

    Args:
        objects: Every generated object, in emission order
        diagnostics: Optional diagnostic log for drops and corrections

    Returns:
        Corrected copies in the original order, minus dropped objects
    """
    diagnostics = diagnostics if diagnostics is not None else GenerationDiagnostics()
    corrected = [replace(obj, properties=replace(obj.properties)) for obj in objects]

    kept = []
    for obj in corrected:
        if _has_valid_kinematics(obj):
            kept.append(obj)
        else:
            diagnostics.record(STAGE, obj.id, "dropped: invalid state or orbit")

    stars = [obj for obj in kept if obj.type == CelestialType.STAR]
    if stars:
        main_star = max(stars, key=lambda s: s.mass_kg)
        if main_star.parent_id is not None:
            logger.info(f"Promoting {main_star.id} to main star")
        _set_parent(main_star, None)
        main_star.properties.is_main_star = True
        for star in stars:
            if star is main_star:
                continue
            star.properties.is_main_star = False
            if star.parent_id != main_star.id:
                diagnostics.record(STAGE, star.id, f"re-parented to main star {main_star.id}")
                _set_parent(star, main_star.id)

    by_id = {obj.id: obj for obj in kept}
    dropped: set[str] = set()

    for obj in kept:
        if obj.type == CelestialType.STAR:
            continue
        parent = by_id.get(obj.parent_id) if obj.parent_id else None

        moon_of_star = parent is not None and parent.type == CelestialType.STAR
        if obj.type == CelestialType.MOON and moon_of_star:
            planet = find_nearest_planet(obj, kept)
            if planet is None:
                diagnostics.record(STAGE, obj.id, "dropped: moon of a star with no planet nearby")
                dropped.add(obj.id)
            else:
                diagnostics.record(STAGE, obj.id, f"moon re-parented to nearest planet {planet.id}")
                _set_parent(obj, planet.id)
            continue

        if parent is not None:
            continue

        if obj.type == CelestialType.RING_SYSTEM:
            diagnostics.record(STAGE, obj.id, "dropped: orphaned ring system")
            dropped.add(obj.id)
            continue

        best = find_best_gravitational_parent(obj, kept)
        if best is None:
            diagnostics.record(STAGE, obj.id, "dropped: no valid gravitational parent")
            dropped.add(obj.id)
        else:
            diagnostics.record(STAGE, obj.id, f"re-parented to {best.id}")
            _set_parent(obj, best.id)

    # Cascade drops until every remaining parent link resolves
    changed = True
    while changed:
        changed = False
        for obj in kept:
            if obj.id in dropped or obj.parent_id is None:
                continue
            if obj.parent_id not in by_id or obj.parent_id in dropped:
                diagnostics.record(STAGE, obj.id, f"dropped: parent {obj.parent_id} unresolved")
                dropped.add(obj.id)
                changed = True

    result = [obj for obj in kept if obj.id not in dropped]
    logger.info(
        f"Hierarchy validated: {len(result)} object(s) kept, "
        f"{len(objects) - len(result)} dropped"
    )
    return result
