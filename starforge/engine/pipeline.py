"""Generation pipeline orchestrator.

Stages, in order:
1. Stars (eager): roll and place all stars; zero stars is fatal
2. Bodies (lazy): scan orbital slots and turn each into a belt or a planet
   with its ring system and moons
3. Guaranteed belt: add a belt around the main star if none was generated
4. Oort cloud: optional, disabled by default
5. Hierarchy validation: buffer everything and correct parent links

Architecture:
Each stage is an independent method on SystemGenerator; ``run`` composes them.
Failures of a single body are recorded as diagnostics and the body is
omitted. Anything unexpected propagates to the stream's error channel.
"""

import logging
from itertools import islice
from typing import Iterator, Optional

from ..models.celestial import CelestialObject
from ..models.enums import CelestialType
from ..schemas.config import GeneratorConfig
from ..utils.constants import AU, GUARANTEED_BELT_RANGE_AU
from ..utils.naming import CelestialNamer
from ..utils.rng import create_seeded_source, get_random_in_range
from .belts import generate_asteroid_belt, generate_oort_cloud
from .classifier import is_asteroid_belt_slot
from .diagnostics import GenerationDiagnostics
from .errors import GenerationError
from .hierarchy import validate_and_correct_hierarchy
from .moons import generate_moons
from .placement import OrbitalSlot, iter_orbital_slots, roll_max_slots
from .planets import generate_planet
from .stellar import generate_stars_in_system
from .stream import SystemStream

logger = logging.getLogger(__name__)


class SystemGenerator:
    """Runs the generation stages for one seed.

    Each instance owns its random source, name registry and diagnostics, so
    independent runs never share state.
    """

    def __init__(self, seed: str, config: Optional[GeneratorConfig] = None):
        """Initialize a generator.

        Args:
            seed: System seed string
            config: Generation parameters (defaults if omitted)
        """
        self.seed = seed
        self.config = config or GeneratorConfig()
        self.random = create_seeded_source(seed)
        self.namer = CelestialNamer(self.random)
        self.diagnostics = GenerationDiagnostics()
        self.belt_count = 0

    # =========================================================================
    # STAGES
    # =========================================================================

    def generate_stars(self) -> list[CelestialObject]:
        """Stage 1: generate every star.

        Raises:
            GenerationError: If no stars could be generated
        """
        try:
            stars = generate_stars_in_system(self.random, self.namer, self.seed)
        except ValueError as exc:
            raise GenerationError(f"Star generation failed for seed '{self.seed}': {exc}") from exc
        if not stars:
            raise GenerationError(f"No stars generated for seed '{self.seed}'")
        logger.info(f"Seed '{self.seed}': generated {len(stars)} star(s)")
        return stars

    def iter_bodies(self, stars: list[CelestialObject]) -> Iterator[CelestialObject]:
        """Stage 2: lazily turn accepted orbital slots into bodies."""
        max_slots = roll_max_slots(self.random, self.config.max_system_modifier)
        slots = iter_orbital_slots(self.random, stars, self.config)
        for slot in islice(slots, max_slots):
            yield from self.generate_slot(slot)

    def generate_slot(self, slot: OrbitalSlot) -> Iterator[CelestialObject]:
        """Belt, or planet followed by its ring system and moons."""
        if is_asteroid_belt_slot(self.random, slot.distance_from_parent_au):
            belt = self._make_belt(slot.parent_star, slot.distance_from_parent_au)
            if belt is not None:
                yield belt
            return

        try:
            bodies = generate_planet(
                self.random,
                self.namer,
                slot.parent_star,
                slot.distance_from_parent_au,
                self.seed,
                self.config.scale,
            )
        except ValueError as exc:
            self.diagnostics.record("bodies", None, f"planet at slot {slot.index} skipped: {exc}")
            return

        yield from bodies
        yield from generate_moons(
            self.random,
            self.namer,
            bodies[0],
            slot.distance_from_parent_au,
            self.seed,
            self.diagnostics,
        )

    def guaranteed_belt(
        self, stars: list[CelestialObject], bodies: list[CelestialObject]
    ) -> Optional[CelestialObject]:
        """Stage 3: a belt around the main star if the scan produced none."""
        if any(b.type == CelestialType.ASTEROID_FIELD for b in bodies):
            return None
        distance_au = get_random_in_range(*GUARANTEED_BELT_RANGE_AU, self.random)
        return self._make_belt(stars[0], distance_au)

    def oort_cloud(
        self, stars: list[CelestialObject], bodies: list[CelestialObject]
    ) -> Optional[CelestialObject]:
        """Stage 4: optional Oort cloud beyond the outermost object."""
        if not self.config.include_oort_cloud:
            return None
        main_star = stars[0]
        outermost_au = max(
            (
                obj.state.position_m.distance_to(main_star.state.position_m) / AU
                for obj in stars + bodies
            ),
            default=0.0,
        )
        return generate_oort_cloud(self.random, main_star, outermost_au, self.seed)

    def validate(self, objects: list[CelestialObject]) -> list[CelestialObject]:
        """Stage 5: hierarchy validation over the full set."""
        return validate_and_correct_hierarchy(objects, self.diagnostics)

    # =========================================================================
    # ORCHESTRATION
    # =========================================================================

    def run(self, stars: list[CelestialObject]) -> Iterator[CelestialObject]:
        """Run stages 2-5 for already generated stars and yield the result."""
        bodies = list(self.iter_bodies(stars))
        extras = [
            obj
            for obj in (self.guaranteed_belt(stars, bodies), self.oort_cloud(stars, bodies))
            if obj is not None
        ]
        objects = stars + bodies + extras
        logger.debug(f"Seed '{self.seed}': {len(objects)} object(s) before validation")
        yield from self.validate(objects)

    def _make_belt(
        self, parent_star: CelestialObject, distance_au: float
    ) -> Optional[CelestialObject]:
        try:
            belt = generate_asteroid_belt(
                self.random,
                self.namer,
                parent_star,
                self.belt_count,
                distance_au,
                self.seed,
            )
        except ValueError as exc:
            self.diagnostics.record("belts", parent_star.id, f"belt skipped: {exc}")
            return None
        self.belt_count += 1
        return belt


def generate_system(
    seed: str,
    max_system_modifier: Optional[int] = None,
    config: Optional[GeneratorConfig] = None,
) -> SystemStream:
    """Generate a complete star system for a seed.

    Stars are generated immediately; everything else is produced when a
    consumer subscribes to or iterates the returned stream.

    Args:
        seed: System seed string
        max_system_modifier: Widens the orbit cap (5 + 0..modifier slots).
            Defaults to the config's value, 20 unless configured otherwise.
        config: Generation parameters

    Returns:
        Single-use stream of celestial objects: stars, then each planet with
        its ring system and moons (or a belt), then any guaranteed belt and
        Oort cloud

    Raises:
        GenerationError: If no stars could be generated
    """
    config = config or GeneratorConfig()
    if max_system_modifier is not None and max_system_modifier != config.max_system_modifier:
        config = GeneratorConfig.model_validate(
            {**config.model_dump(), "max_system_modifier": max_system_modifier}
        )

    generator = SystemGenerator(seed, config)
    stars = generator.generate_stars()
    return SystemStream(lambda: generator.run(stars), generator.diagnostics)
