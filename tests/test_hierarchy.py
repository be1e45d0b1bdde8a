"""Tests for hierarchy validation and correction."""

import math

from starforge.engine.diagnostics import GenerationDiagnostics
from starforge.engine.hierarchy import (
    find_best_gravitational_parent,
    validate_and_correct_hierarchy,
)
from starforge.engine.surfaces import create_rocky_properties
from starforge.models import (
    CelestialObject,
    CelestialType,
    PhysicsState,
    PlanetType,
    RingSystemProperties,
    SpectralClass,
    StarProperties,
    StellarType,
)
from starforge.utils import (
    AU,
    EARTH_MASS,
    EARTH_RADIUS,
    SOLAR_MASS,
    SOLAR_RADIUS,
    SeededRandom,
    Vector3,
)


def _star(star_id, mass=SOLAR_MASS, x_au=0.0, parent=None, main=False):
    return CelestialObject(
        id=star_id,
        name=star_id,
        type=CelestialType.STAR,
        mass_kg=mass,
        radius_m=SOLAR_RADIUS,
        temperature_k=5772.0,
        properties=StarProperties(
            stellar_type=StellarType.MAIN_SEQUENCE,
            spectral_class="GV",
            main_spectral_class=SpectralClass.G,
            luminosity_class="V",
            luminosity=1.0,
            color="#fff4ea",
            is_main_star=main,
        ),
        state=PhysicsState(position_m=Vector3(x_au * AU, 0.0, 0.0)),
        parent_id=parent,
    )


def _body(body_id, parent, x_au, moon=False):
    return CelestialObject(
        id=body_id,
        name=body_id,
        type=CelestialType.MOON if moon else CelestialType.PLANET,
        mass_kg=EARTH_MASS * (0.01 if moon else 1.0),
        radius_m=EARTH_RADIUS,
        temperature_k=200.0,
        properties=create_rocky_properties(
            SeededRandom(body_id), PlanetType.BARREN, is_moon=moon
        ),
        state=PhysicsState(position_m=Vector3(x_au * AU, 0.0, 0.0)),
        parent_id=parent,
    )


def _ring(parent, x_au):
    return CelestialObject(
        id=f"ring-system-{parent}",
        name=f"{parent} Rings",
        type=CelestialType.RING_SYSTEM,
        mass_kg=0.0,
        radius_m=EARTH_RADIUS,
        temperature_k=200.0,
        properties=RingSystemProperties(rings=[], parent_id=parent),
        state=PhysicsState(position_m=Vector3(x_au * AU, 0.0, 0.0)),
        parent_id=parent,
    )


def _ids(objects):
    return [obj.id for obj in objects]


class TestValidHierarchy:
    """Test that a consistent system passes unchanged."""

    def test_consistent_system_kept(self):
        """Test that nothing is dropped or re-parented in a valid system."""
        objects = [
            _star("star-a", main=True),
            _body("planet-1", "star-a", 1.0),
            _ring("planet-1", 1.0),
            _body("moon-1", "planet-1", 1.001, moon=True),
        ]
        diagnostics = GenerationDiagnostics()
        result = validate_and_correct_hierarchy(objects, diagnostics)

        assert _ids(result) == _ids(objects)
        assert [obj.parent_id for obj in result] == [None, "star-a", "planet-1", "planet-1"]
        assert len(diagnostics) == 0

    def test_empty_input(self):
        """Test that an empty set validates to an empty list."""
        assert validate_and_correct_hierarchy([]) == []


class TestMainStar:
    """Test main star reselection."""

    def test_most_massive_star_promoted(self):
        """Test the most massive star becomes the root."""
        light = _star("star-a", mass=SOLAR_MASS, main=True)
        heavy = _star("star-b", mass=2 * SOLAR_MASS, x_au=10.0, parent="star-a")
        result = validate_and_correct_hierarchy([light, heavy])

        by_id = {obj.id: obj for obj in result}
        assert by_id["star-b"].parent_id is None
        assert by_id["star-b"].properties.is_main_star
        assert by_id["star-a"].parent_id == "star-b"
        assert by_id["star-a"].current_parent_id == "star-b"
        assert not by_id["star-a"].properties.is_main_star

    def test_input_not_mutated(self):
        """Test corrections are applied to copies only."""
        light = _star("star-a", mass=SOLAR_MASS, main=True)
        heavy = _star("star-b", mass=2 * SOLAR_MASS, x_au=10.0, parent="star-a")
        validate_and_correct_hierarchy([light, heavy])

        assert heavy.parent_id == "star-a"
        assert not heavy.properties.is_main_star
        assert light.parent_id is None
        assert light.properties.is_main_star


class TestReparenting:
    """Test parent corrections."""

    def test_moon_of_star_moves_to_nearest_planet(self):
        """Test a moon parented to a star is attached to the closest planet."""
        objects = [
            _star("star-a", main=True),
            _body("planet-1", "star-a", 1.0),
            _body("planet-2", "star-a", 5.0),
            _body("moon-1", "star-a", 5.01, moon=True),
        ]
        diagnostics = GenerationDiagnostics()
        result = validate_and_correct_hierarchy(objects, diagnostics)

        moon = next(obj for obj in result if obj.id == "moon-1")
        assert moon.parent_id == "planet-2"
        assert any("moon re-parented" in d.message for d in diagnostics.for_stage("hierarchy"))

    def test_missing_parent_uses_strongest_pull(self):
        """Test an object with a missing parent gets the strongest gravitational parent."""
        objects = [
            _star("star-a", mass=2 * SOLAR_MASS, main=True),
            _star("star-b", mass=SOLAR_MASS, x_au=10.0, parent="star-a"),
            _body("planet-1", "star-ghost", 9.0),
        ]
        result = validate_and_correct_hierarchy(objects)

        planet = next(obj for obj in result if obj.id == "planet-1")
        assert planet.parent_id == "star-b"

    def test_best_parent_respects_allowed_types(self):
        """Test that moons only consider planets as gravitational parents."""
        star = _star("star-a", main=True)
        planet = _body("planet-1", "star-a", 3.0)
        moon = _body("moon-1", "planet-ghost", 0.5, moon=True)
        assert find_best_gravitational_parent(moon, [star, planet, moon]) is planet


class TestDrops:
    """Test dropping and cascading."""

    def test_invalid_state_dropped_with_children(self):
        """Test a body with a non-finite state is dropped along with its ring."""
        broken = _body("planet-1", "star-a", 1.0)
        broken.state = PhysicsState(position_m=Vector3(math.nan, 0.0, 0.0))
        objects = [
            _star("star-a", main=True),
            broken,
            _ring("planet-1", 1.0),
        ]
        diagnostics = GenerationDiagnostics()
        result = validate_and_correct_hierarchy(objects, diagnostics)

        assert _ids(result) == ["star-a"]
        messages = [d.message for d in diagnostics.records]
        assert "dropped: invalid state or orbit" in messages
        assert "dropped: orphaned ring system" in messages

    def test_moon_of_dropped_planet_reattached(self):
        """Test a moon whose planet was dropped moves to another planet."""
        broken = _body("planet-1", "star-a", 1.0)
        broken.state = PhysicsState(position_m=Vector3(math.inf, 0.0, 0.0))
        objects = [
            _star("star-a", main=True),
            broken,
            _body("planet-2", "star-a", 2.0),
            _body("moon-1", "planet-1", 1.001, moon=True),
        ]
        result = validate_and_correct_hierarchy(objects)

        moon = next(obj for obj in result if obj.id == "moon-1")
        assert moon.parent_id == "planet-2"

    def test_cascade_without_stars(self):
        """Test that an unparentable planet takes its moon with it."""
        objects = [
            _body("planet-1", "star-x", 1.0),
            _body("moon-1", "planet-1", 1.001, moon=True),
        ]
        diagnostics = GenerationDiagnostics()
        result = validate_and_correct_hierarchy(objects, diagnostics)

        assert result == []
        assert [d.object_id for d in diagnostics.records] == ["planet-1", "moon-1"]

    def test_moon_of_star_without_planets_dropped(self):
        """Test a moon parented to a star is dropped when no planet exists."""
        objects = [
            _star("star-a", main=True),
            _body("moon-1", "star-a", 1.0, moon=True),
        ]
        result = validate_and_correct_hierarchy(objects)
        assert _ids(result) == ["star-a"]
