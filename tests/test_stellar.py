"""Tests for star generation and barycentric companions."""

import math
from collections import Counter

import pytest

from starforge.engine.orbits import make_orbit
from starforge.engine.stellar import (
    barycentric_orbit,
    black_hole_mass_category,
    generate_star,
    generate_stars_in_system,
    luminosity_class_for,
    main_sequence_radius_temperature,
    roll_star_count,
    roll_stellar_details,
    roll_stellar_type,
    roll_white_dwarf_composition,
    spectral_class_for_temperature,
    white_dwarf_type,
)
from starforge.models import CelestialType, SpectralClass, StellarType
from starforge.utils import AU, SOLAR_MASS, SOLAR_RADIUS, CelestialNamer, SeededRandom
from starforge.utils.physics import schwarzschild_radius, surface_gravity_log_g


class ScriptedRandom:
    """Returns scripted values first, then a constant."""

    def __init__(self, values, default=0.5):
        self.values = list(values)
        self.default = default

    def __call__(self) -> float:
        if self.values:
            return self.values.pop(0)
        return self.default


def _system(seed: str):
    rng = SeededRandom(seed)
    return generate_stars_in_system(rng, CelestialNamer(rng), seed)


class TestStarCount:
    """Test the star count ladder."""

    def test_extremes(self):
        """Test lowest and highest rolls map to 1 and 8 stars."""
        assert roll_star_count(lambda: 0.0) == 1
        assert roll_star_count(lambda: 0.9999) == 8

    def test_count_bounds(self):
        """Test counts always lie in [1, 8]."""
        rng = SeededRandom("count-bounds")
        for _ in range(2000):
            assert 1 <= roll_star_count(rng) <= 8

    def test_probabilities_decrease_with_count(self):
        """Test that each higher star count is rarer than the one below it."""
        rng = SeededRandom("distribution")
        counts = Counter(roll_star_count(rng) for _ in range(20000))
        for n in range(1, 8):
            assert counts[n] > counts[n + 1]


class TestStellarTypes:
    """Test stellar type selection and parameters."""

    def test_weighted_type_bands(self):
        """Test the cumulative weight bands."""
        assert roll_stellar_type(lambda: 0.0) == StellarType.MAIN_SEQUENCE
        assert roll_stellar_type(lambda: 0.75) == StellarType.WHITE_DWARF
        assert roll_stellar_type(lambda: 0.87) == StellarType.NEUTRON_STAR
        assert roll_stellar_type(lambda: 0.92) == StellarType.BLACK_HOLE
        assert roll_stellar_type(lambda: 0.99) == StellarType.WOLF_RAYET

    def test_spectral_class_for_temperature(self):
        """Test temperature thresholds for spectral classes."""
        assert spectral_class_for_temperature(40000) == SpectralClass.O
        assert spectral_class_for_temperature(15000) == SpectralClass.B
        assert spectral_class_for_temperature(8000) == SpectralClass.A
        assert spectral_class_for_temperature(6500) == SpectralClass.F
        assert spectral_class_for_temperature(5772) == SpectralClass.G
        assert spectral_class_for_temperature(4000) == SpectralClass.K
        assert spectral_class_for_temperature(3000) == SpectralClass.M

    def test_sun_like_main_sequence(self):
        """Test a 1 solar mass star is a G star of about 1 solar radius."""
        radius, temperature = main_sequence_radius_temperature(1.0)
        assert radius == pytest.approx(1.0)
        assert spectral_class_for_temperature(temperature) == SpectralClass.G

    def test_minimum_radius_applied(self):
        """Test small main-sequence radii are raised to the class minimum."""
        radius, temperature = main_sequence_radius_temperature(0.1)
        assert spectral_class_for_temperature(temperature) == SpectralClass.M
        assert radius == pytest.approx(0.4)

    def test_massive_star_is_o_class(self):
        """Test that very massive stars are O stars."""
        _, temperature = main_sequence_radius_temperature(40.0)
        assert spectral_class_for_temperature(temperature) == SpectralClass.O

    def test_black_hole(self):
        """Test black hole radius, temperature and luminosity."""
        rng = ScriptedRandom([0.92])
        star = generate_star(rng, CelestialNamer(rng), "bh")

        assert star.properties.stellar_type == StellarType.BLACK_HOLE
        assert star.temperature_k == 2.7
        assert star.radius_m == pytest.approx(schwarzschild_radius(star.mass_kg))
        assert star.properties.luminosity == 0.0
        assert star.properties.spectral_class == "X"

    def test_main_sequence_star_fields(self):
        """Test a generated Sun-like star's identity and payload."""
        rng = ScriptedRandom([0.0, 0.75, 1 / 3])
        star = generate_star(rng, CelestialNamer(rng), "sol")

        assert star.type == CelestialType.STAR
        assert star.id == f"star-{star.name.lower().replace(' ', '-')}"
        assert star.seed == f"sol-{star.id}"
        assert star.mass_kg == pytest.approx(SOLAR_MASS)
        assert star.properties.spectral_class == "GV"
        assert star.properties.luminosity_class == "V"
        assert star.properties.luminosity == pytest.approx(1.0, rel=0.1)
        assert star.parent_id is None
        assert star.orbit is None

    def test_white_dwarf_designation(self):
        """Test white dwarfs are designated by atmospheric type, not temperature."""
        rng = ScriptedRandom([0.75])
        star = generate_star(rng, CelestialNamer(rng), "wd")
        properties = star.properties

        assert properties.stellar_type == StellarType.WHITE_DWARF
        assert properties.luminosity_class == "VII"
        # 33000 K is below the DO limit, so only DA or DC can result
        assert properties.white_dwarf_type in ("DA", "DC")
        assert properties.spectral_class == properties.white_dwarf_type


class TestStellarClassification:
    """Test luminosity classes and white dwarf atmospheres."""

    def test_sun_surface_gravity(self):
        """Test the Sun's log g is about 4.44."""
        assert surface_gravity_log_g(SOLAR_MASS, SOLAR_RADIUS) == pytest.approx(4.44, abs=0.01)

    def test_luminosity_classes(self):
        """Test luminosity class per stellar type."""
        ms = StellarType.MAIN_SEQUENCE
        assert luminosity_class_for(ms, SOLAR_MASS, SOLAR_RADIUS) == "V"
        assert luminosity_class_for(ms, SOLAR_MASS, 3 * SOLAR_RADIUS) == "IV"
        assert luminosity_class_for(StellarType.WHITE_DWARF, SOLAR_MASS, 7e6) == "VII"
        assert luminosity_class_for(StellarType.WOLF_RAYET, 30 * SOLAR_MASS, 1e10) == "I"
        assert luminosity_class_for(StellarType.NEUTRON_STAR, SOLAR_MASS, 1.2e4) == ""
        assert luminosity_class_for(StellarType.BLACK_HOLE, 10 * SOLAR_MASS, 3e4) == ""

    def test_white_dwarf_types(self):
        """Test each atmospheric class from its dominant feature."""
        assert white_dwarf_type({"hydrogen": 0.7}, 20000) == "DA"
        assert white_dwarf_type({"hydrogen": 0.2, "helium": 0.6}, 20000) == "DB"
        assert white_dwarf_type({"hydrogen": 0.2, "carbon": 0.2}, 20000) == "DQ"
        assert white_dwarf_type({"hydrogen": 0.2, "metals": 0.2}, 20000) == "DZ"
        assert white_dwarf_type({"hydrogen": 0.2}, 50000) == "DO"
        assert white_dwarf_type({"hydrogen": 0.2}, 20000) == "DC"

    def test_hydrogen_rich_composition(self):
        """Test a hydrogen-rich roll gives a DA atmosphere."""
        composition = roll_white_dwarf_composition(ScriptedRandom([0.9, 0.5]))
        assert composition["hydrogen"] == pytest.approx(0.75)
        assert white_dwarf_type(composition, 20000) == "DA"

    def test_hydrogen_poor_composition(self):
        """Test a hydrogen-poor cool dwarf shows no strong lines."""
        composition = roll_white_dwarf_composition(ScriptedRandom([0.1, 0.5]))
        assert composition["hydrogen"] == pytest.approx(0.25)
        assert white_dwarf_type(composition, 20000) == "DC"


class TestStellarDetails:
    """Test age, metallicity, rotation and remnant data."""

    def test_pulsar_and_magnetar(self):
        """Test a fast, strongly magnetized neutron star."""
        details = roll_stellar_details(
            ScriptedRandom([0.5, 0.5, 0.25, 0.99999]),
            StellarType.NEUTRON_STAR,
            1.4 * SOLAR_MASS,
            6e5,
        )
        assert details["metallicity"] == pytest.approx(0.0)
        assert details["age_years"] == pytest.approx(6.9e9)
        assert details["rotation_period_s"] == pytest.approx(5.0)
        assert details["is_pulsar"] is True
        assert details["magnetic_field_gauss"] > 1e14
        assert details["is_magnetar"] is True

    def test_slow_weak_neutron_star(self):
        """Test a slow neutron star with a weak field is neither pulsar nor magnetar."""
        details = roll_stellar_details(
            ScriptedRandom([0.5, 0.5, 0.75, 0.0]),
            StellarType.NEUTRON_STAR,
            1.4 * SOLAR_MASS,
            6e5,
        )
        assert details["rotation_period_s"] == pytest.approx(15.0)
        assert details["is_pulsar"] is False
        assert details["magnetic_field_gauss"] == pytest.approx(1e8)
        assert details["is_magnetar"] is False

    def test_kerr_black_hole(self):
        """Test a rotating black hole is a Kerr black hole."""
        details = roll_stellar_details(
            ScriptedRandom([0.5, 0.5, 0.5, 0.5]), StellarType.BLACK_HOLE, 10 * SOLAR_MASS, 2.7
        )
        assert details["black_hole_rotation"] == "kerr"
        assert details["rotation_period_s"] > 0
        assert details["black_hole_mass_category"] == "stellar"

    def test_schwarzschild_black_hole(self):
        """Test a non-rotating black hole is a Schwarzschild black hole."""
        details = roll_stellar_details(
            ScriptedRandom([0.5, 0.5, 0.05]), StellarType.BLACK_HOLE, 10 * SOLAR_MASS, 2.7
        )
        assert details["black_hole_rotation"] == "schwarzschild"
        assert details["rotation_period_s"] == 0.0

    def test_black_hole_mass_categories(self):
        """Test mass category thresholds at 100 and 1e5 solar masses."""
        assert black_hole_mass_category(50 * SOLAR_MASS) == "stellar"
        assert black_hole_mass_category(500 * SOLAR_MASS) == "intermediate"
        assert black_hole_mass_category(1e6 * SOLAR_MASS) == "supermassive"

    def test_every_star_has_physics_data(self):
        """Test ranges of age, metallicity and rotation over many systems."""
        for i in range(50):
            for star in _system(f"details-{i}"):
                properties = star.properties
                assert -0.5 <= properties.metallicity <= 0.5
                assert 0.0 <= properties.age_years < 13.8e9
                if properties.black_hole_rotation == "schwarzschild":
                    assert properties.rotation_period_s == 0.0
                else:
                    assert properties.rotation_period_s > 0.0
                if properties.stellar_type == StellarType.MAIN_SEQUENCE:
                    assert properties.white_dwarf_type is None
                    assert properties.is_pulsar is None
                    assert properties.black_hole_rotation is None

    def test_details_come_from_star_seed(self):
        """Test the star's details are rolled from its own seed."""
        rng = SeededRandom("own-seed")
        star = generate_star(rng, CelestialNamer(rng), "own-seed")
        expected = roll_stellar_details(
            SeededRandom(star.seed), star.properties.stellar_type, star.mass_kg, star.temperature_k
        )
        assert star.properties.metallicity == expected["metallicity"]
        assert star.properties.age_years == expected["age_years"]


class TestStellarSystem:
    """Test multi-star construction."""

    def test_stars_sorted_and_parented(self):
        """Test ordering by mass and parent links to the main star."""
        for i in range(100):
            stars = _system(f"stars-{i}")
            assert 1 <= len(stars) <= 8
            masses = [s.mass_kg for s in stars]
            assert masses == sorted(masses, reverse=True)

            primary = stars[0]
            assert primary.parent_id is None
            assert primary.properties.is_main_star
            for companion in stars[1:]:
                assert companion.parent_id == primary.id
                assert not companion.properties.is_main_star
                assert companion.orbit is not None
                assert companion.orbit.periapsis_m > primary.radius_m * 1.1
                assert companion.state.is_finite()

    def test_single_star_is_stationary(self):
        """Test a lone star sits at the origin with no orbit."""
        found = False
        for i in range(50):
            stars = _system(f"single-{i}")
            if len(stars) == 1:
                found = True
                assert stars[0].orbit is None
                assert stars[0].state.position_m.length() == 0.0
        assert found

    def test_barycenter_balance(self):
        """Test primary and dominant companion balance about the barycenter."""
        checked = 0
        for i in range(100):
            stars = _system(f"binary-{i}")
            if len(stars) < 2:
                continue
            checked += 1
            primary, companion = stars[0], stars[1]
            a_p = primary.orbit.semi_major_axis_m
            a_c = companion.orbit.semi_major_axis_m
            # Companion's distance from the barycenter is a_c - a_p
            assert primary.mass_kg * a_p == pytest.approx(companion.mass_kg * (a_c - a_p))
            offset = (companion.orbit.argument_of_periapsis - primary.orbit.argument_of_periapsis) % (
                2 * math.pi
            )
            assert offset == pytest.approx(math.pi)
            assert primary.orbit.period_s == pytest.approx(companion.orbit.period_s)
        assert checked > 0

    def test_companion_state_includes_primary_state(self):
        """Test companions share the primary's barycentric frame."""
        for i in range(50):
            stars = _system(f"frame-{i}")
            if len(stars) < 2:
                continue
            primary = stars[0]
            for companion in stars[1:]:
                separation = companion.state.position_m.distance_to(primary.state.position_m)
                assert separation >= companion.orbit.periapsis_m * 0.999
                assert separation <= companion.orbit.apoapsis_m * 1.001


class TestBarycentricOrbit:
    """Test primary orbit back-computation."""

    def test_fifty_au_one_to_four(self):
        """Test a 50 AU companion at mass ratio 1:4 puts the primary at 10 AU."""
        companion_orbit = make_orbit(50 * AU, 0.2, 0.05, 1.0, 0.5, 2.0, 5 * SOLAR_MASS)
        primary_orbit = barycentric_orbit(4 * SOLAR_MASS, SOLAR_MASS, companion_orbit)

        assert primary_orbit.semi_major_axis_m == pytest.approx(10 * AU)
        assert primary_orbit.eccentricity == companion_orbit.eccentricity
        assert primary_orbit.argument_of_periapsis == pytest.approx(0.5 + math.pi)
        assert primary_orbit.mean_anomaly == pytest.approx(2.0 + math.pi)
        assert primary_orbit.period_s == companion_orbit.period_s

    def test_zero_total_mass(self):
        """Test that a non-positive total mass yields no orbit."""
        companion_orbit = make_orbit(AU, 0.1, 0.0, 0.0, 0.0, 0.0, SOLAR_MASS)
        assert barycentric_orbit(0.0, 0.0, companion_orbit) is None

    def test_equal_masses_split_evenly(self):
        """Test equal masses put the primary at half the separation."""
        companion_orbit = make_orbit(10 * AU, 0.1, 0.0, 0.0, 0.0, 0.0, 2 * SOLAR_MASS)
        primary_orbit = barycentric_orbit(SOLAR_MASS, SOLAR_MASS, companion_orbit)
        assert primary_orbit.semi_major_axis_m == pytest.approx(5 * AU)

