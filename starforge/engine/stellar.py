"""Star generation and barycentric multi-star construction."""

import logging
import math
from typing import Optional

from ..models.celestial import CelestialObject
from ..models.enums import CelestialType, SpectralClass, StellarType
from ..models.orbit import OrbitalParameters
from ..models.properties import StarProperties
from ..utils.constants import (
    AU,
    BLACK_HOLE_NONROTATING_CHANCE,
    COMPANION_DISTANCE_SPAN_AU,
    COMPANION_MIN_DISTANCE_AU,
    COMPANION_PERIAPSIS_SAFETY,
    INTERMEDIATE_BLACK_HOLE_MASS,
    MAGNETAR_FIELD_GAUSS,
    MAX_STARS,
    METALLICITY_RANGE_DEX,
    MIN_MAIN_SEQUENCE_RADIUS,
    NEUTRON_STAR_FIELD_RANGE_GAUSS,
    PERIAPSIS_CLEARANCE,
    PULSAR_MAX_PERIOD_S,
    PULSAR_PERIOD_LIMIT_S,
    SOLAR_MASS,
    SOLAR_RADIUS,
    SPECTRAL_CLASS_COLORS,
    STAR_COUNT_LADDER,
    STELLAR_ROTATION_RANGE_HOURS,
    STELLAR_TYPE_WEIGHTS,
    SUPERMASSIVE_BLACK_HOLE_MASS,
    TWO_PI,
    UNIVERSE_AGE_YEARS,
    WHITE_DWARF_HOT_LIMIT_K,
)
from ..utils.naming import CelestialNamer, slugify
from ..utils.physics import (
    luminosity_solar,
    normalize_angle,
    schwarzschild_radius,
    surface_gravity_log_g,
)
from ..utils.rng import RandomFn, SeededRandom
from .orbits import make_orbit, relative_state, validate_orbit

logger = logging.getLogger(__name__)

# Main-sequence bands: (mass low, mass high, radius exponent, T low, T high)
# Masses in solar masses; above the last band T grows linearly from 30000 K.
MAIN_SEQUENCE_BANDS = [
    (0.1, 0.4, 0.8, 2400.0, 3700.0),
    (0.4, 0.8, 0.7, 3700.0, 5200.0),
    (0.8, 1.05, 0.6, 5200.0, 6000.0),
    (1.05, 1.4, 0.55, 6000.0, 7500.0),
    (1.4, 3.0, 0.5, 7500.0, 10000.0),
    (3.0, 16.0, 0.45, 10000.0, 30000.0),
]

# Spectral class lower temperature limits, hottest first
SPECTRAL_CLASS_LIMITS = [
    (30000.0, SpectralClass.O),
    (10000.0, SpectralClass.B),
    (7500.0, SpectralClass.A),
    (6000.0, SpectralClass.F),
    (5200.0, SpectralClass.G),
    (3700.0, SpectralClass.K),
]


def roll_star_count(random: RandomFn) -> int:
    """Number of stars in the system, 1-8, favoring single and binary systems."""
    roll = random()
    for threshold, count in STAR_COUNT_LADDER:
        if roll < threshold:
            return count
    return MAX_STARS


def roll_stellar_type(random: RandomFn) -> StellarType:
    """Weighted pick across stellar types."""
    roll = random() * sum(STELLAR_TYPE_WEIGHTS.values())
    for name, weight in STELLAR_TYPE_WEIGHTS.items():
        if roll < weight:
            return StellarType[name]
        roll -= weight
    return StellarType.MAIN_SEQUENCE


def spectral_class_for_temperature(temperature_k: float) -> SpectralClass:
    for limit, spectral_class in SPECTRAL_CLASS_LIMITS:
        if temperature_k >= limit:
            return spectral_class
    return SpectralClass.M


def roll_main_sequence_mass(random: RandomFn) -> float:
    """Main-sequence mass in solar masses, weighted toward low-mass stars."""
    roll = random()
    if roll < 0.7:
        return 0.1 + random() * 0.7
    if roll < 0.9:
        return 0.8 + random() * 0.6
    if roll < 0.98:
        return 1.4 + random() * 8.6
    return 10.0 + random() * 40.0


def main_sequence_radius_temperature(mass_solar: float) -> tuple[float, float]:
    """Radius (solar radii) and effective temperature (K) from piecewise relations.

    Radii below the minimum for the resulting spectral class are raised to it.
    """
    for mass_low, mass_high, exponent, temp_low, temp_high in MAIN_SEQUENCE_BANDS:
        if mass_solar < mass_high:
            fraction = max(0.0, (mass_solar - mass_low) / (mass_high - mass_low))
            radius = mass_solar**exponent
            temperature = temp_low + fraction * (temp_high - temp_low)
            break
    else:
        radius = mass_solar**0.4
        temperature = 30000.0 + (mass_solar - 16.0) / 40.0 * 20000.0

    spectral_class = spectral_class_for_temperature(temperature)
    radius = max(radius, MIN_MAIN_SEQUENCE_RADIUS[spectral_class.value])
    return radius, temperature


def _stellar_parameters(
    random: RandomFn, stellar_type: StellarType
) -> tuple[float, float, float]:
    """Mass (kg), radius (m) and temperature (K) for a stellar type."""
    if stellar_type == StellarType.WHITE_DWARF:
        mass = (0.1 + random() * 1.3) * SOLAR_MASS
        radius = (0.005 + random() * 0.01) * SOLAR_RADIUS
        temperature = 8000.0 + random() * 50000.0
    elif stellar_type == StellarType.NEUTRON_STAR:
        mass = (1.1 + random() * 1.4) * SOLAR_MASS
        radius = (10.0 + random() * 10.0) * 1000.0
        temperature = 500000.0 + random() * 500000.0
    elif stellar_type == StellarType.BLACK_HOLE:
        mass = (3.0 + random() * 47.0) * SOLAR_MASS
        radius = schwarzschild_radius(mass)
        temperature = 2.7
    elif stellar_type == StellarType.WOLF_RAYET:
        mass = (20.0 + random() * 60.0) * SOLAR_MASS
        radius = (5.0 + random() * 15.0) * SOLAR_RADIUS
        temperature = 30000.0 + random() * 170000.0
    else:
        mass_solar = roll_main_sequence_mass(random)
        radius_solar, temperature = main_sequence_radius_temperature(mass_solar)
        mass = mass_solar * SOLAR_MASS
        radius = radius_solar * SOLAR_RADIUS
    return mass, radius, temperature


def luminosity_class_for(
    stellar_type: StellarType, mass_kg: float, radius_m: float
) -> str:
    """Yerkes luminosity class; empty for neutron stars and black holes.

    Main-sequence stars are dwarfs (V) unless their surface gravity has
    dropped to log g <= 4.0, which marks a subgiant (IV).
    """
    if stellar_type == StellarType.MAIN_SEQUENCE:
        if surface_gravity_log_g(mass_kg, radius_m) > 4.0:
            return "V"
        return "IV"
    if stellar_type == StellarType.WHITE_DWARF:
        return "VII"
    if stellar_type == StellarType.WOLF_RAYET:
        return "I"
    return ""


def roll_white_dwarf_composition(random: RandomFn) -> dict[str, float]:
    """Surface abundance fractions; about half of white dwarfs are hydrogen-rich."""
    if random() > 0.5:
        hydrogen = 0.6 + random() * 0.3
    else:
        hydrogen = 0.1 + random() * 0.3
    return {
        "hydrogen": hydrogen,
        "helium": random() * 0.4,
        "carbon": random() * 0.1,
        "metals": random() * 0.05,
    }


def white_dwarf_type(composition: dict[str, float], temperature_k: float) -> str:
    """Atmospheric class of a white dwarf from its dominant surface features."""
    if composition.get("hydrogen", 0.0) > 0.5:
        return "DA"
    if composition.get("helium", 0.0) > 0.5:
        return "DB"
    if composition.get("carbon", 0.0) > 0.1:
        return "DQ"
    if composition.get("metals", 0.0) > 0.1:
        return "DZ"
    if temperature_k > WHITE_DWARF_HOT_LIMIT_K:
        return "DO"
    return "DC"


def black_hole_mass_category(mass_kg: float) -> str:
    mass_solar = mass_kg / SOLAR_MASS
    if mass_solar < INTERMEDIATE_BLACK_HOLE_MASS:
        return "stellar"
    if mass_solar < SUPERMASSIVE_BLACK_HOLE_MASS:
        return "intermediate"
    return "supermassive"


def roll_stellar_details(
    random: RandomFn, stellar_type: StellarType, mass_kg: float, temperature_k: float
) -> dict:
    """Age, metallicity, rotation and remnant characteristics for a star.

    Returns:
        Keyword arguments for StarProperties
    """
    low, high = METALLICITY_RANGE_DEX
    details = {
        "metallicity": low + random() * (high - low),
        "age_years": random() * UNIVERSE_AGE_YEARS,
    }

    if stellar_type == StellarType.NEUTRON_STAR:
        period = random() * PULSAR_MAX_PERIOD_S
        field_low, field_high = NEUTRON_STAR_FIELD_RANGE_GAUSS
        field_strength = field_low + random() * (field_high - field_low)
        details.update(
            rotation_period_s=period,
            magnetic_field_gauss=field_strength,
            is_pulsar=period < PULSAR_PERIOD_LIMIT_S,
            is_magnetar=field_strength > MAGNETAR_FIELD_GAUSS,
        )
    elif stellar_type == StellarType.BLACK_HOLE:
        rotating = random() >= BLACK_HOLE_NONROTATING_CHANCE
        details.update(
            rotation_period_s=_rotation_period(random) if rotating else 0.0,
            black_hole_mass_category=black_hole_mass_category(mass_kg),
            black_hole_rotation="kerr" if rotating else "schwarzschild",
        )
    else:
        details["rotation_period_s"] = _rotation_period(random)

    if stellar_type == StellarType.WHITE_DWARF:
        composition = roll_white_dwarf_composition(random)
        details["white_dwarf_type"] = white_dwarf_type(composition, temperature_k)
    return details


def _rotation_period(random: RandomFn) -> float:
    low, high = STELLAR_ROTATION_RANGE_HOURS
    return (low + random() * (high - low)) * 3600.0


def _spectral_designation(
    stellar_type: StellarType,
    spectral_class: SpectralClass,
    luminosity_class: str,
    white_dwarf_class: Optional[str],
) -> str:
    if stellar_type == StellarType.MAIN_SEQUENCE:
        return f"{spectral_class.value}{luminosity_class}"
    if stellar_type == StellarType.WHITE_DWARF:
        return white_dwarf_class or "D"
    if stellar_type == StellarType.NEUTRON_STAR:
        return "P"
    if stellar_type == StellarType.BLACK_HOLE:
        return "X"
    return "W"


def generate_star(
    random: RandomFn, namer: CelestialNamer, system_seed: str
) -> CelestialObject:
    """Generate a single star at the origin with no parent.

    Type, mass, radius, temperature and name come from ``random``. Age,
    metallicity, rotation and remnant details are rolled from the star's own
    seed, so they never shift the draws of the rest of the system.

    Args:
        random: Seeded random source
        namer: Per-system name registry
        system_seed: Seed of the whole system, used for the per-object seed

    Returns:
        Star object; the caller places it relative to the other stars
    """
    stellar_type = roll_stellar_type(random)
    mass, radius, temperature = _stellar_parameters(random, stellar_type)
    spectral_class = spectral_class_for_temperature(temperature)
    luminosity_class = luminosity_class_for(stellar_type, mass, radius)

    if stellar_type == StellarType.BLACK_HOLE:
        luminosity = 0.0
        color = "#000000"
    else:
        luminosity = luminosity_solar(radius, temperature)
        color = SPECTRAL_CLASS_COLORS[spectral_class.value]

    name = namer.next_name()
    star_id = f"star-{slugify(name)}"
    seed = f"{system_seed}-{star_id}"
    details = roll_stellar_details(SeededRandom(seed), stellar_type, mass, temperature)
    designation = _spectral_designation(
        stellar_type, spectral_class, luminosity_class, details.get("white_dwarf_type")
    )
    return CelestialObject(
        id=star_id,
        name=name,
        type=CelestialType.STAR,
        mass_kg=mass,
        radius_m=radius,
        temperature_k=temperature,
        properties=StarProperties(
            stellar_type=stellar_type,
            spectral_class=designation,
            main_spectral_class=spectral_class,
            luminosity_class=luminosity_class,
            luminosity=luminosity,
            color=color,
            **details,
        ),
        seed=seed,
    )


def barycentric_orbit(
    primary_mass_kg: float,
    companion_mass_kg: float,
    companion_orbit: OrbitalParameters,
) -> Optional[OrbitalParameters]:
    """Back-compute the primary's orbit about the pair's barycenter.

    The primary's semi-major axis is the companion's scaled by
    m_companion / m_total, with periapsis argument and mean anomaly rotated by
    pi and the same period. Returns None when the total mass is not positive.
    """
    total_mass = primary_mass_kg + companion_mass_kg
    if total_mass <= 0:
        logger.warning(
            f"Cannot compute barycenter for total mass {total_mass}; primary stays fixed"
        )
        return None
    return OrbitalParameters(
        semi_major_axis_m=companion_mass_kg / total_mass * companion_orbit.semi_major_axis_m,
        eccentricity=companion_orbit.eccentricity,
        inclination=companion_orbit.inclination,
        longitude_of_ascending_node=companion_orbit.longitude_of_ascending_node,
        argument_of_periapsis=normalize_angle(companion_orbit.argument_of_periapsis + math.pi),
        mean_anomaly=normalize_angle(companion_orbit.mean_anomaly + math.pi),
        period_s=companion_orbit.period_s,
    )


def _companion_orbit(
    random: RandomFn, primary: CelestialObject, companion: CelestialObject
) -> OrbitalParameters:
    distance_au = COMPANION_MIN_DISTANCE_AU + random() ** 3 * COMPANION_DISTANCE_SPAN_AU
    eccentricity = 0.1 + random() * 0.4
    inclination = (random() - 0.5) * 0.2
    node = random() * TWO_PI
    periapsis = random() * TWO_PI
    mean_anomaly = random() * TWO_PI

    # Keep the companion's periapsis clear of both stellar surfaces
    min_sma = (
        PERIAPSIS_CLEARANCE
        * COMPANION_PERIAPSIS_SAFETY
        * (primary.radius_m + companion.radius_m)
        / (1 - eccentricity)
    )
    semi_major_axis = max(distance_au * AU, min_sma)
    return make_orbit(
        semi_major_axis,
        eccentricity,
        inclination,
        node,
        periapsis,
        mean_anomaly,
        primary.mass_kg + companion.mass_kg,
    )


def generate_stars_in_system(
    random: RandomFn, namer: CelestialNamer, system_seed: str
) -> list[CelestialObject]:
    """Generate all stars of a system in world-frame states.

    Algorithm:
    1. Roll the star count (1-8) and generate each star
    2. Sort by mass, heaviest first; the heaviest is the main star
    3. Provisional pass: orbit each companion around a stationary primary
    4. Corrected pass: back-compute the primary's orbit about the barycenter
       of itself and its most massive companion, then superpose the
       primary's state onto every companion's provisional state

    Returns:
        Stars sorted by mass, main star first
    """
    count = roll_star_count(random)
    stars = [generate_star(random, namer, system_seed) for _ in range(count)]
    stars.sort(key=lambda s: s.mass_kg, reverse=True)

    primary, companions = stars[0], stars[1:]
    primary.properties.is_main_star = True
    primary.properties.partner_stars = [c.id for c in companions]

    # Provisional: companions around a fixed primary
    provisional = []
    for companion in companions:
        orbit = _companion_orbit(random, primary, companion)
        validate_orbit(orbit, primary.radius_m, companion.id)
        companion.orbit = orbit
        companion.parent_id = primary.id
        companion.current_parent_id = primary.id
        companion.properties.partner_stars = [primary.id]
        provisional.append(relative_state(orbit))

    # Corrected: primary about the barycenter with its dominant companion
    if companions:
        dominant = companions[0]
        primary_orbit = barycentric_orbit(primary.mass_kg, dominant.mass_kg, dominant.orbit)
        if primary_orbit is not None:
            primary.orbit = primary_orbit
            primary.state = relative_state(primary_orbit)
        for companion, state in zip(companions, provisional):
            companion.state = primary.state + state

    logger.debug(f"Generated {len(stars)} star(s); main star {primary.id}")
    return stars
