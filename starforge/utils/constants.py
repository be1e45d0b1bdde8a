"""Physical constants and generation tables."""

import math

# Physical constants (SI)
G = 6.6743e-11  # Gravitational constant, m^3 kg^-1 s^-2
C = 299792458.0  # Speed of light, m/s
AU = 149597870700.0  # Astronomical unit, m
STEFAN_BOLTZMANN = 5.670374419e-8  # W m^-2 K^-4

SOLAR_MASS = 1.989e30  # kg
SOLAR_RADIUS = 696340e3  # m
SOLAR_LUMINOSITY = 3.828e26  # W

EARTH_MASS = 5.972e24  # kg
EARTH_RADIUS = 6.371e6  # m

TWO_PI = 2 * math.pi

# Star count ladder: (cumulative probability, star count)
# 1: 40%, 2: 30%, 3: 12%, 4: 7%, 5: 5%, 6: 3%, 7: 2%, 8: 1%
STAR_COUNT_LADDER = (
    (0.40, 1),
    (0.70, 2),
    (0.82, 3),
    (0.89, 4),
    (0.94, 5),
    (0.97, 6),
    (0.99, 7),
    (1.00, 8),
)
MAX_STARS = 8

# Relative weights for the stellar type roll
STELLAR_TYPE_WEIGHTS = {
    "MAIN_SEQUENCE": 70,
    "WHITE_DWARF": 15,
    "NEUTRON_STAR": 5,
    "BLACK_HOLE": 5,
    "WOLF_RAYET": 5,
}

# Minimum main-sequence radius per spectral class, in solar radii
MIN_MAIN_SEQUENCE_RADIUS = {
    "O": 6.6,
    "B": 3.0,
    "A": 1.5,
    "F": 1.15,
    "G": 0.85,
    "K": 0.65,
    "M": 0.4,
}

# Approximate blackbody colors for each spectral class
SPECTRAL_CLASS_COLORS = {
    "O": "#9bb0ff",
    "B": "#aabfff",
    "A": "#cad7ff",
    "F": "#f8f7ff",
    "G": "#fff4ea",
    "K": "#ffd2a1",
    "M": "#ffcc6f",
}

# Stellar physics data
UNIVERSE_AGE_YEARS = 13.8e9
METALLICITY_RANGE_DEX = (-0.5, 0.5)
STELLAR_ROTATION_RANGE_HOURS = (24.0, 1024.0)
PULSAR_MAX_PERIOD_S = 20.0
PULSAR_PERIOD_LIMIT_S = 10.0  # Neutron stars spinning faster than this are pulsars
NEUTRON_STAR_FIELD_RANGE_GAUSS = (1e8, 1e15)
MAGNETAR_FIELD_GAUSS = 1e14
BLACK_HOLE_NONROTATING_CHANCE = 0.1
INTERMEDIATE_BLACK_HOLE_MASS = 100.0  # Solar masses
SUPERMASSIVE_BLACK_HOLE_MASS = 1e5  # Solar masses
WHITE_DWARF_HOT_LIMIT_K = 45000.0  # DO dwarfs show ionized helium above this

# Companion stars
COMPANION_MIN_DISTANCE_AU = 0.1
COMPANION_DISTANCE_SPAN_AU = 199.9
COMPANION_PERIAPSIS_SAFETY = 1.5  # Multiplier on the 1.1x periapsis clearance

# Orbit validity
PERIAPSIS_CLEARANCE = 1.1  # Periapsis must exceed parent radius times this

# Planet zones (AU)
INNER_ZONE_LIMIT_AU = 2.5
MIDDLE_ZONE_LIMIT_AU = 8.0

# Asteroid belts
BELT_CHANCE = 0.15
BELT_BAND_AU = (2.0, 10.0)
GUARANTEED_BELT_RANGE_AU = (2.0, 6.0)

# Moons
MIN_MOON_HOST_DISTANCE_AU = 0.3
MAX_MOONS = 4
CAPTURED_MOON_CHANCE = 0.1

# Gas giant (Sudarsky) class temperature limits, K
GAS_GIANT_CLASS_LIMITS = (150.0, 250.0, 800.0, 1400.0)

# Oort cloud
OORT_CLOUD_MIN_INNER_AU = 2000.0
OORT_CLOUD_OUTER_RANGE_AU = (50000.0, 100000.0)

# Ring and belt material colors
ROCKY_TYPE_COLORS = {
    "ICE": "#e8f4ff",
    "METALLIC": "#a8a8b0",
    "LIGHT_ROCK": "#c2b280",
    "DARK_ROCK": "#5a4d41",
    "ICE_DUST": "#d6e2ea",
    "DUST": "#b09a80",
}

ROCKY_TYPE_COMPOSITION = {
    "ICE": ["water ice", "ammonia ice"],
    "METALLIC": ["iron", "nickel"],
    "LIGHT_ROCK": ["silicates", "feldspar"],
    "DARK_ROCK": ["carbonaceous rock", "basalt"],
    "ICE_DUST": ["water ice", "dust"],
    "DUST": ["silicate dust", "carbon dust"],
}
