"""Enumerations shared by the data model and generators."""

from enum import Enum


class CelestialType(str, Enum):
    STAR = "STAR"
    PLANET = "PLANET"
    GAS_GIANT = "GAS_GIANT"
    MOON = "MOON"
    ASTEROID_FIELD = "ASTEROID_FIELD"
    OORT_CLOUD = "OORT_CLOUD"
    RING_SYSTEM = "RING_SYSTEM"


class CelestialStatus(str, Enum):
    ACTIVE = "ACTIVE"


class StellarType(str, Enum):
    MAIN_SEQUENCE = "MAIN_SEQUENCE"
    WHITE_DWARF = "WHITE_DWARF"
    NEUTRON_STAR = "NEUTRON_STAR"
    BLACK_HOLE = "BLACK_HOLE"
    WOLF_RAYET = "WOLF_RAYET"


class SpectralClass(str, Enum):
    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"


class PlanetType(str, Enum):
    """Rocky world sub-types (also used for moons)."""

    ROCKY = "ROCKY"
    TERRESTRIAL = "TERRESTRIAL"
    DESERT = "DESERT"
    LAVA = "LAVA"
    BARREN = "BARREN"
    ICE = "ICE"
    OCEAN = "OCEAN"


class SurfaceType(str, Enum):
    CRATERED = "CRATERED"
    MOUNTAINOUS = "MOUNTAINOUS"
    VOLCANIC = "VOLCANIC"
    FLAT = "FLAT"
    CANYONOUS = "CANYONOUS"
    VARIED = "VARIED"
    ICE_FLATS = "ICE_FLATS"


class AtmosphereType(str, Enum):
    NONE = "NONE"
    THIN = "THIN"
    NORMAL = "NORMAL"
    DENSE = "DENSE"
    VERY_DENSE = "VERY_DENSE"


class GasGiantClass(str, Enum):
    """Sudarsky classification, coldest to hottest."""

    CLASS_I = "CLASS_I"  # Ammonia clouds
    CLASS_II = "CLASS_II"  # Water clouds
    CLASS_III = "CLASS_III"  # Cloudless
    CLASS_IV = "CLASS_IV"  # Alkali metals
    CLASS_V = "CLASS_V"  # Silicate clouds


class RockyType(str, Enum):
    """Particle material for rings and belts."""

    ICE = "ICE"
    METALLIC = "METALLIC"
    LIGHT_ROCK = "LIGHT_ROCK"
    DARK_ROCK = "DARK_ROCK"
    ICE_DUST = "ICE_DUST"
    DUST = "DUST"


class PlanetZone(str, Enum):
    INNER = "INNER"  # < 2.5 AU
    MIDDLE = "MIDDLE"  # 2.5 - 8 AU
    OUTER = "OUTER"  # >= 8 AU, ice-giant zone
