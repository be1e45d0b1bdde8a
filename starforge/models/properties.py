"""Type-specific payloads carried by celestial objects.

Each payload dataclass has a fixed ``type`` discriminator, so the set of
payloads forms a closed tagged union (``CelestialProperties``).
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from .enums import (
    AtmosphereType,
    CelestialType,
    GasGiantClass,
    PlanetType,
    RockyType,
    SpectralClass,
    StellarType,
    SurfaceType,
)


@dataclass
class StarProperties:
    stellar_type: StellarType
    spectral_class: str  # Full designation, e.g. "GV", "DA", "P"
    main_spectral_class: SpectralClass
    luminosity_class: str
    luminosity: float  # Solar luminosities
    color: str  # Hex
    is_main_star: bool = False
    partner_stars: list[str] = field(default_factory=list)
    metallicity: float = 0.0  # [Fe/H], dex
    age_years: float = 0.0
    rotation_period_s: float = 0.0  # 0 for a non-rotating body
    # Remnant details, None where they do not apply
    white_dwarf_type: Optional[str] = None  # DA, DB, DQ, DZ, DO or DC
    magnetic_field_gauss: Optional[float] = None
    is_pulsar: Optional[bool] = None
    is_magnetar: Optional[bool] = None
    black_hole_mass_category: Optional[str] = None  # stellar, intermediate, supermassive
    black_hole_rotation: Optional[str] = None  # kerr or schwarzschild
    type: CelestialType = field(default=CelestialType.STAR, init=False)


@dataclass
class SurfaceProperties:
    """Procedural surface parameters for the renderer."""

    planet_type: PlanetType
    surface_type: SurfaceType
    roughness: float
    persistence: float
    lacunarity: float
    octaves: int
    simple_period: float
    bump_scale: float
    colors: list[str]  # Five gradient colors, lowest to highest elevation
    heights: list[float]  # Five thresholds in [0, 1], ascending
    shininess: float
    specular_strength: float
    terrain_type: int  # 1 = simple, 2 = sharp peaks, 3 = sharp valleys
    terrain_amplitude: float
    terrain_sharpness: float


@dataclass
class AtmosphereProperties:
    type: AtmosphereType
    pressure: float  # Bar
    composition: list[str]
    glow_color: str
    intensity: float
    power: float
    thickness: float


@dataclass
class CloudProperties:
    color: str
    opacity: float
    coverage: float
    speed: float


@dataclass
class PlanetProperties:
    """Payload for rocky planets and moons."""

    planet_type: PlanetType
    composition: list[str]
    surface: SurfaceProperties
    atmosphere: Optional[AtmosphereProperties] = None
    clouds: Optional[CloudProperties] = None
    is_moon: bool = False
    parent_planet: Optional[str] = None
    type: CelestialType = field(default=CelestialType.PLANET, init=False)

    def __post_init__(self):
        if self.is_moon:
            self.type = CelestialType.MOON


@dataclass
class GasGiantAtmosphere:
    type: AtmosphereType
    composition: list[str]
    pressure: float  # Bar


@dataclass
class GasGiantProperties:
    gas_giant_class: GasGiantClass
    atmosphere: GasGiantAtmosphere
    atmosphere_color: str
    cloud_color: str
    cloud_speed: float
    type: CelestialType = field(default=CelestialType.GAS_GIANT, init=False)


@dataclass
class RingProperties:
    """A single ring. Radii are in scene units, not meters."""

    inner_radius: float
    outer_radius: float
    density: float
    opacity: float
    color: str
    tilt: float
    rotation_rate: float
    texture: str
    composition: list[str]
    type: RockyType


@dataclass
class RingSystemProperties:
    rings: list[RingProperties]
    parent_id: str
    type: CelestialType = field(default=CelestialType.RING_SYSTEM, init=False)


@dataclass
class AsteroidFieldProperties:
    inner_radius_au: float
    outer_radius_au: float
    height_au: float
    count: int
    color: str
    composition: list[str]
    belt_type: RockyType
    type: CelestialType = field(default=CelestialType.ASTEROID_FIELD, init=False)


@dataclass
class OortCloudProperties:
    inner_radius_au: float
    outer_radius_au: float
    composition: list[str]
    particle_count: int
    particle_color: str
    type: CelestialType = field(default=CelestialType.OORT_CLOUD, init=False)


CelestialProperties = Union[
    StarProperties,
    PlanetProperties,
    GasGiantProperties,
    RingSystemProperties,
    AsteroidFieldProperties,
    OortCloudProperties,
]

# Payload class each celestial type must carry
PAYLOAD_TYPES: dict[CelestialType, type] = {
    CelestialType.STAR: StarProperties,
    CelestialType.PLANET: PlanetProperties,
    CelestialType.MOON: PlanetProperties,
    CelestialType.GAS_GIANT: GasGiantProperties,
    CelestialType.RING_SYSTEM: RingSystemProperties,
    CelestialType.ASTEROID_FIELD: AsteroidFieldProperties,
    CelestialType.OORT_CLOUD: OortCloudProperties,
}
