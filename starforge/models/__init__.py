"""Data models for Starforge."""

from .celestial import CelestialObject
from .enums import (
    AtmosphereType,
    CelestialStatus,
    CelestialType,
    GasGiantClass,
    PlanetType,
    PlanetZone,
    RockyType,
    SpectralClass,
    StellarType,
    SurfaceType,
)
from .orbit import OrbitalParameters, PhysicsState
from .properties import (
    AsteroidFieldProperties,
    AtmosphereProperties,
    CelestialProperties,
    CloudProperties,
    GasGiantAtmosphere,
    GasGiantProperties,
    OortCloudProperties,
    PlanetProperties,
    RingProperties,
    RingSystemProperties,
    StarProperties,
    SurfaceProperties,
)

__all__ = [
    "CelestialObject",
    "AtmosphereType",
    "CelestialStatus",
    "CelestialType",
    "GasGiantClass",
    "PlanetType",
    "PlanetZone",
    "RockyType",
    "SpectralClass",
    "StellarType",
    "SurfaceType",
    "OrbitalParameters",
    "PhysicsState",
    "AsteroidFieldProperties",
    "AtmosphereProperties",
    "CelestialProperties",
    "CloudProperties",
    "GasGiantAtmosphere",
    "GasGiantProperties",
    "OortCloudProperties",
    "PlanetProperties",
    "RingProperties",
    "RingSystemProperties",
    "StarProperties",
    "SurfaceProperties",
]
