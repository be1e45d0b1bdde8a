"""Celestial object data model."""

import math
from dataclasses import dataclass, field
from typing import Optional

from ..utils.vectors import Vector3
from .enums import CelestialStatus, CelestialType
from .orbit import OrbitalParameters, PhysicsState
from .properties import PAYLOAD_TYPES, CelestialProperties


@dataclass
class CelestialObject:
    """A single generated body: star, planet, moon, ring system, belt or cloud.

    Objects are created once by a generator stage. Only the hierarchy
    validator rewrites parent links, and it does so on copies.
    """

    id: str  # Derived from the parent chain and the generated name
    name: str
    type: CelestialType
    mass_kg: float
    radius_m: float  # Physical radius (outer edge in meters for belts/clouds)
    temperature_k: float
    properties: CelestialProperties
    state: PhysicsState = field(default_factory=PhysicsState)  # World frame, epoch 0
    orbit: Optional[OrbitalParameters] = None  # None for roots and ring systems
    parent_id: Optional[str] = None
    current_parent_id: Optional[str] = None
    seed: str = ""  # Per-object reproducibility seed
    albedo: Optional[float] = None
    rotation_period_s: Optional[float] = None
    axial_tilt: Optional[Vector3] = None  # Unit vector
    status: CelestialStatus = CelestialStatus.ACTIVE

    def __post_init__(self):
        """Validate object data after initialization."""
        expected = PAYLOAD_TYPES[self.type]
        if not isinstance(self.properties, expected):
            raise ValueError(
                f"Invalid properties for {self.type.value}: "
                f"{type(self.properties).__name__} (must be {expected.__name__})"
            )
        if self.properties.type != self.type:
            raise ValueError(
                f"Payload tag {self.properties.type.value} does not match {self.type.value}"
            )
        if not (math.isfinite(self.mass_kg) and self.mass_kg >= 0):
            raise ValueError(f"Invalid mass_kg: {self.mass_kg} (must be >= 0)")
        if not (math.isfinite(self.radius_m) and self.radius_m >= 0):
            raise ValueError(f"Invalid radius_m: {self.radius_m} (must be >= 0)")
        if self.orbit is not None and not (0 <= self.orbit.eccentricity < 1):
            raise ValueError(
                f"Invalid eccentricity: {self.orbit.eccentricity} (must be in [0, 1))"
            )
        if self.current_parent_id is None:
            self.current_parent_id = self.parent_id
