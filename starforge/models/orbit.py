"""Orbital elements and kinematic state."""

import math
from dataclasses import dataclass, field

from ..utils.vectors import Vector3


@dataclass
class OrbitalParameters:
    """Keplerian elements relative to the parent body. Angles in radians."""

    semi_major_axis_m: float
    eccentricity: float
    inclination: float
    longitude_of_ascending_node: float
    argument_of_periapsis: float
    mean_anomaly: float
    period_s: float

    @property
    def periapsis_m(self) -> float:
        return self.semi_major_axis_m * (1 - self.eccentricity)

    @property
    def apoapsis_m(self) -> float:
        return self.semi_major_axis_m * (1 + self.eccentricity)

    def is_valid(self) -> bool:
        values = (
            self.semi_major_axis_m,
            self.eccentricity,
            self.inclination,
            self.longitude_of_ascending_node,
            self.argument_of_periapsis,
            self.mean_anomaly,
            self.period_s,
        )
        if not all(math.isfinite(v) for v in values):
            return False
        return self.semi_major_axis_m > 0 and 0 <= self.eccentricity < 1


@dataclass
class PhysicsState:
    """Absolute world-frame state at epoch 0."""

    position_m: Vector3 = field(default_factory=Vector3)
    velocity_mps: Vector3 = field(default_factory=Vector3)

    def __add__(self, other: "PhysicsState") -> "PhysicsState":
        return PhysicsState(
            position_m=self.position_m + other.position_m,
            velocity_mps=self.velocity_mps + other.velocity_mps,
        )

    def is_finite(self) -> bool:
        return self.position_m.is_finite() and self.velocity_mps.is_finite()
