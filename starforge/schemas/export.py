"""Pydantic schemas for exporting a generated system as JSON."""

from collections import Counter
from dataclasses import asdict
from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field

from ..models.celestial import CelestialObject
from ..utils.vectors import Vector3


def _plain(value: Any) -> Any:
    """Convert dataclass output into JSON-friendly values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def _vector(vector: Optional[Vector3]) -> Optional[list[float]]:
    return None if vector is None else list(vector.as_tuple())


class OrbitRecord(BaseModel):
    """Keplerian elements, angles in radians."""

    semi_major_axis_m: float = Field(gt=0)
    eccentricity: float = Field(ge=0, lt=1)
    inclination: float
    longitude_of_ascending_node: float
    argument_of_periapsis: float
    mean_anomaly: float
    period_s: float = Field(ge=0)


class CelestialObjectRecord(BaseModel):
    """Flat JSON view of a celestial object."""

    id: str
    name: str
    type: str
    status: str
    parent_id: Optional[str] = None
    current_parent_id: Optional[str] = None
    mass_kg: float = Field(ge=0)
    radius_m: float = Field(ge=0)
    temperature_k: float
    albedo: Optional[float] = None
    rotation_period_s: Optional[float] = None
    axial_tilt: Optional[list[float]] = None
    position_m: list[float] = Field(description="World-frame position at epoch 0")
    velocity_mps: list[float] = Field(description="World-frame velocity at epoch 0")
    orbit: Optional[OrbitRecord] = None
    seed: str
    properties: dict[str, Any]

    @classmethod
    def from_object(cls, obj: CelestialObject) -> "CelestialObjectRecord":
        orbit = None
        if obj.orbit is not None:
            orbit = OrbitRecord(**asdict(obj.orbit))
        return cls(
            id=obj.id,
            name=obj.name,
            type=obj.type.value,
            status=obj.status.value,
            parent_id=obj.parent_id,
            current_parent_id=obj.current_parent_id,
            mass_kg=obj.mass_kg,
            radius_m=obj.radius_m,
            temperature_k=obj.temperature_k,
            albedo=obj.albedo,
            rotation_period_s=obj.rotation_period_s,
            axial_tilt=_vector(obj.axial_tilt),
            position_m=_vector(obj.state.position_m),
            velocity_mps=_vector(obj.state.velocity_mps),
            orbit=orbit,
            seed=obj.seed,
            properties=_plain(asdict(obj.properties)),
        )


class DiagnosticRecord(BaseModel):
    stage: str
    object_id: Optional[str] = None
    message: str


class SystemExport(BaseModel):
    """A full generated system plus summary counts."""

    seed: str
    max_system_modifier: int = Field(ge=0)
    counts: dict[str, int] = Field(description="Number of objects per celestial type")
    objects: list[CelestialObjectRecord]
    diagnostics: list[DiagnosticRecord] = []

    @classmethod
    def from_objects(
        cls,
        seed: str,
        max_system_modifier: int,
        objects: Iterable[CelestialObject],
        diagnostics: Iterable[Any] = (),
    ) -> "SystemExport":
        """Build an export from emitted objects and diagnostic records.

        Args:
            seed: System seed
            max_system_modifier: Modifier used for the run
            objects: Emitted objects, in order
            diagnostics: Records with ``stage``, ``object_id`` and ``message``
        """
        objects = list(objects)
        counts = Counter(obj.type.value for obj in objects)
        return cls(
            seed=seed,
            max_system_modifier=max_system_modifier,
            counts=dict(counts),
            objects=[CelestialObjectRecord.from_object(obj) for obj in objects],
            diagnostics=[
                DiagnosticRecord(stage=d.stage, object_id=d.object_id, message=d.message)
                for d in diagnostics
            ],
        )
