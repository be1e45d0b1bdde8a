"""Pydantic configuration models for system generation."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models.enums import CelestialType
from ..utils.constants import AU


class ScaleConfig(BaseModel):
    """Presentation scaling, passed explicitly to the ring generator.

    Ring geometry is expressed in scene units; every other quantity in the
    generated system stays in SI units.
    """

    model_config = ConfigDict(frozen=True)

    render_scale_au: float = Field(
        default=1000.0, gt=0, description="Scene units per astronomical unit"
    )
    size: float = Field(default=1.0, gt=0, description="Size multiplier for planets and moons")
    gas_giant_size: float = Field(default=1.0, gt=0, description="Size multiplier for gas giants")
    star_size: float = Field(default=1.0, gt=0, description="Size multiplier for stars")

    @property
    def scene_units_per_meter(self) -> float:
        return self.render_scale_au / AU

    def scale_size(self, radius_m: float, celestial_type: CelestialType) -> float:
        """Convert a physical radius to a visual radius in scene units."""
        if celestial_type == CelestialType.STAR:
            multiplier = self.star_size
        elif celestial_type == CelestialType.GAS_GIANT:
            multiplier = self.gas_giant_size
        else:
            multiplier = self.size
        return radius_m * self.scene_units_per_meter * multiplier


class GeneratorConfig(BaseModel):
    """Tunable parameters for one generation run."""

    model_config = ConfigDict(frozen=True)

    max_system_modifier: int = Field(
        default=20, ge=0, description="Upper bound added to the 5-slot base orbit cap"
    )
    initial_distance_au: float = Field(default=0.3, gt=0, description="First candidate orbit")
    min_step_au: float = Field(default=0.2, gt=0, description="Minimum spacing between candidates")
    max_step_au: float = Field(default=20.0, gt=0, description="Maximum spacing between candidates")
    step_rate: float = Field(default=0.8, gt=0, description="Rate of the exponential step draw")
    max_placement_au: float = Field(default=500.0, gt=0, description="Outermost candidate orbit")
    total_potential_orbits: int = Field(
        default=300, gt=0, description="Number of candidate orbits scanned"
    )
    parent_proximity_multiplier: float = Field(
        default=1.5, gt=0, description="Minimum distance to the parent star in parent radii"
    )
    other_star_proximity_multiplier: float = Field(
        default=1.2, gt=0, description="Minimum distance to other stars in their radii"
    )
    include_oort_cloud: bool = Field(
        default=False, description="Append an Oort cloud around the main star"
    )
    scale: ScaleConfig = Field(default_factory=ScaleConfig)

    @model_validator(mode="after")
    def check_step_bounds(self) -> "GeneratorConfig":
        """Reject an inverted step range."""
        if self.max_step_au < self.min_step_au:
            raise ValueError(
                f"max_step_au ({self.max_step_au}) must be >= min_step_au ({self.min_step_au})"
            )
        return self
