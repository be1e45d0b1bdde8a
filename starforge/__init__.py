"""Starforge - deterministic procedural star-system generation."""

from .engine import GenerationError, InvalidOrbitError, SystemStream, generate_system
from .models import CelestialObject, CelestialType
from .schemas import GeneratorConfig, ScaleConfig

__all__ = [
    "GenerationError",
    "InvalidOrbitError",
    "SystemStream",
    "generate_system",
    "CelestialObject",
    "CelestialType",
    "GeneratorConfig",
    "ScaleConfig",
]
