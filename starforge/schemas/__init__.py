"""Pydantic schemas for configuration and export."""

from .config import GeneratorConfig, ScaleConfig
from .export import CelestialObjectRecord, DiagnosticRecord, OrbitRecord, SystemExport

__all__ = [
    "GeneratorConfig",
    "ScaleConfig",
    "CelestialObjectRecord",
    "DiagnosticRecord",
    "OrbitRecord",
    "SystemExport",
]
