"""Generation engine components."""

from .diagnostics import Diagnostic, GenerationDiagnostics
from .errors import GenerationError, InvalidOrbitError
from .hierarchy import validate_and_correct_hierarchy
from .pipeline import SystemGenerator, generate_system
from .stream import Subscription, SystemStream

__all__ = [
    "Diagnostic",
    "GenerationDiagnostics",
    "GenerationError",
    "InvalidOrbitError",
    "validate_and_correct_hierarchy",
    "SystemGenerator",
    "generate_system",
    "Subscription",
    "SystemStream",
]
