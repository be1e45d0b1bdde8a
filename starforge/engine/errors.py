"""Exceptions raised by the generation engine."""


class GenerationError(RuntimeError):
    """Fatal failure: the system cannot be generated at all."""


class InvalidOrbitError(ValueError):
    """An individual body's orbit is invalid; the body is skipped."""
