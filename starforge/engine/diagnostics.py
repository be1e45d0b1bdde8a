"""Per-run diagnostic log for skipped or corrected objects."""

import logging
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class Diagnostic:
    stage: str  # "stars", "bodies", "moons", "belts", "hierarchy"
    object_id: Optional[str]
    message: str


@dataclass
class GenerationDiagnostics:
    """Collects non-fatal problems encountered during one generation run."""

    records: list[Diagnostic] = field(default_factory=list)

    def record(self, stage: str, object_id: Optional[str], message: str):
        """Store a diagnostic and log it as a warning."""
        self.records.append(Diagnostic(stage=stage, object_id=object_id, message=message))
        logger.warning(f"[{stage}] {object_id or '-'}: {message}")

    def for_stage(self, stage: str) -> list[Diagnostic]:
        return [r for r in self.records if r.stage == stage]

    def __len__(self) -> int:
        return len(self.records)
