from dataclasses import dataclass
from enum import StrEnum


class Stage(StrEnum):
    ANALYZING_PRIMARY = "analyzing_primary"
    ANALYZING_SECONDARY = "analyzing_secondary"
    COMPARING_FACES = "comparing_faces"
    ENQUEUING = "enqueuing"
    DONE = "done"


@dataclass(frozen=True)
class PipelineOutcome:
    """Terminal result of one verification run.

    ``message`` is safe to show to the submitting user. ``stage`` is the
    stage that ended the run and is meant for callers and logs only.
    """

    success: bool
    message: str
    stage: Stage
