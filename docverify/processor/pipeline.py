from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from docverify.imaging.models import ImageAsset
from docverify.processor.models import Stage
from docverify.verification.models import (
    DocumentAnalysisResult,
    FaceComparisonResult,
    FailureKind,
)


@dataclass(slots=True)
class PipelineContext:
    user_id: int
    front: ImageAsset
    back: ImageAsset
    selfie: ImageAsset
    submission_id: str | None = None
    stage: Stage = Stage.ANALYZING_PRIMARY
    primary_analysis: DocumentAnalysisResult | None = None
    secondary_analysis: DocumentAnalysisResult | None = None
    face_comparison: FaceComparisonResult | None = None
    enqueued: bool = False
    # Set once a step that writes outside the run has started
    committing: bool = False

    def close(self) -> None:
        for image in (self.front, self.back, self.selfie):
            image.close()


@dataclass(frozen=True)
class StepResult:
    success: bool
    error_message: str | None = None
    failure_kind: FailureKind | None = None
    details: dict[str, object] = field(default_factory=dict)


class PipelineStep(ABC):
    stage: ClassVar[Stage]
    # Prepended to the user-facing message when this step fails
    failure_prefix: ClassVar[str]
    # A committing step is never abandoned by a timeout once it has started
    commits: ClassVar[bool] = False

    @abstractmethod
    def run(self, context: PipelineContext) -> StepResult:
        raise NotImplementedError
