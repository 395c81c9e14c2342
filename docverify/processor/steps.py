from docverify.processor.models import Stage
from docverify.processor.pipeline import PipelineContext, PipelineStep, StepResult
from docverify.verification import messages
from docverify.verification.analyzer import DocumentAnalyzer
from docverify.verification.enqueuer import ModerationEnqueuer
from docverify.verification.face_comparator import FaceComparator
from docverify.verification.models import DocumentAnalysisResult, DocumentType, FailureKind


def _analysis_step_result(result: DocumentAnalysisResult) -> StepResult:
    return StepResult(
        success=result.success,
        error_message=result.error_message,
        failure_kind=result.failure_kind,
        details={
            "confidence": result.confidence,
            "document_type": result.document_type,
            "has_face": result.has_face,
            "error_message": result.error_message,
        },
    )


class AnalyzePrimaryStep(PipelineStep):
    stage = Stage.ANALYZING_PRIMARY
    failure_prefix = messages.FRONT_PREFIX

    def __init__(self, analyzer: DocumentAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> StepResult:
        result = self._analyzer.analyze(context.front, DocumentType.PRIMARY)
        context.primary_analysis = result
        return _analysis_step_result(result)


class AnalyzeSecondaryStep(PipelineStep):
    stage = Stage.ANALYZING_SECONDARY
    failure_prefix = messages.BACK_PREFIX

    def __init__(self, analyzer: DocumentAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> StepResult:
        result = self._analyzer.analyze(context.back, DocumentType.SECONDARY)
        context.secondary_analysis = result
        return _analysis_step_result(result)


class CompareFacesStep(PipelineStep):
    stage = Stage.COMPARING_FACES
    failure_prefix = messages.FACE_PREFIX

    def __init__(self, comparator: FaceComparator) -> None:
        self._comparator = comparator

    def run(self, context: PipelineContext) -> StepResult:
        result = self._comparator.compare(context.selfie, context.front)
        context.face_comparison = result
        return StepResult(
            success=result.success,
            error_message=result.error_message,
            failure_kind=result.failure_kind,
            details={
                "confidence": result.confidence,
                "matched": result.matched,
                "error_message": result.error_message,
            },
        )


class EnqueueStep(PipelineStep):
    stage = Stage.ENQUEUING
    failure_prefix = messages.QUEUE_PREFIX
    commits = True

    def __init__(self, enqueuer: ModerationEnqueuer) -> None:
        self._enqueuer = enqueuer

    def run(self, context: PipelineContext) -> StepResult:
        context.enqueued = self._enqueuer.enqueue(
            context.user_id,
            context.front,
            context.back,
            context.selfie,
            submission_id=context.submission_id,
        )
        if not context.enqueued:
            return StepResult(
                success=False,
                error_message=messages.TRY_AGAIN_LATER,
                failure_kind=FailureKind.INFRASTRUCTURE,
            )
        return StepResult(success=True, details={"submission_id": context.submission_id})
