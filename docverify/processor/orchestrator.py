import threading
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from pathlib import Path

from docverify.config.settings import Settings
from docverify.database.repositories.moderation_repository import ModerationRepository
from docverify.face.factory import FaceDetectorFactory
from docverify.face.presence_matcher import PresenceOnlyFaceMatcher
from docverify.imaging.resolver import ImageResolver
from docverify.logging.logger import Log
from docverify.ocr.factory import TextExtractorFactory
from docverify.processor.models import PipelineOutcome, Stage
from docverify.processor.pipeline import PipelineContext, PipelineStep, StepResult
from docverify.processor.steps import (
    AnalyzePrimaryStep,
    AnalyzeSecondaryStep,
    CompareFacesStep,
    EnqueueStep,
)
from docverify.verification import messages
from docverify.verification.analyzer import DocumentAnalyzer
from docverify.verification.classifier import DocumentClassifier
from docverify.verification.config import VerificationConfig
from docverify.verification.enqueuer import ModerationEnqueuer
from docverify.verification.face_comparator import FaceComparator
from docverify.verification.models import FailureKind


class VerificationOrchestrator:
    """Runs the verification stages for one submission.

    Pipeline: analyze front -> analyze back -> compare faces -> enqueue.
    Stages run strictly in order and the first failure ends the run; later
    stages are never started. Exceptions raised by a stage are converted into
    a failed outcome at that stage's boundary.
    """

    def __init__(
        self,
        resolver: ImageResolver,
        steps: list[PipelineStep],
        timeout_seconds: float | None = None,
    ) -> None:
        self._resolver = resolver
        self._steps = steps
        self._timeout_seconds = timeout_seconds

    def process(
        self,
        user_id: int,
        front_reference: str,
        back_reference: str,
        selfie_reference: str,
        submission_id: str | None = None,
        cancel_event: threading.Event | None = None,
    ) -> PipelineOutcome:
        """Verify a front/back/selfie triple and queue it for human review.

        Cancellation and the timeout are honoured between stages only; a stage
        that is already running (e.g. OCR) completes first. Once the enqueue
        stage has started the run is no longer abandoned: the timeout waits
        for it and returns its real outcome.
        """
        context = PipelineContext(
            user_id=user_id,
            front=self._resolver.resolve(front_reference),
            back=self._resolver.resolve(back_reference),
            selfie=self._resolver.resolve(selfie_reference),
            submission_id=submission_id,
        )
        cancel = cancel_event if cancel_event is not None else threading.Event()
        # Guards the cancel check and the start of a committing stage
        guard = threading.Lock()

        if not self._timeout_seconds:
            return self._run(context, cancel, guard)

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="docverify")
        try:
            future = executor.submit(self._run, context, cancel, guard)
            try:
                return future.result(timeout=self._timeout_seconds)
            except FutureTimeoutError:
                with guard:
                    abandon = not context.committing
                    if abandon:
                        cancel.set()
                if not abandon:
                    Log.warning(
                        f"Document verification exceeded {self._timeout_seconds}s "
                        "while committing; waiting for the stage to finish",
                        user_id=user_id,
                        stage=context.stage,
                    )
                    return future.result()
                # The running stage finishes in the background; no later stage starts.
                Log.error(
                    f"Document verification timed out after {self._timeout_seconds}s",
                    user_id=user_id,
                    stage=context.stage,
                )
                return PipelineOutcome(success=False, message=messages.TIMED_OUT, stage=context.stage)
        finally:
            executor.shutdown(wait=False)

    def _run(
        self,
        context: PipelineContext,
        cancel: threading.Event,
        guard: threading.Lock,
    ) -> PipelineOutcome:
        Log.info(
            f"Starting document verification for user {context.user_id}",
            user_id=context.user_id,
            stage=context.stage,
            front=Path(context.front.reference).name,
            back=Path(context.back.reference).name,
            selfie=Path(context.selfie.reference).name,
        )
        try:
            for step in self._steps:
                with guard:
                    context.stage = step.stage
                    if cancel.is_set():
                        Log.warning(
                            "Document verification cancelled",
                            user_id=context.user_id,
                            stage=step.stage,
                        )
                        return PipelineOutcome(
                            success=False, message=messages.CANCELLED, stage=step.stage
                        )
                    context.committing = step.commits

                outcome = self._run_step(step, context)
                if outcome is not None:
                    return outcome
        finally:
            context.close()

        context.stage = Stage.DONE
        Log.info(
            f"Document verification completed for user {context.user_id}",
            user_id=context.user_id,
            stage=Stage.DONE,
            status="pending_review",
            primary_confidence=_confidence(context.primary_analysis),
            secondary_confidence=_confidence(context.secondary_analysis),
            face_confidence=_confidence(context.face_comparison),
        )
        return PipelineOutcome(success=True, message=messages.READY_FOR_REVIEW, stage=Stage.DONE)

    def _run_step(self, step: PipelineStep, context: PipelineContext) -> PipelineOutcome | None:
        """Run one stage. Returns a failed outcome, or None to continue."""
        Log.info(f"Stage {step.stage} started", user_id=context.user_id, stage=step.stage)
        try:
            result = step.run(context)
        except Exception as exc:
            Log.error(
                f"Stage {step.stage} raised: {exc}",
                user_id=context.user_id,
                stage=step.stage,
                error_type=type(exc).__name__,
            )
            result = StepResult(
                success=False,
                error_message=str(exc),
                failure_kind=FailureKind.INFRASTRUCTURE,
            )
        else:
            self._log_result(step, context, result)

        if result.success:
            return None
        return PipelineOutcome(
            success=False,
            message=f"{step.failure_prefix}: {_user_message(result)}",
            stage=step.stage,
        )

    def _log_result(self, step: PipelineStep, context: PipelineContext, result: StepResult) -> None:
        message = f"Stage {step.stage} {'succeeded' if result.success else 'failed'}"
        fields: dict[str, object] = {
            "user_id": context.user_id,
            "stage": step.stage,
            "success": result.success,
            "failure_kind": result.failure_kind,
            **result.details,
        }
        if result.success:
            Log.info(message, **fields)
        elif result.failure_kind is FailureKind.INFRASTRUCTURE:
            Log.error(message, **fields)
        else:
            Log.warning(message, **fields)


def _user_message(result: StepResult) -> str:
    if result.failure_kind is FailureKind.INFRASTRUCTURE or not result.error_message:
        return messages.TRY_AGAIN_LATER
    return result.error_message


def _confidence(result: object) -> float | None:
    return getattr(result, "confidence", None)


def build_orchestrator(
    settings: Settings,
    files_root: Path | None = None,
) -> VerificationOrchestrator:
    """Build a VerificationOrchestrator with all required adapters.

    The database pool must be initialized with ``init_pool`` before the
    orchestrator reaches the enqueue stage.
    """
    config = VerificationConfig.from_settings(settings)
    resolver = ImageResolver(
        files_root=files_root if files_root is not None else Path(settings.files_root),
        max_size_bytes=settings.max_image_size_bytes,
    )
    analyzer = DocumentAnalyzer(
        extractor=TextExtractorFactory.create(settings),
        classifier=DocumentClassifier(config),
        config=config,
    )
    comparator = FaceComparator(
        detector=FaceDetectorFactory.create(settings),
        matcher=PresenceOnlyFaceMatcher(config.face_placeholder_confidence),
        config=config,
    )
    enqueuer = ModerationEnqueuer(ModerationRepository())
    steps: list[PipelineStep] = [
        AnalyzePrimaryStep(analyzer),
        AnalyzeSecondaryStep(analyzer),
        CompareFacesStep(comparator),
        EnqueueStep(enqueuer),
    ]
    return VerificationOrchestrator(
        resolver=resolver,
        steps=steps,
        timeout_seconds=settings.pipeline_timeout_seconds or None,
    )
