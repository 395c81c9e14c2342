from docverify.face.base import BaseFaceDetector, BaseFaceMatcher
from docverify.imaging.exceptions import ImageNotFoundError, UnsupportedImageError
from docverify.imaging.models import ImageAsset
from docverify.logging.logger import Log
from docverify.verification import messages
from docverify.verification.config import VerificationConfig
from docverify.verification.models import FaceComparisonResult, FailureKind


class FaceComparator:
    """Checks that a selfie and the document photo both show a face and match.

    Matching is delegated to a pluggable BaseFaceMatcher; the score it returns
    is reported as the comparison confidence.
    """

    def __init__(
        self,
        detector: BaseFaceDetector,
        matcher: BaseFaceMatcher,
        config: VerificationConfig,
    ) -> None:
        self._detector = detector
        self._matcher = matcher
        self._config = config

    def compare(self, selfie: ImageAsset, document: ImageAsset) -> FaceComparisonResult:
        try:
            selfie.verify()
            document.verify()
        except ImageNotFoundError:
            return self._rejected(messages.IMAGES_NOT_FOUND, FailureKind.INPUT, confidence=0.0)
        except UnsupportedImageError as exc:
            Log.warning(f"Rejected image upload: {exc}")
            return self._rejected(messages.UNSUPPORTED_IMAGE, FailureKind.INPUT, confidence=0.0)

        if not self._detector.has_face(selfie):
            return self._rejected(
                messages.NO_FACE_IN_SELFIE,
                FailureKind.FACE_PRESENCE,
                confidence=self._config.face_absent_confidence,
            )
        if not self._detector.has_face(document):
            return self._rejected(
                messages.NO_FACE_IN_DOCUMENT,
                FailureKind.FACE_PRESENCE,
                confidence=self._config.face_absent_confidence,
            )

        score = min(max(self._matcher.score(selfie, document), 0.0), 1.0)
        if score < self._config.face_match_threshold:
            return self._rejected(
                messages.FACES_DO_NOT_MATCH,
                FailureKind.FACE_MISMATCH,
                confidence=score,
            )
        return FaceComparisonResult(success=True, confidence=score, matched=True)

    def _rejected(
        self,
        error_message: str,
        failure_kind: FailureKind,
        confidence: float,
    ) -> FaceComparisonResult:
        return FaceComparisonResult(
            success=False,
            confidence=confidence,
            matched=False,
            error_message=error_message,
            failure_kind=failure_kind,
        )
