from docverify.imaging.exceptions import ImageDecodeError, ImageNotFoundError, UnsupportedImageError
from docverify.imaging.models import ImageAsset
from docverify.logging.logger import Log
from docverify.ocr.base import BaseTextExtractor
from docverify.ocr.exceptions import OcrError
from docverify.verification import messages
from docverify.verification.classifier import DocumentClassifier
from docverify.verification.config import VerificationConfig
from docverify.verification.models import DocumentAnalysisResult, DocumentType, FailureKind


class DocumentAnalyzer:
    """Decides whether one image is a readable document of the requested side.

    Every rejection is returned as a failed DocumentAnalysisResult; no error
    raised by the extractor propagates past ``analyze``. Failed results before
    classification report the requested type.
    """

    def __init__(
        self,
        extractor: BaseTextExtractor,
        classifier: DocumentClassifier,
        config: VerificationConfig,
    ) -> None:
        self._extractor = extractor
        self._classifier = classifier
        self._config = config

    def analyze(self, image: ImageAsset, requested_type: DocumentType) -> DocumentAnalysisResult:
        """Run extraction, classification and thresholds for one image.

        Decision order:
        1. missing or unsupported image
        2. OCR failure
        3. not a document (too little text, no document evidence)
        4. type mismatch, then low confidence
        """
        try:
            image.verify()
        except ImageNotFoundError:
            return DocumentAnalysisResult.failed(
                messages.IMAGE_NOT_FOUND, FailureKind.INPUT, requested_type
            )
        except UnsupportedImageError as exc:
            Log.warning(f"Rejected image upload: {exc}", image=image.reference)
            return DocumentAnalysisResult.failed(
                messages.UNSUPPORTED_IMAGE, FailureKind.INPUT, requested_type
            )

        try:
            extraction = self._extractor.extract(image)
        except ImageNotFoundError:
            return DocumentAnalysisResult.failed(
                messages.IMAGE_NOT_FOUND, FailureKind.INPUT, requested_type
            )
        except ImageDecodeError as exc:
            Log.warning(f"Could not decode document image: {exc}", image=image.reference)
            return DocumentAnalysisResult.failed(
                f"{messages.PROCESSING_ERROR}: {messages.UNREADABLE_IMAGE}",
                FailureKind.INPUT,
                requested_type,
            )
        except OcrError as exc:
            Log.error(
                f"OCR failed while analyzing document: {exc}",
                image=image.reference,
                document_type=requested_type,
            )
            return DocumentAnalysisResult.failed(
                f"{messages.PROCESSING_ERROR}: {exc}",
                FailureKind.INFRASTRUCTURE,
                requested_type,
            )
        except Exception as exc:
            Log.error(
                f"Unexpected error while analyzing document: {exc}",
                image=image.reference,
                document_type=requested_type,
                error_type=type(exc).__name__,
            )
            return DocumentAnalysisResult.failed(
                messages.PROCESSING_ERROR,
                FailureKind.INFRASTRUCTURE,
                requested_type,
            )

        confidence = min(max(extraction.engine_confidence, 0.0), 1.0)
        text = extraction.recognized_text
        classification = self._classifier.classify(text, requested_type)

        if not classification.looks_like_document:
            return DocumentAnalysisResult(
                success=False,
                confidence=confidence,
                detected_text=text,
                document_type=DocumentType.UNKNOWN,
                error_message=messages.NOT_A_DOCUMENT,
                failure_kind=FailureKind.CLASSIFICATION,
            )

        detected = classification.detected_type
        is_correct_type = detected is DocumentType.UNKNOWN or detected is requested_type
        is_confident = confidence >= self._config.confidence_threshold
        success = is_confident and is_correct_type and classification.looks_like_document

        error_message: str | None = None
        if not is_correct_type:
            error_message = messages.TYPE_MISMATCH
        elif not is_confident:
            error_message = messages.LOW_CONFIDENCE

        return DocumentAnalysisResult(
            success=success,
            confidence=confidence,
            detected_text=text,
            document_type=detected.or_fallback(requested_type),
            # Only the identity card side carries a photograph
            has_face=requested_type is DocumentType.PRIMARY,
            error_message=error_message,
            failure_kind=None if success else FailureKind.CLASSIFICATION,
        )
