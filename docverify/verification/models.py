from dataclasses import dataclass
from enum import StrEnum


class DocumentType(StrEnum):
    PRIMARY = "primary"  # front side, identity card with photo ("RG")
    SECONDARY = "secondary"  # back side, person registry ("CPF")
    UNKNOWN = "unknown"

    def or_fallback(self, requested: "DocumentType") -> "DocumentType":
        """Outward-facing type: the requested one when classification was inconclusive."""
        return requested if self is DocumentType.UNKNOWN else self


class FailureKind(StrEnum):
    INPUT = "input"  # missing, unsupported or unreadable image
    CLASSIFICATION = "classification"  # not a document, wrong side, low confidence
    FACE_PRESENCE = "face_presence"
    FACE_MISMATCH = "face_mismatch"
    INFRASTRUCTURE = "infrastructure"  # OCR engine or storage unavailable


@dataclass(frozen=True)
class ClassificationResult:
    detected_type: DocumentType
    has_minimum_text: bool
    has_document_keyword: bool

    @property
    def looks_like_document(self) -> bool:
        return self.has_minimum_text and (
            self.has_document_keyword or self.detected_type is not DocumentType.UNKNOWN
        )


@dataclass(frozen=True)
class DocumentAnalysisResult:
    """Verdict for one document image."""

    success: bool
    confidence: float
    document_type: DocumentType
    detected_text: str | None = None
    has_face: bool | None = None
    error_message: str | None = None
    failure_kind: FailureKind | None = None

    @classmethod
    def failed(
        cls,
        error_message: str,
        failure_kind: FailureKind,
        document_type: DocumentType = DocumentType.UNKNOWN,
    ) -> "DocumentAnalysisResult":
        return cls(
            success=False,
            confidence=0.0,
            document_type=document_type,
            error_message=error_message,
            failure_kind=failure_kind,
        )


@dataclass(frozen=True)
class FaceComparisonResult:
    """Verdict for a selfie against the document photo."""

    success: bool
    confidence: float
    matched: bool
    error_message: str | None = None
    failure_kind: FailureKind | None = None

    def __post_init__(self) -> None:
        if self.matched and not self.success:
            raise ValueError("A face comparison cannot be matched without succeeding")
