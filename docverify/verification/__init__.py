from docverify.verification.analyzer import DocumentAnalyzer
from docverify.verification.classifier import DocumentClassifier
from docverify.verification.config import VerificationConfig
from docverify.verification.face_comparator import FaceComparator
from docverify.verification.models import DocumentType

__all__ = [
    "DocumentAnalyzer",
    "DocumentClassifier",
    "DocumentType",
    "FaceComparator",
    "VerificationConfig",
]
