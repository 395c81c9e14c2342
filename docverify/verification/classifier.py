"""Keyword-based document classification.

Two independent keyword tiers are checked against the OCR text:

1. Type keywords decide which side of the document was photographed
   (primary identity card vs. secondary person registry).
2. Generic official-document keywords (nation, ministry, "registro", ...)
   say whether the text looks like any official document at all.

Text and keywords are folded to lowercase ASCII with ICU before matching,
so OCR output that dropped diacritics ("habilitacao") still matches.
"""

import re
import threading
import unicodedata
from typing import ClassVar

import icu  # type: ignore[import-untyped]

from docverify.logging.logger import Log
from docverify.verification.config import VerificationConfig
from docverify.verification.models import ClassificationResult, DocumentType


class DocumentClassifier:
    """Guesses document type and plausibility from extracted text."""

    _ICU_TRANSFORM: ClassVar[str] = "Any-Latin; Latin-ASCII; Lower"

    def __init__(self, config: VerificationConfig) -> None:
        self._config = config
        self._transliterator: icu.Transliterator = icu.Transliterator.createInstance(
            self._ICU_TRANSFORM
        )
        self._lock = threading.Lock()
        # Order matters: primary keywords win when both sides match.
        self._type_patterns: list[tuple[DocumentType, re.Pattern[str]]] = [
            (DocumentType.PRIMARY, self._compile(config.primary_keywords)),
            (DocumentType.SECONDARY, self._compile(config.secondary_keywords)),
        ]
        self._document_pattern = self._compile(config.document_keywords)

    def classify(self, text: str, requested_type: DocumentType) -> ClassificationResult:
        folded = self._fold(text)
        detected_type = DocumentType.UNKNOWN
        for doc_type, pattern in self._type_patterns:
            if pattern.search(folded):
                detected_type = doc_type
                break

        result = ClassificationResult(
            detected_type=detected_type,
            has_minimum_text=len(text.strip()) > self._config.min_text_length,
            has_document_keyword=self._document_pattern.search(folded) is not None,
        )
        Log.debug(
            "Classified document text",
            requested_type=requested_type,
            detected_type=result.detected_type,
            has_minimum_text=result.has_minimum_text,
            has_document_keyword=result.has_document_keyword,
        )
        return result

    def _fold(self, text: str) -> str:
        normalized = unicodedata.normalize("NFC", text)
        with self._lock:
            return str(self._transliterator.transliterate(normalized))

    def _compile(self, keywords: tuple[str, ...]) -> re.Pattern[str]:
        alternatives = []
        for keyword in keywords:
            folded = re.escape(self._fold(keyword))
            if len(keyword) <= self._config.short_keyword_max_length:
                # Letters may not touch a short label; digits may ("cpf123")
                alternatives.append(rf"(?<![a-z]){folded}(?![a-z])")
            else:
                alternatives.append(folded)
        if not alternatives:
            # Matches nothing
            return re.compile(r"(?!)")
        return re.compile("|".join(alternatives))
