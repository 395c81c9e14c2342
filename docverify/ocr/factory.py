from typing import ClassVar

from docverify.config.settings import Settings
from docverify.ocr.base import BaseTextExtractor
from docverify.ocr.paddle_adapter import PaddleOcrAdapter
from docverify.ocr.tesseract_adapter import TesseractAdapter


class TextExtractorFactory:
    """Creates the configured OCR adapter."""

    ENGINES: ClassVar[tuple[str, ...]] = ("tesseract", "paddle")

    # Tesseract traineddata names -> PaddleOCR language codes
    PADDLE_LANGUAGES: ClassVar[dict[str, str]] = {
        "por": "pt",
        "eng": "en",
        "spa": "es",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.ocr_engine.lower()
        if engine == "tesseract":
            return TesseractAdapter(language=settings.ocr_language)
        if engine == "paddle":
            language = cls.PADDLE_LANGUAGES.get(settings.ocr_language, settings.ocr_language)
            return PaddleOcrAdapter(language=language, pool_size=settings.ocr_pool_size)
        raise ValueError(
            f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
