from unittest.mock import patch

import pytest

from docverify.ocr.factory import TextExtractorFactory
from docverify.ocr.paddle_adapter import PaddleOcrAdapter
from docverify.ocr.tesseract_adapter import TesseractAdapter


def _make_settings(ocr_engine: str, ocr_language: str = "por"):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only OCR fields."""
    with patch("docverify.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.ocr_engine = ocr_engine
        settings.ocr_language = ocr_language
        settings.ocr_pool_size = 1
        return settings


class TestTextExtractorFactory:
    def test_creates_tesseract_adapter(self) -> None:
        adapter = TextExtractorFactory.create(_make_settings("tesseract"))
        assert isinstance(adapter, TesseractAdapter)

    def test_creates_paddle_adapter(self) -> None:
        adapter = TextExtractorFactory.create(_make_settings("paddle"))
        assert isinstance(adapter, PaddleOcrAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = TextExtractorFactory.create(_make_settings("Tesseract"))
        assert isinstance(adapter, TesseractAdapter)

    def test_maps_language_for_paddle(self) -> None:
        with patch("docverify.ocr.factory.PaddleOcrAdapter") as mock_adapter:
            TextExtractorFactory.create(_make_settings("paddle", "por"))

        mock_adapter.assert_called_once_with(language="pt", pool_size=1)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown OCR engine"):
            TextExtractorFactory.create(_make_settings("abbyy"))
