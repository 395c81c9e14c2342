from abc import ABC, abstractmethod

from docverify.imaging.models import ImageAsset
from docverify.ocr.models import ExtractionResult


class BaseTextExtractor(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def extract(self, image: ImageAsset) -> ExtractionResult:
        """Recognize text in an image.

        Any engine session used for the call is released before returning,
        whether recognition succeeds or fails.

        Args:
            image: Asset to read. Never modified.

        Returns:
            ExtractionResult with the recognized text and a 0-1 confidence.

        Raises:
            EngineUnavailableError: if the engine cannot be initialized.
            ImageDecodeError: if the image cannot be decoded.
            OcrExtractionError: if recognition itself fails.
        """
