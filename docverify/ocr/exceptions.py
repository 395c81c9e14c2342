class OcrError(Exception):
    """Base exception for all OCR errors."""


class EngineUnavailableError(OcrError):
    """Raised when the OCR engine cannot be initialized or checked out."""


class OcrExtractionError(OcrError):
    """Raised when the engine fails while recognizing an image."""
