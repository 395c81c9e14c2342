from collections.abc import Callable
from typing import Any

import numpy as np

from docverify.imaging.models import ImageAsset
from docverify.logging.logger import Log
from docverify.ocr.base import BaseTextExtractor
from docverify.ocr.exceptions import EngineUnavailableError, OcrExtractionError
from docverify.ocr.models import ExtractionResult
from docverify.ocr.pool import EnginePool


def paddle_engine_factory(language: str) -> Callable[[], Any]:
    """Build a factory that starts one PaddleOCR engine per call."""

    def create() -> Any:
        try:
            from paddleocr import PaddleOCR
        except ImportError as exc:
            raise EngineUnavailableError(
                "paddleocr is not installed; install the 'paddle' extra"
            ) from exc
        Log.info("Starting PaddleOCR engine", language=language)
        return PaddleOCR(use_angle_cls=True, lang=language, show_log=False)

    return create


class PaddleOcrAdapter(BaseTextExtractor):
    """Recognizes text with PaddleOCR engines checked out of a bounded pool.

    PaddleOCR loads detection and recognition models on start-up, so engines
    are reused across calls but never shared by two calls at once.
    """

    def __init__(
        self,
        language: str = "pt",
        pool_size: int = 2,
        engine_factory: Callable[[], Any] | None = None,
    ) -> None:
        self._pool: EnginePool[Any] = EnginePool(
            engine_factory or paddle_engine_factory(language),
            size=pool_size,
        )

    def extract(self, image: ImageAsset) -> ExtractionResult:
        # PaddleOCR expects BGR channel order
        pixels = np.asarray(image.load())[:, :, ::-1]
        with self._pool.checkout() as engine:
            try:
                result = engine.ocr(pixels, cls=True)
            except Exception as exc:
                raise OcrExtractionError(f"paddleocr recognition failed: {exc}") from exc
        return self._to_result(result)

    def _to_result(self, result: Any) -> ExtractionResult:
        if not result or not result[0]:
            return ExtractionResult(recognized_text="", engine_confidence=0.0)

        texts: list[str] = []
        scores: list[float] = []
        for _bbox, (text, score) in result[0]:
            texts.append(str(text))
            scores.append(float(score))

        mean = sum(scores) / len(scores)
        return ExtractionResult(
            recognized_text="\n".join(texts),
            engine_confidence=min(max(mean, 0.0), 1.0),
        )
