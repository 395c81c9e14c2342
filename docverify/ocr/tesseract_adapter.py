import threading
from typing import Any

import pytesseract

from docverify.imaging.models import ImageAsset
from docverify.logging.logger import Log
from docverify.ocr.base import BaseTextExtractor
from docverify.ocr.exceptions import EngineUnavailableError, OcrExtractionError
from docverify.ocr.models import ExtractionResult


class TesseractAdapter(BaseTextExtractor):
    """Recognizes text with the Tesseract binary through pytesseract.

    pytesseract starts one tesseract process per recognition and removes its
    temporary files when the call returns, so no engine handle outlives a call.
    """

    def __init__(self, language: str = "por", config: str = "--psm 3") -> None:
        self._language = language
        self._config = config
        self._checked = False
        self._lock = threading.Lock()

    def extract(self, image: ImageAsset) -> ExtractionResult:
        self._ensure_engine()
        pixels = image.load()
        try:
            data = pytesseract.image_to_data(
                pixels,
                lang=self._language,
                config=self._config,
                output_type=pytesseract.Output.DICT,
            )
        except pytesseract.TesseractNotFoundError as exc:
            raise EngineUnavailableError(f"tesseract is not installed: {exc}") from exc
        except (pytesseract.TesseractError, RuntimeError) as exc:
            raise OcrExtractionError(f"tesseract recognition failed: {exc}") from exc
        return self._to_result(data)

    def _ensure_engine(self) -> None:
        """Check once that the binary runs and the language pack is installed."""
        with self._lock:
            if self._checked:
                return
            try:
                languages = pytesseract.get_languages(config="")
            except pytesseract.TesseractNotFoundError as exc:
                raise EngineUnavailableError(f"tesseract is not installed: {exc}") from exc
            except (pytesseract.TesseractError, OSError) as exc:
                raise EngineUnavailableError(f"tesseract cannot start: {exc}") from exc
            missing = [lang for lang in self._language.split("+") if lang not in languages]
            if missing:
                raise EngineUnavailableError(
                    f"tesseract language data not installed: {', '.join(missing)}"
                )
            Log.debug("Tesseract engine ready", language=self._language)
            self._checked = True

    def _to_result(self, data: dict[str, list[Any]]) -> ExtractionResult:
        lines: dict[tuple[int, int, int, int], list[str]] = {}
        confidences: list[float] = []
        for i, raw_word in enumerate(data.get("text", [])):
            word = str(raw_word or "").strip()
            conf = float(data["conf"][i])
            if not word or conf < 0:
                continue
            key = (
                int(data["page_num"][i]),
                int(data["block_num"][i]),
                int(data["par_num"][i]),
                int(data["line_num"][i]),
            )
            lines.setdefault(key, []).append(word)
            confidences.append(conf)

        text = "\n".join(" ".join(words) for words in lines.values())
        if not confidences:
            return ExtractionResult(recognized_text=text, engine_confidence=0.0)
        mean = sum(confidences) / len(confidences) / 100.0
        return ExtractionResult(recognized_text=text, engine_confidence=min(max(mean, 0.0), 1.0))
