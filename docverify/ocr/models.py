from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionResult:
    """Text recognized in one image and the engine's confidence in it."""

    recognized_text: str
    engine_confidence: float  # 0.0 - 1.0
