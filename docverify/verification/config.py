from dataclasses import dataclass

from docverify.config.settings import Settings


@dataclass(frozen=True)
class VerificationConfig:
    """Thresholds and keyword lists shared by the verification components.

    Keywords are written in their natural (accented) form; the classifier
    folds them the same way it folds OCR text.
    """

    confidence_threshold: float = 0.3
    min_text_length: int = 20
    # Keywords up to this length must not touch other letters ("rg", "cpf").
    short_keyword_max_length: int = 3

    primary_keywords: tuple[str, ...] = (
        "identidade",
        "registro geral",
        "rg",
        "cnh",
        "carteira nacional",
        "habilitação",
    )
    secondary_keywords: tuple[str, ...] = (
        "cpf",
        "cadastro de pessoa",
    )
    document_keywords: tuple[str, ...] = (
        "brasil",
        "república",
        "federativa",
        "ministério",
        "secretaria",
        "identidade",
        "documento",
        "registro",
        "nascimento",
        "filiação",
    )

    face_absent_confidence: float = 0.3
    face_placeholder_confidence: float = 0.75
    face_match_threshold: float = 0.6

    @classmethod
    def from_settings(cls, settings: Settings) -> "VerificationConfig":
        return cls(
            confidence_threshold=settings.confidence_threshold,
            min_text_length=settings.min_text_length,
            face_match_threshold=settings.face_match_threshold,
        )
