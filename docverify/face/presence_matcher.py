from docverify.face.base import BaseFaceMatcher
from docverify.imaging.models import ImageAsset


class PresenceOnlyFaceMatcher(BaseFaceMatcher):
    """Placeholder matcher used until biometric comparison is available.

    Callers only reach it after both images passed face presence, so it
    reports a fixed moderate-high score without looking at the pixels.
    """

    def __init__(self, placeholder_score: float = 0.75) -> None:
        self._placeholder_score = placeholder_score

    def score(self, selfie: ImageAsset, document: ImageAsset) -> float:
        return self._placeholder_score
