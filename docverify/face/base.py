from abc import ABC, abstractmethod

from docverify.imaging.models import ImageAsset


class BaseFaceDetector(ABC):
    """Contract for face presence detectors."""

    @abstractmethod
    def has_face(self, image: ImageAsset) -> bool:
        """Return True if the image shows a human face.

        Must return False, not raise, when the image cannot be decoded.
        """


class BaseFaceMatcher(ABC):
    """Contract for selfie-to-document face matchers."""

    @abstractmethod
    def score(self, selfie: ImageAsset, document: ImageAsset) -> float:
        """Return a 0-1 certainty that both images show the same person."""
