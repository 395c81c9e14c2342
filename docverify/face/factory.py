from typing import ClassVar

from docverify.config.settings import Settings
from docverify.face.base import BaseFaceDetector
from docverify.face.opencv_detector import OpenCvFaceDetector
from docverify.face.render_check_detector import RenderCheckFaceDetector


class FaceDetectorFactory:
    """Creates the configured face presence detector."""

    DETECTORS: ClassVar[tuple[str, ...]] = ("render", "opencv")

    @classmethod
    def create(cls, settings: Settings) -> BaseFaceDetector:
        detector = settings.face_detector.lower()
        if detector == "render":
            return RenderCheckFaceDetector()
        if detector == "opencv":
            return OpenCvFaceDetector(min_size_px=settings.face_min_size_px)
        raise ValueError(
            f"Unknown face detector '{detector}'. Choose from: {list(cls.DETECTORS)}"
        )
