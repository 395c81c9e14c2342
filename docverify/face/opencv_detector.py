import threading
from typing import ClassVar

import cv2
import numpy as np

from docverify.face.base import BaseFaceDetector
from docverify.face.exceptions import FaceDetectorUnavailableError
from docverify.imaging.exceptions import ImageError
from docverify.imaging.models import ImageAsset
from docverify.logging.logger import Log


class OpenCvFaceDetector(BaseFaceDetector):
    """Detects frontal faces with OpenCV's bundled Haar cascade.

    Several (scaleFactor, minNeighbors) passes are tried from strict to loose;
    the first pass that finds a face wins.
    """

    CASCADE_FILE: ClassVar[str] = "haarcascade_frontalface_default.xml"
    DETECTION_PASSES: ClassVar[tuple[tuple[float, int], ...]] = (
        (1.1, 5),
        (1.1, 4),
        (1.05, 3),
    )

    def __init__(self, min_size_px: int = 40) -> None:
        self._min_size = (min_size_px, min_size_px)
        self._cascade = cv2.CascadeClassifier(cv2.data.haarcascades + self.CASCADE_FILE)
        if self._cascade.empty():
            raise FaceDetectorUnavailableError(f"Cannot load cascade {self.CASCADE_FILE}")
        self._lock = threading.Lock()

    def has_face(self, image: ImageAsset) -> bool:
        try:
            pixels = image.load()
        except ImageError as exc:
            Log.warning(f"Could not decode image for face detection: {exc}", image=image.reference)
            return False

        gray = cv2.cvtColor(np.asarray(pixels), cv2.COLOR_RGB2GRAY)
        gray = cv2.equalizeHist(gray)
        with self._lock:
            for scale_factor, min_neighbors in self.DETECTION_PASSES:
                faces = self._cascade.detectMultiScale(
                    gray,
                    scaleFactor=scale_factor,
                    minNeighbors=min_neighbors,
                    minSize=self._min_size,
                )
                if len(faces) > 0:
                    Log.debug(
                        f"Detected {len(faces)} face(s)",
                        image=image.reference,
                        scale_factor=scale_factor,
                    )
                    return True
        return False
