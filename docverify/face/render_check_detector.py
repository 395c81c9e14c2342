from docverify.face.base import BaseFaceDetector
from docverify.imaging.exceptions import ImageError
from docverify.imaging.models import ImageAsset
from docverify.logging.logger import Log


class RenderCheckFaceDetector(BaseFaceDetector):
    """Assumes a face is present whenever the image decodes and renders.

    This is a presence gate for unreadable uploads only; it does no actual
    detection. Swap in OpenCvFaceDetector for a real check.
    """

    def has_face(self, image: ImageAsset) -> bool:
        try:
            pixels = image.load()
        except ImageError as exc:
            Log.warning(f"Could not render image for face check: {exc}", image=image.reference)
            return False
        return pixels.width > 0 and pixels.height > 0
