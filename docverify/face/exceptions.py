class FaceDetectorUnavailableError(Exception):
    """Raised when a face detection model cannot be loaded."""
