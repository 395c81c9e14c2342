class ImageError(Exception):
    """Base exception for all image asset errors."""


class ImageNotFoundError(ImageError):
    """Raised when an image reference does not resolve to a readable file."""


class UnsupportedImageError(ImageError):
    """Raised when an image has a disallowed format or exceeds the size limit."""


class ImageDecodeError(ImageError):
    """Raised when image bytes cannot be decoded into pixels."""
