import os
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from docverify.imaging.exceptions import (
    ImageDecodeError,
    ImageNotFoundError,
    UnsupportedImageError,
)

ALLOWED_SUFFIXES: frozenset[str] = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})


@dataclass
class ImageAsset:
    """Read-only handle to a stored image with lazily decoded pixels.

    The file itself is owned by the caller; the asset never writes, moves or
    deletes it. Decoded pixels are cached until :meth:`close` is called.
    """

    reference: str
    path: Path | None
    max_size_bytes: int | None = None
    _pixels: Image.Image | None = field(default=None, init=False, repr=False, compare=False)

    def exists(self) -> bool:
        return (
            self.path is not None
            and self.path.is_file()
            and os.access(self.path, os.R_OK)
        )

    def verify(self) -> None:
        """Check that the asset is a readable image file within upload limits.

        Raises:
            ImageNotFoundError: if the file is missing or unreadable.
            UnsupportedImageError: on a disallowed extension or oversized file.
        """
        if self.path is None or not self.exists():
            raise ImageNotFoundError(f"Image not found: {self.reference}")
        if self.path.suffix.lower() not in ALLOWED_SUFFIXES:
            raise UnsupportedImageError(
                f"Unsupported image format '{self.path.suffix}' for {self.reference}"
            )
        size = self.path.stat().st_size
        if self.max_size_bytes is not None and size > self.max_size_bytes:
            raise UnsupportedImageError(
                f"Image {self.reference} is {size} bytes, limit is {self.max_size_bytes}"
            )

    def load(self) -> Image.Image:
        """Decode and render the image to RGB pixels.

        Raises:
            ImageNotFoundError: if the file disappeared.
            ImageDecodeError: if the bytes are not a decodable image.
        """
        if self._pixels is not None:
            return self._pixels
        if self.path is None:
            raise ImageNotFoundError(f"Image not found: {self.reference}")
        try:
            with Image.open(self.path) as img:
                img.load()
                self._pixels = img.convert("RGB")
        except FileNotFoundError as exc:
            raise ImageNotFoundError(f"Image not found: {self.reference}") from exc
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise ImageDecodeError(f"Cannot decode image {self.reference}: {exc}") from exc
        return self._pixels

    def close(self) -> None:
        """Drop cached pixels."""
        if self._pixels is not None:
            self._pixels.close()
            self._pixels = None
