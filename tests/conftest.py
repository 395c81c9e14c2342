from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture()
def uploads_root(tmp_path: Path) -> Path:
    root = tmp_path / "uploads"
    root.mkdir()
    return root


@pytest.fixture()
def make_image(uploads_root: Path) -> Callable[..., Path]:
    """Write a small solid-color image under the uploads root."""

    def _make(
        name: str = "documents/front.png",
        size: tuple[int, int] = (64, 48),
        color: tuple[int, int, int] = (200, 180, 160),
    ) -> Path:
        path = uploads_root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size, color).save(path)
        return path

    return _make


@pytest.fixture()
def corrupt_image(uploads_root: Path) -> Path:
    """A file with an image extension whose bytes are not an image."""
    path = uploads_root / "documents" / "corrupt.jpg"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"definitely not a jpeg")
    return path
