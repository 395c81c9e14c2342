from pathlib import Path

from docverify.imaging.models import ImageAsset


class ImageResolver:
    """Maps stored image references to assets under the uploads root.

    References are the public paths saved by the uploading system
    (e.g. ``/documents/abc.jpg``); a leading slash is ignored. References that
    would escape the root resolve to an asset without a path, which callers
    see as "not found".
    """

    FILES_ROOT = Path("/app/uploads")

    def __init__(
        self,
        files_root: Path | None = None,
        max_size_bytes: int | None = None,
    ) -> None:
        self._files_root = files_root if files_root is not None else self.FILES_ROOT
        self._max_size_bytes = max_size_bytes

    def resolve(self, reference: str) -> ImageAsset:
        return ImageAsset(
            reference=reference,
            path=self._resolve_path(reference),
            max_size_bytes=self._max_size_bytes,
        )

    def _resolve_path(self, reference: str) -> Path | None:
        relative = reference.strip().lstrip("/")
        if not relative:
            return None
        root = self._files_root.resolve()
        try:
            path = (root / relative).resolve()
        except (OSError, ValueError):
            return None
        if not path.is_relative_to(root):
            return None
        return path
