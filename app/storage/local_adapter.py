import uuid
from pathlib import Path, PurePath

from app.logging.logger import Log
from app.processor.models import SourceFile
from app.storage.base import BaseStorage
from app.storage.exceptions import StorageError


def stored_file_path(root: Path, folder: str, file_name: str) -> Path:
    """Build path to a stored file: {root}/{folder}/{file_name}"""
    return root / folder / file_name


class LocalStorageAdapter(BaseStorage):
    """Stores files on the local filesystem under a per-upload folder."""

    FILES_ROOT = Path("/app/files")

    def __init__(self, root: Path | None = None) -> None:
        self._root = root if root is not None else self.FILES_ROOT

    def upload(self, file: SourceFile) -> str | None:
        if not file.content:
            Log.warning("Refusing to store empty file", file=file.name)
            return None
        folder = uuid.uuid4().hex
        file_name = PurePath(file.name).name or "upload"
        path = stored_file_path(self._root, folder, file_name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(file.content)
        except OSError as exc:
            raise StorageError(f"Failed to store {file.name}: {exc}") from exc
        Log.debug(f"Stored {len(file.content)} bytes at {path}")
        return f"{folder}/{file_name}"

    def read(self, reference: str) -> bytes:
        path = self._resolve(reference)
        if not path.is_file():
            raise StorageError(f"File not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Failed to read {reference}: {exc}") from exc

    def _resolve(self, reference: str) -> Path:
        path = (self._root / reference).resolve()
        if not path.is_relative_to(self._root.resolve()):
            raise StorageError(f"Reference escapes storage root: {reference}")
        return path
