from pathlib import Path

from app.config.settings import Settings
from app.storage.base import BaseStorage
from app.storage.exceptions import UnsupportedStorageDiskError
from app.storage.local_adapter import LocalStorageAdapter


class StorageFactory:
    """Creates the storage adapter for the configured disk."""

    @classmethod
    def create(cls, settings: Settings) -> BaseStorage:
        disk = settings.storage_disk.lower()
        if disk != "local":
            raise UnsupportedStorageDiskError(
                f"storage_disk '{settings.storage_disk}' is not supported"
            )
        return LocalStorageAdapter(root=Path(settings.storage_root))
