from abc import ABC, abstractmethod

from app.processor.models import SourceFile


class BaseStorage(ABC):
    """Contract for all file storage adapters."""

    @abstractmethod
    def upload(self, file: SourceFile) -> str | None:
        """Store file bytes and return a stable reference path.

        Returns:
            Reference usable with ``read``, or None if the file was rejected.

        Raises:
            StorageError: if the backend fails while writing.
        """

    @abstractmethod
    def read(self, reference: str) -> bytes:
        """Read back the bytes stored under a reference.

        Raises:
            StorageError: if the reference cannot be resolved or read.
        """
