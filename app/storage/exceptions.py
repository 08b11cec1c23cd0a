class StorageError(Exception):
    """Raised when a storage backend cannot write or read a file."""


class UnsupportedStorageDiskError(StorageError):
    """Raised when settings name a storage disk with no adapter."""
