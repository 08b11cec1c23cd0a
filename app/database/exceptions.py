class RecordStoreError(Exception):
    """Raised when the record store cannot read or write a value."""
