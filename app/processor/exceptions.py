class ProcessorError(Exception):
    """Base exception for all per-file pipeline errors."""


class UploadError(ProcessorError):
    """Raised when storage returns no reference for an uploaded file."""


class ConversionError(ProcessorError):
    """Raised when the preview renderer produces no artifact."""


class StageOrderError(ProcessorError):
    """Raised when a step runs before the data it depends on is available."""


class EmptyBatchError(ValueError):
    """Raised when a batch is submitted without any files."""
