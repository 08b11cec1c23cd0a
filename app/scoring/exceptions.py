class ScoringError(Exception):
    """Raised when scoring fails or returns an unusable payload."""


class ScoringValidationError(ScoringError):
    """Raised when parsed feedback does not match the expected structure."""


class ScoringNetworkError(ScoringError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
