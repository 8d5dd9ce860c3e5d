"""Exceptions raised by the embedding store and its collaborators."""

from embedstore.models.enums import ProviderErrorType


class EmbedStoreError(Exception):
    """Base exception for all embedstore errors."""


class ValidationError(EmbedStoreError):
    """Caller input rejected before any work begins (empty text, bad top_k)."""


class ProviderError(EmbedStoreError):
    """
    Embedding generation failed.
    
    The specific failure kind travels in ``error_type`` so callers can decide
    on their own retry policy.
    """
    
    error_type: ProviderErrorType = ProviderErrorType.RESPONSE
    
    def __init__(
        self,
        message: str,
        error_type: ProviderErrorType | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        if error_type is not None:
            self.error_type = error_type
        self.details = details or {}


class ProviderAuthError(ProviderError):
    """Missing or rejected credentials, or a misconfigured provider."""
    
    error_type = ProviderErrorType.AUTH


class ProviderTransientError(ProviderError):
    """Network failure, timeout, rate limit or provider-side outage."""
    
    error_type = ProviderErrorType.TRANSIENT


class ProviderResponseError(ProviderError):
    """Malformed or unexpected provider response. Not worth retrying."""
    
    error_type = ProviderErrorType.RESPONSE


class DimensionalityMismatchError(EmbedStoreError):
    """A vector's length disagrees with the length established for its model."""
    
    def __init__(self, model: str, expected: int, actual: int):
        super().__init__(
            f"Model {model!r} produces {expected}-dimensional vectors, got {actual}"
        )
        self.model = model
        self.expected = expected
        self.actual = actual
