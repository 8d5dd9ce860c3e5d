"""embedstore data models."""

from embedstore.models.enums import ProviderErrorType, ProviderName
from embedstore.models.embedding import (
    ClearResult,
    ScoredMatch,
    StoredEmbedding,
    StoreResult,
    StoreStats,
)

__all__ = [
    "ProviderErrorType",
    "ProviderName",
    "ClearResult",
    "ScoredMatch",
    "StoredEmbedding",
    "StoreResult",
    "StoreStats",
]
