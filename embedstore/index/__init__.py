"""Embedding index: vector math, store and ranking."""

from embedstore.index.ranking import rank
from embedstore.index.store import EmbeddingStore
from embedstore.index.vector_math import (
    ZeroVectorError,
    cosine_similarities,
    cosine_similarity,
    dot,
    magnitude,
)

__all__ = [
    "rank",
    "EmbeddingStore",
    "ZeroVectorError",
    "cosine_similarities",
    "cosine_similarity",
    "dot",
    "magnitude",
]
