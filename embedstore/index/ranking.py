"""Exact brute-force ranking of stored embeddings against a query vector."""

from typing import Sequence

import numpy as np

from embedstore.exceptions import ValidationError
from embedstore.index.store import EmbeddingStore
from embedstore.index.vector_math import cosine_similarities
from embedstore.models.embedding import ScoredMatch


def rank(
    store: EmbeddingStore,
    query_vector: Sequence[float],
    embedding_type: str | None = None,
    top_k: int = 5,
    include_embeddings: bool = False,
    exclude_text: str | None = None,
) -> list[ScoredMatch]:
    """
    Rank stored embeddings by cosine similarity to ``query_vector``.
    
    Items whose dimensionality differs from the query's were produced by
    another model and are skipped. Equal scores keep insertion order.
    
    Args:
        store: Store to scan.
        query_vector: Query embedding.
        embedding_type: Only consider items with this type.
        top_k: Maximum number of results.
        include_embeddings: Attach stored vectors to the results.
        exclude_text: Skip items whose text equals this (self-matches).
        
    Returns:
        Up to ``top_k`` matches, best first. Empty when nothing is comparable.
        
    Raises:
        ValidationError: If ``top_k`` is not positive.
    """
    if top_k <= 0:
        raise ValidationError(f"top_k must be positive, got {top_k}")
    
    dim = len(query_vector)
    candidates = [
        item
        for item in store.snapshot(embedding_type)
        if item.dimensions == dim and (exclude_text is None or item.text != exclude_text)
    ]
    
    if not candidates or dim == 0:
        return []
    
    matrix = np.array([item.vector for item in candidates], dtype=np.float64)
    scores = cosine_similarities(query_vector, matrix)
    
    comparable = np.flatnonzero(np.isfinite(scores))
    # Stable sort on negated scores: ties stay in insertion order
    order = comparable[np.argsort(-scores[comparable], kind="stable")][:top_k]
    
    results = []
    for i in order:
        item = candidates[i]
        results.append(ScoredMatch(
            id=item.id,
            text=item.text,
            embedding_type=item.embedding_type,
            model=item.model,
            score=float(scores[i]),
            vector=list(item.vector) if include_embeddings else None,
        ))
    
    return results
