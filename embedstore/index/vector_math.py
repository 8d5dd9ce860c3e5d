"""Vector operations used for similarity scoring."""

from typing import Sequence

import numpy as np


class ZeroVectorError(ValueError):
    """Cosine similarity is undefined when either vector has zero magnitude."""


def _as_array(vec: Sequence[float] | np.ndarray) -> np.ndarray:
    return np.asarray(vec, dtype=np.float64)


def _check_lengths(a: np.ndarray, b: np.ndarray) -> None:
    if a.shape != b.shape:
        raise ValueError(f"Vector lengths differ: {a.shape[0]} != {b.shape[0]}")


def _unit_rows(m: np.ndarray) -> np.ndarray:
    """
    Scale each row of a 2-D array to unit length. Zero rows stay zero.
    
    Rows are divided by their max-abs component first so the norm cannot
    overflow or underflow for extreme magnitudes.
    """
    scale = np.max(np.abs(m), axis=1, keepdims=True)
    scale[scale == 0] = 1.0
    scaled = m / scale
    norms = np.linalg.norm(scaled, axis=1, keepdims=True)
    norms[norms == 0] = 1.0
    return scaled / norms


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two equal-length vectors."""
    v1, v2 = _as_array(a), _as_array(b)
    _check_lengths(v1, v2)
    return float(np.dot(v1, v2))


def magnitude(a: Sequence[float]) -> float:
    """Euclidean (L2) norm."""
    return float(np.linalg.norm(_as_array(a)))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.
    
    Raises:
        ValueError: If the vectors have different lengths.
        ZeroVectorError: If either vector has zero magnitude.
    
    Returns:
        Similarity score from -1.0 to 1.0.
    """
    v1, v2 = _as_array(a), _as_array(b)
    _check_lengths(v1, v2)
    if v1.size == 0:
        raise ZeroVectorError("Cosine similarity is undefined for empty vectors")
    
    u1, u2 = _unit_rows(v1[np.newaxis, :])[0], _unit_rows(v2[np.newaxis, :])[0]
    
    if not np.any(u1) or not np.any(u2):
        raise ZeroVectorError("Cosine similarity is undefined for a zero vector")
    
    return float(np.clip(np.dot(u1, u2), -1.0, 1.0))


def cosine_similarities(query: Sequence[float], matrix: np.ndarray) -> np.ndarray:
    """
    Score one query vector against every row of a 2-D matrix.
    
    Rows with zero magnitude score ``nan``. A zero query scores ``nan``
    everywhere.
    """
    q = _as_array(query)
    m = np.asarray(matrix, dtype=np.float64)
    
    if m.size == 0:
        return np.empty(0, dtype=np.float64)
    if m.ndim != 2 or m.shape[1] != q.shape[0]:
        raise ValueError(f"Matrix shape {m.shape} does not match query length {q.shape[0]}")
    
    units = _unit_rows(m)
    q_unit = _unit_rows(q[np.newaxis, :])[0]
    
    sims = units @ q_unit
    
    sims[~units.any(axis=1)] = np.nan
    if not q_unit.any():
        sims[:] = np.nan
    
    return np.clip(sims, -1.0, 1.0)
