"""Embedding provider interface."""

import math
from abc import ABC, abstractmethod
from typing import Any

from embedstore.exceptions import ProviderResponseError


class EmbeddingProvider(ABC):
    """Abstract base for embedding providers."""
    
    default_model: str
    
    @abstractmethod
    async def embed(self, text: str, model: str | None = None) -> list[float]:
        """
        Generate an embedding for a single text.
        
        Args:
            text: Non-empty text to embed.
            model: Model identifier, ``default_model`` when omitted.
            
        Returns:
            Embedding vector.
            
        Raises:
            ProviderError: If the provider cannot produce a vector.
        """
        ...
    
    async def aclose(self) -> None:
        """Release any underlying client."""


def coerce_vector(raw: Any, source: str) -> list[float]:
    """
    Validate a vector decoded from a provider payload.
    
    Raises:
        ProviderResponseError: If ``raw`` is not a non-empty list of finite numbers.
    """
    if not isinstance(raw, (list, tuple)) or not raw:
        raise ProviderResponseError(f"{source} returned no embedding")
    
    vector = []
    for value in raw:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ProviderResponseError(
                f"{source} returned a non-numeric embedding component",
                details={"value": repr(value)[:100]},
            )
        if not math.isfinite(value):
            raise ProviderResponseError(f"{source} returned a non-finite embedding component")
        vector.append(float(value))
    
    return vector
