"""Shared fixtures."""

import asyncio
import hashlib

import pytest

from embedstore.embeddings.base import EmbeddingProvider
from embedstore.index.store import EmbeddingStore
from embedstore.service import EmbeddingService


class FakeEmbeddingProvider(EmbeddingProvider):
    """
    Deterministic provider for tests.
    
    Texts found in ``vectors`` get that vector; anything else gets a
    hash-derived one of ``dims[model]`` (default 4) components.
    """
    
    def __init__(self, default_model: str = "text-embedding-3-large", delay: float = 0.0):
        self.default_model = default_model
        self.delay = delay
        self.vectors: dict[str, list[float]] = {}
        self.dims: dict[str, int] = {}
        self.calls: list[tuple[str, str]] = []
        self.error: Exception | None = None
    
    async def embed(self, text: str, model: str | None = None) -> list[float]:
        model = model or self.default_model
        self.calls.append((text, model))
        await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if text in self.vectors:
            return list(self.vectors[text])
        digest = hashlib.sha256(f"{model}:{text}".encode()).digest()
        size = self.dims.get(model, 4)
        return [(digest[i % len(digest)] - 127.5) / 127.5 for i in range(size)]


@pytest.fixture
def provider():
    return FakeEmbeddingProvider()


@pytest.fixture
def store():
    return EmbeddingStore()


@pytest.fixture
def service(provider, store):
    return EmbeddingService(
        provider,
        store=store,
        allowed_models=["text-embedding-3-large", "text-embedding-3-small"],
    )
