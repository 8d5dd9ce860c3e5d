"""Stored embedding and ranking result models."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StoredEmbedding(BaseModel):
    """One text passage and its embedding, as held by the store."""
    
    model_config = ConfigDict(frozen=True)
    
    id: str = Field(default_factory=lambda: uuid4().hex)
    text: str
    vector: tuple[float, ...]
    model: str
    embedding_type: str = ""
    created_at: datetime = Field(default_factory=_utcnow)
    
    @computed_field
    @property
    def dimensions(self) -> int:
        return len(self.vector)


class ScoredMatch(BaseModel):
    """A stored embedding scored against a query vector."""
    
    id: str
    text: str
    embedding_type: str
    model: str
    score: float
    vector: list[float] | None = Field(
        default=None,
        description="Stored vector, only present when embeddings were requested",
    )


class StoreResult(BaseModel):
    """Outcome of a store request."""
    
    id: str
    created: bool
    model: str
    dimensions: int
    embedding: list[float] | None = Field(
        default=None,
        description="Stored vector, only present when requested",
    )


class ClearResult(BaseModel):
    """Outcome of a clear request."""
    
    removed: int


class StoreStats(BaseModel):
    """Point-in-time item counts."""
    
    total: int = 0
    by_type: dict[str, int] = Field(default_factory=dict)
