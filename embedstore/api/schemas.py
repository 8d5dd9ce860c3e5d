"""Request and response bodies for the HTTP API."""

from pydantic import BaseModel, Field

from embedstore.models.embedding import ScoredMatch


class StoreRequest(BaseModel):
    text: str = Field(description="The text to generate an embedding for")
    model: str | None = Field(default=None, description="Embedding model, server default when omitted")
    embedding_type: str = Field(default="", description="Category tag, e.g. 'user' or 'title'")
    include_embedding: bool = Field(default=False, description="Return the stored vector")


class CompareRequest(BaseModel):
    text: str = Field(description="The text to compare with stored embeddings")
    model: str | None = None
    embedding_type: str | None = Field(default=None, description="Only compare against this type")
    top_k: int | None = Field(default=None, description="Number of results, 5 when omitted")
    include_embeddings: bool = False
    exclude_self: bool = Field(default=False, description="Skip stored items with the same text")


class CompareResponse(BaseModel):
    results: list[ScoredMatch]


class HealthResponse(BaseModel):
    status: str = "ok"
    total: int
    by_type: dict[str, int]


class ErrorResponse(BaseModel):
    error: str
    kind: str | None = None
    details: dict = Field(default_factory=dict)
