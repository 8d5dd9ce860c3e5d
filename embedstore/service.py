"""Store / compare / clear operations over an embedding store."""

import logging
from typing import Iterable

from embedstore.config import Settings
from embedstore.embeddings import EmbeddingProvider, get_embedding_provider
from embedstore.exceptions import ValidationError
from embedstore.index.ranking import rank
from embedstore.index.store import EmbeddingStore
from embedstore.models.embedding import ClearResult, ScoredMatch, StoreResult, StoreStats
from embedstore.models.enums import ProviderName


logger = logging.getLogger(__name__)


class EmbeddingService:
    """
    Facade tying an embedding provider to an in-memory store.
    
    Embeddings are always computed before the store is touched, so the
    store lock is never held while a provider call is in flight.
    """
    
    def __init__(
        self,
        provider: EmbeddingProvider,
        store: EmbeddingStore | None = None,
        allowed_models: Iterable[str] | None = None,
        default_top_k: int = 5,
    ):
        self.provider = provider
        self.index = store if store is not None else EmbeddingStore()
        self.allowed_models = set(allowed_models) if allowed_models else None
        self.default_top_k = default_top_k
    
    @classmethod
    def from_settings(cls, settings: Settings, provider: EmbeddingProvider | None = None):
        """Build a service (and, unless given, its provider) from settings."""
        allowed = None
        if settings.provider == ProviderName.OPENAI:
            allowed = settings.allowed_models
        return cls(
            provider=provider or get_embedding_provider(settings),
            allowed_models=allowed,
            default_top_k=settings.default_top_k,
        )
    
    def resolve_model(self, model: str | None) -> str:
        """Return ``model``, or the provider default when omitted or not allowed."""
        default = self.provider.default_model
        if not model:
            return default
        if self.allowed_models is not None and model not in self.allowed_models:
            logger.warning("Unsupported model %r, falling back to %s", model, default)
            return default
        return model
    
    @staticmethod
    def _check_text(text: str) -> None:
        if not text:
            raise ValidationError("text must not be empty")
    
    async def store(
        self,
        text: str,
        embedding_type: str = "",
        model: str | None = None,
        include_embedding: bool = False,
    ) -> StoreResult:
        """
        Embed ``text`` and store it under ``embedding_type``.
        
        Storing an existing (text, embedding_type) pair returns the existing
        item with ``created=False``. With ``include_embedding`` the stored
        vector (the existing one for duplicates) is returned too.
        
        Raises:
            ValidationError: If ``text`` is empty.
            ProviderError: If embedding generation fails.
            DimensionalityMismatchError: If the vector length disagrees with
                earlier vectors from the same model.
        """
        self._check_text(text)
        model = self.resolve_model(model)
        embedding_type = embedding_type or ""
        
        vector = await self.provider.embed(text, model)
        item, created = self.index.insert(text, embedding_type, vector, model)
        
        if not created:
            logger.debug("Duplicate store for type %r returned %s", embedding_type, item.id)
        
        return StoreResult(
            id=item.id,
            created=created,
            model=item.model,
            dimensions=item.dimensions,
            embedding=list(item.vector) if include_embedding else None,
        )
    
    async def compare(
        self,
        text: str,
        embedding_type: str | None = None,
        model: str | None = None,
        top_k: int | None = None,
        include_embeddings: bool = False,
        exclude_self: bool = False,
    ) -> list[ScoredMatch]:
        """
        Embed ``text`` and rank stored embeddings against it.
        
        Args:
            text: Query text.
            embedding_type: Only compare against this type.
            model: Embedding model for the query.
            top_k: Maximum results, ``default_top_k`` when omitted.
            include_embeddings: Attach stored vectors to results.
            exclude_self: Skip stored items with exactly the query text.
            
        Returns:
            Matches sorted by descending similarity. Empty is a valid answer.
        """
        self._check_text(text)
        if top_k is None:
            top_k = self.default_top_k
        if top_k <= 0:
            raise ValidationError(f"top_k must be positive, got {top_k}")
        model = self.resolve_model(model)
        
        query = await self.provider.embed(text, model)
        
        return rank(
            self.index,
            query,
            embedding_type=embedding_type,
            top_k=top_k,
            include_embeddings=include_embeddings,
            exclude_text=text if exclude_self else None,
        )
    
    def clear(self) -> ClearResult:
        """Remove every stored embedding."""
        return ClearResult(removed=self.index.clear())
    
    def stats(self) -> StoreStats:
        return self.index.stats()
    
    async def aclose(self) -> None:
        await self.provider.aclose()
