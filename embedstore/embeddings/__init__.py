"""Embedding providers."""

import logging

from embedstore.config import Settings
from embedstore.embeddings.base import EmbeddingProvider, coerce_vector
from embedstore.embeddings.ollama import OllamaEmbeddingProvider
from embedstore.embeddings.openai import OpenAIEmbeddingProvider
from embedstore.models.enums import ProviderName


logger = logging.getLogger(__name__)


def get_embedding_provider(settings: Settings) -> EmbeddingProvider:
    """Build the provider selected by ``settings.provider``."""
    if settings.provider == ProviderName.OLLAMA:
        logger.info("Using Ollama embeddings at %s", settings.ollama_base_url)
        return OllamaEmbeddingProvider(
            model=settings.ollama_model,
            base_url=settings.ollama_base_url,
            timeout=settings.request_timeout,
            max_retries=settings.max_retries,
        )
    
    logger.info("Using OpenAI embeddings (%s)", settings.embedding_model)
    return OpenAIEmbeddingProvider(
        model=settings.embedding_model,
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.request_timeout,
        max_retries=settings.max_retries,
    )


__all__ = [
    "EmbeddingProvider",
    "OllamaEmbeddingProvider",
    "OpenAIEmbeddingProvider",
    "coerce_vector",
    "get_embedding_provider",
]
