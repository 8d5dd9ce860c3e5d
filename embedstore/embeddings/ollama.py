"""Ollama embedding provider for local LLM embeddings."""

from embedstore.embeddings.base import EmbeddingProvider, coerce_vector
from embedstore.exceptions import ProviderError
from embedstore.http.client import HTTPClient


class OllamaEmbeddingProvider(EmbeddingProvider):
    """
    Local embedding provider using Ollama.
    
    Recommended embedding models:
    - nomic-embed-text (good quality, 768 dim)
    - mxbai-embed-large (high quality, 1024 dim)
    - all-minilm (fast, 384 dim)
    """
    
    def __init__(
        self,
        model: str = "nomic-embed-text",
        base_url: str = "http://localhost:11434",
        http_client: HTTPClient | None = None,
        timeout: float = 60.0,
        max_retries: int = 2,
    ):
        """
        Initialize Ollama embedding provider.
        
        Args:
            model: Default Ollama embedding model name.
            base_url: Ollama server URL.
            http_client: Client to use instead of building one.
            timeout: Request timeout in seconds.
            max_retries: Extra attempts on transport errors.
        """
        self.default_model = model
        self.base_url = base_url.rstrip("/")
        self._http = http_client or HTTPClient(timeout=timeout, max_attempts=max_retries + 1)
    
    async def embed(self, text: str, model: str | None = None) -> list[float]:
        """Generate an embedding using Ollama's local API."""
        data = await self._http.post_json(
            f"{self.base_url}/api/embeddings",
            {"model": model or self.default_model, "prompt": text},
        )
        return coerce_vector(data.get("embedding"), "Ollama")
    
    async def is_available(self) -> bool:
        """Check if the Ollama server answers an embedding request."""
        try:
            await self.embed("ping")
        except ProviderError:
            return False
        return True
    
    async def aclose(self) -> None:
        await self._http.aclose()
