"""OpenAI embedding provider."""

import logging
from typing import Any

import openai
from openai import AsyncOpenAI

from embedstore.config import DEFAULT_MODEL
from embedstore.embeddings.base import EmbeddingProvider, coerce_vector
from embedstore.exceptions import (
    ProviderAuthError,
    ProviderResponseError,
    ProviderTransientError,
)


logger = logging.getLogger(__name__)


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """
    Embedding provider using OpenAI's API.
    
    Requires an API key, either passed in or read by the SDK from
    ``OPENAI_API_KEY``.
    """
    
    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
        max_retries: int = 2,
        client: Any = None,
    ):
        self.default_model = model
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries
        self._client = client
    
    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            try:
                self._client = AsyncOpenAI(
                    api_key=self.api_key or None,
                    base_url=self.base_url,
                    timeout=self.timeout,
                    max_retries=self.max_retries,
                )
            except openai.OpenAIError as e:
                # Raised by the SDK when no API key can be found
                raise ProviderAuthError(str(e)) from e
        return self._client
    
    async def embed(self, text: str, model: str | None = None) -> list[float]:
        """Generate an embedding using the OpenAI API."""
        model = model or self.default_model
        client = self._get_client()
        
        try:
            response = await client.embeddings.create(model=model, input=text)
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            raise ProviderAuthError(
                "OpenAI rejected the configured credentials",
                details={"status_code": e.status_code},
            ) from e
        except (openai.APITimeoutError, openai.APIConnectionError) as e:
            logger.warning("OpenAI connection failure: %s", e)
            raise ProviderTransientError(
                "Could not reach OpenAI",
                details={"error": str(e)},
            ) from e
        except (openai.RateLimitError, openai.InternalServerError) as e:
            logger.warning("OpenAI unavailable: %s", e)
            raise ProviderTransientError(
                f"OpenAI unavailable ({e.status_code})",
                details={"status_code": e.status_code},
            ) from e
        except openai.APIStatusError as e:
            raise ProviderResponseError(
                f"OpenAI rejected the request ({e.status_code})",
                details={"status_code": e.status_code, "model": model},
            ) from e
        
        data = getattr(response, "data", None)
        if not data:
            raise ProviderResponseError("OpenAI returned no embedding data")
        
        return coerce_vector(getattr(data[0], "embedding", None), "OpenAI")
    
    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
