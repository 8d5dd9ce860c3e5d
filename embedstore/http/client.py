"""Async HTTP client with retry logic for embedding backends."""

import logging

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from embedstore.exceptions import (
    ProviderAuthError,
    ProviderResponseError,
    ProviderTransientError,
)


logger = logging.getLogger(__name__)


class HTTPClient:
    """JSON-over-HTTP client that maps failures onto provider errors."""
    
    DEFAULT_HEADERS = {
        "User-Agent": "embedstore/0.1",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    
    def __init__(
        self,
        timeout: float = 30.0,
        max_attempts: int = 3,
        headers: dict | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self._headers = {**self.DEFAULT_HEADERS, **(headers or {})}
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
    
    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers=self._headers,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client
    
    async def __aenter__(self):
        self._get_client()
        return self
    
    async def __aexit__(self, *args):
        await self.aclose()
    
    async def aclose(self):
        if self._client:
            await self._client.aclose()
            self._client = None
    
    async def _send(self, url: str, payload: dict) -> httpx.Response:
        # Only transport-level failures are retried; the attempt count is
        # bounded and configured per client.
        retrying = retry(
            retry=retry_if_exception_type(httpx.TransportError),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
            reraise=True,
        )
        return await retrying(self._get_client().post)(url, json=payload)
    
    async def post_json(self, url: str, payload: dict) -> dict:
        """
        POST a JSON payload and decode the JSON response.
        
        Raises:
            ProviderAuthError: On 401/403.
            ProviderTransientError: On timeouts, network errors, 429 and 5xx.
            ProviderResponseError: On other error statuses or a non-JSON body.
        """
        try:
            response = await self._send(url, payload)
        except httpx.TimeoutException as e:
            raise ProviderTransientError(
                f"Timeout calling {url}",
                details={"error": str(e)},
            ) from e
        except httpx.TransportError as e:
            raise ProviderTransientError(
                f"Network error calling {url}",
                details={"error": str(e)},
            ) from e
        
        status = response.status_code
        
        if status in (401, 403):
            raise ProviderAuthError(
                f"Unauthorized access to {url}",
                details={"status_code": status},
            )
        
        if status == 429 or status >= 500:
            logger.warning("Provider at %s returned %d", url, status)
            raise ProviderTransientError(
                f"Provider unavailable ({status}) at {url}",
                details={"status_code": status, "body": response.text[:500]},
            )
        
        if status >= 400:
            raise ProviderResponseError(
                f"Provider rejected request ({status}) at {url}",
                details={"status_code": status, "body": response.text[:500]},
            )
        
        try:
            data = response.json()
        except ValueError as e:
            raise ProviderResponseError(
                f"Non-JSON response from {url}",
                details={"body": response.text[:500]},
            ) from e
        
        if not isinstance(data, dict):
            raise ProviderResponseError(f"Unexpected JSON payload from {url}")
        
        return data
