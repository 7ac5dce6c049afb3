"""Thin JSON-over-HTTP transport built on httpx."""

import logging
from typing import Any

import httpx

from forvomcp.request import redact_url

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
JSON_HEADERS = {"Accept": "application/json"}


class RestTransport:
    """Sends one HTTP request per call and returns the decoded JSON body.

    Errors raised by httpx (network failures, ``HTTPStatusError`` for non-2xx
    responses, JSON decoding errors) are logged and re-raised unchanged.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = DEFAULT_TIMEOUT):
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def request(self, method: str, url: str, body: Any = None) -> Any:
        kwargs = {} if body is None else {"json": body}
        try:
            response = await self.client.request(method, url, headers=JSON_HEADERS, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error: {e.response.status_code} - {method} {redact_url(url)}")
            raise
        except Exception as e:
            logger.error(f"API request failed: {method} {redact_url(url)}: {redact_url(str(e))}")
            raise

    async def get(self, url: str, body: Any = None) -> Any:
        return await self.request("GET", url, body)

    async def post(self, url: str, body: Any = None) -> Any:
        return await self.request("POST", url, body)

    async def delete(self, url: str, body: Any = None) -> Any:
        return await self.request("DELETE", url, body)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "RestTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
