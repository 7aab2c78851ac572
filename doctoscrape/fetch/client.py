"""HTTP client with error mapping."""
import logging
from typing import Optional
import httpx

from doctoscrape.config import config
from doctoscrape.errors import HttpStatusError, NetworkError

logger = logging.getLogger(__name__)


class FetchClient:
    """Async HTTP client shared by every fetch of a run."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        # Configure connection pool
        limits = httpx.Limits(
            max_connections=config.CONCURRENCY,
            max_keepalive_connections=min(config.CONCURRENCY, 20),
        )

        self.client = httpx.AsyncClient(
            http2=True,
            timeout=config.TIMEOUT,
            follow_redirects=True,
            limits=limits,
            headers={"User-Agent": config.USER_AGENT},
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.client.aclose()

    async def fetch(self, url: str) -> httpx.Response:
        """GET a URL, raising NetworkError or HttpStatusError on failure.

        Any httpx request failure (transport, timeout, redirect loop, body
        decoding) becomes NetworkError.
        """
        logger.debug(f"GET {url}")
        try:
            response = await self.client.get(url)
        except httpx.RequestError as e:
            logger.warning(f"Network error for {url}: {e!r}")
            raise NetworkError(url, repr(e)) from e

        if not response.is_success:
            raise HttpStatusError(url, response.status_code)

        return response

    async def fetch_text(self, url: str) -> str:
        """GET a URL and return the decoded body."""
        response = await self.fetch(url)
        return response.text

    async def fetch_bytes(self, url: str) -> bytes:
        """GET a URL and return the raw body."""
        response = await self.fetch(url)
        return response.content
