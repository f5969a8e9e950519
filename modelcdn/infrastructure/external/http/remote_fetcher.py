"""Remote fetch for URL uploads over a shared httpx.AsyncClient."""

import logging

import httpx

from modelcdn.infrastructure.exceptions import RemoteFetchError

logger = logging.getLogger(__name__)


class HttpRemoteFetcher:
    """Fetch a URL's body; any transport error or non-2xx status is a RemoteFetchError."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, url: str) -> bytes:
        try:
            response = await self._client.get(url, follow_redirects=True)
        except httpx.HTTPError as e:
            logger.warning("Fetch of %s failed: %s", url, e)
            raise RemoteFetchError(url, str(e)) from e
        if not response.is_success:
            logger.warning("Fetch of %s answered %d", url, response.status_code)
            raise RemoteFetchError(url, f"HTTP {response.status_code}")
        return response.content
