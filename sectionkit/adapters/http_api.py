"""
HTTP API client adapter.

Issues CRUD calls against the content API with httpx.
Satisfies ApiClientPort.

Key behaviors:
- DELETE <path>/<id>; any 2xx is success
- Non-2xx responses return a failed DeleteResult
- Transport errors propagate to the caller (the delete flow contains them)
"""

from __future__ import annotations

import logging

import httpx

from sectionkit.core.ports.api import DeleteResult
from sectionkit.core.services.paths import api_item_path

logger = logging.getLogger(__name__)


class HttpxApiClient:
    """Async content API client backed by httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = "",
        *,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._headers = headers or {}
        self._http_client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers=self._headers,
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> HttpxApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def delete(self, path: str, item_id: str) -> DeleteResult:
        client = await self._get_client()
        url = api_item_path(path, item_id)
        logger.debug("DELETE %s", url)

        response = await client.delete(url)
        if response.is_success:
            return DeleteResult(ok=True, status_code=response.status_code)

        return DeleteResult(
            ok=False,
            status_code=response.status_code,
            error=f"DELETE {url} returned {response.status_code}",
        )
