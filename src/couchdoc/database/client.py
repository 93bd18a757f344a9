"""Async HTTP client initialization for the database server."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from types import TracebackType

    from couchdoc.config import CouchConfig

logger = logging.getLogger(__name__)


class CouchClient:
    """Manages the async HTTP client and the configured database name."""

    def __init__(
        self,
        config: CouchConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        """Create the HTTP client. Does nothing if it already exists."""
        if self._http is not None:
            return
        auth = (
            httpx.BasicAuth(self._config.username, self._config.password)
            if self._config.has_credentials
            else None
        )
        self._http = httpx.AsyncClient(
            auth=auth,
            timeout=self._config.timeout,
            headers={"Accept": "application/json"},
            transport=self._transport,
        )
        logger.debug("HTTP client created for %s", self.base_url.host)

    async def close(self) -> None:
        """Close the underlying client."""
        if self._http:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> CouchClient:
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def http(self) -> httpx.AsyncClient:
        if self._http is None:
            raise RuntimeError("CouchClient not initialized, call initialize() first")
        return self._http

    @property
    def base_url(self) -> httpx.URL:
        return httpx.URL(self._config.url)

    @property
    def database(self) -> str:
        return self._config.database
