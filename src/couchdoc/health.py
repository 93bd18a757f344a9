"""Pre-flight reachability check for the database server."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from couchdoc.config import Settings

logger = logging.getLogger(__name__)


async def check_server(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    """Verify the database server answers on its root URL. Return False if not."""
    url = settings.couch.url
    if not url:
        logger.error("COUCHDB_URL is not set")
        return False

    root = httpx.URL(url).copy_with(path="/")
    async with httpx.AsyncClient(timeout=3, transport=transport) as client:
        try:
            response = await client.get(root)
        except httpx.TransportError as exc:
            logger.error("Database server is not reachable at %s: %s", root.host, exc)
            return False

    if response.is_error:
        logger.error(
            "Database server at %s answered %s", root.host, response.status_code
        )
        return False
    return True
