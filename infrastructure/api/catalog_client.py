"""Static catalog (Data Dragon) lookups. Cosmetic only; never blocks the pipeline."""
from __future__ import annotations

from typing import Optional

import httpx

from core.logging import get_logger

logger = get_logger(__name__, service="catalog")

PLACEHOLDER_VERSION = "live"


class CatalogClient:
    """Reads the current content version from the static catalog."""

    def __init__(
        self,
        versions_url: str = "https://ddragon.leagueoflegends.com/api/versions.json",
        *,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.versions_url = versions_url
        self.timeout = timeout
        self._transport = transport

    async def current_version(self) -> Optional[str]:
        """Newest published version (e.g. "14.3.1"), or None when the catalog is unavailable."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.versions_url)
                response.raise_for_status()
                versions = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(f"catalog unavailable: {exc}")
            return None
        if not isinstance(versions, list) or not versions or not isinstance(versions[0], str):
            logger.warning("catalog versions payload has an unexpected shape")
            return None
        return versions[0]

    async def patch_tag(self) -> Optional[str]:
        """Current version trimmed to major.minor ("14.3"), or None."""
        version = await self.current_version()
        if not version:
            return None
        parts = version.split(".")
        return ".".join(parts[:2]) if len(parts) >= 2 else version
