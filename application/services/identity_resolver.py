"""Identity resolution - ladder references to stable PUUIDs."""
from __future__ import annotations

import asyncio
from typing import Iterable, List, Optional

from core.errors import HarvestError, NotFound
from core.logging import get_logger
from domain.entities import Seed
from domain.interfaces import ISummonerRepository

logger = get_logger(__name__, service="identity")


class IdentityResolver:
    """Turns Seeds into PUUIDs. Failures become omissions, never errors."""

    def __init__(self, summoner_repo: ISummonerRepository) -> None:
        self.summoner_repo = summoner_repo

    async def resolve(self, seed: Seed) -> Optional[str]:
        if seed.puuid:
            return seed.puuid
        try:
            return await self.summoner_repo.get_puuid(seed.external_id)
        except NotFound:
            logger.debug(f"seed {seed.external_id[:12]}… no longer exists, skipping")
        except HarvestError as exc:
            logger.warning(f"could not resolve seed {seed.external_id[:12]}…: {exc}")
        return None

    async def resolve_all(self, seeds: Iterable[Seed]) -> List[str]:
        """Resolve a batch; returns unique PUUIDs in seed order.

        Calls are issued concurrently and paced by the client's rate gate.
        """
        seeds = list(seeds)
        results = await asyncio.gather(*(self.resolve(s) for s in seeds))

        puuids: List[str] = []
        seen: set = set()
        for puuid in results:
            if puuid and puuid not in seen:
                seen.add(puuid)
                puuids.append(puuid)
        missing = len(seeds) - sum(1 for p in results if p)
        if missing:
            logger.info(f"resolved {len(puuids)} identities, {missing} seeds unresolved")
        return puuids
