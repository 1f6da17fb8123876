"""Match collection - id listing, global dedup, bounded-concurrency fetch, queue filter."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Collection, Dict, Iterable, List, Optional

from core.errors import HarvestError, NotFound
from core.logging import get_logger
from domain.entities import MatchRecord
from domain.interfaces import IMatchRepository

logger = get_logger(__name__, service="match-collector")


@dataclass
class CollectionStats:
    identities: int = 0
    listing_failures: int = 0
    ids_listed: int = 0
    unique_ids: int = 0
    fetched: int = 0
    dropped: int = 0
    filtered_out: int = 0

    @property
    def kept(self) -> int:
        return self.fetched - self.filtered_out


class MatchCollector:
    """
    Collects match records for a pool of identities.

    1. list recent match ids per identity into one shared, ordered set
    2. fetch every unique id once, at most ``fetch_concurrency`` in flight
    3. keep only matches whose queue id is in ``allowed_queues``

    Queue filtering happens after the fetch and never as a listing
    parameter: the listing endpoint's queue filter is unreliable across
    record age.
    """

    def __init__(
        self,
        match_repo: IMatchRepository,
        *,
        allowed_queues: Collection[int],
        fetch_concurrency: int = 8,
    ) -> None:
        self.match_repo = match_repo
        self.allowed_queues = frozenset(allowed_queues)
        self.fetch_concurrency = max(1, fetch_concurrency)
        self.stats = CollectionStats()

    async def collect(self, identities: Iterable[str], per_identity_count: int) -> List[MatchRecord]:
        self.stats = CollectionStats()
        match_ids = await self._list_match_ids(list(identities), per_identity_count)
        if not match_ids:
            return []

        records = await self._fetch_all(match_ids)
        kept: List[MatchRecord] = []
        for record in records:
            if record.queue_id in self.allowed_queues:
                kept.append(record)
            else:
                self.stats.filtered_out += 1
                logger.trace(lambda: f"{record.match_id}: queue {record.queue_id} not allowed")

        logger.info(
            f"collected {len(kept)} matches "
            f"(unique ids {self.stats.unique_ids}, fetched {self.stats.fetched}, "
            f"dropped {self.stats.dropped}, other queues {self.stats.filtered_out})"
        )
        return kept

    async def _list_match_ids(self, identities: List[str], count: int) -> List[str]:
        self.stats.identities = len(identities)
        listings = await asyncio.gather(*(self._list_one(p, count) for p in identities))

        # dict keeps first-seen order while deduplicating across identities
        unique: Dict[str, None] = {}
        for ids in listings:
            if ids is None:
                self.stats.listing_failures += 1
                continue
            self.stats.ids_listed += len(ids)
            for match_id in ids:
                unique.setdefault(match_id, None)

        self.stats.unique_ids = len(unique)
        logger.info(f"listed {self.stats.ids_listed} match ids, {len(unique)} unique")
        return list(unique)

    async def _list_one(self, puuid: str, count: int) -> Optional[List[str]]:
        try:
            return await self.match_repo.get_match_ids(puuid, count)
        except HarvestError as exc:
            logger.warning(f"match listing failed for {puuid[:12]}…: {exc}")
            return None

    async def _fetch_all(self, match_ids: List[str]) -> List[MatchRecord]:
        pool = asyncio.Semaphore(self.fetch_concurrency)

        async def _fetch(match_id: str) -> Optional[MatchRecord]:
            async with pool:
                try:
                    return await self.match_repo.get_match(match_id)
                except NotFound:
                    logger.debug(f"{match_id}: not found, dropped")
                except HarvestError as exc:
                    logger.warning(f"{match_id}: dropped ({type(exc).__name__}: {exc})")
                return None

        results = await asyncio.gather(*(_fetch(m) for m in match_ids))
        records = [r for r in results if r is not None]
        self.stats.fetched = len(records)
        self.stats.dropped = len(match_ids) - len(records)
        return records
