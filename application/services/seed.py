"""Seed discovery - apex leagues first, paged divisions as fallback."""
from __future__ import annotations

from typing import Dict, List, Sequence

from core.errors import HarvestError
from core.logging import get_logger
from domain.entities import Seed
from domain.enums import DIVISIONS, Tier
from domain.interfaces import ILeagueRepository

logger = get_logger(__name__, service="seed-discovery")


class SeedDiscoveryService:
    """
    Discovers seed players on the ladder.

    Fast path : Challenger → Grandmaster → Master  (one unpaged call each)
    Slow path : paged tiers (Diamond by default), divisions I → IV,
                page 1, 2, ... until a page comes back empty or
                ``max_pages_per_division`` is reached.

    Seeds are deduplicated by external id and returned in discovery order.
    A failing league call is logged and skipped; partial results are fine.
    """

    def __init__(
        self,
        league_repo: ILeagueRepository,
        *,
        paged_tiers: Sequence[Tier] = (Tier.DIAMOND,),
        divisions: Sequence[str] = DIVISIONS,
        max_pages_per_division: int = 2,
    ) -> None:
        self.league_repo = league_repo
        self.paged_tiers = list(paged_tiers)
        self.divisions = list(divisions)
        self.max_pages_per_division = max(1, max_pages_per_division)

    async def discover(self, target_count: int) -> List[Seed]:
        seeds: Dict[str, Seed] = {}
        if target_count <= 0:
            return []

        # ── Fast path: apex leagues ───────────────────────────────────
        for tier in Tier.apex_tiers():
            try:
                entries = await self.league_repo.get_apex_entries(tier)
            except HarvestError as exc:
                logger.warning(f"{tier.value} league unavailable, skipping: {exc}")
                continue
            added = self._absorb(seeds, entries, target_count)
            logger.debug(f"{tier.value}: +{added} seeds ({len(seeds)}/{target_count})")
            if len(seeds) >= target_count:
                return list(seeds.values())

        # ── Slow path: paged divisions ────────────────────────────────
        for tier in self.paged_tiers:
            for division in self.divisions:
                for page in range(1, self.max_pages_per_division + 1):
                    try:
                        entries = await self.league_repo.get_division_page(tier, division, page)
                    except HarvestError as exc:
                        logger.warning(f"{tier.value} {division} page {page} failed, skipping division: {exc}")
                        break
                    if not entries:
                        break
                    added = self._absorb(seeds, entries, target_count)
                    logger.debug(f"{tier.value} {division} p{page}: +{added} seeds ({len(seeds)}/{target_count})")
                    if len(seeds) >= target_count:
                        return list(seeds.values())

        if len(seeds) < target_count:
            logger.info(f"ladder exhausted with {len(seeds)}/{target_count} seeds")
        return list(seeds.values())

    @staticmethod
    def _absorb(seeds: Dict[str, Seed], entries: List[Seed], target_count: int) -> int:
        added = 0
        for seed in entries:
            if len(seeds) >= target_count:
                break
            if seed.external_id in seeds:
                continue
            seeds[seed.external_id] = seed
            added += 1
        return added
