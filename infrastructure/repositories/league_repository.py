"""League (ladder) repository implementation."""
from __future__ import annotations

from typing import Any, List, Optional

from core.errors import MalformedResponse
from core.logging import get_logger
from domain.entities import Seed
from domain.enums import Tier
from domain.interfaces import ILeagueRepository
from infrastructure.api import RiotAPIClient
from .payloads import ENTRY_LIST, LeagueEntryPayload, LeagueListPayload, parse_payload

logger = get_logger(__name__, service="league-repo")


class LeagueRepository(ILeagueRepository):
    """Repository for ladder entries using the Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        self.api_client = api_client

    async def get_apex_entries(self, tier: Tier) -> List[Seed]:
        blob = await self.api_client.get_apex_league(tier)
        league = parse_payload(LeagueListPayload, blob, f"{tier.value} league")
        return self._parse_entries(league.entries, tier.value, None)

    async def get_division_page(self, tier: Tier, division: str, page: int) -> List[Seed]:
        blob = await self.api_client.get_league_entries(tier, division, page)
        entries = parse_payload(ENTRY_LIST, blob, f"{tier.value} {division} page {page}")
        return self._parse_entries(entries, tier.value, division)

    def _parse_entries(self, entries: List[Any], tier: str, division: Optional[str]) -> List[Seed]:
        seeds: List[Seed] = []
        for entry in entries:
            try:
                seeds.append(self._parse_entry(entry, tier, division))
            except MalformedResponse as exc:
                logger.debug(f"skipping ladder entry: {exc}")
        return seeds

    @staticmethod
    def _parse_entry(data: Any, tier: str, division: Optional[str]) -> Seed:
        entry = parse_payload(LeagueEntryPayload, data, "league entry")
        return Seed(
            external_id=entry.summoner_id or entry.puuid,
            display_name=entry.summoner_name,
            puuid=entry.puuid or None,
            tier=entry.tier or tier,
            division=entry.rank or division,
        )
