"""Summoner repository implementation."""
from domain.interfaces import ISummonerRepository
from infrastructure.api import RiotAPIClient
from .payloads import SummonerPayload, parse_payload


class SummonerRepository(ISummonerRepository):
    """Repository for summoner identity lookups using the Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize summoner repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def get_puuid(self, summoner_id: str) -> str:
        """
        Resolve an encrypted summoner id to its PUUID.

        Args:
            summoner_id: Ladder-scoped encrypted summoner id

        Returns:
            The PUUID

        Raises:
            NotFound: the summoner no longer exists (stale ladder entry)
            MalformedResponse: the payload has no non-empty string ``puuid``
        """
        data = await self.api_client.get_summoner_by_id(summoner_id)
        return parse_payload(SummonerPayload, data, "summoner").puuid
