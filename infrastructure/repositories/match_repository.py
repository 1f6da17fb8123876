"""Match repository implementation."""
from typing import List

from core.errors import MalformedResponse
from domain.entities import MatchRecord, Participant, Unit
from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient
from .payloads import MATCH_IDS, MatchPayload, ParticipantPayload, UnitPayload, parse_payload


class MatchRepository(IMatchRepository):
    """Repository for TFT match data using the Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize match repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def get_match_ids(self, puuid: str, count: int) -> List[str]:
        """Most recent match ids for a PUUID (all queues)."""
        ids = await self.api_client.get_match_ids_by_puuid(puuid, count=count)
        return parse_payload(MATCH_IDS, ids, "match id list")

    async def get_match(self, match_id: str) -> MatchRecord:
        """
        Get a single match by ID.

        Args:
            match_id: Match identifier

        Returns:
            Validated MatchRecord

        Raises:
            NotFound: unknown match id
            MalformedResponse: the payload does not match the match schema
        """
        data = await self.api_client.get_match_by_id(match_id)
        return self._parse_match_data(parse_payload(MatchPayload, data, "match"), match_id)

    def _parse_match_data(self, match: MatchPayload, match_id: str) -> MatchRecord:
        """Turn a validated match payload into a MatchRecord."""
        reported_id = match.metadata.match_id
        if reported_id != match_id:
            raise MalformedResponse(f"match: requested {match_id!r}, payload is {reported_id!r}")
        return MatchRecord(
            match_id=reported_id,
            queue_id=match.info.queue_id,
            game_version=match.info.game_version or "",
            participants=tuple(self._parse_participant_data(p) for p in match.info.participants),
        )

    def _parse_participant_data(self, data: ParticipantPayload) -> Participant:
        return Participant(
            placement=data.placement,
            puuid=data.puuid or "",
            units=tuple(self._parse_unit_data(u) for u in data.units or ()),
        )

    @staticmethod
    def _parse_unit_data(data: UnitPayload) -> Unit:
        # ``tier`` on a unit is its star level
        return Unit(
            character_id=data.character_id,
            star_level=1 if data.tier is None else data.tier,
            items=tuple(data.item_names or ()),
        )
