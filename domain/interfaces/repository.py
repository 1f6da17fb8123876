"""Repository interfaces for ladder, identity and match data."""
from abc import ABC, abstractmethod
from typing import List

from ..entities import MatchRecord, Seed
from ..enums import Tier


class ILeagueRepository(ABC):
    """Interface for ladder (league) data."""

    @abstractmethod
    async def get_apex_entries(self, tier: Tier) -> List[Seed]:
        """All entries of an unpaged apex league."""

    @abstractmethod
    async def get_division_page(self, tier: Tier, division: str, page: int) -> List[Seed]:
        """One page of a paged tier/division; empty when exhausted."""


class ISummonerRepository(ABC):
    """Interface for identity lookups."""

    @abstractmethod
    async def get_puuid(self, summoner_id: str) -> str:
        """Stable identifier for a ladder-scoped summoner id."""


class IMatchRepository(ABC):
    """Interface for match data."""

    @abstractmethod
    async def get_match_ids(self, puuid: str, count: int) -> List[str]:
        """Most recent match ids for an identity, newest first."""

    @abstractmethod
    async def get_match(self, match_id: str) -> MatchRecord:
        """A single validated match; raises MalformedResponse on schema mismatch."""
