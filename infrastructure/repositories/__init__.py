"""Infrastructure repositories."""
from .league_repository import LeagueRepository
from .match_repository import MatchRepository
from .summoner_repository import SummonerRepository

__all__ = [
    'LeagueRepository',
    'MatchRepository',
    'SummonerRepository',
]
