"""Domain interfaces."""
from .repository import ILeagueRepository, IMatchRepository, ISummonerRepository

__all__ = [
    'ILeagueRepository',
    'IMatchRepository',
    'ISummonerRepository',
]
