"""Infrastructure layer - API clients and repositories."""
from .api import RiotAPIClient, RateGate, HostRateGates, CatalogClient
from .repositories import LeagueRepository, MatchRepository, SummonerRepository

__all__ = [
    'RiotAPIClient',
    'RateGate',
    'HostRateGates',
    'CatalogClient',
    'LeagueRepository',
    'MatchRepository',
    'SummonerRepository',
]
