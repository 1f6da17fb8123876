"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .rate_limiter import RateGate, HostRateGates
from .catalog_client import CatalogClient, PLACEHOLDER_VERSION

__all__ = [
    'RiotAPIClient',
    'RateGate',
    'HostRateGates',
    'CatalogClient',
    'PLACEHOLDER_VERSION',
]
