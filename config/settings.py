"""Application settings and configuration."""
from __future__ import annotations

import math
import os
from pathlib import Path
from typing import Callable, List, Optional, Tuple, TypeVar

from dotenv import load_dotenv

from core.errors import ConfigurationError
from domain.enums import Platform, Tier

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)

T = TypeVar("T")


def _env(name: str, default: str, cast: Callable[[str], T]) -> T:
    raw = os.getenv(name, default).strip() or default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name}={raw!r} is not valid: {exc}") from exc


def _csv(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(',') if part.strip()]


def _int_csv(raw: str) -> Tuple[int, ...]:
    return tuple(int(part) for part in _csv(raw))


class Settings:
    """
    Process configuration, read once from the environment (and ``config/.env``).

    Riot development keys allow 20 requests/second and 100 requests/2 minutes
    per routing host. The defaults match those limits; lower them for shared
    or production keys.
    """

    def __init__(self) -> None:
        self.RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '').strip()

        # ── Target ─────────────────────────────────────────────────────────
        self.PLATFORM: str = os.getenv('PLATFORM', 'na1').strip().lower()
        self.REGION:   str = os.getenv('REGION', '').strip().lower()

        # ── Rate limits (per routing host) ─────────────────────────────────
        self.RATE_LIMIT_PER_1_SEC: int   = _env('RATE_LIMIT_PER_1_SEC', '20', int)
        self.RATE_LIMIT_PER_2_MIN: int   = _env('RATE_LIMIT_PER_2_MIN', '100', int)
        self.RATE_JITTER_SEC:      float = _env('RATE_JITTER_SEC', '0.05', float)

        # ── HTTP ───────────────────────────────────────────────────────────
        self.REQUEST_TIMEOUT:     float = _env('REQUEST_TIMEOUT', '30', float)
        self.MAX_RETRIES:         int   = _env('MAX_RETRIES', '4', int)
        self.RETRY_BACKOFF:       float = _env('RETRY_BACKOFF', '2.0', float)
        self.DEFAULT_RETRY_AFTER: float = _env('DEFAULT_RETRY_AFTER', '2.0', float)

        # ── Seeds ──────────────────────────────────────────────────────────
        self.SEED_PLAYERS:           int       = _env('SEED_PLAYERS', '30', int)
        self.PAGED_TIERS:            List[str] = [t.upper() for t in _csv(os.getenv('PAGED_TIERS', 'DIAMOND'))]
        self.MAX_PAGES_PER_DIVISION: int       = _env('MAX_PAGES_PER_DIVISION', '2', int)

        # ── Matches ────────────────────────────────────────────────────────
        self.COUNT_PER:         int             = _env('COUNT_PER', '5', int)
        self.QUEUES:            Tuple[int, ...] = _env('QUEUES', '1100', _int_csv)
        self.FETCH_CONCURRENCY: int             = _env('FETCH_CONCURRENCY', '8', int)

        # ── Aggregation / output ───────────────────────────────────────────
        self.MIN_SAMPLE:  int  = _env('MIN_SAMPLE', '5', int)
        self.TOP_N:       int  = _env('TOP_N', '30', int)
        self.OUTPUT_PATH: Path = Path(os.getenv('OUTPUT_PATH', 'public/data/comps.json'))
        self.CATALOG_URL: str  = os.getenv('CATALOG_URL', 'https://ddragon.leagueoflegends.com/api/versions.json')

        # ── Paths / logging ────────────────────────────────────────────────
        self.BASE_DIR: Path          = Path(__file__).resolve().parent.parent
        self.LOG_DIR:  Optional[Path] = Path(os.getenv('LOG_DIR')) if os.getenv('LOG_DIR') else None
        self.LOG_LEVEL: str          = os.getenv('LOG_LEVEL', 'INFO')

    @property
    def platform(self) -> Platform:
        return Platform.from_string(self.PLATFORM)

    @property
    def region(self) -> str:
        return self.REGION or self.platform.regional_route

    def validate(self) -> None:
        """Raise ConfigurationError for anything that would make the run meaningless."""
        if not self.RIOT_API_KEY:
            raise ConfigurationError("RIOT_API_KEY must be set (environment or config/.env)")
        try:
            platform = Platform.from_string(self.PLATFORM)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        if self.REGION and self.REGION not in Platform.regional_routes():
            raise ConfigurationError(
                f"REGION={self.REGION!r} is not one of {sorted(Platform.regional_routes())}"
            )
        if self.REGION and self.REGION != platform.regional_route:
            raise ConfigurationError(
                f"REGION={self.REGION!r} does not route PLATFORM={platform.value!r} "
                f"(expected {platform.regional_route!r})"
            )
        for tier in self.PAGED_TIERS:
            if tier not in Tier.paged_names():
                raise ConfigurationError(f"PAGED_TIERS contains {tier!r}, expected some of {Tier.paged_names()}")
        if not self.QUEUES:
            raise ConfigurationError("QUEUES must list at least one queue id")
        for name in (
            'RATE_LIMIT_PER_1_SEC', 'RATE_LIMIT_PER_2_MIN', 'MAX_RETRIES', 'SEED_PLAYERS',
            'COUNT_PER', 'FETCH_CONCURRENCY', 'MIN_SAMPLE', 'TOP_N', 'MAX_PAGES_PER_DIVISION',
        ):
            if getattr(self, name) < 1:
                raise ConfigurationError(f"{name} must be >= 1, got {getattr(self, name)}")

        for name in ('REQUEST_TIMEOUT', 'RETRY_BACKOFF', 'DEFAULT_RETRY_AFTER'):
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0):
                raise ConfigurationError(f"{name} must be a finite number > 0, got {value}")
        if not (math.isfinite(self.RATE_JITTER_SEC) and self.RATE_JITTER_SEC >= 0):
            raise ConfigurationError(f"RATE_JITTER_SEC must be a finite number >= 0, got {self.RATE_JITTER_SEC}")
