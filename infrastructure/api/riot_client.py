"""Riot Games TFT API client."""
from __future__ import annotations

import asyncio
import math
from typing import Any, Dict, List, Optional

import httpx

from core.errors import (
    MalformedResponse,
    NotFound,
    RateLimited,
    RequestFailed,
    TransientServerError,
)
from core.logging import get_logger
from domain.enums import Platform, Tier
from .rate_limiter import HostRateGates, Sleeper

logger = get_logger(__name__, service="riot-client")

BODY_PREVIEW_CHARS = 200
# Never wait longer than the long rate window on a single Retry-After
MAX_RETRY_AFTER_SEC = 120.0


class RiotAPIClient:
    """Asynchronous TFT API client; every request goes through its host's rate gate.

    Retries are a bounded loop: 429 waits for the server's ``Retry-After``,
    5xx and network errors back off exponentially. Exhausting the attempts
    raises :class:`RateLimited` or :class:`TransientServerError`.
    """

    def __init__(
        self,
        api_key: str,
        platform: Platform,
        region: Optional[str] = None,
        *,
        gates: Optional[HostRateGates] = None,
        max_attempts: int = 4,
        retry_backoff: float = 2.0,
        default_retry_after: float = 2.0,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self.api_key = api_key
        self.platform = platform
        self.region = region or platform.regional_route
        self.gates = gates or HostRateGates()
        self.max_attempts = max(1, max_attempts)
        self.retry_backoff = retry_backoff
        self.default_retry_after = default_retry_after
        self.timeout = timeout
        self.session: Optional[httpx.AsyncClient] = None
        self.last_status_code: Optional[int] = None
        self.request_count = 0
        self._transport = transport
        self._sleep = sleep

    async def __aenter__(self) -> "RiotAPIClient":
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_) -> None:
        if self.session:
            await self.session.aclose()
            self.session = None

    def _get_platform_url(self) -> str:
        return f"https://{self.platform.platform_host}"

    def _get_regional_url(self) -> str:
        return f"https://{self.region}.api.riotgames.com"

    def _retry_after(self, response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw:
            try:
                wait = float(raw)
            except ValueError:
                wait = math.nan
            if math.isfinite(wait):
                return min(max(0.0, wait), MAX_RETRY_AFTER_SEC)
            logger.debug(f"ignoring unusable Retry-After {raw!r}")
        return self.default_retry_after

    def _backoff(self, attempt: int) -> float:
        return self.retry_backoff ** (attempt - 1)

    async def request(self, url: str) -> Any:
        """GET ``url`` and return its decoded JSON body."""
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")
        host = httpx.URL(url).host

        for attempt in range(1, self.max_attempts + 1):
            last_attempt = attempt == self.max_attempts
            await self.gates.acquire(host)
            self.request_count += 1

            try:
                response = await self.session.get(url)
            except httpx.TransportError as exc:
                if last_attempt:
                    raise TransientServerError(
                        f"network error after {attempt} attempts: {exc}", url=url
                    ) from exc
                wait = self._backoff(attempt)
                logger.warning(f"network error ({type(exc).__name__}), retry {attempt}/{self.max_attempts} in {wait:.1f}s", extra={"url": url})
                await self._sleep(wait)
                continue
            except httpx.DecodingError as exc:
                raise MalformedResponse(f"undecodable body from {url}: {exc}", url=url) from exc
            except httpx.HTTPError as exc:
                raise RequestFailed(f"{type(exc).__name__} for {url}: {exc}", url=url) from exc

            status = response.status_code
            self.last_status_code = status

            if 200 <= status < 300:
                return self._decode(response, url)

            if status == 404:
                raise NotFound(f"404 for {url}", url=url, status_code=status)

            if status == 429:
                if last_attempt:
                    raise RateLimited(f"429 persisted after {attempt} attempts", url=url, status_code=status)
                wait = self._retry_after(response)
                logger.warning(f"429 rate-limited, retry {attempt}/{self.max_attempts} in {wait:.1f}s", extra={"url": url})
                await self._sleep(wait)
                continue

            if status >= 500:
                if last_attempt:
                    raise TransientServerError(
                        f"HTTP {status} persisted after {attempt} attempts", url=url, status_code=status
                    )
                wait = self._backoff(attempt)
                logger.warning(f"HTTP {status}, retry {attempt}/{self.max_attempts} in {wait:.1f}s", extra={"url": url})
                await self._sleep(wait)
                continue

            if status in (401, 403):
                logger.error(f"{status} from Riot API, check RIOT_API_KEY")
            body = response.text[:BODY_PREVIEW_CHARS]
            raise RequestFailed(f"HTTP {status} for {url} :: {body}", url=url, status_code=status, body=body)

        # range() above always returns or raises on its final iteration
        raise AssertionError("unreachable")

    @staticmethod
    def _decode(response: httpx.Response, url: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponse(f"invalid JSON from {url}: {exc}", url=url, status_code=response.status_code) from exc

    # ── League API ─────────────────────────────────────────────────────

    async def get_apex_league(self, tier: Tier) -> Dict[str, Any]:
        """Challenger / Grandmaster / Master league, unpaged."""
        return await self.request(f"{self._get_platform_url()}/tft/league/v1/{tier.league_path}")

    async def get_challenger_league(self) -> Dict[str, Any]:
        return await self.get_apex_league(Tier.CHALLENGER)

    async def get_grandmaster_league(self) -> Dict[str, Any]:
        return await self.get_apex_league(Tier.GRANDMASTER)

    async def get_master_league(self) -> Dict[str, Any]:
        return await self.get_apex_league(Tier.MASTER)

    async def get_league_entries(self, tier: Tier, division: str, page: int = 1) -> List[Dict[str, Any]]:
        url = f"{self._get_platform_url()}/tft/league/v1/entries/{tier.value}/{division}?page={page}"
        return await self.request(url)

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_id(self, summoner_id: str) -> Dict[str, Any]:
        return await self.request(f"{self._get_platform_url()}/tft/summoner/v1/summoners/{summoner_id}")

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(self, puuid: str, count: int = 20, start: int = 0) -> List[str]:
        # No queue parameter: the listing's queue filter is unreliable, matches are filtered after fetch.
        url = f"{self._get_regional_url()}/tft/match/v1/matches/by-puuid/{puuid}/ids?start={start}&count={count}"
        return await self.request(url)

    async def get_match_by_id(self, match_id: str) -> Dict[str, Any]:
        return await self.request(f"{self._get_regional_url()}/tft/match/v1/matches/{match_id}")
