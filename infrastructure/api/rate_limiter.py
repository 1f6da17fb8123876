"""Dual sliding-window rate gates, one per routing host."""
from __future__ import annotations

import asyncio
import random
import time
from collections import deque
from typing import Awaitable, Callable, Deque, Dict, Optional, Tuple

from core.logging import get_logger

logger = get_logger(__name__, service="rate-gate")

Clock = Callable[[], float]
Sleeper = Callable[[float], Awaitable[None]]

MIN_WAIT_SEC = 0.005


class RateGate:
    """
    Sliding-window rate limiter with two windows:
      - Short : ``per_short`` calls in the trailing ``short_window`` seconds
      - Long  : ``per_long`` calls in the trailing ``long_window`` seconds

    ``acquire()`` records the call in both windows only once both have room.
    Check and record happen with no await in between, so concurrent callers
    on one event loop cannot overshoot either window.
    """

    def __init__(
        self,
        per_short: int = 20,
        per_long: int = 100,
        *,
        short_window: float = 1.0,
        long_window: float = 120.0,
        jitter: float = 0.0,
        clock: Clock = time.monotonic,
        sleep: Sleeper = asyncio.sleep,
        name: str = "default",
    ) -> None:
        if per_short < 1 or per_long < 1:
            raise ValueError("rate limits must be >= 1")
        self.per_short = per_short
        self.per_long = per_long
        self.short_window = short_window
        self.long_window = long_window
        self.jitter = jitter
        self.name = name
        self._clock = clock
        self._sleep = sleep
        self._short: Deque[float] = deque()
        self._long: Deque[float] = deque()

    def _evict(self, now: float) -> None:
        while self._short and now - self._short[0] >= self.short_window:
            self._short.popleft()
        while self._long and now - self._long[0] >= self.long_window:
            self._long.popleft()

    def _wait_time(self, now: float) -> float:
        """Seconds until both windows have room; 0 when a call may proceed now."""
        wait = 0.0
        if len(self._short) >= self.per_short:
            wait = max(wait, self._short[0] + self.short_window - now)
        if len(self._long) >= self.per_long:
            wait = max(wait, self._long[0] + self.long_window - now)
        return wait

    async def acquire(self) -> None:
        while True:
            now = self._clock()
            self._evict(now)
            wait = self._wait_time(now)
            if wait <= 0:
                self._short.append(now)
                self._long.append(now)
                break
            wait = max(MIN_WAIT_SEC, wait)
            logger.trace(lambda: f"rate gate {self.name} saturated, waiting {wait:.3f}s")
            await self._sleep(wait)

        if self.jitter > 0:
            await self._sleep(random.uniform(0, self.jitter))

    def get_status(self) -> Tuple[int, int, int, int]:
        """(used_short, limit_short, used_long, limit_long) as of now."""
        self._evict(self._clock())
        return len(self._short), self.per_short, len(self._long), self.per_long

    def reset(self) -> None:
        self._short.clear()
        self._long.clear()


class HostRateGates:
    """Per-host rate gates created lazily with shared limits."""

    def __init__(
        self,
        per_short: int = 20,
        per_long: int = 100,
        *,
        jitter: float = 0.0,
        clock: Clock = time.monotonic,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self.per_short = per_short
        self.per_long = per_long
        self.jitter = jitter
        self._clock = clock
        self._sleep = sleep
        self.gates: Dict[str, RateGate] = {}

    def gate_for(self, host: str) -> RateGate:
        gate = self.gates.get(host)
        if gate is None:
            gate = RateGate(
                self.per_short,
                self.per_long,
                jitter=self.jitter,
                clock=self._clock,
                sleep=self._sleep,
                name=host,
            )
            self.gates[host] = gate
        return gate

    def add_host(self, host: str, per_short: int, per_long: int) -> None:
        """Register a host whose budget differs from the shared default."""
        self.gates[host] = RateGate(
            per_short, per_long, jitter=self.jitter, clock=self._clock, sleep=self._sleep, name=host
        )

    async def acquire(self, host: str) -> None:
        await self.gate_for(host).acquire()

    def status(self, host: str) -> Optional[Tuple[int, int, int, int]]:
        gate = self.gates.get(host)
        return gate.get_status() if gate else None
