import asyncio

import pytest

from infrastructure.api.rate_limiter import MIN_WAIT_SEC, HostRateGates, RateGate


def _max_in_window(stamps, window):
    return max(sum(1 for t in stamps if start <= t < start + window) for start in stamps)


async def _burst(gate, clock, n):
    stamps = []
    for _ in range(n):
        await gate.acquire()
        stamps.append(clock())
    return stamps


@pytest.mark.anyio
async def test_short_window_is_never_exceeded(clock):
    gate = RateGate(20, 1000, clock=clock, sleep=clock.sleep)
    stamps = await _burst(gate, clock, 65)

    assert _max_in_window(stamps, 1.0) <= 20
    assert stamps[:20] == [0.0] * 20
    assert stamps[20] == pytest.approx(1.0)


@pytest.mark.anyio
async def test_long_window_is_never_exceeded(clock):
    gate = RateGate(5, 8, short_window=1.0, long_window=10.0, clock=clock, sleep=clock.sleep)
    stamps = await _burst(gate, clock, 20)

    assert _max_in_window(stamps, 1.0) <= 5
    assert _max_in_window(stamps, 10.0) <= 8
    # 5 at t=0, 3 at t=1, then blocked by the long window until t=10
    assert stamps[8] == pytest.approx(10.0)


@pytest.mark.anyio
async def test_concurrent_callers_respect_both_windows(clock):
    gate = RateGate(4, 10, short_window=1.0, long_window=5.0, clock=clock, sleep=clock.sleep)
    stamps = []

    async def call():
        await gate.acquire()
        stamps.append(clock())

    await asyncio.gather(*(call() for _ in range(30)))

    assert len(stamps) == 30
    assert _max_in_window(sorted(stamps), 1.0) <= 4
    assert _max_in_window(sorted(stamps), 5.0) <= 10


@pytest.mark.anyio
async def test_wait_never_drops_below_floor(clock):
    gate = RateGate(1, 100, short_window=0.001, clock=clock, sleep=clock.sleep)
    await gate.acquire()
    await gate.acquire()

    assert clock.sleeps
    assert min(clock.sleeps) >= MIN_WAIT_SEC


@pytest.mark.anyio
async def test_jitter_sleeps_after_acquiring(clock):
    gate = RateGate(10, 10, jitter=0.5, clock=clock, sleep=clock.sleep)
    await gate.acquire()

    assert len(clock.sleeps) == 1
    assert 0.0 <= clock.sleeps[0] <= 0.5


def test_status_and_reset(clock):
    gate = RateGate(3, 7, clock=clock, sleep=clock.sleep)
    asyncio.run(gate.acquire())

    assert gate.get_status() == (1, 3, 1, 7)
    clock.now = 1.0
    assert gate.get_status() == (0, 3, 1, 7)
    gate.reset()
    assert gate.get_status() == (0, 3, 0, 7)


def test_invalid_limits_are_rejected():
    with pytest.raises(ValueError):
        RateGate(0, 10)


@pytest.mark.anyio
async def test_hosts_are_gated_independently(clock):
    gates = HostRateGates(2, 100, clock=clock, sleep=clock.sleep)
    for _ in range(2):
        await gates.acquire("na1.api.riotgames.com")
        await gates.acquire("americas.api.riotgames.com")

    assert clock.sleeps == []
    assert set(gates.gates) == {"na1.api.riotgames.com", "americas.api.riotgames.com"}
    assert gates.status("na1.api.riotgames.com") == (2, 2, 2, 100)
    assert gates.status("kr.api.riotgames.com") is None


@pytest.mark.anyio
async def test_host_override_budget(clock):
    gates = HostRateGates(20, 100, clock=clock, sleep=clock.sleep)
    gates.add_host("slow.example", 1, 1)
    await gates.acquire("slow.example")

    assert gates.gate_for("slow.example").per_short == 1
    assert gates.gate_for("other.example").per_short == 20
