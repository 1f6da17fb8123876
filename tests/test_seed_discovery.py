import pytest

from application.services.seed import SeedDiscoveryService
from domain.entities import Seed
from domain.enums import Tier

from tests.fakes import FakeLeagueRepo


def _seeds(prefix, n):
    return [Seed(external_id=f"{prefix}{i}") for i in range(n)]


@pytest.mark.anyio
async def test_apex_tiers_satisfy_target_without_paging():
    repo = FakeLeagueRepo(apex={Tier.CHALLENGER: _seeds("c", 3), Tier.GRANDMASTER: _seeds("g", 5)})
    seeds = await SeedDiscoveryService(repo).discover(6)

    assert [s.external_id for s in seeds] == ["c0", "c1", "c2", "g0", "g1", "g2"]
    assert repo.calls == [(Tier.CHALLENGER,), (Tier.GRANDMASTER,)]


@pytest.mark.anyio
async def test_duplicates_are_dropped_in_discovery_order():
    repo = FakeLeagueRepo(
        apex={Tier.CHALLENGER: _seeds("x", 2), Tier.GRANDMASTER: _seeds("x", 3)},
    )
    seeds = await SeedDiscoveryService(repo, max_pages_per_division=1).discover(10)
    assert [s.external_id for s in seeds] == ["x0", "x1", "x2"]


@pytest.mark.anyio
async def test_paged_tiers_walk_divisions_until_empty_page():
    repo = FakeLeagueRepo(
        apex={Tier.MASTER: _seeds("m", 1)},
        pages={
            (Tier.DIAMOND, "I", 1): _seeds("d1p1-", 2),
            (Tier.DIAMOND, "I", 2): _seeds("d1p2-", 2),
            (Tier.DIAMOND, "II", 1): _seeds("d2p1-", 2),
        },
    )
    seeds = await SeedDiscoveryService(repo, max_pages_per_division=3).discover(100)

    assert len(seeds) == 7
    paged = [c for c in repo.calls if len(c) == 3]
    assert paged == [
        (Tier.DIAMOND, "I", 1),
        (Tier.DIAMOND, "I", 2),
        (Tier.DIAMOND, "I", 3),
        (Tier.DIAMOND, "II", 1),
        (Tier.DIAMOND, "II", 2),
        (Tier.DIAMOND, "III", 1),
        (Tier.DIAMOND, "IV", 1),
    ]


@pytest.mark.anyio
async def test_page_limit_per_division():
    pages = {(Tier.DIAMOND, d, p): _seeds(f"{d}{p}-", 1) for d in ("I", "II", "III", "IV") for p in (1, 2, 3)}
    repo = FakeLeagueRepo(pages=pages)
    seeds = await SeedDiscoveryService(repo, max_pages_per_division=2).discover(100)

    assert len(seeds) == 8
    assert all(c[2] <= 2 for c in repo.calls if len(c) == 3)


@pytest.mark.anyio
async def test_failures_are_skipped():
    repo = FakeLeagueRepo(
        apex={Tier.GRANDMASTER: _seeds("g", 1)},
        pages={(Tier.DIAMOND, "II", 1): _seeds("d", 1), (Tier.DIAMOND, "I", 2): _seeds("never", 1)},
        failing=[(Tier.CHALLENGER,), (Tier.DIAMOND, "I", 1)],
    )
    seeds = await SeedDiscoveryService(repo).discover(100)

    assert [s.external_id for s in seeds] == ["g0", "d0"]
    assert (Tier.DIAMOND, "I", 2) not in repo.calls


@pytest.mark.anyio
async def test_multiple_paged_tiers_in_order():
    repo = FakeLeagueRepo(
        pages={(Tier.EMERALD, "I", 1): _seeds("e", 2)},
    )
    service = SeedDiscoveryService(repo, paged_tiers=[Tier.DIAMOND, Tier.EMERALD], max_pages_per_division=1)
    seeds = await service.discover(2)

    assert [s.external_id for s in seeds] == ["e0", "e1"]
    assert repo.calls[-1] == (Tier.EMERALD, "I", 1)


@pytest.mark.anyio
async def test_non_positive_target_returns_nothing():
    repo = FakeLeagueRepo(apex={Tier.CHALLENGER: _seeds("c", 3)})
    assert await SeedDiscoveryService(repo).discover(0) == []
    assert repo.calls == []
