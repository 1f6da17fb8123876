import pytest

from application.services.match_collector import MatchCollector

from tests.fakes import FakeMatchRepo, board, record


@pytest.mark.anyio
async def test_shared_match_is_fetched_once():
    repo = FakeMatchRepo(
        listings={"p1": ["M1", "M2"], "p2": ["M1", "M3"]},
        matches={m: record(m, board(1, "A")) for m in ("M1", "M2", "M3")},
    )
    collector = MatchCollector(repo, allowed_queues={1100})
    records = await collector.collect(["p1", "p2"], 5)

    assert [r.match_id for r in records] == ["M1", "M2", "M3"]
    assert repo.fetch_calls.count("M1") == 1
    assert collector.stats.ids_listed == 4
    assert collector.stats.unique_ids == 3


@pytest.mark.anyio
async def test_other_queues_are_fetched_but_excluded():
    repo = FakeMatchRepo(
        listings={"p1": ["M1", "M2"]},
        matches={"M1": record("M1", board(1, "A")), "M2": record("M2", board(1, "A"), queue_id=1090)},
    )
    collector = MatchCollector(repo, allowed_queues={1100})
    records = await collector.collect(["p1"], 5)

    assert [r.match_id for r in records] == ["M1"]
    assert "M2" in repo.fetch_calls
    assert collector.stats.fetched == 2
    assert collector.stats.filtered_out == 1
    assert collector.stats.kept == 1


@pytest.mark.anyio
async def test_failed_fetches_and_listings_are_dropped():
    repo = FakeMatchRepo(
        listings={"p1": ["M1", "M2", "M404"], "p2": ["M9"]},
        matches={"M1": record("M1", board(1, "A")), "M2": record("M2", board(1, "A"))},
        failing=("M2", "p2"),
    )
    collector = MatchCollector(repo, allowed_queues={1100})
    records = await collector.collect(["p1", "p2"], 5)

    assert [r.match_id for r in records] == ["M1"]
    assert collector.stats.listing_failures == 1
    assert collector.stats.dropped == 2
    assert "M9" not in repo.fetch_calls


@pytest.mark.anyio
async def test_fetch_pool_bounds_in_flight_requests():
    ids = [f"M{i}" for i in range(20)]
    repo = FakeMatchRepo(
        listings={"p1": ids},
        matches={m: record(m, board(1, "A")) for m in ids},
        failing=("M3", "M4"),
    )
    collector = MatchCollector(repo, allowed_queues={1100}, fetch_concurrency=3)
    records = await collector.collect(["p1"], 20)

    assert len(records) == 18
    assert repo.max_in_flight == 3
    assert sorted(repo.fetch_calls) == sorted(ids)


@pytest.mark.anyio
async def test_no_identities_collects_nothing():
    repo = FakeMatchRepo(listings={}, matches={})
    assert await MatchCollector(repo, allowed_queues={1100}).collect([], 5) == []
    assert repo.fetch_calls == []
