import pytest

from domain.entities import MatchRecord
from domain.enums import DIVISIONS, Platform, QueueType, Tier


def test_patch_version_from_game_version():
    record = MatchRecord("NA1_1", 1100, game_version="Linux Version 14.3.562.9143 (Feb 02 2024/12:13:52) [PUBLIC] ")
    assert record.patch_version == "14.3"
    assert MatchRecord("NA1_2", 1100).patch_version == ""


def test_queue_type_lookup():
    assert MatchRecord("NA1_1", 1100).queue_type is QueueType.RANKED
    assert MatchRecord("NA1_1", 4242).queue_type is None
    assert QueueType.describe([1100, 4242]).endswith("4242")


def test_apex_tiers_have_league_paths_and_paged_tiers_do_not():
    assert [t.league_path for t in Tier.apex_tiers()] == ["challenger", "grandmaster", "master"]
    with pytest.raises(ValueError):
        Tier.DIAMOND.league_path
    assert "DIAMOND" in Tier.paged_names()
    assert "MASTER" not in Tier.paged_names()
    assert DIVISIONS == ("I", "II", "III", "IV")


@pytest.mark.parametrize(
    "value, platform, route",
    [("na1", Platform.NA1, "americas"), ("EUW", Platform.EUW1, "europe"), ("kr", Platform.KR, "asia"), ("oce", Platform.OC1, "sea")],
)
def test_platform_routing(value, platform, route):
    assert Platform.from_string(value) is platform
    assert platform.regional_route == route
    assert platform.platform_host == f"{platform.value}.api.riotgames.com"


def test_unknown_platform():
    with pytest.raises(ValueError):
        Platform.from_string("atlantis")
