import copy

import pytest

from core.errors import MalformedResponse
from domain.enums import Tier
from infrastructure.repositories import LeagueRepository, MatchRepository, SummonerRepository


class StubAPI:
    """Returns canned payloads in place of RiotAPIClient."""

    def __init__(self, payload):
        self.payload = payload
        self.calls = []

    async def _reply(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        return self.payload

    get_apex_league = _reply
    get_league_entries = _reply
    get_summoner_by_id = _reply
    get_match_ids_by_puuid = _reply
    get_match_by_id = _reply


MATCH = {
    "metadata": {"match_id": "NA1_100", "participants": ["p1", "p2"]},
    "info": {
        "queue_id": 1100,
        "game_version": "Linux Version 14.3.562.9143 (Feb 02 2024/12:13:52) [PUBLIC] ",
        "participants": [
            {
                "puuid": "p1",
                "placement": 1,
                "units": [
                    {"character_id": "TFT11_Ahri", "tier": 2, "itemNames": ["TFT_Item_JeweledGauntlet"]},
                    {"character_id": "TFT11_Lux", "tier": 3},
                ],
            },
            {"puuid": "p2", "placement": 8},
        ],
    },
}


@pytest.mark.anyio
async def test_match_payload_is_parsed():
    record = await MatchRepository(StubAPI(MATCH)).get_match("NA1_100")

    assert record.match_id == "NA1_100"
    assert record.queue_id == 1100
    assert record.patch_version == "14.3"
    first, last = record.participants
    assert first.placement == 1
    assert first.unit_ids == ["TFT11_Ahri", "TFT11_Lux"]
    assert first.units[0].star_level == 2
    assert first.units[0].items == ("TFT_Item_JeweledGauntlet",)
    assert first.units[1].items == ()
    assert last.units == ()


def _broken(mutate):
    payload = copy.deepcopy(MATCH)
    mutate(payload)
    return payload


@pytest.mark.anyio
@pytest.mark.parametrize(
    "mutate",
    [
        lambda m: m["metadata"].update(match_id="NA1_999"),
        lambda m: m["info"].pop("queue_id"),
        lambda m: m["info"].update(queue_id="1100"),
        lambda m: m["info"]["participants"][0].update(placement=9),
        lambda m: m["info"]["participants"][0].update(placement=0),
        lambda m: m["info"]["participants"][0]["units"][0].update(tier="2"),
        lambda m: m["info"]["participants"][0].update(placement=True),
        lambda m: m["info"]["participants"][0]["units"][0].update(character_id=""),
        lambda m: m["info"]["participants"][0]["units"][0].update(itemNames=[1, 2]),
        lambda m: m.pop("info"),
    ],
)
async def test_match_schema_violations_are_malformed(mutate):
    with pytest.raises(MalformedResponse):
        await MatchRepository(StubAPI(_broken(mutate))).get_match("NA1_100")


@pytest.mark.anyio
async def test_match_ids_must_be_strings():
    repo = MatchRepository(StubAPI(["NA1_1", 2]))
    with pytest.raises(MalformedResponse):
        await repo.get_match_ids("p1", 5)


@pytest.mark.anyio
async def test_match_ids_pass_count():
    api = StubAPI(["NA1_1", "NA1_2"])
    assert await MatchRepository(api).get_match_ids("p1", 5) == ["NA1_1", "NA1_2"]
    assert api.calls[0] == (("p1",), {"count": 5})


@pytest.mark.anyio
async def test_summoner_without_puuid_is_malformed():
    with pytest.raises(MalformedResponse):
        await SummonerRepository(StubAPI({"id": "s1"})).get_puuid("s1")
    with pytest.raises(MalformedResponse):
        await SummonerRepository(StubAPI({"puuid": ""})).get_puuid("s1")
    assert await SummonerRepository(StubAPI({"puuid": "p1"})).get_puuid("s1") == "p1"


@pytest.mark.anyio
async def test_apex_league_entries_become_seeds():
    league = {
        "tier": "CHALLENGER",
        "entries": [
            {"summonerId": "s1", "summonerName": "One", "rank": "I"},
            {"puuid": "p2"},
            {"summonerName": "nobody"},
            "garbage",
        ],
    }
    seeds = await LeagueRepository(StubAPI(league)).get_apex_entries(Tier.CHALLENGER)

    assert [s.external_id for s in seeds] == ["s1", "p2"]
    assert seeds[0].display_name == "One"
    assert seeds[0].puuid is None
    assert seeds[0].tier == "CHALLENGER"
    assert seeds[1].puuid == "p2"


@pytest.mark.anyio
async def test_apex_league_without_entries_is_malformed():
    with pytest.raises(MalformedResponse):
        await LeagueRepository(StubAPI({"tier": "MASTER"})).get_apex_entries(Tier.MASTER)


@pytest.mark.anyio
async def test_division_page_entries():
    page = [{"summonerId": "s1", "puuid": "p1", "tier": "DIAMOND", "rank": "II"}]
    seeds = await LeagueRepository(StubAPI(page)).get_division_page(Tier.DIAMOND, "II", 1)

    assert seeds[0].external_id == "s1"
    assert seeds[0].puuid == "p1"
    assert seeds[0].division == "II"


@pytest.mark.anyio
async def test_malformed_match_names_the_offending_field():
    payload = _broken(lambda m: m["info"]["participants"][1].update(placement=9))
    with pytest.raises(MalformedResponse) as info:
        await MatchRepository(StubAPI(payload)).get_match("NA1_100")

    assert "info.participants.1.placement" in str(info.value)


@pytest.mark.anyio
async def test_division_page_must_be_a_list():
    with pytest.raises(MalformedResponse):
        await LeagueRepository(StubAPI({"entries": []})).get_division_page(Tier.DIAMOND, "I", 1)
