from domain.entities import UnitStats, composition_key, display_name
from domain.entities.composition import MAX_ITEMS, key_units


def test_key_is_order_and_case_independent():
    assert composition_key(["TFT11_Ahri", "TFT11_Lux", "tft11_jinx"]) == composition_key(
        ["tft11_jinx", "tft11_ahri", "TFT11_LUX"]
    )


def test_key_is_sorted_lowercase_and_pipe_joined():
    assert composition_key(["B", "a", "C"]) == "a|b|c"


def test_duplicate_units_collapse():
    assert composition_key(["A", "a", "B"]) == "a|b"


def test_blank_ids_are_ignored_and_empty_board_has_empty_key():
    assert composition_key(["", "  ", "A"]) == "a"
    assert composition_key([]) == ""
    assert key_units("") == []


def test_display_name_strips_set_prefix_and_truncates():
    key = composition_key(["TFT11_Ahri", "TFT11_Lux", "TFT11_Jinx", "TFT11_Kobuko", "TFT11_Lee_Sin"])
    assert display_name(key) == "Ahri Jinx Kobuko Lee Sin +1"


def test_unit_stats_item_sets_are_sorted_and_capped():
    stats = UnitStats()
    stats.add(2, ("Z", "A", "M", "B"))
    stats.add(3, ("A", "B", "M", "Z"))
    stats.add(1, ())

    assert stats.plays == 3
    assert stats.sum_stars == 6
    (items, count), = stats.item_sets.items()
    assert items == ("A", "B", "M")
    assert len(items) == MAX_ITEMS
    assert count == 2
