from dataclasses import replace

from cassino.engine.entities import Build, LooseCard, TemporaryStack
from cassino.game_pieces.cards import Card
from cassino.gui.config import CardDimensions, TableConfig, TableLayout
from cassino.gui.services.geometry import Rect
from cassino.gui.services.locator import entity_bounds, index_among


def test_loose_cards_indexed_among_loose_cards(table):
    assert entity_bounds(table[0], table) == Rect(50, 100, 60, 80)
    # second loose card sits after a build in the list but is loose index 1
    assert entity_bounds(table[2], table) == Rect(130, 100, 60, 80)


def test_build_bounds(table):
    assert entity_bounds(table[1], table) == Rect(200, 50, 90, 80)


def test_temporary_stack_bounds(table):
    bounds = entity_bounds(table[3], table)
    assert bounds == Rect(200, 200, 72, 80)


def test_second_build_and_stack_are_spaced():
    builds = [
        Build("b1", 0, 7, (Card(7, "H"),)),
        Build("b2", 1, 8, (Card(8, "H"),)),
        TemporaryStack("s1", (Card(2, "H"),)),
        TemporaryStack("s2", (Card(3, "H"),)),
    ]
    assert entity_bounds(builds[1], builds).x == 300
    assert entity_bounds(builds[3], builds).x == 320


def test_builds_match_by_id_then_by_cards():
    cards = (Card(4, "H"), Card(5, "S"))
    listed = [Build("a", 0, 9, (Card(9, "C"),)), Build(None, 0, 9, cards)]
    # same id, different object and different cards
    assert index_among(Build("a", 1, 3, ()), listed) == 0
    # no id: fall back to card sequence
    assert index_among(Build(None, 0, 9, cards), listed) == 1
    assert index_among(Build("zzz", 0, 9, (Card(2, "D"),)), listed) is None


def test_stacks_match_by_cards_without_id():
    cards = (Card(3, "H"), Card(6, "S"))
    listed = [TemporaryStack(None, (Card(1, "C"),)), TemporaryStack(None, cards)]
    assert index_among(TemporaryStack(None, cards), listed) == 1


def test_duplicate_loose_cards_resolve_to_first_match():
    listed = [LooseCard(Card(2, "H")), LooseCard(Card(2, "H"))]
    assert entity_bounds(listed[1], listed) == entity_bounds(listed[0], listed)


def test_missing_entity_has_no_bounds(table):
    assert entity_bounds(LooseCard(Card("A", "S")), table) is None
    assert entity_bounds(Build("gone", 0, 4, ()), table) is None
    assert entity_bounds(LooseCard(Card(2, "H")), []) is None


def test_measured_bounds_override_estimate(table):
    measured = replace(table[1], bounds=Rect(5, 6, 7, 8))
    assert entity_bounds(measured, table) == Rect(5, 6, 7, 8)


def test_unrecognised_entity_treated_as_loose_card():
    class Legacy:
        def __init__(self, rank, suit):
            self.rank = rank
            self.suit = suit

    listed = [Legacy(3, "H"), LooseCard(Card(4, "S"))]
    assert entity_bounds(listed[0], listed) == Rect(50, 100, 60, 80)
    assert entity_bounds(listed[1], listed) == Rect(130, 100, 60, 80)


def test_layout_comes_from_config(table):
    config = TableConfig(
        card=CardDimensions(100, 120),
        layout=TableLayout(loose_origin_x=0, loose_spacing=110, build_width_factor=2),
    )
    assert entity_bounds(table[2], table, config) == Rect(110, 100, 100, 120)
    assert entity_bounds(table[1], table, config) == Rect(200, 50, 200, 120)


def test_rankless_item_has_no_bounds():
    class Placeholder:
        pass

    item = Placeholder()
    assert entity_bounds(item, [item]) is None


def test_pip_rank_text_and_number_locate_the_same_card():
    listed = [LooseCard(Card(4, "S")), LooseCard(Card(9, "H"))]
    assert entity_bounds(LooseCard(Card("9", "H")), listed) == Rect(130, 100, 60, 80)
