"""Displayed value of a card stack.

A staging stack whose cards all share one rank is in *set mode* and shows that
rank (``[9, 9]`` shows 9). Any other stack is in *sum mode* and shows the total
(``[3, 6]`` shows 9). The value is a label only; whether the stack is a legal
build is decided elsewhere.
"""

from collections.abc import Sequence

from cassino.engine.entities import Build, TableEntity
from cassino.game_pieces.cards import Card, calculate_card_sum, rank_value
from cassino.game_pieces.constants import StackMode


def stack_mode(cards: Sequence[Card]) -> StackMode:
    if not cards:
        raise ValueError("A stack needs at least one card")
    values = {rank_value(c.rank) for c in cards}
    return StackMode.SET if len(values) == 1 else StackMode.SUM


def stack_value(cards: Sequence[Card]) -> int:
    if stack_mode(cards) is StackMode.SET:
        return rank_value(cards[0].rank)
    return calculate_card_sum(cards)


def display_value(entity: TableEntity) -> int:
    # Committed builds keep the value they were declared with
    if isinstance(entity, Build):
        return entity.value
    return stack_value(entity.cards)
