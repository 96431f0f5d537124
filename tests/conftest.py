import pytest

from cassino.engine.entities import Build, LooseCard, TemporaryStack
from cassino.game_pieces.cards import Card


@pytest.fixture
def table():
    """Two loose cards, a build, and a staging stack in typical play order."""
    return [
        LooseCard(Card("5", "H")),
        Build(build_id="b1", owner=0, value=9, cards=(Card("4", "S"), Card("5", "C"))),
        LooseCard(Card("K", "D")),
        TemporaryStack(stack_id="s1", cards=(Card("3", "H"), Card("6", "S"))),
    ]
