from dataclasses import dataclass
from collections.abc import Iterable

from cassino.game_pieces.constants import FACE_VALUES

Rank = int | str


@dataclass(frozen=True, slots=True)
class Card:
    rank: Rank
    suit: str

    def __post_init__(self):
        # Normalize face ranks ("k" -> "K") and pip ranks ("9" -> 9)
        if isinstance(self.rank, str):
            rank = self.rank.strip().upper()
            object.__setattr__(self, "rank", int(rank) if rank.isdigit() else rank)

    @property
    def card_id(self) -> str:
        return f"{self.rank}-{self.suit}"

    @property
    def value(self) -> int:
        return rank_value(self.rank)


def rank_value(rank: Rank) -> int:
    """Return the numeric value of a rank (A=1, J=11, Q=12, K=13)."""
    if isinstance(rank, bool):
        raise ValueError(f"Invalid rank: {rank!r}")
    if isinstance(rank, int):
        return rank
    key = str(rank).strip().upper()
    if key in FACE_VALUES:
        return FACE_VALUES[key]
    if key.isdigit():
        return int(key)
    raise ValueError(f"Invalid rank: {rank!r}")


def calculate_card_sum(cards: Iterable[Card]) -> int:
    return sum(rank_value(c.rank) for c in cards)

