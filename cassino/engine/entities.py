from dataclasses import dataclass, field
from collections.abc import Iterable
from typing import ClassVar, Protocol, runtime_checkable

from cassino.game_pieces.cards import Card, Rank
from cassino.game_pieces.constants import EntityType
from cassino.gui.services.geometry import Rect


@runtime_checkable
class HasBounds(Protocol):
    """Anything a renderer has measured; ``bounds`` is None until laid out."""

    bounds: Rect | None


@dataclass(frozen=True, slots=True)
class LooseCard:
    type: ClassVar[EntityType] = EntityType.LOOSE_CARD

    card: Card
    bounds: Rect | None = field(default=None, compare=False)

    @property
    def rank(self) -> Rank:
        return self.card.rank

    @property
    def suit(self) -> str:
        return self.card.suit

    @property
    def cards(self) -> tuple[Card, ...]:
        return (self.card,)


@dataclass(frozen=True, slots=True)
class Build:
    type: ClassVar[EntityType] = EntityType.BUILD

    build_id: str | None
    owner: int
    value: int
    cards: tuple[Card, ...] = ()
    is_extendable: bool = False
    bounds: Rect | None = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.cards, tuple):
            object.__setattr__(self, "cards", tuple(self.cards))


@dataclass(frozen=True, slots=True)
class TemporaryStack:
    type: ClassVar[EntityType] = EntityType.TEMPORARY_STACK

    stack_id: str | None
    cards: tuple[Card, ...] = ()
    owner: int | None = None
    bounds: Rect | None = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.cards, tuple):
            object.__setattr__(self, "cards", tuple(self.cards))


TableEntity = LooseCard | Build | TemporaryStack


def entity_type(entity: object) -> EntityType:
    """Discriminator for an entity; anything unrecognised counts as a loose card."""
    if isinstance(entity, Build):
        return EntityType.BUILD
    if isinstance(entity, TemporaryStack):
        return EntityType.TEMPORARY_STACK
    return EntityType.LOOSE_CARD


def loose(cards: Iterable[Card]) -> list[LooseCard]:
    return [LooseCard(c) for c in cards]
