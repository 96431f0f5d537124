from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from cassino.engine.entities import Build, LooseCard, TableEntity, TemporaryStack
from cassino.game_pieces.cards import Card
from cassino.gui.services.contact import ContactResult
from cassino.gui.services.geometry import Rect


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CardModel(_Payload):
    rank: int | str
    suit: str

    def to_card(self) -> Card:
        return Card(rank=self.rank, suit=self.suit)


class RectModel(_Payload):
    x: float
    y: float
    width: float = Field(ge=0)
    height: float = Field(ge=0)

    def to_rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @classmethod
    def from_rect(cls, rect: Rect | None) -> "RectModel | None":
        if rect is None:
            return None
        return cls(x=rect.x, y=rect.y, width=rect.width, height=rect.height)


class LooseCardModel(CardModel):
    bounds: RectModel | None = None

    def to_entity(self) -> LooseCard:
        return LooseCard(self.to_card(), bounds=self.bounds.to_rect() if self.bounds else None)


class BuildModel(_Payload):
    type: Literal["build"] = "build"
    build_id: str | None = Field(default=None, alias="buildId")
    id: str | None = None
    owner: int = 0
    value: int
    cards: list[CardModel] = Field(default_factory=list)
    is_extendable: bool = Field(default=False, alias="isExtendable")
    bounds: RectModel | None = None

    def to_entity(self) -> Build:
        return Build(
            build_id=self.build_id or self.id,
            owner=self.owner,
            value=self.value,
            cards=tuple(c.to_card() for c in self.cards),
            is_extendable=self.is_extendable,
            bounds=self.bounds.to_rect() if self.bounds else None,
        )


class TemporaryStackModel(_Payload):
    type: Literal["temporary_stack"] = "temporary_stack"
    stack_id: str | None = Field(default=None, alias="stackId")
    owner: int | None = None
    cards: list[CardModel] = Field(default_factory=list)
    bounds: RectModel | None = None

    def to_entity(self) -> TemporaryStack:
        return TemporaryStack(
            stack_id=self.stack_id,
            cards=tuple(c.to_card() for c in self.cards),
            owner=self.owner,
            bounds=self.bounds.to_rect() if self.bounds else None,
        )


def entity_from_payload(payload: dict[str, Any]) -> TableEntity:
    """Parse a raw table item; a missing or unknown ``type`` means a loose card."""
    kind = payload.get("type")
    if kind == "build":
        return BuildModel.model_validate(payload).to_entity()
    if kind == "temporary_stack":
        return TemporaryStackModel.model_validate(payload).to_entity()
    return LooseCardModel.model_validate(payload).to_entity()


class PointModel(_Payload):
    x: float
    y: float


class DropRequest(_Payload):
    position: PointModel
    table: list[dict[str, Any]] = Field(default_factory=list)
    card: CardModel | None = None

    @property
    def point(self) -> tuple[float, float]:
        return self.position.x, self.position.y

    def entities(self) -> list[TableEntity]:
        return [entity_from_payload(item) for item in self.table]


class ContactReport(_Payload):
    has_contact: bool
    target_type: str | None = None
    overlap_percentage: float = 0.0
    table_bounds: RectModel | None = None
    dropped_bounds: RectModel

    @classmethod
    def from_result(cls, result: ContactResult) -> "ContactReport":
        return cls(
            has_contact=result.has_contact,
            target_type=result.target_type.value if result.target_type else None,
            overlap_percentage=result.overlap_percentage,
            table_bounds=RectModel.from_rect(result.table_bounds),
            dropped_bounds=RectModel.from_rect(result.dropped_bounds),
        )
