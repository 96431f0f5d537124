"""Resolve which table entity a dropped card touched."""

import logging
from dataclasses import dataclass
from collections.abc import Iterator, Sequence

from cassino.engine.entities import LooseCard, TableEntity, entity_type
from cassino.game_pieces.cards import Card
from cassino.game_pieces.constants import EntityType
from cassino.gui.config import DEFAULT_TABLE_CONFIG, TableConfig
from cassino.gui.services.geometry import Point, Rect, dropped_bounds, overlap_percentage
from cassino.gui.services.locator import entity_bounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContactResult:
    has_contact: bool
    dropped_bounds: Rect
    target_entity: TableEntity | None = None
    target_type: EntityType | None = None
    overlap_percentage: float = 0.0
    table_bounds: Rect | None = None

    @property
    def target_card(self) -> Card | None:
        if isinstance(self.target_entity, LooseCard):
            return self.target_entity.card
        return None


@dataclass(frozen=True)
class ContactEntry:
    entity: TableEntity
    entity_type: EntityType
    overlap_percentage: float
    entity_bounds: Rect


@dataclass(frozen=True)
class CardContact:
    card: Card
    overlap_percentage: float
    table_bounds: Rect


def _contacts(
    dropped: Rect, entities: Sequence[TableEntity], config: TableConfig
) -> Iterator[ContactEntry]:
    """Yield every entity whose overlap strictly exceeds the threshold, in list order."""
    for entity in entities:
        bounds = entity_bounds(entity, entities, config)
        if bounds is None:
            continue
        pct = overlap_percentage(dropped, bounds)
        if pct > config.contact_threshold:
            yield ContactEntry(entity, entity_type(entity), pct, bounds)


def resolve_best_contact(
    point: Point,
    entities: Sequence[TableEntity],
    config: TableConfig = DEFAULT_TABLE_CONFIG,
) -> ContactResult:
    """Return the entity with the highest overlap above the contact threshold.

    Ties go to the entity that appears first in ``entities``.
    """
    dropped = dropped_bounds(point, config.card)
    best: ContactEntry | None = None
    for entry in _contacts(dropped, entities, config):
        if best is None or entry.overlap_percentage > best.overlap_percentage:
            best = entry

    if best is None:
        logger.debug(f"Drop at {point} touched nothing ({len(entities)} entities)")
        return ContactResult(has_contact=False, dropped_bounds=dropped)

    logger.debug(
        f"Drop at {point} touched {best.entity_type.value} "
        f"({best.overlap_percentage:.0%} overlap)"
    )
    return ContactResult(
        has_contact=True,
        dropped_bounds=dropped,
        target_entity=best.entity,
        target_type=best.entity_type,
        overlap_percentage=best.overlap_percentage,
        table_bounds=best.entity_bounds,
    )


def resolve_all_contacts(
    point: Point,
    entities: Sequence[TableEntity],
    config: TableConfig = DEFAULT_TABLE_CONFIG,
) -> list[ContactEntry]:
    """All entities above the threshold, highest overlap first (stable for ties)."""
    dropped = dropped_bounds(point, config.card)
    return sorted(
        _contacts(dropped, entities, config),
        key=lambda entry: entry.overlap_percentage,
        reverse=True,
    )


def has_any_contact(
    point: Point,
    entities: Sequence[TableEntity],
    config: TableConfig = DEFAULT_TABLE_CONFIG,
) -> bool:
    return resolve_best_contact(point, entities, config).has_contact


def loose_card_contacts(
    point: Point,
    entities: Sequence[TableEntity],
    config: TableConfig = DEFAULT_TABLE_CONFIG,
) -> list[CardContact]:
    """Card-to-card view of :func:`resolve_all_contacts`; builds and stacks are dropped."""
    return [
        CardContact(entry.entity.card, entry.overlap_percentage, entry.entity_bounds)
        for entry in resolve_all_contacts(point, entities, config)
        if isinstance(entry.entity, LooseCard)
    ]
