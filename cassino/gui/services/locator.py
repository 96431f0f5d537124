"""Estimated table bounds for entities that carry no screen geometry.

Bounds are rebuilt from each entity's ordinal position among entities of the
same type on every query, so they only stay put while the list order and the
per-type counts do. Renderers that know real geometry set ``entity.bounds``
and bypass the estimate.
"""

import logging
from collections.abc import Sequence

from cassino.engine.entities import Build, HasBounds, TableEntity, TemporaryStack, entity_type
from cassino.game_pieces.constants import EntityType
from cassino.gui.config import DEFAULT_TABLE_CONFIG, TableConfig
from cassino.gui.services.geometry import Rect

logger = logging.getLogger(__name__)


def _same_build(a: Build, b: Build) -> bool:
    if a is b:
        return True
    if a.build_id is not None and b.build_id is not None:
        return a.build_id == b.build_id
    return a.cards == b.cards


def _same_stack(a: TemporaryStack, b: TemporaryStack) -> bool:
    if a is b:
        return True
    if a.stack_id is not None and b.stack_id is not None:
        return a.stack_id == b.stack_id
    return a.cards == b.cards


def _same_loose(a, b) -> bool:
    # Without a rank there is no card to lay out
    rank = getattr(a, "rank", None)
    if rank is None:
        return False
    if a is b:
        return True
    return rank == getattr(b, "rank", None) and getattr(a, "suit", None) == getattr(b, "suit", None)


def index_among(entity: TableEntity, entities: Sequence[TableEntity]) -> int | None:
    """Position of ``entity`` among entities of its own type, or None if absent."""
    kind = entity_type(entity)
    peers = [e for e in entities if entity_type(e) is kind]
    if kind is EntityType.BUILD:
        same = _same_build
    elif kind is EntityType.TEMPORARY_STACK:
        same = _same_stack
    else:
        same = _same_loose
    for i, peer in enumerate(peers):
        if same(peer, entity):
            return i
    return None


def entity_bounds(
    entity: TableEntity,
    entities: Sequence[TableEntity],
    config: TableConfig = DEFAULT_TABLE_CONFIG,
) -> Rect | None:
    if isinstance(entity, HasBounds) and entity.bounds is not None:
        return entity.bounds

    index = index_among(entity, entities)
    if index is None:
        logger.debug(f"No bounds for {entity!r}: not on the table")
        return None

    card = config.card
    layout = config.layout
    kind = entity_type(entity)
    if kind is EntityType.BUILD:
        return Rect(
            x=layout.build_origin_x + index * layout.build_spacing,
            y=layout.build_y,
            width=card.width * layout.build_width_factor,
            height=card.height,
        )
    if kind is EntityType.TEMPORARY_STACK:
        return Rect(
            x=layout.temp_stack_origin_x + index * layout.temp_stack_spacing,
            y=layout.temp_stack_y,
            width=card.width * layout.temp_stack_width_factor,
            height=card.height,
        )
    return Rect(
        x=layout.loose_origin_x + index * layout.loose_spacing,
        y=layout.loose_y,
        width=card.width,
        height=card.height,
    )
