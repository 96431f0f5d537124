"""Guess whether a drop was meant as a capture, a build, or a trail.

Contact detection answers "what did the card touch"; this module answers
"what was the player aiming at" by measuring how close the drop landed to
loose cards of the same and of a different rank.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from collections.abc import Sequence

from cassino.engine.entities import LooseCard, TableEntity
from cassino.game_pieces.cards import Card, rank_value
from cassino.gui import constants as C
from cassino.gui.config import DEFAULT_TABLE_CONFIG, TableConfig
from cassino.gui.services.geometry import Point, distance, within_bounds
from cassino.gui.services.locator import entity_bounds

logger = logging.getLogger(__name__)

# Distance ratio (same rank / different rank) below which a drop is a capture
CAPTURE_RATIO = 0.7
# ... and above which it is a build attempt
BUILD_RATIO = 1.5
# More different-rank cards than this and an unaimed drop is a trail
CROWDED_TABLE = 3


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Intent(str, Enum):
    CAPTURE = "capture"
    BUILD_ATTEMPT = "build_attempt"
    UNCLEAR_CAPTURE = "unclear_capture"
    TRAIL = "trail"


@dataclass(frozen=True)
class CardDistance:
    card: LooseCard
    distance: float


@dataclass
class ProximityResult:
    near_same_rank: LooseCard | None = None
    near_different_rank: LooseCard | None = None
    same_rank: list[CardDistance] = field(default_factory=list)
    different_rank: list[CardDistance] = field(default_factory=list)
    confidence: Confidence = Confidence.LOW

    def distance_to(self, card: LooseCard | None) -> float:
        for d in (*self.same_rank, *self.different_rank):
            if d.card is card:
                return d.distance
        return float("inf")


@dataclass(frozen=True)
class IntentResult:
    intent: Intent
    target: LooseCard | None
    confidence: Confidence
    reason: str


def find_same_rank_cards(entities: Sequence[TableEntity], dropped: Card) -> list[LooseCard]:
    value = rank_value(dropped.rank)
    return [e for e in entities if isinstance(e, LooseCard) and rank_value(e.rank) == value]


def find_different_rank_cards(entities: Sequence[TableEntity], dropped: Card) -> list[LooseCard]:
    value = rank_value(dropped.rank)
    return [e for e in entities if isinstance(e, LooseCard) and rank_value(e.rank) != value]


def _nearest(distances: list[CardDistance]) -> LooseCard | None:
    if not distances:
        return None
    return min(distances, key=lambda d: d.distance).card


def detect_proximity(
    point: Point,
    entities: Sequence[TableEntity],
    dropped: Card,
    config: TableConfig = DEFAULT_TABLE_CONFIG,
) -> ProximityResult:
    """Measure the distance from the drop to every loose card near it.

    Cards with measured bounds are checked with a tighter tolerance than
    estimated ones; the result is HIGH confidence only when every loose card
    on the table was measured.
    """
    value = rank_value(dropped.rank)
    result = ProximityResult(confidence=Confidence.HIGH)
    looses = [e for e in entities if isinstance(e, LooseCard)]

    for card in looses:
        measured = card.bounds is not None
        if not measured:
            result.confidence = Confidence.MEDIUM
        bounds = entity_bounds(card, entities, config)
        if bounds is None:
            continue
        tolerance = C.MEASURED_TOLERANCE if measured else C.ESTIMATED_TOLERANCE
        if not within_bounds(point, bounds, tolerance):
            continue
        entry = CardDistance(card, distance(point, bounds.center))
        if rank_value(card.rank) == value:
            result.same_rank.append(entry)
        else:
            result.different_rank.append(entry)

    if not looses:
        result.confidence = Confidence.MEDIUM
    result.near_same_rank = _nearest(result.same_rank)
    result.near_different_rank = _nearest(result.different_rank)
    return result


def safe_detect_proximity(
    point: Point | None,
    entities: Sequence[TableEntity] | None,
    dropped: Card | None,
    config: TableConfig = DEFAULT_TABLE_CONFIG,
) -> ProximityResult:
    if point is None or len(point) != 2:
        logger.warning("Invalid drop position for proximity detection")
        return ProximityResult()
    if entities is None or dropped is None:
        logger.warning("Invalid table cards or dropped card for proximity detection")
        return ProximityResult()
    return detect_proximity(point, entities, dropped, config)


def determine_user_intent(
    proximity: ProximityResult,
    same_rank_cards: Sequence[LooseCard],
    different_rank_cards: Sequence[LooseCard],
) -> IntentResult:
    near_same = proximity.near_same_rank
    near_diff = proximity.near_different_rank
    confidence = proximity.confidence

    if near_same is not None and near_diff is None:
        return IntentResult(Intent.CAPTURE, near_same, confidence, "Near same-rank card only")

    if near_diff is not None and near_same is None:
        return IntentResult(
            Intent.BUILD_ATTEMPT, near_diff, confidence, "Near different-rank card only"
        )

    if near_same is not None and near_diff is not None:
        same_dist = proximity.distance_to(near_same)
        diff_dist = proximity.distance_to(near_diff)
        ratio = same_dist / diff_dist if diff_dist else float("inf")
        tempered = Confidence.HIGH if confidence is Confidence.HIGH else Confidence.MEDIUM
        if ratio < CAPTURE_RATIO:
            return IntentResult(
                Intent.CAPTURE, near_same, tempered, "Significantly closer to same-rank card"
            )
        if ratio > BUILD_RATIO:
            return IntentResult(
                Intent.BUILD_ATTEMPT,
                near_diff,
                tempered,
                "Significantly closer to different-rank card",
            )
        return IntentResult(
            Intent.UNCLEAR_CAPTURE,
            near_same,
            Confidence.LOW,
            "Ambiguous proximity - similar distances to both card types",
        )

    if same_rank_cards:
        if len(different_rank_cards) > CROWDED_TABLE:
            return IntentResult(
                Intent.TRAIL,
                None,
                Confidence.MEDIUM,
                "Crowded table - requiring explicit card targeting",
            )
        return IntentResult(
            Intent.UNCLEAR_CAPTURE,
            same_rank_cards[0],
            Confidence.LOW,
            "Same-rank cards available but no clear proximity",
        )

    return IntentResult(Intent.TRAIL, None, confidence, "No nearby cards detected")
