"""Outs counting and draw classification.

An out is a single unseen card that lifts the hand into a better category.
Every unseen card is tested by full re-evaluation, so the count is exact
rather than a rule-of-thumb estimate.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Sequence

from poker_trainer.errors import InvalidInputError
from poker_trainer.models.card import Card
from poker_trainer.simulation.deck import create_deck, remove_cards
from poker_trainer.simulation.evaluator import HandCategory, evaluate7

logger = logging.getLogger(__name__)


class DrawType(str, Enum):
    """What a drawing hand improves to."""
    STRAIGHT_FLUSH = "straight_flush"
    QUADS = "quads"
    FULL_HOUSE = "full_house"
    FLUSH = "flush"
    STRAIGHT = "straight"
    TRIPS = "trips"
    TWO_PAIR = "two_pair"
    PAIR = "pair"
    OTHER = "other"


_DRAW_TYPE_BY_CATEGORY = {
    HandCategory.STRAIGHT_FLUSH: DrawType.STRAIGHT_FLUSH,
    HandCategory.FOUR_OF_A_KIND: DrawType.QUADS,
    HandCategory.FULL_HOUSE: DrawType.FULL_HOUSE,
    HandCategory.FLUSH: DrawType.FLUSH,
    HandCategory.STRAIGHT: DrawType.STRAIGHT,
    HandCategory.THREE_OF_A_KIND: DrawType.TRIPS,
    HandCategory.TWO_PAIR: DrawType.TWO_PAIR,
    HandCategory.PAIR: DrawType.PAIR,
}


@dataclass(frozen=True)
class Out:
    """One card that improves the hand."""
    card: Card
    from_category: HandCategory
    to_category: HandCategory
    draw_type: DrawType


@dataclass
class OutsReport:
    """All outs for a hand, grouped by draw type."""
    total_outs: int
    current_category: HandCategory
    outs: List[Out] = field(default_factory=list)
    by_type: Dict[DrawType, int] = field(default_factory=dict)


@dataclass(frozen=True)
class DrawVisibility:
    """How obvious a completed draw is to opponents."""
    type: str
    outs: int
    visibility: str
    implied_odds: str
    reason: str


def classify_improvement(to_category: HandCategory) -> DrawType:
    """Map the category a hand improves to onto its draw type."""
    return _DRAW_TYPE_BY_CATEGORY.get(to_category, DrawType.OTHER)


def count_outs(hole_cards: Sequence[Card], board: Sequence[Card]) -> OutsReport:
    """Count the cards that improve the hero's hand category.

    Args:
        hole_cards: Hero's 2 hole cards.
        board: 3 (flop) or 4 (turn) community cards.

    Returns:
        OutsReport listing every out and the count per draw type.
    """
    if len(hole_cards) != 2:
        raise InvalidInputError(f"Need exactly 2 hole cards, got {len(hole_cards)}")
    if len(board) < 3 or len(board) > 4:
        raise InvalidInputError(f"Board must have 3-4 cards, got {len(board)}")

    known = list(hole_cards) + list(board)
    if len(set(known)) != len(known):
        raise InvalidInputError(f"Duplicate cards in {known}")

    current = evaluate7(known)
    remaining = remove_cards(create_deck(), known)

    outs: List[Out] = []
    by_type: Dict[DrawType, int] = {}
    for card in remaining:
        improved = evaluate7(known + [card])
        if improved.category > current.category:
            draw_type = classify_improvement(improved.category)
            outs.append(Out(card, current.category, improved.category, draw_type))
            by_type[draw_type] = by_type.get(draw_type, 0) + 1

    logger.debug("%s on %s: %d outs from %s %s", list(hole_cards), list(board),
                 len(outs), current.name, {k.value: v for k, v in by_type.items()})

    return OutsReport(
        total_outs=len(outs),
        current_category=current.category,
        outs=outs,
        by_type=by_type,
    )


def analyze_draw_visibility(by_type: Mapping[str, int]) -> List[DrawVisibility]:
    """Rate how visible each draw is once it completes.

    Well-hidden draws get paid off more, so they carry better implied odds.
    Keys may be DrawType members or their string values.
    """
    counts: Dict[DrawType, int] = {}
    for key, value in by_type.items():
        try:
            counts[DrawType(key)] = value
        except ValueError:
            raise InvalidInputError(f"Unknown draw type: {key!r}") from None
    draws: List[DrawVisibility] = []

    flush = counts.get(DrawType.FLUSH, 0)
    if flush:
        draws.append(DrawVisibility(
            type="Flush draw",
            outs=flush,
            visibility="high",
            implied_odds="worst",
            reason="Third suited card on board is impossible to miss",
        ))

    straight = counts.get(DrawType.STRAIGHT, 0)
    if straight:
        if straight >= 8:
            draws.append(DrawVisibility(
                type="Open-ended straight draw",
                outs=straight,
                visibility="medium",
                implied_odds="medium",
                reason="Connected board cards signal straight possibilities",
            ))
        else:
            draws.append(DrawVisibility(
                type="Gutshot straight draw",
                outs=straight,
                visibility="low",
                implied_odds="good",
                reason="Gutshots on disconnected boards are hard to spot",
            ))

    pair = counts.get(DrawType.PAIR, 0)
    if pair:
        draws.append(DrawVisibility(
            type="Overcard outs",
            outs=pair,
            visibility="high",
            implied_odds="worst",
            reason="High cards on the turn/river are universal scare cards",
        ))

    sets = counts.get(DrawType.TRIPS, 0) + counts.get(DrawType.FULL_HOUSE, 0)
    if sets:
        draws.append(DrawVisibility(
            type="Set/trips outs",
            outs=sets,
            visibility="very_low",
            implied_odds="best",
            reason="Sets are nearly invisible, opponents stack off against them",
        ))

    return draws
