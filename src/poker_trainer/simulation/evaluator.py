"""Hand evaluation: 5-card ranking and best-of-7 extraction."""

from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Dict, List, Sequence, Tuple

from poker_trainer.errors import InvalidInputError
from poker_trainer.models.card import Card


class HandCategory(IntEnum):
    """Hand categories from worst to best."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


HAND_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}

# Number of tie-break values each category carries
KICKER_COUNTS = {
    HandCategory.HIGH_CARD: 5,
    HandCategory.PAIR: 4,
    HandCategory.TWO_PAIR: 3,
    HandCategory.THREE_OF_A_KIND: 3,
    HandCategory.STRAIGHT: 1,
    HandCategory.FLUSH: 5,
    HandCategory.FULL_HOUSE: 2,
    HandCategory.FOUR_OF_A_KIND: 2,
    HandCategory.STRAIGHT_FLUSH: 1,
}

_WHEEL = [14, 5, 4, 3, 2]


@dataclass(frozen=True)
class EvaluatedHand:
    """A ranked 5-card hand.

    ``kickers`` is a tuple whose length is fixed by the category, so two
    hands of the same category always compare element by element.
    """
    category: HandCategory
    kickers: Tuple[int, ...]

    def __post_init__(self):
        expected = KICKER_COUNTS[self.category]
        if len(self.kickers) != expected:
            raise InvalidInputError(
                f"{HAND_NAMES[self.category]} needs {expected} kickers, "
                f"got {len(self.kickers)}")

    @property
    def name(self) -> str:
        return HAND_NAMES[self.category]

    def __lt__(self, other: "EvaluatedHand") -> bool:
        return compare_hands(self, other) < 0

    def __le__(self, other: "EvaluatedHand") -> bool:
        return compare_hands(self, other) <= 0

    def __gt__(self, other: "EvaluatedHand") -> bool:
        return compare_hands(self, other) > 0

    def __ge__(self, other: "EvaluatedHand") -> bool:
        return compare_hands(self, other) >= 0


class HandEvaluator:
    """Evaluates poker hands."""

    @staticmethod
    def evaluate_five(cards: Sequence[Card]) -> EvaluatedHand:
        """Evaluate exactly 5 cards."""
        if len(cards) != 5:
            raise InvalidInputError(f"Need exactly 5 cards, got {len(cards)}")

        # Get sorted ranks (descending) and suits
        ranks = sorted((int(c.rank) for c in cards), reverse=True)

        # Count rank frequencies
        rank_counts: Dict[int, int] = {}
        for r in ranks:
            rank_counts[r] = rank_counts.get(r, 0) + 1

        # Groups ordered by multiplicity, then rank
        groups = sorted(rank_counts.items(), key=lambda rc: (-rc[1], -rc[0]))
        counts = [count for _, count in groups]
        grouped_ranks = [rank for rank, _ in groups]

        is_flush = len({c.suit for c in cards}) == 1
        is_straight, high_card = HandEvaluator._check_straight(ranks)

        if is_flush and is_straight:
            return EvaluatedHand(HandCategory.STRAIGHT_FLUSH, (high_card,))

        if counts[0] == 4:
            return EvaluatedHand(HandCategory.FOUR_OF_A_KIND,
                                 (grouped_ranks[0], grouped_ranks[1]))

        if counts[0] == 3 and counts[1] == 2:
            return EvaluatedHand(HandCategory.FULL_HOUSE,
                                 (grouped_ranks[0], grouped_ranks[1]))

        if is_flush:
            return EvaluatedHand(HandCategory.FLUSH, tuple(ranks))

        if is_straight:
            return EvaluatedHand(HandCategory.STRAIGHT, (high_card,))

        # Remaining groups are singletons, already in descending rank order
        if counts[0] == 3:
            return EvaluatedHand(HandCategory.THREE_OF_A_KIND, tuple(grouped_ranks))

        if counts[0] == 2 and counts[1] == 2:
            return EvaluatedHand(HandCategory.TWO_PAIR, tuple(grouped_ranks))

        if counts[0] == 2:
            return EvaluatedHand(HandCategory.PAIR, tuple(grouped_ranks))

        return EvaluatedHand(HandCategory.HIGH_CARD, tuple(ranks))

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> EvaluatedHand:
        """Evaluate the best 5-card hand from 5 to 7 cards.

        Args:
            cards: List of cards (5-7 cards).

        Returns:
            The best EvaluatedHand over all 5-card combinations.
        """
        if len(cards) < 5:
            raise InvalidInputError(f"Need at least 5 cards, got {len(cards)}")
        if len(cards) > 7:
            raise InvalidInputError(f"Need at most 7 cards, got {len(cards)}")

        if len(cards) == 5:
            return HandEvaluator.evaluate_five(cards)

        best = None
        for combo in combinations(cards, 5):
            hand = HandEvaluator.evaluate_five(combo)
            if best is None or compare_hands(hand, best) > 0:
                best = hand
        return best

    @staticmethod
    def _check_straight(ranks: List[int]) -> Tuple[bool, int]:
        """Check if 5 descending ranks form a straight.

        Returns:
            Tuple of (is_straight, high_card). The wheel reports 5 high.
        """
        if len(set(ranks)) != 5:
            return False, 0

        if ranks[0] - ranks[4] == 4:
            return True, ranks[0]

        # Ace-low straight (A-2-3-4-5)
        if ranks == _WHEEL:
            return True, 5

        return False, 0

    @staticmethod
    def compare(a: EvaluatedHand, b: EvaluatedHand) -> int:
        """Compare two evaluated hands.

        Returns:
            Positive if ``a`` wins, negative if ``b`` wins, 0 if tied.
        """
        if a.category != b.category:
            return int(a.category) - int(b.category)

        for k1, k2 in zip(a.kickers, b.kickers):
            if k1 != k2:
                return k1 - k2

        return 0

    @staticmethod
    def get_winners(hands: Sequence[EvaluatedHand]) -> List[int]:
        """Get the index of every hand tied for best.

        Args:
            hands: Evaluated hands, one per player.

        Returns:
            List of winning indices (several for ties, empty for no hands).
        """
        if not hands:
            return []

        best_idx = 0
        winners = [0]
        for i in range(1, len(hands)):
            cmp = compare_hands(hands[i], hands[best_idx])
            if cmp > 0:
                best_idx = i
                winners = [i]
            elif cmp == 0:
                winners.append(i)
        return winners

    @staticmethod
    def get_rank_name(hand: EvaluatedHand) -> str:
        """Get a human-readable name for an evaluated hand."""
        return HAND_NAMES[hand.category]


evaluate5 = HandEvaluator.evaluate_five
evaluate7 = HandEvaluator.evaluate
compare_hands = HandEvaluator.compare
find_winners = HandEvaluator.get_winners
hand_name = HandEvaluator.get_rank_name
