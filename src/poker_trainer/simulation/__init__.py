"""Hand evaluation and equity simulation."""

from poker_trainer.simulation.deck import Deck, create_deck, shuffle, remove_cards
from poker_trainer.simulation.evaluator import (
    HandCategory, EvaluatedHand, HandEvaluator,
    evaluate5, evaluate7, compare_hands, find_winners, hand_name,
)
from poker_trainer.simulation.equity import (
    KnownHand, UnknownHand, PlayerEquity, EquityCalculator, calculate_equity,
)

__all__ = [
    "Deck", "create_deck", "shuffle", "remove_cards",
    "HandCategory", "EvaluatedHand", "HandEvaluator",
    "evaluate5", "evaluate7", "compare_hands", "find_winners", "hand_name",
    "KnownHand", "UnknownHand", "PlayerEquity", "EquityCalculator", "calculate_equity",
]
