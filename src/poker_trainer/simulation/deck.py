"""Deck construction, shuffling, and dealing."""

import random
from typing import Iterable, List, Optional, Sequence

from poker_trainer.errors import InvalidInputError
from poker_trainer.models.card import Card, Rank, Suit


def create_deck() -> List[Card]:
    """Return a fresh list of all 52 cards."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle(deck: Sequence[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """Return a uniformly shuffled copy of ``deck``.

    The input is never mutated, so callers may keep reusing it.

    Args:
        deck: Cards to shuffle.
        rng: Random source. Defaults to the module-level generator.
    """
    shuffled = list(deck)
    (rng or random).shuffle(shuffled)
    return shuffled


def remove_cards(deck: Iterable[Card], to_remove: Iterable[Card]) -> List[Card]:
    """Return ``deck`` without any card equal to one in ``to_remove``."""
    removed = set(to_remove)
    return [card for card in deck if card not in removed]


class Deck:
    """A dealable stack of cards, a standard 52-card deck by default."""

    def __init__(self, cards: Optional[Iterable[Card]] = None,
                 rng: Optional[random.Random] = None):
        """Initialize a deck.

        Args:
            cards: Starting cards, top first. Defaults to all 52 cards.
            rng: Random source used by ``shuffle``.
        """
        self._initial: List[Card] = list(cards) if cards is not None else create_deck()
        self.rng = rng
        self.cards: List[Card] = list(self._initial)

    def shuffle(self):
        """Replace the remaining cards with a shuffled copy."""
        self.cards = shuffle(self.cards, self.rng)

    def deal(self, count: int = 1) -> List[Card]:
        """Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.
        """
        if count > len(self.cards):
            raise InvalidInputError(
                f"Not enough cards in deck. Need {count}, have {len(self.cards)}")

        dealt = self.cards[:count]
        self.cards = self.cards[count:]
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card from the top of the deck."""
        return self.deal(1)[0]

    def reset(self):
        """Restore the starting cards and shuffle them."""
        self.cards = list(self._initial)
        self.shuffle()

    @property
    def remaining(self) -> int:
        """Get the number of remaining cards."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.cards)})"
