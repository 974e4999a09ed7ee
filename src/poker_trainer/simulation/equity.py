"""Monte Carlo equity calculator for N players.

Each player either holds known hole cards or an unknown hand that is dealt
at random on every iteration. Missing board cards are dealt the same way.
"""

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from poker_trainer import config
from poker_trainer.errors import InvalidInputError
from poker_trainer.models.card import Card
from poker_trainer.simulation.deck import create_deck, remove_cards
from poker_trainer.simulation.evaluator import evaluate7, find_winners

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KnownHand:
    """A player whose two hole cards are known."""
    cards: Tuple[Card, Card]


@dataclass(frozen=True)
class UnknownHand:
    """A player holding a random hand."""


Hand = Union[KnownHand, UnknownHand]


@dataclass(frozen=True)
class PlayerEquity:
    equity: float
    wins: int
    ties: int


def as_hand(player: Union[Hand, Sequence[Card], None]) -> Hand:
    """Normalize a player description into a Hand.

    ``None`` means an unknown hand; a sequence of cards means a known one.
    """
    if isinstance(player, (KnownHand, UnknownHand)):
        hand = player
    elif player is None:
        hand = UnknownHand()
    else:
        hand = KnownHand(tuple(player))

    if isinstance(hand, KnownHand) and len(hand.cards) != 2:
        raise InvalidInputError(f"A known hand needs 2 cards, got {len(hand.cards)}")
    return hand


def _simulate(hands: Sequence[Hand], board: Sequence[Card], pool: Sequence[Card],
              iterations: int, seed: Optional[int]) -> Tuple[List[int], List[int]]:
    """Run ``iterations`` deals and return per-player (wins, ties)."""
    rng = random.Random(seed)
    wins = [0] * len(hands)
    ties = [0] * len(hands)
    board_needed = 5 - len(board)
    unknown = sum(1 for h in hands if isinstance(h, UnknownHand))

    if unknown == 0 and board_needed == 0:
        # Nothing left to deal: every iteration has the same outcome
        winners = find_winners([evaluate7(list(h.cards) + list(board)) for h in hands])
        for i in winners:
            if len(winners) == 1:
                wins[i] += iterations
            else:
                ties[i] += iterations
        return wins, ties

    deck = list(pool)
    for _ in range(iterations):
        rng.shuffle(deck)

        hole_cards = []
        dealt = 0
        for hand in hands:
            if isinstance(hand, KnownHand):
                hole_cards.append(list(hand.cards))
            else:
                hole_cards.append(deck[dealt:dealt + 2])
                dealt += 2
        full_board = list(board) + deck[dealt:dealt + board_needed]

        winners = find_winners([evaluate7(cards + full_board) for cards in hole_cards])
        if len(winners) == 1:
            wins[winners[0]] += 1
        else:
            for i in winners:
                ties[i] += 1

    return wins, ties


def _simulate_shard(args) -> Tuple[List[int], List[int]]:
    return _simulate(*args)


class EquityCalculator:
    """Estimates each player's share of the pot by random deals."""

    def __init__(self, rng: Optional[random.Random] = None,
                 workers: Optional[int] = None):
        """Initialize the calculator.

        Args:
            rng: Random source. Seeds every shard, so a seeded generator
                 gives reproducible results.
            workers: Number of worker processes. 1 runs in-process.
        """
        self.rng = rng if rng is not None else random.Random(config.EQUITY_SEED)
        self.workers = workers if workers is not None else config.DEFAULT_EQUITY_WORKERS
        if self.workers < 1:
            raise InvalidInputError(f"workers must be at least 1, got {self.workers}")

    def calculate(self, players: Sequence[Union[Hand, Sequence[Card], None]],
                  board: Sequence[Card] = (),
                  iterations: Optional[int] = None) -> List[PlayerEquity]:
        """Calculate equity for each player.

        Args:
            players: One entry per player: a Hand, two cards, or None for
                     an unknown hand.
            board: Known community cards (0-5).
            iterations: Number of simulated deals.

        Returns:
            PlayerEquity for each player, in input order.
        """
        if iterations is None:
            iterations = config.DEFAULT_EQUITY_ITERATIONS
        if len(players) < 2:
            raise InvalidInputError(f"Need at least 2 players, got {len(players)}")
        if iterations < 1:
            raise InvalidInputError(f"iterations must be positive, got {iterations}")
        if len(board) > 5:
            raise InvalidInputError(f"Board can have at most 5 cards, got {len(board)}")

        hands = [as_hand(p) for p in players]
        board = list(board)

        known = list(board)
        for hand in hands:
            if isinstance(hand, KnownHand):
                known.extend(hand.cards)
        if len(set(known)) != len(known):
            raise InvalidInputError(f"Duplicate cards in {known}")

        pool = remove_cards(create_deck(), known)
        unknown = sum(1 for h in hands if isinstance(h, UnknownHand))
        needed = 2 * unknown + 5 - len(board)
        if needed > len(pool):
            raise InvalidInputError(
                f"Not enough unseen cards to deal. Need {needed}, have {len(pool)}")

        shards = self._split(iterations)
        # A fully dealt spot needs no randomness
        jobs = [(hands, board, pool, count, self.rng.getrandbits(64) if needed else None)
                for count in shards]
        logger.debug("Simulating %d players, board %s, %d iterations in %d shard(s)",
                     len(hands), board, iterations, len(jobs))

        if len(jobs) == 1:
            results = [_simulate_shard(jobs[0])]
        else:
            with ProcessPoolExecutor(max_workers=len(jobs)) as executor:
                results = list(executor.map(_simulate_shard, jobs))

        wins = [0] * len(hands)
        ties = [0] * len(hands)
        for shard_wins, shard_ties in results:
            for i in range(len(hands)):
                wins[i] += shard_wins[i]
                ties[i] += shard_ties[i]

        return [
            PlayerEquity(
                equity=(wins[i] + 0.5 * ties[i]) / iterations,
                wins=wins[i],
                ties=ties[i],
            )
            for i in range(len(hands))
        ]

    def _split(self, iterations: int) -> List[int]:
        """Split iterations as evenly as possible across workers."""
        workers = min(self.workers, iterations)
        chunk, extra = divmod(iterations, workers)
        return [chunk + (1 if i < extra else 0) for i in range(workers)]


def calculate_equity(players: Sequence[Union[Hand, Sequence[Card], None]],
                     board: Sequence[Card] = (),
                     iterations: Optional[int] = None,
                     rng: Optional[random.Random] = None,
                     workers: Optional[int] = None) -> List[PlayerEquity]:
    """Calculate Monte Carlo equity for each player.

    See ``EquityCalculator.calculate``.
    """
    return EquityCalculator(rng=rng, workers=workers).calculate(players, board, iterations)
