"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List

from poker_trainer.errors import ParseError


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"

    @classmethod
    def from_char(cls, s: str) -> "Suit":
        for suit in cls:
            if suit.value == s.lower():
                return suit
        raise ParseError(f"Unknown suit: {s!r}")

    @property
    def symbol(self) -> str:
        return {"h": "♥", "d": "♦", "c": "♣", "s": "♠"}[self.value]


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def char(self) -> str:
        return _RANK_CHARS[self.value]

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        for r in cls:
            if r.char == c.upper():
                return r
        raise ParseError(f"Unknown rank: {c!r}")


_RANK_CHARS = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8",
    9: "9", 10: "T", 11: "J", 12: "Q", 13: "K", 14: "A",
}


@dataclass(frozen=True)
class Card:
    """A single playing card.

    Cards are immutable values: two cards are equal when rank and suit
    match, and can be used as set members or dict keys.
    """
    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '2c' (case-insensitive)."""
        if not isinstance(s, str) or len(s) != 2:
            raise ParseError(f"Cannot parse card: {s!r}")
        return cls(Rank.from_char(s[0]), Suit.from_char(s[1]))

    def __repr__(self) -> str:
        return self.to_short()

    def __str__(self) -> str:
        return self.to_short()

    def to_short(self) -> str:
        """Return short string like 'Ah'."""
        return f"{self.rank.char}{self.suit.value}"

    def to_display(self) -> str:
        """Return the rank with a suit symbol, like 'A♥'."""
        return f"{self.rank.char}{self.suit.symbol}"


def parse_card(s: str) -> Card:
    """Parse a two-character card string into a Card.

    Raises:
        ParseError: if the string is not a rank char followed by a suit char.
    """
    return Card.parse(s)


def parse_cards(strings: Iterable[str]) -> List[Card]:
    return [Card.parse(s) for s in strings]


def card_to_string(card: Card) -> str:
    return card.to_short()


def card_to_display(card: Card) -> str:
    return card.to_display()
