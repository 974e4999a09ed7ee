"""Data models for the poker engine."""

from poker_trainer.models.card import (
    Card, Rank, Suit,
    parse_card, parse_cards, card_to_string, card_to_display,
)

__all__ = [
    "Card", "Rank", "Suit",
    "parse_card", "parse_cards", "card_to_string", "card_to_display",
]
