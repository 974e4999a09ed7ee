"""Tests for the card model and deck helpers."""

import random

import pytest

from poker_trainer.errors import ParseError, InvalidInputError
from poker_trainer.models.card import (
    Card, Rank, Suit, parse_card, parse_cards, card_to_string, card_to_display,
)
from poker_trainer.simulation.deck import Deck, create_deck, shuffle, remove_cards


class TestParseCard:
    """Tests for parsing card strings."""

    def test_parse_ace_of_hearts(self):
        card = parse_card("Ah")
        assert card.rank == Rank.ACE
        assert card.rank == 14
        assert card.suit == Suit.HEARTS

    def test_parse_ten(self):
        assert parse_card("Ts").rank == 10

    def test_parse_is_case_insensitive(self):
        assert parse_card("ah") == parse_card("Ah")
        assert parse_card("TS") == Card(Rank.TEN, Suit.SPADES)
        assert parse_card("kD") == Card(Rank.KING, Suit.DIAMONDS)

    @pytest.mark.parametrize("bad", ["", "A", "Ahh", "10h", "1h", "Xh", "Ax", "A1", "A♥"])
    def test_rejects_malformed(self, bad):
        with pytest.raises(ParseError):
            parse_card(bad)

    def test_rejects_none(self):
        with pytest.raises(ParseError):
            parse_card(None)

    def test_parse_error_is_value_error(self):
        """Callers catching ValueError still see bad card input."""
        with pytest.raises(ValueError):
            parse_card("Zz")

    def test_parse_cards(self):
        cards = parse_cards(["As", "Kd", "2c"])
        assert [card_to_string(c) for c in cards] == ["As", "Kd", "2c"]


class TestCardFormatting:
    """Tests for card string output."""

    @pytest.mark.parametrize("raw,canonical", [
        ("ah", "Ah"), ("TS", "Ts"), ("2c", "2c"), ("qD", "Qd"), ("9H", "9h"),
    ])
    def test_round_trip_normalizes(self, raw, canonical):
        assert card_to_string(parse_card(raw)) == canonical

    def test_round_trip_every_card(self):
        for card in create_deck():
            assert parse_card(card_to_string(card)) == card

    def test_display_uses_suit_symbol(self):
        assert card_to_display(parse_card("Ah")) == "A♥"
        assert card_to_display(parse_card("Tc")) == "T♣"

    def test_cards_are_hashable_values(self):
        assert len({parse_card("Ah"), parse_card("ah"), parse_card("Ad")}) == 2

    def test_cards_are_immutable(self):
        card = parse_card("Ah")
        with pytest.raises(AttributeError):
            card.rank = Rank.KING


class TestDeck:
    """Tests for deck construction and shuffling."""

    def test_create_deck_has_52_unique_cards(self):
        deck = create_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_shuffle_is_a_permutation(self):
        deck = create_deck()
        shuffled = shuffle(deck, random.Random(7))
        assert len(shuffled) == 52
        assert set(shuffled) == set(deck)

    def test_shuffle_does_not_mutate_input(self):
        deck = create_deck()
        original = list(deck)
        shuffle(deck, random.Random(1))
        assert deck == original

    def test_shuffle_changes_order(self):
        deck = create_deck()
        # Identity permutation has probability 1/52!
        assert shuffle(deck, random.Random(3)) != deck

    def test_seeded_shuffle_is_reproducible(self):
        deck = create_deck()
        assert shuffle(deck, random.Random(42)) == shuffle(deck, random.Random(42))

    def test_remove_cards(self):
        deck = create_deck()
        gone = parse_cards(["As", "Kd"])
        remaining = remove_cards(deck, gone)
        assert len(remaining) == 50
        assert not set(gone) & set(remaining)

    def test_remove_cards_ignores_repeats(self):
        remaining = remove_cards(create_deck(), parse_cards(["As", "As", "as"]))
        assert len(remaining) == 51


class TestDealing:
    """Tests for the Deck dealing object."""

    def test_deck_initialization(self):
        assert len(Deck()) == 52

    def test_deal_cards(self):
        deck = Deck()
        dealt = deck.deal(5)
        assert len(dealt) == 5
        assert deck.remaining == 47

    def test_deal_one(self):
        deck = Deck(parse_cards(["Ah", "Kh"]))
        assert deck.deal_one() == parse_card("Ah")
        assert len(deck) == 1

    def test_deal_too_many(self):
        deck = Deck()
        deck.deal(52)
        with pytest.raises(InvalidInputError):
            deck.deal(1)

    def test_shuffle_keeps_source_cards(self):
        source = create_deck()
        deck = Deck(source, random.Random(5))
        deck.shuffle()
        assert source == create_deck()
        assert set(deck.cards) == set(source)

    def test_reset(self):
        deck = Deck(rng=random.Random(9))
        deck.deal(10)
        deck.reset()
        assert len(deck) == 52
