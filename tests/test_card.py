"""Tests for Card, deck generation, shuffling and the dealing cursor."""

import random

import pytest

from poker_trainer.core.errors import DeckExhaustedError, InvalidArgumentError
from poker_trainer.utils.card import Card, Deck, generate_deck, shuffle_deck
from poker_trainer.utils.constants import Rank, Suit


class TestCard:
    def test_from_str(self) -> None:
        c = Card.from_str("Ah")
        assert c.rank == Rank.ACE
        assert c.suit == Suit.HEARTS

    def test_from_str_ten_alias(self) -> None:
        assert Card.from_str("10d") == Card.from_str("Td")

    def test_invalid_rank(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Card.from_str("Xh")

    def test_invalid_suit(self) -> None:
        with pytest.raises(ValueError):
            Card.from_str("Ax")

    def test_value(self) -> None:
        assert Card.from_str("Td").value == 10
        assert Card.from_str("Ac").value == 14
        assert Card.from_str("2s").value == 2

    def test_display_uses_suit_symbol(self) -> None:
        assert Card.from_str("As").display == "A♠"

    def test_equality_and_hash(self) -> None:
        assert Card.from_str("Kh") == Card(Rank.KING, Suit.HEARTS)
        assert len({Card.from_str("Kh"), Card.from_str("Kh")}) == 1


class TestGenerateDeck:
    def test_52_unique_cards(self) -> None:
        deck = generate_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_deterministic_order(self) -> None:
        assert generate_deck() == generate_deck()


class TestShuffleDeck:
    def test_same_multiset(self) -> None:
        deck = generate_deck()
        shuffled = shuffle_deck(deck)
        assert len(shuffled) == 52
        assert set(shuffled) == set(deck)

    def test_does_not_mutate_input(self) -> None:
        deck = generate_deck()
        snapshot = list(deck)
        shuffle_deck(deck, random.Random(1))
        assert deck == snapshot

    def test_not_identity_over_repeated_trials(self) -> None:
        deck = generate_deck()
        assert any(shuffle_deck(deck) != deck for _ in range(5))

    def test_seeded_rng_is_reproducible(self) -> None:
        deck = generate_deck()
        assert shuffle_deck(deck, random.Random(42)) == shuffle_deck(deck, random.Random(42))


class TestDeck:
    def test_deal_advances_cursor(self) -> None:
        deck = Deck(generate_deck())
        first = deck.deal(2)
        second = deck.deal(2)
        assert first == generate_deck()[:2]
        assert second == generate_deck()[2:4]
        assert deck.position == 4
        assert deck.remaining == 48

    def test_deal_one(self) -> None:
        deck = Deck(generate_deck())
        assert deck.deal_one() == generate_deck()[0]

    def test_exhausted(self) -> None:
        deck = Deck(generate_deck())
        deck.deal(50)
        with pytest.raises(DeckExhaustedError):
            deck.deal(3)

    def test_shuffled_deck_deals_unique_cards(self) -> None:
        deck = Deck.shuffled(random.Random(7))
        dealt = deck.deal(52)
        assert len(set(dealt)) == 52
        assert deck.remaining == 0

    def test_negative_count_rejected(self) -> None:
        deck = Deck(generate_deck())
        with pytest.raises(InvalidArgumentError):
            deck.deal(-1)
        assert deck.position == 0
        assert deck.deal(2) == generate_deck()[:2]

    def test_fractional_count_rejected(self) -> None:
        deck = Deck(generate_deck())
        with pytest.raises(InvalidArgumentError):
            deck.deal(2.5)
        assert deck.remaining == 52
