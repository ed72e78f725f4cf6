"""Card and Deck classes for the trainer."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from poker_trainer.core.errors import DeckExhaustedError, InvalidArgumentError
from poker_trainer.utils.constants import RANK_VALUES, SUIT_SYMBOLS, Rank, Suit


@dataclass(frozen=True)
class Card:
    """Represents a single playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Create a Card from a string like 'Ah', 'Td' or '10d'.

        Args:
            s: Rank character(s) followed by a suit character.

        Returns:
            A new Card instance.

        Raises:
            InvalidArgumentError: If the string is malformed or contains
                invalid rank/suit characters.
        """
        s = s.strip()
        if s[:2] == "10":
            s = "T" + s[2:]
        if len(s) != 2:
            raise InvalidArgumentError(f"Card string must be 2 characters, got '{s}'")
        try:
            rank = Rank(s[0].upper())
        except ValueError:
            raise InvalidArgumentError(f"Invalid rank character: '{s[0]}'")
        try:
            suit = Suit(s[1].lower())
        except ValueError:
            raise InvalidArgumentError(f"Invalid suit character: '{s[1]}'")
        return cls(rank=rank, suit=suit)

    @property
    def value(self) -> int:
        """Numeric value of the card's rank (2-14)."""
        return RANK_VALUES[self.rank]

    @property
    def display(self) -> str:
        """Rank followed by the suit symbol, e.g. 'A♠'."""
        return f"{self.rank.value}{SUIT_SYMBOLS[self.suit]}"

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))


def generate_deck() -> list[Card]:
    """Build the 52-card deck in a fixed order (suit by suit, 2 to A)."""
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


def shuffle_deck(
    deck: Sequence[Card],
    rng: random.Random | None = None,
) -> list[Card]:
    """Return a uniformly shuffled copy of ``deck``.

    Fisher-Yates over a copy, so the input is never mutated.

    Args:
        deck: Cards to shuffle.
        rng: Random source with a ``randrange`` method. Defaults to the
            module-level ``random`` generator.
    """
    source = rng if rng is not None else random
    shuffled = list(deck)
    for i in range(len(shuffled) - 1, 0, -1):
        j = source.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


class Deck:
    """Dealing cursor over an ordered card sequence.

    Cards are consumed left to right. The underlying sequence is copied
    on construction and never reordered afterwards.
    """

    def __init__(self, cards: Sequence[Card]) -> None:
        self._cards: tuple[Card, ...] = tuple(cards)
        self._cursor = 0

    @classmethod
    def shuffled(cls, rng: random.Random | None = None) -> Deck:
        """Create a fresh deck in random order."""
        return cls(shuffle_deck(generate_deck(), rng))

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the deck.

        Args:
            n: Number of cards to deal.

        Returns:
            List of dealt cards.

        Raises:
            InvalidArgumentError: If n is not a non-negative integer.
            DeckExhaustedError: If not enough cards remain.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidArgumentError(f"Card count must be a non-negative integer, got {n!r}")
        if n > self.remaining:
            raise DeckExhaustedError(
                f"Cannot deal {n} cards, only {self.remaining} remaining"
            )
        dealt = list(self._cards[self._cursor:self._cursor + n])
        self._cursor += n
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card from the top of the deck."""
        return self.deal(1)[0]

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards) - self._cursor

    @property
    def position(self) -> int:
        """Index of the next card to be dealt."""
        return self._cursor
