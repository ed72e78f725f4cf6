"""Shared helpers for deterministic puzzle tests."""

from __future__ import annotations

from collections.abc import Sequence

from poker_trainer.utils.card import Card


def identity_shuffle(deck: Sequence[Card]) -> list[Card]:
    return list(deck)


def stacked_shuffle(*top: str):
    """Build a shuffle that puts the given cards on top, rest in order.

    ``stacked_shuffle("Ah", "4h")`` deals Ah 4h to the first seat.
    """
    top_cards = [Card.from_str(s) for s in top]

    def shuffle(deck: Sequence[Card]) -> list[Card]:
        rest = [c for c in deck if c not in top_cards]
        return top_cards + rest

    return shuffle


class FixedChoice:
    """Random source stand-in whose choice() always returns ``value``."""

    def __init__(self, value) -> None:
        self.value = value

    def choice(self, seq):
        assert self.value in seq
        return self.value

    def randint(self, a: int, b: int) -> int:
        return a

    def randrange(self, n: int) -> int:
        return n - 1
