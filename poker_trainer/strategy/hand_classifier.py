"""Rank and suit predicates over a two-card starting hand.

All predicates work on numeric rank values (2-14, T=10 ... A=14) and are
pure. Callers guarantee two distinct cards.
"""

from __future__ import annotations

from poker_trainer.utils.card import Card
from poker_trainer.utils.constants import RANK_VALUES, Rank

Hand = tuple[Card, Card]


def is_pocket_pair(hand: Hand) -> bool:
    return hand[0].rank == hand[1].rank


def has_rank(hand: Hand, rank: Rank) -> bool:
    """Whether either card is of ``rank``."""
    return hand[0].rank == rank or hand[1].rank == rank


def has_ace(hand: Hand) -> bool:
    return has_rank(hand, Rank.ACE)


def has_king(hand: Hand) -> bool:
    return has_rank(hand, Rank.KING)


def has_queen(hand: Hand) -> bool:
    return has_rank(hand, Rank.QUEEN)


def has_jack(hand: Hand) -> bool:
    return has_rank(hand, Rank.JACK)


def has_ten(hand: Hand) -> bool:
    return has_rank(hand, Rank.TEN)


def is_suited(hand: Hand) -> bool:
    return hand[0].suit == hand[1].suit


def high_low(hand: Hand) -> tuple[int, int]:
    """Return (higher, lower) rank values.

    Pocket pairs return the same value twice, so check is_pocket_pair
    first where the gap matters.
    """
    a, b = hand[0].value, hand[1].value
    return (a, b) if a >= b else (b, a)


def is_suited_connector_or_gapper(hand: Hand) -> bool:
    """Suited, at most two gaps between the ranks, low card 3 or better.

    A gap of zero is admitted, which overlaps with pocket pairs only in
    theory since a pair can never be suited.
    """
    if not is_suited(hand):
        return False
    high, low = high_low(hand)
    return high - low <= 3 and low >= RANK_VALUES[Rank.THREE]


def is_broadway_hand(hand: Hand) -> bool:
    """Both cards T or higher, suited or not."""
    _, low = high_low(hand)
    return low >= RANK_VALUES[Rank.TEN]


def is_bottom_hand(hand: Hand) -> bool:
    """Rough cut of the weakest starting hands (32o, 54o, 72o, T5o...).

    Offsuit, no card above T and a kicker of 5 or lower. Close-ranked
    hands (gap <= 3) and the wide-gapped trash like 72o both qualify.
    Only meant as an exclusion filter for wide raising ranges, not as a
    hand-strength ranking. Small pairs (22-55) fall inside the cut too.
    """
    if is_suited(hand):
        return False
    high, low = high_low(hand)
    return high <= RANK_VALUES[Rank.TEN] and low <= RANK_VALUES[Rank.FIVE]


def hand_to_notation(hand: Hand) -> str:
    """Standard shorthand for a hand: 'TT', 'AKs', '72o'."""
    first, second = sorted(hand, key=lambda c: c.value, reverse=True)
    ranks = f"{first.rank.value}{second.rank.value}"
    if is_pocket_pair(hand):
        return ranks
    return ranks + ("s" if is_suited(hand) else "o")
