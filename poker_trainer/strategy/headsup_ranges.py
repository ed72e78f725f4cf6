"""Heads-up small blind preflop ranges by stack depth.

Each depth has its own hand-written rule set. Adjacent tables look alike
but their boundaries differ on purpose (compare the J-high and T-high
rules at 10bb and 30bb), so they are kept as separate functions rather
than one parametrized chart.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from poker_trainer.strategy.hand_classifier import (
    Hand,
    has_ace,
    has_jack,
    has_king,
    has_queen,
    has_ten,
    hand_to_notation,
    high_low,
    is_bottom_hand,
    is_pocket_pair,
    is_suited,
)
from poker_trainer.utils.constants import RANK_VALUES, Action, Rank

logger = logging.getLogger("poker_trainer.ranges")

_T = RANK_VALUES[Rank.TEN]
_J = RANK_VALUES[Rank.JACK]
_Q = RANK_VALUES[Rank.QUEEN]
_NINE = RANK_VALUES[Rank.NINE]


def is_in_headsup_sb_10bb_range(hand: Hand) -> bool:
    """10bb push range: pairs, Ax, Kx, Q5+, J7+, T8+, 53s."""
    high, low = high_low(hand)

    if is_pocket_pair(hand):
        return True
    if has_ace(hand) or has_king(hand):
        return True
    if high == _Q and low >= 5:
        return True
    if high == _J and low >= 7:
        return True
    if high == _T and low >= 8:
        return True
    # 53s
    return is_suited(hand) and high == 5 and low == 3


def is_in_headsup_sb_20bb_range(hand: Hand) -> bool:
    """20bb push range: pairs, any broadway card, 9xs, 98o/97o."""
    high, low = high_low(hand)

    if is_pocket_pair(hand):
        return True
    if has_ace(hand) or has_king(hand) or has_queen(hand):
        return True
    if has_jack(hand) or has_ten(hand):
        return True
    if high == _NINE:
        if is_suited(hand):
            return True
        return low >= 7
    return False


def is_in_headsup_sb_30bb_range(hand: Hand) -> bool:
    """30bb raise range: pairs, Ax, Kx, Q5+, J7-JT, T8-T9, 9xs, 98o/97o."""
    high, low = high_low(hand)

    if is_pocket_pair(hand):
        return True
    if has_ace(hand) or has_king(hand):
        return True
    if high == _Q:
        return low >= 5
    if high == _J:
        return 7 <= low <= _T
    if high == _T:
        return 8 <= low <= _NINE
    if high == _NINE:
        if is_suited(hand):
            return True
        return low >= 7
    return False


def should_raise_in_headsup_sb_50bb_range(hand: Hand) -> bool:
    """50bb raise range: everything except the bottom hands."""
    return not is_bottom_hand(hand)


def should_call_in_headsup_sb_50bb_range(hand: Hand) -> bool:
    """50bb limp range: A2s-A5s, 65s, 54s."""
    if not is_suited(hand):
        return False
    high, low = high_low(hand)

    if has_ace(hand) and low <= 5:
        return True
    return high <= 6 and low >= 4 and high - low == 1


def should_raise_in_headsup_sb_100bb_range(hand: Hand) -> bool:
    """100bb raise range: pairs, any broadway card, 9xs."""
    high, _ = high_low(hand)

    if is_pocket_pair(hand):
        return True
    if has_ace(hand) or has_king(hand) or has_queen(hand):
        return True
    if has_jack(hand) or has_ten(hand):
        return True
    return high == _NINE and is_suited(hand)


# ---------------------------------------------------------------------------
# Range tables
# ---------------------------------------------------------------------------

RangePredicate = Callable[[Hand], bool]


@dataclass(frozen=True)
class RangeTable:
    """Decision rules and explanations for one stack depth."""

    stack_bb: int
    raise_range: RangePredicate
    raise_description: str
    fold_description: str
    call_range: RangePredicate | None = None
    call_description: str = ""
    # Shallow tables raise all-in
    is_push: bool = False


@dataclass(frozen=True)
class RangeDecision:
    """Outcome of classifying a hand against a range table."""

    action: Action
    description: str


HEADSUP_SB_TABLES: dict[int, RangeTable] = {
    10: RangeTable(
        stack_bb=10,
        raise_range=is_in_headsup_sb_10bb_range,
        raise_description=(
            "At 10bb heads-up from the small blind, push all-in with any pair, "
            "any ace or king, Q5+, J7+, T8+ and 53s."
        ),
        fold_description=(
            "At 10bb heads-up from the small blind, fold hands outside the push "
            "range (pairs, any ace or king, Q5+, J7+, T8+, 53s)."
        ),
        is_push=True,
    ),
    20: RangeTable(
        stack_bb=20,
        raise_range=is_in_headsup_sb_20bb_range,
        raise_description=(
            "At 20bb heads-up from the small blind, push with any pair, any hand "
            "containing an A, K, Q, J or T, suited nine-high hands and 98o/97o."
        ),
        fold_description=(
            "At 20bb heads-up from the small blind, fold hands outside the push "
            "range (pairs, any A/K/Q/J/T, 9xs, 98o, 97o)."
        ),
        is_push=True,
    ),
    30: RangeTable(
        stack_bb=30,
        raise_range=is_in_headsup_sb_30bb_range,
        raise_description=(
            "At 30bb heads-up from the small blind, raise with any pair, any ace "
            "or king, Q5+, J7-JT, T8-T9, suited nine-high hands and 98o/97o."
        ),
        fold_description=(
            "At 30bb heads-up from the small blind, fold hands outside the raising "
            "range (pairs, any ace or king, Q5+, J7-JT, T8-T9, 9xs, 98o, 97o)."
        ),
    ),
    50: RangeTable(
        stack_bb=50,
        raise_range=should_raise_in_headsup_sb_50bb_range,
        raise_description=(
            "At 50bb heads-up from the small blind, raise a very wide range: "
            "everything except the weakest offsuit hands."
        ),
        fold_description=(
            "At 50bb heads-up from the small blind, fold only the weakest offsuit "
            "hands (no card above T with a kicker of 5 or lower)."
        ),
        call_range=should_call_in_headsup_sb_50bb_range,
        call_description=(
            "At 50bb heads-up from the small blind, limp with weak suited aces "
            "(A2s-A5s) and low suited connectors (65s, 54s)."
        ),
    ),
    100: RangeTable(
        stack_bb=100,
        raise_range=should_raise_in_headsup_sb_100bb_range,
        raise_description=(
            "At 100bb heads-up from the small blind, raise with any pair, any hand "
            "containing an A, K, Q, J or T, and suited nine-high hands."
        ),
        fold_description=(
            "At 100bb heads-up from the small blind, fold hands outside the raising "
            "range (pairs, any A/K/Q/J/T, 9xs)."
        ),
    ),
}


def get_headsup_sb_table(stack_bb: float) -> RangeTable | None:
    """Get the range table for an exact stack depth, or None if unsupported."""
    if isinstance(stack_bb, float) and not stack_bb.is_integer():
        return None
    return HEADSUP_SB_TABLES.get(int(stack_bb))


def classify_headsup_sb(hand: Hand, stack_bb: float) -> RangeDecision | None:
    """Decide the small blind's opening action heads-up.

    The limp range is checked before the raise range, so hands in both
    (A4s at 50bb) are limped.

    Args:
        hand: The small blind's hole cards.
        stack_bb: Effective stack in big blinds.

    Returns:
        The action and its explanation, or None when no table exists for
        this stack depth.
    """
    table = get_headsup_sb_table(stack_bb)
    if table is None:
        logger.debug("No heads-up SB table for %sbb", stack_bb)
        return None

    notation = hand_to_notation(hand)
    if table.call_range is not None and table.call_range(hand):
        decision = RangeDecision(Action.CALL, f"Call with {notation}. {table.call_description}")
    elif table.raise_range(hand):
        verb = "Push" if table.is_push else "Raise"
        decision = RangeDecision(Action.RAISE, f"{verb} with {notation}. {table.raise_description}")
    else:
        decision = RangeDecision(Action.FOLD, f"Fold {notation}. {table.fold_description}")

    logger.debug("Heads-up SB %dbb: %s -> %s", table.stack_bb, notation, decision.action)
    return decision
