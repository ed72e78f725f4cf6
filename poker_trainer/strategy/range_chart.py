"""13x13 starting-hand chart for a range predicate.

Rows and columns run A down to 2. Pairs sit on the diagonal, suited
hands above it and offsuit hands below it, the usual layout for preflop
charts.
"""

from __future__ import annotations

import numpy as np

from poker_trainer.strategy.hand_classifier import Hand
from poker_trainer.strategy.headsup_ranges import RangePredicate
from poker_trainer.utils.card import Card
from poker_trainer.utils.constants import Rank, Suit

TOTAL_COMBOS = 1326

CHART_RANKS: list[Rank] = [
    Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN,
    Rank.NINE, Rank.EIGHT, Rank.SEVEN, Rank.SIX, Rank.FIVE,
    Rank.FOUR, Rank.THREE, Rank.TWO,
]

# Combos per cell: 6 for pairs, 4 suited, 12 offsuit
_COMBO_WEIGHTS = np.where(
    np.eye(13, dtype=bool),
    6,
    np.where(np.triu(np.ones((13, 13), dtype=bool), k=1), 4, 12),
)


def cell_hand(row: int, col: int) -> Hand:
    """A representative hand for a chart cell."""
    r1, r2 = CHART_RANKS[row], CHART_RANKS[col]
    if row < col:
        return (Card(r1, Suit.SPADES), Card(r2, Suit.SPADES))
    if row > col:
        # Offsuit: higher rank is the column
        return (Card(r2, Suit.SPADES), Card(r1, Suit.HEARTS))
    return (Card(r1, Suit.SPADES), Card(r2, Suit.HEARTS))


def cell_label(row: int, col: int) -> str:
    r1, r2 = CHART_RANKS[row], CHART_RANKS[col]
    if row == col:
        return f"{r1.value}{r2.value}"
    if row < col:
        return f"{r1.value}{r2.value}s"
    return f"{r2.value}{r1.value}o"


def range_grid(predicate: RangePredicate) -> np.ndarray:
    """Evaluate ``predicate`` on every cell; returns a 13x13 bool array."""
    grid = np.zeros((13, 13), dtype=bool)
    for row in range(13):
        for col in range(13):
            grid[row, col] = predicate(cell_hand(row, col))
    return grid


def range_combo_count(grid: np.ndarray) -> int:
    """Number of specific two-card combos covered by a chart."""
    return int(_COMBO_WEIGHTS[grid].sum())


def range_percentage(grid: np.ndarray) -> float:
    """Share of all 1326 starting combos covered, in percent."""
    return range_combo_count(grid) / TOTAL_COMBOS * 100


def format_chart(grid: np.ndarray, empty: str = ".") -> str:
    """Render a chart as text, one labelled cell per included hand."""
    header = "     " + " ".join(f"{r.value:>4}" for r in CHART_RANKS)
    lines = [header]
    for row in range(13):
        cells = []
        for col in range(13):
            label = cell_label(row, col) if grid[row, col] else empty
            cells.append(f"{label:>4}")
        lines.append(f"{CHART_RANKS[row].value:>4} " + " ".join(cells))
    pct = range_percentage(grid)
    lines.append(f"Range: {range_combo_count(grid)} combos ({pct:.1f}%)")
    return "\n".join(lines)
