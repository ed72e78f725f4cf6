"""Preflop hand classification and heads-up small blind ranges.

Key public API:
    classify_headsup_sb  -- Action + explanation for a hand at a stack depth
    HEADSUP_SB_TABLES    -- Range tables keyed by stack depth in bb
    RangeDecision        -- Classification result
"""

from poker_trainer.strategy.headsup_ranges import (
    HEADSUP_SB_TABLES,
    RangeDecision,
    RangeTable,
    classify_headsup_sb,
)

__all__ = ["HEADSUP_SB_TABLES", "RangeDecision", "RangeTable", "classify_headsup_sb"]
