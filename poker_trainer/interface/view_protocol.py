"""Abstract view interface for trainer front ends.

The TrainerView Protocol is the contract between TrainerPresenter and a
concrete front end (the text CLI, or any GUI). The presenter depends only
on this protocol.
"""

from __future__ import annotations

from typing import Protocol

from poker_trainer.core.puzzle import PokerPuzzle
from poker_trainer.interface.session import AnswerFeedback, SessionStats


class TrainerView(Protocol):
    """Interface that any front end must implement."""

    def show_puzzle(self, puzzle: PokerPuzzle) -> None:
        """Display the table, the user's cards and the available actions."""
        ...

    def show_feedback(self, feedback: AnswerFeedback) -> None:
        """Display whether the chosen action was right, with the explanation."""
        ...

    def show_stats(self, stats: SessionStats) -> None:
        """Display correct / incorrect / total / accuracy."""
        ...

    def show_error(self, message: str) -> None:
        ...
