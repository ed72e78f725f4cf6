"""Framework-agnostic presenter for trainer front ends.

TrainerPresenter mediates between a TrainerView and the TrainerSession.
It has no UI imports; it depends only on the TrainerView Protocol.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from poker_trainer.core.errors import TrainerError
from poker_trainer.interface.session import AnswerFeedback, GameSettings, TrainerSession

if TYPE_CHECKING:
    from poker_trainer.interface.view_protocol import TrainerView

logger = logging.getLogger("poker_trainer.presenter")


class TrainerPresenter:
    """Coordinates settings changes, dealing and grading for a view."""

    def __init__(self, view: TrainerView, session: TrainerSession | None = None) -> None:
        self._view = view
        self._session = session or TrainerSession()

    @property
    def session(self) -> TrainerSession:
        return self._session

    def on_settings_submitted(self, settings: GameSettings) -> None:
        """Apply settings from the view and show the first puzzle."""
        try:
            puzzle = self._session.update_settings(settings)
        except TrainerError as e:
            logger.debug("Rejected settings %s: %s", settings, e)
            self._view.show_error(str(e))
            return
        self._view.show_puzzle(puzzle)

    def on_next_requested(self) -> None:
        """Deal and show a new puzzle with the current settings."""
        try:
            puzzle = self._session.next_puzzle()
        except TrainerError as e:
            self._view.show_error(str(e))
            return
        self._view.show_puzzle(puzzle)

    def on_action_selected(self, action: str) -> AnswerFeedback | None:
        """Grade the user's action and refresh feedback and stats."""
        try:
            feedback = self._session.submit_answer(action)
        except TrainerError as e:
            self._view.show_error(str(e))
            return None
        self._view.show_feedback(feedback)
        self._view.show_stats(self._session.stats)
        return feedback
