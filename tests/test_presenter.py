"""Tests for TrainerPresenter with a mock TrainerView."""

from __future__ import annotations

from unittest.mock import MagicMock

from helpers import stacked_shuffle
from poker_trainer.interface.presenter import TrainerPresenter
from poker_trainer.interface.session import GameSettings, TrainerSession
from poker_trainer.utils.constants import GameType, Position


def _make_presenter(*top: str) -> tuple[TrainerPresenter, MagicMock]:
    view = MagicMock()
    session = TrainerSession(shuffle=stacked_shuffle(*top) if top else None)
    return TrainerPresenter(view=view, session=session), view


_HEADS_UP_50 = GameSettings(GameType.CASH, 2, Position.SB, 50)


class TestSettings:
    def test_valid_settings_show_puzzle(self) -> None:
        presenter, view = _make_presenter()
        presenter.on_settings_submitted(_HEADS_UP_50)
        view.show_puzzle.assert_called_once_with(presenter.session.puzzle)
        view.show_error.assert_not_called()

    def test_invalid_settings_show_error(self) -> None:
        presenter, view = _make_presenter()
        presenter.on_settings_submitted(GameSettings(player_count=2, user_position=Position.CO))
        view.show_error.assert_called_once()
        view.show_puzzle.assert_not_called()


class TestActions:
    def test_correct_action(self) -> None:
        presenter, view = _make_presenter("Ah", "4h")
        presenter.on_settings_submitted(_HEADS_UP_50)
        feedback = presenter.on_action_selected("CALL")
        assert feedback is not None and feedback.is_correct
        view.show_feedback.assert_called_once_with(feedback)
        view.show_stats.assert_called_once_with(presenter.session.stats)

    def test_action_before_deal(self) -> None:
        presenter, view = _make_presenter()
        assert presenter.on_action_selected("FOLD") is None
        view.show_error.assert_called_once()
        view.show_feedback.assert_not_called()

    def test_next_requested(self) -> None:
        presenter, view = _make_presenter()
        presenter.on_settings_submitted(_HEADS_UP_50)
        first = presenter.session.puzzle
        presenter.on_next_requested()
        assert presenter.session.puzzle is not first
        assert view.show_puzzle.call_count == 2
