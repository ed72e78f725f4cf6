"""Tests for the text-mode trainer."""

from unittest.mock import patch

from helpers import stacked_shuffle
from poker_trainer.core.puzzle import create_puzzle
from poker_trainer.interface.session import GameSettings, TrainerSession
from poker_trainer.interface.trainer_cli import (
    main,
    parse_action,
    render_puzzle,
    run_quiz,
)
from poker_trainer.utils.constants import GameType, Position


class TestParseAction:
    def test_shortcuts(self) -> None:
        assert parse_action("f") == "FOLD"
        assert parse_action("k") == "CHECK"
        assert parse_action(" C ") == "CALL"
        assert parse_action("r") == "RAISE"

    def test_full_word(self) -> None:
        assert parse_action("raise") == "RAISE"


class TestRender:
    def test_shows_user_hand(self) -> None:
        puzzle = create_puzzle("CASH", 2, "SB", 50, shuffle=stacked_shuffle("Ah", "4h"))
        text = render_puzzle(puzzle)
        assert "Cash Game" in text
        assert "You (SB): A♥ 4♥  (A4s)" in text
        assert "Pot 3 BB" in text
        assert "Answer" not in text

    def test_reveal(self) -> None:
        puzzle = create_puzzle("MTT", 2, "SB", 50, shuffle=stacked_shuffle("Ah", "4h"))
        text = render_puzzle(puzzle, reveal=True)
        assert "Tournament" in text
        assert "Answer: CALL" in text


class TestQuiz:
    def test_quiz_loop(self, capsys) -> None:
        settings = GameSettings(GameType.CASH, 2, Position.SB, 50)
        session = TrainerSession(settings=settings, shuffle=stacked_shuffle("Ah", "4h"))
        with patch("builtins.input", side_effect=["c", "r", "q"]):
            stats = run_quiz(settings, session)
        assert stats.correct == 1
        assert stats.incorrect == 1
        out = capsys.readouterr().out
        assert "Correct! Call with A4s." in out
        assert "Session over." in out

    def test_quiz_unknown_action_reprompts(self, capsys) -> None:
        settings = GameSettings(GameType.CASH, 2, Position.SB, 50)
        session = TrainerSession(settings=settings, shuffle=stacked_shuffle("Ah", "4h"))
        with patch("builtins.input", side_effect=["shove", "c", "q"]):
            stats = run_quiz(settings, session)
        assert stats.total == 1
        assert "Error: Unknown action" in capsys.readouterr().out

    def test_quiz_unoffered_action_reprompts(self, capsys) -> None:
        settings = GameSettings(GameType.CASH, 2, Position.SB, 50)
        session = TrainerSession(settings=settings, shuffle=stacked_shuffle("Ah", "4h"))
        with patch("builtins.input", side_effect=["k", "c", "q"]):
            stats = run_quiz(settings, session)
        assert stats.total == 1
        assert stats.correct == 1
        assert "Error: CHECK is not available here" in capsys.readouterr().out


class TestMain:
    def test_chart(self, capsys) -> None:
        assert main(["chart", "--stack", "50"]) == 0
        out = capsys.readouterr().out
        assert "Heads-up SB 50bb raise range" in out
        assert "Heads-up SB 50bb call range" in out

    def test_chart_unsupported(self, capsys) -> None:
        assert main(["chart", "--stack", "40"]) == 2
        assert "No heads-up SB range" in capsys.readouterr().err

    def test_deal(self, capsys, tmp_path) -> None:
        config = tmp_path / "config.json"
        assert main(["--config", str(config), "deal", "--players", "6", "--position", "CO", "--count", "2"]) == 0
        assert capsys.readouterr().out.count("Answer:") == 2

    def test_invalid_settings(self, capsys, tmp_path) -> None:
        config = tmp_path / "config.json"
        assert main(["--config", str(config), "deal", "--players", "2", "--position", "CO"]) == 2
        assert "Error:" in capsys.readouterr().err
