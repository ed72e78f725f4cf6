"""Text-mode preflop trainer.

Usage:
    python -m poker_trainer.interface.trainer_cli quiz --players 2 --position SB --stack 50
    python -m poker_trainer.interface.trainer_cli deal --count 5
    python -m poker_trainer.interface.trainer_cli chart --stack 30

Example quiz round:
    ============================================================
      Cash Game - Blinds 0.5/1 BB - Pot 3 BB - Your Stack 50 BB
    ============================================================
      Seats:  SB* 50bb | BB 50bb
      Board:  K♠ 7♦ 2♣ J♥ 4♠
      You (SB): A♥ 4♥  (A4s)

      Action [fold/call/raise, q to quit]: call

      Correct! Call with A4s. At 50bb heads-up from the small blind, ...
      Correct 1 | Incorrect 0 | Total 1 | Accuracy 100%
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from poker_trainer.core.config import load_trainer_config
from poker_trainer.core.errors import TrainerError
from poker_trainer.core.puzzle import PokerPuzzle
from poker_trainer.interface.presenter import TrainerPresenter
from poker_trainer.interface.session import (
    AnswerFeedback,
    GameSettings,
    SessionStats,
    TrainerSession,
)
from poker_trainer.interface.view_protocol import TrainerView
from poker_trainer.strategy.hand_classifier import hand_to_notation
from poker_trainer.strategy.headsup_ranges import HEADSUP_SB_TABLES
from poker_trainer.strategy.range_chart import format_chart, range_grid
from poker_trainer.utils.constants import SUPPORTED_STACK_DEPTHS, Action, GameType

_DIVIDER = "=" * 60

# Single-letter shortcuts accepted at the action prompt
_ACTION_KEYS: dict[str, Action] = {
    "f": Action.FOLD,
    "k": Action.CHECK,
    "c": Action.CALL,
    "r": Action.RAISE,
}


def _prompt(msg: str, default: str = "") -> str:
    """Print a prompt and read user input."""
    suffix = f" [{default}]" if default else ""
    try:
        val = input(f"  {msg}{suffix}: ").strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return "q"
    return val if val else default


def _fmt_bb(amount: float, big_blind: float) -> str:
    return f"{amount / big_blind:g}"


def render_puzzle(puzzle: PokerPuzzle, reveal: bool = False) -> str:
    """Format a puzzle as text; ``reveal`` appends the answer."""
    bb = puzzle.blinds.big
    game = "Cash Game" if puzzle.game_type == GameType.CASH else "Tournament"
    user = puzzle.user
    seats = " | ".join(
        f"{p.position}{'*' if p.is_user else ''} {_fmt_bb(p.stack, bb)}bb"
        for p in puzzle.players
    )
    lines = [
        _DIVIDER,
        f"  {game} - Blinds {_fmt_bb(puzzle.blinds.small, bb)}/1 BB - "
        f"Pot {_fmt_bb(puzzle.pot, bb)} BB - Your Stack {_fmt_bb(user.stack, bb)} BB",
        _DIVIDER,
        f"  Seats:  {seats}",
        f"  Board:  {' '.join(c.display for c in puzzle.community_cards)}",
    ]
    if user.cards is not None:
        cards = " ".join(c.display for c in user.cards)
        lines.append(f"  You ({user.position}): {cards}  ({hand_to_notation(user.cards)})")
    if reveal:
        lines.append(f"  Answer: {puzzle.correct_action} - {puzzle.action_description}")
    return "\n".join(lines)


class ConsoleView:
    """TrainerView that prints to stdout."""

    def show_puzzle(self, puzzle: PokerPuzzle) -> None:
        print()
        print(render_puzzle(puzzle))
        print()

    def show_feedback(self, feedback: AnswerFeedback) -> None:
        print()
        print(f"  {feedback.message}")

    def show_stats(self, stats: SessionStats) -> None:
        print(
            f"  Correct {stats.correct} | Incorrect {stats.incorrect} | "
            f"Total {stats.total} | Accuracy {stats.accuracy}%"
        )

    def show_error(self, message: str) -> None:
        print(f"  Error: {message}")


def parse_action(text: str) -> str:
    """Map a shortcut ('f', 'k', 'c', 'r') to an action name."""
    text = text.strip().lower()
    action = _ACTION_KEYS.get(text)
    return action.value if action else text.upper()


def run_quiz(settings: GameSettings, session: TrainerSession) -> SessionStats:
    """Interactive quiz loop. Returns the final stats."""
    view: TrainerView = ConsoleView()
    presenter = TrainerPresenter(view=view, session=session)
    presenter.on_settings_submitted(settings)
    if session.puzzle is None:
        return session.stats

    while True:
        offered = "/".join(a.value.lower() for a in session.puzzle.available_actions)
        answer = _prompt(f"Action [{offered}, q to quit]")
        if answer.lower() in ("q", "quit", ""):
            break
        if presenter.on_action_selected(parse_action(answer)) is None:
            continue
        presenter.on_next_requested()

    print()
    print("  Session over.")
    view.show_stats(session.stats)
    return session.stats


def run_deal(settings: GameSettings, session: TrainerSession, count: int) -> None:
    """Print ``count`` puzzles with their answers."""
    session.update_settings(settings)
    for i in range(count):
        if i:
            session.next_puzzle()
        print(render_puzzle(session.puzzle, reveal=True))
        print()


def run_chart(stack_bb: int) -> None:
    """Print the heads-up small blind chart(s) for a stack depth."""
    table = HEADSUP_SB_TABLES.get(stack_bb)
    if table is None:
        supported = ", ".join(str(d) for d in SUPPORTED_STACK_DEPTHS)
        raise TrainerError(f"No heads-up SB range for {stack_bb}bb (supported: {supported})")
    label = "push" if table.is_push else "raise"
    print(f"Heads-up SB {stack_bb}bb {label} range")
    print(format_chart(range_grid(table.raise_range)))
    if table.call_range is not None:
        print()
        print(f"Heads-up SB {stack_bb}bb call range")
        print(format_chart(range_grid(table.call_range)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Preflop decision trainer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Trainer config JSON (default: ~/.poker_trainer/config.json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    def add_table_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--game", default="CASH", help="CASH or MTT")
        p.add_argument("--players", default="2", help="Players at the table (2-10)")
        p.add_argument("--position", default="SB", help="Your seat (UTG ... BB)")
        p.add_argument("--stack", default="50", help="Stack depth in big blinds")

    add_table_args(sub.add_parser("quiz", help="Answer puzzles interactively"))
    deal = sub.add_parser("deal", help="Print generated puzzles with answers")
    add_table_args(deal)
    deal.add_argument("--count", type=int, default=5, help="Number of puzzles")
    chart = sub.add_parser("chart", help="Show a heads-up SB range chart")
    chart.add_argument("--stack", type=int, default=50, help="Stack depth in big blinds")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.command == "chart":
            run_chart(args.stack)
            return 0

        config = load_trainer_config(args.config)
        settings = GameSettings.from_strings(args.game, args.players, args.position, args.stack)
        session = TrainerSession(settings=settings, config=config)
        if args.command == "deal":
            run_deal(settings, session, args.count)
        else:
            run_quiz(settings, session)
    except TrainerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
