"""Trainer session state: settings, the current puzzle and running stats.

One explicit container that front ends pass around instead of keeping
settings and scores in globals. Puzzle generation itself stays in
``create_puzzle``, which the session calls as a stateless service.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from poker_trainer.core.config import TrainerConfig
from poker_trainer.core.errors import InvalidArgumentError
from poker_trainer.core.puzzle import PokerPuzzle, ShuffleFn, create_puzzle
from poker_trainer.core.table import get_positions_for_player_count
from poker_trainer.utils.constants import Action, GameType, Position

logger = logging.getLogger("poker_trainer.session")


@dataclass(frozen=True)
class GameSettings:
    """What the user picked on the settings screen."""

    game_type: GameType = GameType.CASH
    player_count: int = 6
    user_position: Position = Position.BTN
    big_blinds: float = 100

    def validate(self) -> None:
        """Check that the user position has a seat at this table size.

        Raises:
            InvalidArgumentError: If the player count or position is invalid.
        """
        positions = get_positions_for_player_count(self.player_count)
        if self.user_position not in positions:
            raise InvalidArgumentError(
                f"{self.user_position} is not a seat at a {self.player_count}-handed table"
            )
        if self.big_blinds <= 0:
            raise InvalidArgumentError(f"Stack depth must be positive, got {self.big_blinds}")

    @classmethod
    def from_strings(
        cls,
        game_type: str,
        player_count: str,
        user_position: str,
        big_blinds: str,
    ) -> GameSettings:
        """Parse raw form/CLI input into settings (case-insensitive)."""
        try:
            gt = GameType(game_type.strip().upper())
        except ValueError:
            raise InvalidArgumentError(f"Unknown game type: '{game_type}'")
        try:
            pos = Position(user_position.strip().upper())
        except ValueError:
            raise InvalidArgumentError(f"Unknown position: '{user_position}'")
        try:
            count = int(player_count)
            depth = float(big_blinds)
        except ValueError:
            raise InvalidArgumentError(
                f"Player count and stack must be numbers, got '{player_count}', '{big_blinds}'"
            )
        if depth.is_integer():
            depth = int(depth)
        settings = cls(game_type=gt, player_count=count, user_position=pos, big_blinds=depth)
        settings.validate()
        return settings


@dataclass
class SessionStats:
    correct: int = 0
    incorrect: int = 0

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    @property
    def accuracy(self) -> int:
        """Share of correct answers as a rounded percentage (0 when empty)."""
        if self.total == 0:
            return 0
        # Halves round up
        return (200 * self.correct + self.total) // (2 * self.total)

    def record(self, is_correct: bool) -> None:
        if is_correct:
            self.correct += 1
        else:
            self.incorrect += 1


@dataclass(frozen=True)
class AnswerFeedback:
    """Result of grading one answer."""

    selected: Action
    correct_action: Action
    is_correct: bool
    message: str


@dataclass
class TrainerSession:
    """Holds one user's training run."""

    settings: GameSettings = field(default_factory=GameSettings)
    config: TrainerConfig = field(default_factory=TrainerConfig)
    stats: SessionStats = field(default_factory=SessionStats)
    rng: random.Random | None = None
    shuffle: ShuffleFn | None = None
    puzzle: PokerPuzzle | None = None
    answered: bool = False

    def update_settings(self, settings: GameSettings) -> PokerPuzzle:
        """Apply new settings and deal a fresh puzzle for them."""
        settings.validate()
        self.settings = settings
        logger.debug("Settings updated: %s", settings)
        return self.next_puzzle()

    def next_puzzle(self) -> PokerPuzzle:
        """Replace the current puzzle with a new deal."""
        s = self.settings
        self.puzzle = create_puzzle(
            s.game_type,
            s.player_count,
            s.user_position,
            s.big_blinds,
            config=self.config,
            rng=self.rng,
            shuffle=self.shuffle,
        )
        self.answered = False
        return self.puzzle

    def submit_answer(self, action: Action | str) -> AnswerFeedback:
        """Grade an answer against the current puzzle and update stats.

        Raises:
            InvalidArgumentError: If there is no open puzzle, it was already
                answered, or the action is unknown or not offered.
        """
        if self.puzzle is None:
            raise InvalidArgumentError("No puzzle has been dealt yet")
        if self.answered:
            raise InvalidArgumentError("This puzzle has already been answered")
        try:
            selected = Action(str(action).strip().upper())
        except ValueError:
            raise InvalidArgumentError(f"Unknown action: '{action}'")
        if selected not in self.puzzle.available_actions:
            offered = ", ".join(a.value for a in self.puzzle.available_actions)
            raise InvalidArgumentError(f"{selected} is not available here (choose {offered})")

        is_correct = selected == self.puzzle.correct_action
        self.stats.record(is_correct)
        self.answered = True

        prefix = "Correct! " if is_correct else "Not the best play. "
        logger.debug(
            "Answer %s vs %s (%s), accuracy %d%%",
            selected, self.puzzle.correct_action,
            "correct" if is_correct else "incorrect", self.stats.accuracy,
        )
        return AnswerFeedback(
            selected=selected,
            correct_action=self.puzzle.correct_action,
            is_correct=is_correct,
            message=prefix + self.puzzle.action_description,
        )
