"""Trainer configuration.

Puzzle generation knobs that the settings screen does not expose: blind
size, board size and how the pot is sized. Loaded from JSON, defaults
apply when no file exists.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from poker_trainer.core.errors import InvalidArgumentError
from poker_trainer.utils.constants import Difficulty

logger = logging.getLogger("poker_trainer.config")

DEFAULT_CONFIG_PATH = Path.home() / ".poker_trainer" / "config.json"

POT_MODES = ("fixed", "random")


@dataclass(frozen=True)
class TrainerConfig:
    """Configuration for puzzle generation."""

    big_blind_amount: float = 100.0
    community_card_count: int = 5
    pot_mode: str = "fixed"  # "fixed" or "random"
    fixed_pot_bb: float = 3.0
    random_pot_range_bb: tuple[int, int] = (5, 20)
    difficulty: Difficulty = Difficulty.MEDIUM

    def __post_init__(self) -> None:
        _require_number("big_blind_amount", self.big_blind_amount)
        _require_number("fixed_pot_bb", self.fixed_pot_bb)
        if isinstance(self.community_card_count, bool) or not isinstance(
            self.community_card_count, int
        ):
            raise InvalidArgumentError(
                f"community_card_count must be an integer, got {self.community_card_count!r}"
            )
        if self.big_blind_amount <= 0:
            raise InvalidArgumentError(
                f"big_blind_amount must be positive, got {self.big_blind_amount}"
            )
        if not 3 <= self.community_card_count <= 5:
            raise InvalidArgumentError(
                f"community_card_count must be 3-5, got {self.community_card_count}"
            )
        if self.pot_mode not in POT_MODES:
            raise InvalidArgumentError(
                f"pot_mode must be one of {POT_MODES}, got '{self.pot_mode}'"
            )
        if self.fixed_pot_bb <= 0:
            raise InvalidArgumentError(f"fixed_pot_bb must be positive, got {self.fixed_pot_bb}")
        lo, hi = self.random_pot_range_bb
        if not all(isinstance(b, int) and not isinstance(b, bool) for b in (lo, hi)):
            raise InvalidArgumentError(
                f"random_pot_range_bb bounds must be integers, got {self.random_pot_range_bb!r}"
            )
        if lo <= 0 or hi < lo:
            raise InvalidArgumentError(
                f"random_pot_range_bb must be a positive (low, high) pair, got {self.random_pot_range_bb}"
            )

    @property
    def small_blind_amount(self) -> float:
        return self.big_blind_amount / 2


def _require_number(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")


def load_trainer_config(config_path: Path | None = None) -> TrainerConfig:
    """Load trainer configuration from a JSON file.

    Default path: ~/.poker_trainer/config.json

    Returns the defaults when the file does not exist or cannot be read.
    Values that are present but invalid raise InvalidArgumentError.

    Expected JSON format (every key optional):
        {
            "big_blind_amount": 100,
            "community_card_count": 5,
            "pot_mode": "random",
            "fixed_pot_bb": 3,
            "random_pot_range_bb": [5, 20],
            "difficulty": "MEDIUM"
        }
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        logger.debug("No trainer config at %s, using defaults", path)
        return TrainerConfig()

    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read trainer config at %s: %s", path, e)
        return TrainerConfig()

    if not isinstance(data, dict):
        raise InvalidArgumentError(f"Trainer config at {path} must be a JSON object")

    known = set(TrainerConfig.__dataclass_fields__)
    for key in data:
        if key not in known:
            logger.warning("Ignoring unknown trainer config key: %s", key)

    kwargs = {k: v for k, v in data.items() if k in known}
    if "random_pot_range_bb" in kwargs:
        bounds = kwargs["random_pot_range_bb"]
        if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
            raise InvalidArgumentError(
                f"random_pot_range_bb must be a [low, high] pair, got {bounds!r}"
            )
        try:
            kwargs["random_pot_range_bb"] = (int(bounds[0]), int(bounds[1]))
        except (TypeError, ValueError):
            raise InvalidArgumentError(
                f"random_pot_range_bb bounds must be integers, got {bounds!r}"
            )
    if "difficulty" in kwargs:
        try:
            kwargs["difficulty"] = Difficulty(str(kwargs["difficulty"]).upper())
        except ValueError:
            raise InvalidArgumentError(f"Unknown difficulty: {kwargs['difficulty']!r}")

    config = TrainerConfig(**kwargs)
    logger.info("Loaded trainer config from %s", path)
    return config
