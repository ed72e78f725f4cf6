"""Seat and position assignment for a simulated table."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from poker_trainer.core.errors import InvalidArgumentError
from poker_trainer.utils.card import Card
from poker_trainer.utils.constants import (
    FULL_RING_ORDER,
    MAX_PLAYERS,
    MIN_PLAYERS,
    Position,
)

logger = logging.getLogger("poker_trainer.table")


@dataclass(frozen=True)
class Player:
    """A single seat at the puzzle table.

    Only the user's seat ever carries hole cards.
    """

    id: int
    position: Position
    stack: float
    is_user: bool = False
    cards: tuple[Card, Card] | None = None

    def with_cards(self, cards: tuple[Card, Card] | None) -> Player:
        """Return a copy of this player holding ``cards``."""
        return replace(self, cards=cards)


@dataclass(frozen=True)
class Blinds:
    """Forced bets posted before the deal."""

    small: float
    big: float

    def posted_by(self, position: Position) -> float:
        """Chips a seat has already committed preflop."""
        if position == Position.SB:
            return self.small
        if position == Position.BB:
            return self.big
        return 0.0


def get_positions_for_player_count(count: int) -> list[Position]:
    """Get the seat labels used at a table of ``count`` players.

    Seats are the last ``count`` entries of the full-ring acting order,
    so BTN, SB and BB are always present from three players up and a
    heads-up table is exactly SB and BB.

    Raises:
        InvalidArgumentError: If count is not an integer in [2, 10].
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(f"Player count must be an integer, got {count!r}")
    if count < MIN_PLAYERS or count > MAX_PLAYERS:
        raise InvalidArgumentError(
            f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {count}"
        )
    return list(FULL_RING_ORDER[-count:])


def generate_players(
    count: int,
    user_position: Position,
    stack_bb: float,
    big_blind_amount: float,
) -> list[Player]:
    """Seat ``count`` players with equal stacks and flag the user.

    Args:
        count: Number of players at the table.
        user_position: Seat the user plays from.
        stack_bb: Stack depth in big blinds, applied to every seat.
        big_blind_amount: Chip value of one big blind.

    Returns:
        Players in acting order with ids starting at 1.

    Raises:
        InvalidArgumentError: If the count is invalid or the user position
            has no seat at this table size.
    """
    positions = get_positions_for_player_count(count)
    if user_position not in positions:
        raise InvalidArgumentError(
            f"Position {user_position} is not available at a {count}-handed table "
            f"(seats: {', '.join(positions)})"
        )

    stack = stack_bb * big_blind_amount
    players = [
        Player(
            id=index + 1,
            position=position,
            stack=stack,
            is_user=position == user_position,
        )
        for index, position in enumerate(positions)
    ]
    logger.debug(
        "Seated %d players (%s), user at %s",
        count, " ".join(positions), user_position,
    )
    return players
