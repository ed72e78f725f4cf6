"""Puzzle assembly: seat the table, deal, size the pot, pick the answer.

``create_puzzle`` is the single entry point the session and front ends
use. Every call builds its own deck and seat list, so it can be invoked
repeatedly (or from several threads) without shared state.
"""

from __future__ import annotations

import logging
import random
import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar

from poker_trainer.core.config import TrainerConfig
from poker_trainer.core.errors import InternalInconsistencyError, InvalidArgumentError
from poker_trainer.core.table import Blinds, Player, generate_players
from poker_trainer.strategy.hand_classifier import hand_to_notation
from poker_trainer.strategy.headsup_ranges import classify_headsup_sb
from poker_trainer.utils.card import Card, Deck, generate_deck, shuffle_deck
from poker_trainer.utils.constants import Action, Difficulty, GameType, Position

logger = logging.getLogger("poker_trainer.puzzle")

_E = TypeVar("_E", bound=StrEnum)

ShuffleFn = Callable[[Sequence[Card]], Sequence[Card]]

_FALLBACK_DESCRIPTIONS: dict[Action, str] = {
    Action.FOLD: "Fold {hand} from {position}: it is too weak to continue at {stack}bb.",
    Action.CHECK: "Check {hand} in the big blind and see a flop for free.",
    Action.CALL: "Call with {hand} from {position}: it plays well enough at {stack}bb to see a flop.",
    Action.RAISE: "Raise 3x with {hand} from {position}: take the initiative with a strong hand.",
}


@dataclass(frozen=True)
class PokerPuzzle:
    """A single quiz spot. Never mutated; a new deal makes a new puzzle."""

    id: str
    players: tuple[Player, ...]
    blinds: Blinds
    community_cards: tuple[Card, ...]
    pot: float
    correct_action: Action
    action_description: str
    game_type: GameType
    difficulty: Difficulty

    @property
    def user(self) -> Player:
        return next(p for p in self.players if p.is_user)

    @property
    def to_call(self) -> float:
        """Chips the user still owes to continue preflop."""
        return self.blinds.big - self.blinds.posted_by(self.user.position)

    @property
    def available_actions(self) -> list[Action]:
        return available_actions(self.to_call, self.user.position == Position.BB)

    @property
    def pot_bb(self) -> float:
        return self.pot / self.blinds.big

    @property
    def stack_bb(self) -> float:
        return self.user.stack / self.blinds.big


def available_actions(to_call: float, is_big_blind: bool) -> list[Action]:
    """Actions the trainer offers for a betting context.

    CHECK only when the user is the big blind with nothing to call, CALL
    only when there is something to call. FOLD and RAISE are always on.
    """
    actions = [Action.FOLD]
    if to_call <= 0 and is_big_blind:
        actions.append(Action.CHECK)
    if to_call > 0:
        actions.append(Action.CALL)
    actions.append(Action.RAISE)
    return actions


def ensure_offerable(action: Action, to_call: float, is_big_blind: bool) -> Action:
    """Swap CHECK and CALL when the chosen one cannot be selected.

    Raises:
        InternalInconsistencyError: If neither the action nor its
            substitute is offered.
    """
    offered = available_actions(to_call, is_big_blind)
    if action in offered:
        return action

    substitute = {Action.CHECK: Action.CALL, Action.CALL: Action.CHECK}.get(action)
    if substitute is None or substitute not in offered:
        raise InternalInconsistencyError(
            f"{action} is not offerable (to_call={to_call}, offered={', '.join(offered)})"
        )
    logger.warning(
        "Substituting %s for %s (to_call=%s)", substitute, action, to_call,
    )
    return substitute


def _coerce(enum_cls: type[_E], value: object, what: str) -> _E:
    try:
        return enum_cls(str(value).upper())
    except ValueError:
        raise InvalidArgumentError(f"Unknown {what}: {value!r}")


def _pot_size(config: TrainerConfig, rng: random.Random) -> float:
    if config.pot_mode == "random":
        lo, hi = config.random_pot_range_bb
        return rng.randint(lo, hi) * config.big_blind_amount
    return config.fixed_pot_bb * config.big_blind_amount


def _format_stack(stack_bb: float) -> str:
    return f"{stack_bb:g}"


def create_puzzle(
    game_type: GameType | str,
    player_count: int,
    user_position: Position | str,
    stack_bb: float,
    *,
    config: TrainerConfig | None = None,
    rng: random.Random | None = None,
    shuffle: ShuffleFn | None = None,
) -> PokerPuzzle:
    """Deal a new puzzle for the given table settings.

    Heads-up small blind spots at 10/20/30/50/100bb are graded against
    the range tables. Any other spot gets a random answer with a
    templated explanation.

    Args:
        game_type: CASH or MTT.
        player_count: Seats at the table (2-10).
        user_position: Seat the user plays from.
        stack_bb: Stack depth in big blinds for every seat.
        config: Generation settings; defaults to TrainerConfig().
        rng: Random source for the shuffle, pot and fallback action.
        shuffle: Override for the deck shuffle, called with the fresh
            ordered deck. Tests pass an identity or stacked shuffle here.

    Returns:
        The assembled puzzle.

    Raises:
        InvalidArgumentError: For invalid settings. No partial puzzle is
            produced.
        InternalInconsistencyError: If the answer cannot be made
            selectable.
    """
    config = config or TrainerConfig()
    source = rng if rng is not None else random
    game_type = _coerce(GameType, game_type, "game type")
    user_position = _coerce(Position, user_position, "position")
    if stack_bb <= 0:
        raise InvalidArgumentError(f"Stack depth must be positive, got {stack_bb}")

    seats = generate_players(player_count, user_position, stack_bb, config.big_blind_amount)
    blinds = Blinds(small=config.small_blind_amount, big=config.big_blind_amount)

    ordered = shuffle(generate_deck()) if shuffle is not None else shuffle_deck(generate_deck(), rng)
    deck = Deck(ordered)

    # Two cards per seat in seat order; only the user's are kept
    players: list[Player] = []
    user_cards: tuple[Card, Card] | None = None
    for seat in seats:
        first, second = deck.deal(2)
        if seat.is_user:
            user_cards = (first, second)
            seat = seat.with_cards(user_cards)
        players.append(seat)
    assert user_cards is not None

    community_cards = tuple(deck.deal(config.community_card_count))
    pot = _pot_size(config, source)

    to_call = blinds.big - blinds.posted_by(user_position)
    is_big_blind = user_position == Position.BB
    notation = hand_to_notation(user_cards)

    decision = None
    if player_count == 2 and user_position == Position.SB:
        decision = classify_headsup_sb(user_cards, stack_bb)

    if decision is not None:
        action = ensure_offerable(decision.action, to_call, is_big_blind)
        description = decision.description
    else:
        action = ensure_offerable(source.choice(list(Action)), to_call, is_big_blind)
        description = _FALLBACK_DESCRIPTIONS[action].format(
            hand=notation, position=user_position, stack=_format_stack(stack_bb),
        )

    puzzle = PokerPuzzle(
        id=uuid.uuid4().hex,
        players=tuple(players),
        blinds=blinds,
        community_cards=community_cards,
        pot=pot,
        correct_action=action,
        action_description=description,
        game_type=game_type,
        difficulty=config.difficulty,
    )
    logger.info(
        "Puzzle %s: %d-handed %s %sbb, %s -> %s (source=%s)",
        puzzle.id[:8],
        player_count,
        user_position,
        _format_stack(stack_bb),
        notation,
        action,
        "range" if decision is not None else "random",
    )
    return puzzle
