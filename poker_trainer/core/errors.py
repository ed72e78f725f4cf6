"""Error taxonomy for puzzle generation.

Errors are never swallowed by the core: generation aborts and the caller
(session, presenter, CLI) decides how to surface the message.
"""

from __future__ import annotations


class TrainerError(Exception):
    """Base class for all poker trainer errors."""


class InvalidArgumentError(TrainerError, ValueError):
    """Raised for inputs the trainer cannot work with.

    Covers player counts outside [2, 10], a user position that has no
    seat at the requested table size, and malformed settings or config.
    """


class InternalInconsistencyError(TrainerError, RuntimeError):
    """Raised when a generated puzzle would have an unselectable answer.

    The assembler substitutes CHECK for CALL (and vice versa) when the
    betting context requires it. If neither action fits, this error is
    raised rather than returning a misleading puzzle.
    """


class DeckExhaustedError(TrainerError, IndexError):
    """Raised when more cards are dealt than remain in the deck."""
