"""
Game Rules
==========

Handles turn order, game phases and input weight validation.
"""

from __future__ import annotations

import math
from enum import Enum
from numbers import Real
from typing import List, Sequence


# Token weights are unsigned 32-bit values
MAX_WEIGHT = 2 ** 32 - 1


class PlayerSide(Enum):
    """The two players. A always moves first."""
    A = "A"
    B = "B"

    @property
    def other(self) -> "PlayerSide":
        return PlayerSide.B if self is PlayerSide.A else PlayerSide.A


class GamePhase(Enum):
    """Game state: turns remain, or every input weight has been used."""
    RUNNING = "running"
    FINISHED = "finished"


class InvalidWeightError(ValueError):
    """Raised when an input token weight is negative, non-finite or not a number."""

    def __init__(self, weight: object, turn: int, reason: str):
        self.weight = weight
        self.turn = turn
        self.reason = reason
        super().__init__(f"Invalid weight {weight!r} at turn {turn}: {reason}")


class GameFinishedError(RuntimeError):
    """Raised when a turn is requested after all input weights are used."""


def validate_weight(weight: object, turn: int = 0) -> float:
    """
    Check a single input weight.

    Args:
        weight: Candidate token weight.
        turn: Turn index the weight belongs to (for the error message).

    Returns:
        The weight as a float.

    Raises:
        InvalidWeightError: If the weight is not a finite non-negative number
            no greater than MAX_WEIGHT.
    """
    # bool is an int subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeightError(weight, turn, "not a real number")

    try:
        value = float(weight)
    except OverflowError:
        raise InvalidWeightError(weight, turn, "not finite")
    if math.isnan(value) or math.isinf(value):
        raise InvalidWeightError(weight, turn, "not finite")
    if value < 0:
        raise InvalidWeightError(weight, turn, "negative")
    if value > MAX_WEIGHT:
        raise InvalidWeightError(weight, turn, "too large")
    return value


def validate_weights(weights: Sequence[object]) -> List[float]:
    """Validate every weight up front, before any turn is played."""
    return [validate_weight(w, turn) for turn, w in enumerate(weights)]


class TurnOrder:
    """
    Explicit alternation state.

    Player A acts on turns 0, 2, 4, ...; Player B on turns 1, 3, 5, ...
    """

    FIRST = PlayerSide.A

    def __init__(self):
        self._turn_index: int = 0
        self._current: PlayerSide = self.FIRST

    @property
    def turn_index(self) -> int:
        """Index of the turn about to be played."""
        return self._turn_index

    @property
    def current(self) -> PlayerSide:
        """Player who acts on the current turn."""
        return self._current

    @staticmethod
    def side_for(turn_index: int) -> PlayerSide:
        """Player who acts on a given turn index."""
        if turn_index < 0:
            raise ValueError(f"Turn index must be non-negative, got {turn_index}")
        return PlayerSide.A if turn_index % 2 == 0 else PlayerSide.B

    def advance(self) -> PlayerSide:
        """
        Move to the next turn.

        Returns:
            The player who acts on the new turn.
        """
        self._turn_index += 1
        self._current = self._current.other
        return self._current

    def reset(self) -> None:
        """Reset to turn 0 with Player A to move."""
        self._turn_index = 0
        self._current = self.FIRST
