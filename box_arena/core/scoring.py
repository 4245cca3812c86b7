"""
Scoring System
==============

Accumulates turn scores into the two players' totals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from box_arena.core.boxes import BoxKind
from box_arena.core.engine import TurnResult
from box_arena.core.rules import PlayerSide


@dataclass
class Player:
    """A player and their running score."""
    side: PlayerSide
    total_score: float = 0.0

    def add(self, points: float) -> None:
        self.total_score += points


@dataclass(frozen=True)
class ScoreEvent:
    """Record of a scoring event."""
    turn: int
    side: PlayerSide
    box_index: int
    kind: BoxKind
    weight: float
    points: float

    def __repr__(self) -> str:
        return (
            f"ScoreEvent(turn={self.turn}, player={self.side.value}, "
            f"box={self.box_index}:{self.kind.color}, points={self.points})"
        )


class ScoreTracker:
    """
    Tracks both players' scores and the event log of a game.
    """

    def __init__(self):
        self._players: Dict[PlayerSide, Player] = {
            side: Player(side) for side in PlayerSide
        }
        self._events: List[ScoreEvent] = []

    @property
    def player_a(self) -> Player:
        return self._players[PlayerSide.A]

    @property
    def player_b(self) -> Player:
        return self._players[PlayerSide.B]

    @property
    def scores(self) -> Tuple[float, float]:
        """(player A total, player B total)."""
        return (self.player_a.total_score, self.player_b.total_score)

    @property
    def events(self) -> List[ScoreEvent]:
        """All scoring events so far, in turn order."""
        return list(self._events)

    def player(self, side: PlayerSide) -> Player:
        return self._players[side]

    def apply(self, turn: int, side: PlayerSide, result: TurnResult) -> ScoreEvent:
        """
        Add a turn's score to the acting player and return the event.

        Args:
            turn: Index of the turn that produced the score.
            side: Player who acted on that turn.
            result: Outcome of the absorption.

        Returns:
            ScoreEvent describing the points awarded.
        """
        self._players[side].add(result.score)
        event = ScoreEvent(
            turn=turn,
            side=side,
            box_index=result.box_index,
            kind=result.kind,
            weight=result.weight,
            points=result.score
        )
        self._events.append(event)
        return event

    def reset(self) -> None:
        """Reset both scores to zero and clear the event log."""
        for player in self._players.values():
            player.total_score = 0.0
        self._events.clear()
