"""
Core Game
=========

Main game orchestrator combining boxes, turn order and scoring.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from box_arena.core.box_collection import BoxCollection
from box_arena.core.config_loader import GameConfig, get_config
from box_arena.core.engine import TurnEngine
from box_arena.core.rules import (
    GameFinishedError,
    GamePhase,
    PlayerSide,
    TurnOrder,
    validate_weights,
)
from box_arena.core.scoring import ScoreEvent, ScoreTracker


@dataclass
class StepResult:
    """Result of a single turn."""
    event: ScoreEvent
    score_a: float
    score_b: float
    finished: bool


@dataclass
class GameResult:
    """Final outcome of a game."""
    score_a: float
    score_b: float
    events: List[ScoreEvent]

    @property
    def scores(self) -> Tuple[float, float]:
        return (self.score_a, self.score_b)

    @property
    def winner(self) -> str:
        """'A', 'B', or 'tie'. The player with the highest score wins."""
        if self.score_a > self.score_b:
            return PlayerSide.A.value
        if self.score_b > self.score_a:
            return PlayerSide.B.value
        return "tie"


class CoreGame:
    """
    Main game simulation class.

    Orchestrates:
    - Box collection (lightest-box selection)
    - Turn engine (absorption)
    - Turn order (A on even turns, B on odd)
    - Scoring

    One step = one input weight used by one player. The game finishes when
    every input weight has been used exactly once, in order.
    """

    def __init__(
        self,
        inputs: Sequence[float],
        config: Optional[GameConfig] = None,
        debug: bool = False
    ):
        """
        Initialize game.

        Args:
            inputs: Ordered token weights, one per turn.
            config: Game configuration. Uses default if None.
            debug: If True, print each turn.

        Raises:
            InvalidWeightError: If any input weight is negative, non-finite
                or not a number.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._debug = debug
        self._inputs: Tuple[float, ...] = tuple(validate_weights(inputs))

        self._boxes = BoxCollection(config)
        self._engine = TurnEngine()
        self._order = TurnOrder()
        self._scorer = ScoreTracker()
        self._phase = GamePhase.RUNNING if self._inputs else GamePhase.FINISHED

        if self._debug:
            print(f"[DEBUG] CoreGame initialized with {len(self._inputs)} inputs")
            print(f"[DEBUG]   Boxes: {self._boxes}")

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def boxes(self) -> BoxCollection:
        return self._boxes

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_over(self) -> bool:
        """True once every input weight has been used."""
        return self._phase is GamePhase.FINISHED

    @property
    def turn_index(self) -> int:
        """Index of the next turn to be played."""
        return self._order.turn_index

    @property
    def current_player(self) -> PlayerSide:
        return self._order.current

    @property
    def scores(self) -> Tuple[float, float]:
        return self._scorer.scores

    @property
    def events(self) -> List[ScoreEvent]:
        return self._scorer.events

    def step(self) -> StepResult:
        """
        Play the next turn.

        Returns:
            StepResult with the scoring event and updated totals.

        Raises:
            GameFinishedError: If all input weights have been used.
        """
        if self.is_over:
            raise GameFinishedError(
                f"Game finished after {len(self._inputs)} turns"
            )

        turn = self._order.turn_index
        side = self._order.current
        weight = self._inputs[turn]

        result = self._engine.take_turn(weight, self._boxes)
        event = self._scorer.apply(turn, side, result)

        if self._debug:
            print(f"[DEBUG] Turn {turn}: player {side.value} -> "
                  f"box {result.box_index} ({result.kind.color}), "
                  f"weight={weight:g}, score={result.score:g}")

        self._order.advance()
        if self._order.turn_index >= len(self._inputs):
            self._phase = GamePhase.FINISHED

        score_a, score_b = self._scorer.scores
        return StepResult(
            event=event,
            score_a=score_a,
            score_b=score_b,
            finished=self.is_over
        )

    def run(self) -> GameResult:
        """Play all remaining turns and return the final result."""
        while not self.is_over:
            self.step()
        return self.result()

    def result(self) -> GameResult:
        score_a, score_b = self._scorer.scores
        return GameResult(score_a=score_a, score_b=score_b, events=self._scorer.events)

    def reset(self) -> None:
        """Reset boxes, scores and turn order to their initial state."""
        self._boxes = BoxCollection(self._config)
        self._order.reset()
        self._scorer.reset()
        self._phase = GamePhase.RUNNING if self._inputs else GamePhase.FINISHED

    def get_info(self) -> Dict[str, Any]:
        """Summary of the current game state."""
        score_a, score_b = self._scorer.scores
        return {
            "phase": self._phase.value,
            "turn_index": self._order.turn_index,
            "turns_total": len(self._inputs),
            "current_player": self._order.current.value,
            "score_a": score_a,
            "score_b": score_b,
            "box_weights": self._boxes.weights(),
        }


def play(
    input_weights: Sequence[float],
    config: Optional[GameConfig] = None
) -> Tuple[float, float]:
    """
    Play one full game.

    Args:
        input_weights: Ordered token weights, one per turn.
        config: Game configuration. Uses default if None.

    Returns:
        (player A score, player B score).
    """
    return CoreGame(input_weights, config=config).run().scores
