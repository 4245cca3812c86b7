"""
Turn Engine
===========

Plays a single turn: pick the lightest box and let it absorb the weight.
"""

from __future__ import annotations

from dataclasses import dataclass

from box_arena.core.box_collection import BoxCollection
from box_arena.core.boxes import BoxKind


@dataclass(frozen=True)
class TurnResult:
    """Outcome of one absorption."""
    box_index: int
    kind: BoxKind
    weight: float
    score: float


class TurnEngine:
    """
    Delegates each turn to the currently lightest box.

    Holds no state of its own; boxes and players carry all game state.
    """

    def take_turn(self, weight: float, collection: BoxCollection) -> TurnResult:
        """
        Let the lightest box absorb ``weight``.

        Args:
            weight: Token weight for this turn.
            collection: The game's boxes.

        Returns:
            TurnResult with the chosen box and the score it produced.
        """
        index = collection.lightest_index()
        box = collection[index]
        score = box.absorb(weight)
        return TurnResult(
            box_index=index,
            kind=collection.kind_of(index),
            weight=float(weight),
            score=score
        )
