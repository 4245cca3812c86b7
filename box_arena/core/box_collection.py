"""
Box Collection
==============

The fixed arrangement of four scoring boxes used in every game.
"""

from __future__ import annotations

from numbers import Integral
from typing import Iterator, List, Optional, Tuple, Union

from box_arena.core.boxes import BoxKind, ScoringBox
from box_arena.core.config_loader import GameConfig, get_config


class BoxCollection:
    """
    Ordered set of boxes: two green boxes at indices 0 and 1, two blue boxes
    at indices 2 and 3.

    Composition and the index-to-kind mapping never change during a game.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize collection from game config.

        Args:
            config: GameConfig instance. If None, loads from default location.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._kinds: Tuple[BoxKind, ...] = tuple(box.kind for box in config.boxes)
        self._boxes: Tuple[ScoringBox, ...] = tuple(
            ScoringBox(
                kind=box.kind,
                initial_weight=box.initial_weight,
                window_size=config.scoring.window_size
            )
            for box in config.boxes
        )

    @classmethod
    def from_config(cls, config: GameConfig) -> "BoxCollection":
        return cls(config)

    def __len__(self) -> int:
        return len(self._boxes)

    def __getitem__(self, index: int) -> ScoringBox:
        return self._boxes[index]

    def __iter__(self) -> Iterator[ScoringBox]:
        return iter(self._boxes)

    def weights(self) -> List[float]:
        """Current weight of every box, in arrangement order."""
        return [box.current_weight for box in self._boxes]

    def lightest_index(self) -> int:
        """
        Index of the box with the smallest current weight.

        Ties go to the lowest index: only a strictly smaller weight
        replaces the current candidate.
        """
        best = 0
        best_weight = self._boxes[0].current_weight
        for i in range(1, len(self._boxes)):
            weight = self._boxes[i].current_weight
            if weight < best_weight:
                best = i
                best_weight = weight
        return best

    def lightest(self) -> ScoringBox:
        """The box with the smallest current weight (leftmost on ties)."""
        return self._boxes[self.lightest_index()]

    def index_of(self, box: ScoringBox) -> int:
        """Position of ``box`` in the arrangement (identity, not equality)."""
        for i, candidate in enumerate(self._boxes):
            if candidate is box:
                return i
        raise ValueError(f"{box!r} is not part of this collection")

    def kind_of(self, box: Union[ScoringBox, int]) -> BoxKind:
        """
        Scoring kind for a box, from the fixed index mapping.

        Args:
            box: A box from this collection, or its index.

        Returns:
            MEAN_SQUARE for indices 0 and 1, PAIRING for 2 and 3.
        """
        if isinstance(box, Integral) and not isinstance(box, bool):
            index = int(box)
        else:
            index = self.index_of(box)
        if not 0 <= index < len(self._kinds):
            raise IndexError(f"Invalid box index: {index}")
        return self._kinds[index]

    def __repr__(self) -> str:
        weights = ", ".join(f"{w:g}" for w in self.weights())
        return f"BoxCollection([{weights}])"
