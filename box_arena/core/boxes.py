"""
Scoring Boxes
=============

Boxes absorb token weights, add them to their own total and output a score.

Two kinds exist:
- Mean-square (green): square of the mean of the 3 most recently absorbed
  weights, or of all absorbed weights while fewer than 3 have arrived.
- Pairing (blue): Cantor's pairing function of the smallest and largest
  weight absorbed so far, with pairing(0, 1) = 2.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, Iterable, List, Optional, Tuple


class BoxKind(Enum):
    """Scoring behaviour of a box. Fixed for the box's lifetime."""
    MEAN_SQUARE = "mean_square"
    PAIRING = "pairing"

    @property
    def color(self) -> str:
        """Colour name used in the game rules."""
        return "green" if self is BoxKind.MEAN_SQUARE else "blue"


def cantor_pairing(a: float, b: float) -> float:
    """Cantor's pairing function: (a + b)(a + b + 1) / 2 + b."""
    total = a + b
    return (total * (total + 1)) / 2 + b


def mean_square(values: Iterable[float]) -> float:
    """Square of the arithmetic mean of ``values``."""
    values = list(values)
    if not values:
        raise ValueError("mean_square() requires at least one value")
    mean = sum(values) / len(values)
    return mean * mean


class ScoringBox:
    """
    A single box with a running weight total and a small absorption history.

    Mean-square boxes keep a sliding window of recent weights; pairing boxes
    keep only the smallest and largest weights seen.
    """

    def __init__(
        self,
        kind: BoxKind,
        initial_weight: float = 0.0,
        window_size: int = 3
    ):
        """
        Initialize box.

        Args:
            kind: Scoring behaviour of this box.
            initial_weight: Starting weight before any absorption.
            window_size: Recent weights averaged by mean-square boxes.
        """
        self._kind = kind
        self._initial_weight = float(initial_weight)
        self._weight = float(initial_weight)
        self._absorbed_total = 0.0
        self._absorbed_count = 0

        self._recent: Deque[float] = deque(maxlen=window_size)
        self._smallest: Optional[float] = None
        self._largest: Optional[float] = None

    @property
    def kind(self) -> BoxKind:
        return self._kind

    @property
    def initial_weight(self) -> float:
        return self._initial_weight

    @property
    def current_weight(self) -> float:
        """Initial weight plus every weight absorbed so far."""
        return self._weight

    @property
    def absorbed_total(self) -> float:
        return self._absorbed_total

    @property
    def absorbed_count(self) -> int:
        return self._absorbed_count

    @property
    def recent_weights(self) -> Tuple[float, ...]:
        """Sliding window of recent weights (mean-square boxes only)."""
        return tuple(self._recent)

    @property
    def extremes(self) -> Optional[Tuple[float, float]]:
        """(smallest, largest) absorbed weight, or None before the first absorption."""
        if self._smallest is None or self._largest is None:
            return None
        return (self._smallest, self._largest)

    def absorb(self, weight: float) -> float:
        """
        Absorb a token weight and return the resulting score.

        Args:
            weight: Token weight to absorb.

        Returns:
            Score computed with this box's scoring kind.
        """
        weight = float(weight)
        # Score is computed before any state changes
        if self._kind is BoxKind.MEAN_SQUARE:
            score = mean_square(self._next_window(weight))
            self._recent.append(weight)
        else:
            smallest, largest = self._next_extremes(weight)
            score = cantor_pairing(smallest, largest)
            self._smallest, self._largest = smallest, largest

        self._weight += weight
        self._absorbed_total += weight
        self._absorbed_count += 1
        return score

    def _next_window(self, weight: float) -> List[float]:
        """Window contents after absorbing ``weight``; oldest entries drop out."""
        window = list(self._recent) + [weight]
        return window[-self._recent.maxlen:]

    def _next_extremes(self, weight: float) -> Tuple[float, float]:
        if self._smallest is None or self._largest is None:
            return (weight, weight)
        if weight < self._smallest:
            return (weight, self._largest)
        if weight > self._largest:
            return (self._smallest, weight)
        return (self._smallest, self._largest)

    def __repr__(self) -> str:
        return f"ScoringBox({self._kind.color}, weight={self._weight})"
