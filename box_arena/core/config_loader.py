"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to the box layout.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from box_arena.core.boxes import BoxKind


# Fixed by the game design: two green boxes followed by two blue boxes.
EXPECTED_LAYOUT: Tuple[Tuple[BoxKind, float], ...] = (
    (BoxKind.MEAN_SQUARE, 0.0),
    (BoxKind.MEAN_SQUARE, 0.1),
    (BoxKind.PAIRING, 0.2),
    (BoxKind.PAIRING, 0.3),
)
EXPECTED_WINDOW_SIZE = 3


@dataclass(frozen=True)
class BoxConfig:
    """Configuration for a single scoring box."""
    index: int
    kind: BoxKind
    initial_weight: float


@dataclass(frozen=True)
class ScoringConfig:
    """Scoring parameters."""
    window_size: int  # Recent weights averaged by mean-square boxes


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during a game.
    """
    boxes: Tuple[BoxConfig, ...]
    scoring: ScoringConfig

    @property
    def num_boxes(self) -> int:
        """Total number of boxes in the arena."""
        return len(self.boxes)

    def get_box(self, index: int) -> BoxConfig:
        """Get box config by index."""
        if 0 <= index < len(self.boxes):
            return self.boxes[index]
        raise ValueError(f"Invalid box index: {index}")


def _parse_kind(kind_data: str) -> BoxKind:
    """Parse a box kind name from YAML."""
    try:
        return BoxKind(str(kind_data))
    except ValueError:
        valid = ", ".join(kind.value for kind in BoxKind)
        raise ValueError(f"Unknown box kind '{kind_data}', expected one of: {valid}")


def _parse_box(box_data: dict) -> BoxConfig:
    """Parse a single box configuration from YAML."""
    return BoxConfig(
        index=int(box_data["index"]),
        kind=_parse_kind(box_data["kind"]),
        initial_weight=float(box_data["initial_weight"])
    )


def _validate_config(config: GameConfig) -> None:
    """Validate the configuration against the fixed game layout."""
    if len(config.boxes) != len(EXPECTED_LAYOUT):
        raise ValueError(
            f"Game requires exactly {len(EXPECTED_LAYOUT)} boxes, "
            f"got {len(config.boxes)}"
        )

    for i, (box, (kind, weight)) in enumerate(zip(config.boxes, EXPECTED_LAYOUT)):
        if box.index != i:
            raise ValueError(f"Box index mismatch: expected {i}, got {box.index}")
        if box.kind is not kind:
            raise ValueError(
                f"Box {i} must be of kind '{kind.value}', got '{box.kind.value}'"
            )
        if box.initial_weight != weight:
            raise ValueError(
                f"Box {i} must start with weight {weight}, got {box.initial_weight}"
            )

    if config.scoring.window_size != EXPECTED_WINDOW_SIZE:
        raise ValueError(
            f"window_size must be {EXPECTED_WINDOW_SIZE}, "
            f"got {config.scoring.window_size}"
        )


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict) or "boxes" not in raw:
        raise ValueError(f"Config file {config_path} has no 'boxes' section")

    boxes_data: List[dict] = raw["boxes"]
    boxes = tuple(_parse_box(b) for b in boxes_data)

    scoring_data = raw.get("scoring", {})
    scoring = ScoringConfig(
        window_size=int(scoring_data.get("window_size", EXPECTED_WINDOW_SIZE))
    )

    config = GameConfig(boxes=boxes, scoring=scoring)

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
