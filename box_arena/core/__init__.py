"""
Box Arena Core - The game simulation.

Main exports:
- play: Play one full game and return both players' scores
- CoreGame: Turn-by-turn game runner
- BoxCollection: The fixed four-box arrangement
- ScoringBox, BoxKind: Boxes and their scoring behaviour
- GameConfig: Configuration loaded from game_config.yaml
"""

from box_arena.core.config_loader import GameConfig, load_config, get_config
from box_arena.core.boxes import BoxKind, ScoringBox, cantor_pairing, mean_square
from box_arena.core.box_collection import BoxCollection
from box_arena.core.engine import TurnEngine, TurnResult
from box_arena.core.rules import (
    GameFinishedError,
    GamePhase,
    InvalidWeightError,
    PlayerSide,
    TurnOrder,
)
from box_arena.core.scoring import Player, ScoreEvent, ScoreTracker
from box_arena.core.game import CoreGame, GameResult, StepResult, play

__all__ = [
    "GameConfig",
    "load_config",
    "get_config",
    "BoxKind",
    "ScoringBox",
    "cantor_pairing",
    "mean_square",
    "BoxCollection",
    "TurnEngine",
    "TurnResult",
    "GameFinishedError",
    "GamePhase",
    "InvalidWeightError",
    "PlayerSide",
    "TurnOrder",
    "Player",
    "ScoreEvent",
    "ScoreTracker",
    "CoreGame",
    "GameResult",
    "StepResult",
    "play",
]
