"""
Evaluation Package
==================

Contains the scenario bank and the command-line harness for running games.
"""

from box_arena.evaluation.run_games import evaluate_scenarios, load_scenario_bank

__all__ = ["evaluate_scenarios", "load_scenario_bank"]
