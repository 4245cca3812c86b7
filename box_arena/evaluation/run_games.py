"""
Game Harness
============

Runs games from the command line, either for a single list of input weights
or for every scenario in the scenario bank.

Usage:
    python -m box_arena.evaluation.run_games 1 1 2 3
    python -m box_arena.evaluation.run_games --scenarios scenario_bank.json
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import numpy as np

from box_arena.core.config_loader import GameConfig, load_config
from box_arena.core.game import CoreGame
from box_arena.core.rules import InvalidWeightError


@dataclass
class Scenario:
    """A named input list with optional expected final scores."""
    name: str
    inputs: List[float]
    expected: Optional[Tuple[float, float]] = None


@dataclass
class EvalResult:
    """Result for a single game."""
    name: str
    inputs: List[float]
    score_a: float
    score_b: float
    winner: str
    expected: Optional[Tuple[float, float]]
    elapsed_time: float

    @property
    def passed(self) -> bool:
        """True if there is no expectation or the scores match it exactly."""
        if self.expected is None:
            return True
        return (self.score_a, self.score_b) == tuple(self.expected)


@dataclass
class EvalSummary:
    """Summary across all games."""
    mean_total: float
    std_total: float
    min_total: float
    max_total: float
    median_total: float
    passed: int
    total_time: float
    results: List[EvalResult]


def format_scores(score_a: float, score_b: float) -> str:
    return f"Scores: player A {score_a:g}, player B {score_b:g}"


def load_scenario_bank(path: Optional[str] = None) -> List[Scenario]:
    """
    Load the scenario bank.

    Args:
        path: Path to scenario_bank.json. Uses default if None.

    Returns:
        List of scenarios.
    """
    if path is None:
        path = os.path.join(os.path.dirname(__file__), "scenario_bank.json")

    with open(path, "r") as f:
        data = json.load(f)

    scenarios = []
    for i, entry in enumerate(data["scenarios"]):
        expected = entry.get("expected")
        if expected is not None:
            if not isinstance(expected, list) or len(expected) != 2:
                raise ValueError(
                    f"Scenario {entry.get('name', i)!r}: expected must have 2 values, "
                    f"got {expected}"
                )
            expected = (float(expected[0]), float(expected[1]))
        scenarios.append(Scenario(
            name=str(entry.get("name", f"scenario_{i}")),
            inputs=list(entry["inputs"]),
            expected=expected
        ))
    return scenarios


def evaluate_single_scenario(
    scenario: Scenario,
    config: Optional[GameConfig] = None,
    verbose: bool = False,
    debug: bool = False
) -> EvalResult:
    """
    Play one scenario.

    Args:
        scenario: Inputs and optional expected scores.
        config: Game configuration. Uses default if None.
        verbose: If True, print the final scores.
        debug: If True, print every turn.

    Returns:
        EvalResult for this scenario.
    """
    start_time = time.time()
    game = CoreGame(scenario.inputs, config=config, debug=debug)
    outcome = game.run()
    elapsed = time.time() - start_time

    result = EvalResult(
        name=scenario.name,
        inputs=list(scenario.inputs),
        score_a=outcome.score_a,
        score_b=outcome.score_b,
        winner=outcome.winner,
        expected=scenario.expected,
        elapsed_time=elapsed
    )

    if verbose:
        status = "" if result.expected is None else (" [ok]" if result.passed else " [FAIL]")
        print(f"  {scenario.name}: {format_scores(result.score_a, result.score_b)}{status}")

    return result


def evaluate_scenarios(
    scenarios: Optional[Sequence[Scenario]] = None,
    config: Optional[GameConfig] = None,
    verbose: bool = True,
    debug: bool = False
) -> EvalSummary:
    """
    Play every scenario and aggregate the results.

    Args:
        scenarios: Scenarios to play. Uses scenario_bank.json if None.
        config: Game configuration. Uses default if None.
        verbose: If True, print progress and a summary.
        debug: If True, print every turn.

    Returns:
        EvalSummary with aggregate statistics of the combined scores.
    """
    if scenarios is None:
        scenarios = load_scenario_bank()

    if verbose:
        print(f"Playing {len(scenarios)} scenarios...")

    results: List[EvalResult] = []
    total_start = time.time()

    for scenario in scenarios:
        results.append(evaluate_single_scenario(
            scenario,
            config=config,
            verbose=verbose,
            debug=debug
        ))

    total_time = time.time() - total_start

    totals = [r.score_a + r.score_b for r in results] or [0.0]
    passed = sum(1 for r in results if r.passed)

    summary = EvalSummary(
        mean_total=float(np.mean(totals)),
        std_total=float(np.std(totals)),
        min_total=float(np.min(totals)),
        max_total=float(np.max(totals)),
        median_total=float(np.median(totals)),
        passed=passed,
        total_time=total_time,
        results=results
    )

    if verbose:
        print()
        print("=" * 50)
        print("GAME SUMMARY")
        print("=" * 50)
        print(f"Scenarios played: {len(results)}")
        print(f"Passed:           {passed}/{len(results)}")
        print(f"Mean total:       {summary.mean_total:.2f}")
        print(f"Std deviation:    {summary.std_total:.2f}")
        print(f"Min total:        {summary.min_total:g}")
        print(f"Max total:        {summary.max_total:g}")
        print(f"Median total:     {summary.median_total:.2f}")
        print(f"Total time:       {total_time:.4f}s")
        print("=" * 50)

    return summary


def save_results(summary: EvalSummary, output_path: str) -> None:
    """Save game results to JSON."""
    data = {
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        "mean_total": summary.mean_total,
        "std_total": summary.std_total,
        "min_total": summary.min_total,
        "max_total": summary.max_total,
        "median_total": summary.median_total,
        "passed": summary.passed,
        "total_time": summary.total_time,
        "results": [
            {
                "name": r.name,
                "inputs": r.inputs,
                "score_a": r.score_a,
                "score_b": r.score_b,
                "winner": r.winner,
                "expected": list(r.expected) if r.expected is not None else None,
                "passed": r.passed,
                "elapsed_time": r.elapsed_time
            }
            for r in summary.results
        ]
    }

    with open(output_path, "w") as f:
        json.dump(data, f, indent=2)

    print(f"Results saved to {output_path}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play the box absorption game")
    parser.add_argument(
        "weights",
        type=float,
        nargs="*",
        help="Input token weights for a single game (runs the scenario bank if omitted)"
    )
    parser.add_argument(
        "--scenarios",
        type=str,
        default=None,
        help="Path to scenario bank JSON (uses default if not specified)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to game_config.yaml (uses default if not specified)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce output verbosity"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print every turn"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.weights:
            scenarios = [Scenario(name="cli", inputs=list(args.weights))]
        else:
            scenarios = load_scenario_bank(args.scenarios)
    except (OSError, ValueError, KeyError) as e:
        print(f"Error loading game data: {e}")
        return 1

    try:
        if args.weights:
            summary = evaluate_scenarios(
                scenarios,
                config=config,
                verbose=False,
                debug=args.debug
            )
            result = summary.results[0]
            print(format_scores(result.score_a, result.score_b))
        else:
            summary = evaluate_scenarios(
                scenarios,
                config=config,
                verbose=not args.quiet,
                debug=args.debug
            )
    except InvalidWeightError as e:
        print(f"Error: {e}")
        return 1

    if args.output:
        save_results(summary, args.output)

    return 0 if summary.passed == len(summary.results) else 1


if __name__ == "__main__":
    sys.exit(main())
