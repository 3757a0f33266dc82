"""Compute and draw a route for one of the bundled grid scenarios.

Usage:
    # Route across the default doorway scenario
    python examples/route/run.py

    # Pick another scenario from examples/grids/
    python examples/route/run.py --scenario bazaar

    # Use cost weights from PATHER_* environment variables / .env
    python examples/route/run.py --scenario monster_corridor --from-config

    # Route every scenario concurrently
    python examples/route/run.py --all
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import List

from gridpather import (
    CostModel,
    GridLoader,
    GridScenario,
    PathResult,
    calculate_path,
    calculate_paths,
    render_ascii_path,
)
from gridpather.config import Config
from gridpather.logging_utils import log_info, log_search_result


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Weighted A* route on a collision grid")
    parser.add_argument(
        "--scenario",
        default="doorway",
        help="Scenario name in the grids directory (default: doorway)",
    )
    parser.add_argument(
        "--grids-dir",
        type=Path,
        default=None,
        help="Directory holding scenario JSON files (default: Config.GRIDS_DIR)",
    )
    parser.add_argument(
        "--from-config",
        action="store_true",
        help="Build the cost model from PATHER_* environment variables",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Route every scenario in the grids directory concurrently",
    )
    return parser.parse_args()


def report(scenario: GridScenario, result: PathResult) -> None:
    grid = scenario.grid.to_grid()
    label = f"[{scenario.name}] {tuple(scenario.start)} -> {tuple(scenario.goal)}"
    log_search_result(label, result)
    print(render_ascii_path(grid, result.path if result.found else None))
    print()


async def route_all(loader: GridLoader, cost_model: CostModel) -> None:
    names = sorted(path.stem for path in loader.grids_dir.glob("*.json"))
    scenarios: List[GridScenario] = [loader.load(name) for name in names]
    # Each scenario has its own grid, so fan out one batch per scenario
    batches = await asyncio.gather(
        *(
            calculate_paths(scenario.grid.to_grid(), [(scenario.start, scenario.goal)], cost_model)
            for scenario in scenarios
        )
    )
    for scenario, results in zip(scenarios, batches):
        report(scenario, results[0])


def main() -> None:
    args = parse_args()
    cost_model = CostModel.from_config() if args.from_config else CostModel()
    loader = GridLoader(args.grids_dir)

    if args.from_config:
        log_info(Config.display())

    if args.all:
        asyncio.run(route_all(loader, cost_model))
        return

    scenario = loader.load(args.scenario)
    if scenario.description:
        log_info(scenario.description)
    result = calculate_path(scenario.grid.to_grid(), scenario.start, scenario.goal, cost_model)
    report(scenario, result)


if __name__ == "__main__":
    main()
