"""CLI for replaying floor-call scenarios defined in JSON files."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, StrictInt

from dispatch import CallStore, FloorCallStore, InvalidFloorError, TravelDirection
from server.config import LOG_LEVELS, configure_logging

logger = logging.getLogger("run_scenario")


class ScenarioStep(BaseModel):
    op: Literal["add", "remove", "list", "next"]
    floor: Optional[StrictInt] = None
    current_floor: Optional[StrictInt] = None
    direction: TravelDirection = TravelDirection.STATIONARY


class Scenario(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    steps: List[ScenarioStep] = []


def apply_step(store: CallStore, step: ScenarioStep) -> object:
    """Run a single step against the store and return its result.

    Invalid floors are reported as ``{"error": ...}`` instead of aborting
    the replay.
    """

    try:
        if step.op == "add":
            store.add_call(step.floor)
            return None
        if step.op == "remove":
            return store.remove_call(step.floor)
        if step.op == "list":
            return store.list_calls()
        return store.next_stop(step.current_floor, step.direction)
    except InvalidFloorError as exc:
        logger.warning("Step %s rejected: %s", step.op, exc)
        return {"error": str(exc)}


def run_scenario(scenario: Scenario, store: Optional[CallStore] = None) -> List[Dict]:
    store = store if store is not None else FloorCallStore()
    results: List[Dict] = []
    for index, step in enumerate(scenario.steps):
        result = apply_step(store, step)
        results.append({"step": index, "op": step.op, "result": result})
    return results


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write step results as JSON",
    )
    parser.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS)
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    scenario = Scenario(**json.loads(args.config.read_text()))
    store = FloorCallStore()
    steps = run_scenario(scenario, store)

    results = {
        "scenario": scenario.name or args.config.stem,
        "description": scenario.description,
        "steps": steps,
        "pending": store.list_calls(),
    }

    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    for entry in steps:
        print(f"  [{entry['step']}] {entry['op']}: {entry['result']}")
    print(f"Pending calls: {results['pending']}")
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
