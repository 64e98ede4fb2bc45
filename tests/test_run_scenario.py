import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from dispatch import TravelDirection
from run_scenario import Scenario, main, run_scenario

SCENARIO_DIR = Path(__file__).resolve().parent.parent / "scenarios"


def test_replays_steps_in_order():
    scenario = Scenario(
        steps=[
            {"op": "add", "floor": 5},
            {"op": "add", "floor": 10},
            {"op": "next", "current_floor": 7},
            {"op": "remove", "floor": 5},
            {"op": "remove", "floor": 5},
            {"op": "list"},
        ]
    )
    results = [entry["result"] for entry in run_scenario(scenario)]
    assert results == [None, None, 5, True, False, [10]]


def test_invalid_floor_is_reported_not_raised():
    scenario = Scenario(steps=[{"op": "add", "floor": 0}, {"op": "list"}])
    results = run_scenario(scenario)
    assert "error" in results[0]["result"]
    assert results[1]["result"] == []


def test_bundled_scenario(tmp_path, capsys):
    output = tmp_path / "out" / "results.json"
    main([str(SCENARIO_DIR / "morning_round.json"), "--output", str(output)])

    data = json.loads(output.read_text())
    next_stops = [s["result"] for s in data["steps"] if s["op"] == "next"]
    assert next_stops == [9, 15, 3, None]
    assert data["pending"] == []
    assert "Scenario: morning_round" in capsys.readouterr().out


def test_boolean_floor_is_not_a_valid_step():
    with pytest.raises(ValidationError):
        Scenario(steps=[{"op": "add", "floor": True}])


class RecordingStore:
    def __init__(self):
        self.added = []

    def add_call(self, floor):
        self.added.append(floor)

    def list_calls(self):
        return list(self.added)

    def remove_call(self, floor):
        return False

    def next_stop(self, current_floor, direction=TravelDirection.STATIONARY):
        return None

    def __len__(self):
        return len(self.added)


def test_runs_against_any_call_store():
    store = RecordingStore()
    scenario = Scenario(steps=[{"op": "add", "floor": 4}, {"op": "next", "current_floor": 2}])
    results = run_scenario(scenario, store)
    assert store.added == [4]
    assert results[1]["result"] is None
