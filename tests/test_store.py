"""Tests for scenario-set persistence."""
from __future__ import annotations

import json

import pytest

from gat.errors import ConfigurationError, ScenarioSetNotFoundError
from gat.scenarios import generate
from gat.store import ScenarioStore, backfill_workflow_path
from gat.types import Scenario, ScenarioSet


def test_save_creates_config_dir_and_document(tmp_path):
    store = ScenarioStore(tmp_path / "deep" / "workflow-tests")
    path = store.save("deploy", backfill_workflow_path(generate("push"), ".github/workflows/deploy.yml"))

    assert path == tmp_path / "deep" / "workflow-tests" / "deploy-scenarios.json"
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["workflow"] == ".github/workflows/deploy.yml"
    assert raw["trigger"] == "push"
    assert raw["scenarios"][0]["name"] == "Push to main"
    assert set(raw["scenarios"][0]) == {"name", "description", "event"}


def test_save_overwrites(tmp_path):
    store = ScenarioStore(tmp_path)
    store.save("deploy", generate("issues"))
    store.save("deploy", generate("push"))

    assert len(store.load("deploy").scenarios) == 1


def test_load_reads_operator_edits(tmp_path):
    store = ScenarioStore(tmp_path)
    path = store.save("deploy", generate("schedule"))
    raw = json.loads(path.read_text(encoding="utf-8"))
    raw["scenarios"].append({"name": "Extra", "description": "added by hand", "event": {"x": [1, 2]}})
    path.write_text(json.dumps(raw), encoding="utf-8")

    loaded = store.load("deploy")

    assert [s.name for s in loaded.scenarios] == ["Default scenario", "Extra"]
    assert loaded.scenario(2).event == {"x": [1, 2]}


def test_load_missing_does_not_create_anything(tmp_path):
    config_dir = tmp_path / "workflow-tests"
    with pytest.raises(ScenarioSetNotFoundError) as exc:
        ScenarioStore(config_dir).load("nope")

    assert isinstance(exc.value, ConfigurationError)
    assert "gat init" in exc.value.hint
    assert not config_dir.exists()


def test_load_rejects_invalid_json(tmp_path):
    (tmp_path / "bad-scenarios.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        ScenarioStore(tmp_path).load("bad")


def test_load_rejects_non_object(tmp_path):
    (tmp_path / "list-scenarios.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        ScenarioStore(tmp_path).load("list")


def test_backfill_returns_copy():
    original = ScenarioSet(trigger="push", scenarios=[Scenario(name="a")])
    filled = backfill_workflow_path(original, "wf.yml")

    assert filled.workflow_path == "wf.yml"
    assert original.workflow_path == ""


def test_scenario_numbering_is_one_based():
    s = ScenarioSet(scenarios=[Scenario(name="first"), Scenario(name="second")])

    assert s.scenario(1).name == "first"
    assert s.scenario(2).name == "second"
    with pytest.raises(IndexError):
        s.scenario(0)
    with pytest.raises(IndexError):
        s.scenario(3)


def test_exists(tmp_path):
    store = ScenarioStore(tmp_path)
    assert not store.exists("deploy")

    store.save("deploy", generate("push"))
    assert store.exists("deploy")


def test_null_event_loads_as_empty_mapping():
    scenario = Scenario.from_dict({"name": "n", "description": "", "event": None})
    assert scenario.event == {}
