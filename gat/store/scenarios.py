"""JSON-file persistence for scenario sets, one document per workflow basename."""
from __future__ import annotations

import dataclasses
import json
from pathlib import Path

from gat.errors import ConfigurationError, ScenarioSetNotFoundError
from gat.types import ScenarioSet

SCENARIO_FILE_SUFFIX = "-scenarios.json"


class ScenarioStore:
    def __init__(self, config_dir: str | Path):
        self.config_dir = Path(config_dir)

    def path_for(self, basename: str) -> Path:
        return self.config_dir / f"{basename}{SCENARIO_FILE_SUFFIX}"

    def exists(self, basename: str) -> bool:
        return self.path_for(basename).is_file()

    def save(self, basename: str, scenario_set: ScenarioSet) -> Path:
        """Write the set, replacing any earlier document for `basename`."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(basename)
        path.write_text(
            json.dumps(scenario_set.to_dict(), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        return path

    def load(self, basename: str) -> ScenarioSet:
        path = self.path_for(basename)
        if not path.is_file():
            raise ScenarioSetNotFoundError(basename, str(path))
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Invalid scenario file {path}: expected a JSON object")
        return ScenarioSet.from_dict(raw)


def backfill_workflow_path(scenario_set: ScenarioSet, workflow_path: str) -> ScenarioSet:
    # Set once at init; a workflow that later moves leaves this stale.
    return dataclasses.replace(scenario_set, workflow_path=workflow_path)
