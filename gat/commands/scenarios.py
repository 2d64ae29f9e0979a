"""gat list-scenarios <workflow> — number a workflow's scenarios from 1."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gat import console
from gat.errors import ValidationError
from gat.store import ScenarioStore

if TYPE_CHECKING:
    from gat.config import GatConfig
    from gat.types import ScenarioSet


def cmd_list_scenarios(basename: str | None, config: GatConfig) -> ScenarioSet:
    if not basename:
        raise ValidationError("Please specify a workflow name")

    scenario_set = ScenarioStore(config.config_dir).load(basename)

    console.step(f"Test Scenarios for: {basename}")
    console.info(f"Workflow: {scenario_set.workflow_path}")
    console.info(f"Trigger: {scenario_set.trigger}")
    print()
    # Numbering here must match `gat test <workflow> <n>`
    for number, scenario in enumerate(scenario_set.scenarios, 1):
        print(f"{number}. {scenario.name}")
        print(f"   {scenario.description}")
        print()
    return scenario_set
