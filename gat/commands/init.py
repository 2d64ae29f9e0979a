"""gat init <workflow> — write a starter scenario set for a workflow.

The template is chosen from the workflow's first trigger and saved to
<config-dir>/<basename>-scenarios.json, replacing any earlier file.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from gat import console
from gat.commands.list import cmd_list
from gat.discovery import resolve_workflow
from gat.errors import ValidationError
from gat.paths import relative_to_cwd
from gat.scenarios import generate
from gat.store import ScenarioStore, backfill_workflow_path

if TYPE_CHECKING:
    from pathlib import Path

    from gat.config import GatConfig


def cmd_init(selector: str | None, config: GatConfig) -> Path:
    if not selector:
        console.error("Please specify a workflow file")
        print()
        cmd_list(config)
        raise ValidationError("No workflow given", hint="Usage: gat init <workflow>")

    workflow = resolve_workflow(selector, config.workflows_dir)

    console.step(f"Initializing tests for: {workflow.declared_name or workflow.basename}")
    console.info(f"Trigger: {workflow.trigger}")
    print()

    store = ScenarioStore(config.config_dir)
    if store.exists(workflow.basename):
        console.warning(f"Replacing existing scenarios: {store.path_for(workflow.basename)}")

    scenario_set = backfill_workflow_path(generate(workflow.trigger), relative_to_cwd(workflow.path))
    path = store.save(workflow.basename, scenario_set)

    console.success(f"Created test scenarios: {path}")
    console.info("Edit this file to customize test scenarios")
    print()
    console.info("Next steps:")
    print(f"  1. Edit {path}")
    print(f"  2. Run: gat list-scenarios {workflow.basename}")
    print(f"  3. Run: gat test {workflow.basename} 1")
    return path
