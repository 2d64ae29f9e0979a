"""gat list — show every workflow with its ordinal, name and trigger."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gat import console
from gat.discovery import discover

if TYPE_CHECKING:
    from gat.config import GatConfig
    from gat.types import WorkflowDescriptor


def cmd_list(config: GatConfig) -> list[WorkflowDescriptor]:
    workflows = discover(config.workflows_dir)

    console.step("Available Workflows")
    print()
    for wf in workflows:
        print(f"{wf.ordinal}. {wf.filename}")
        print(f"   Name: {wf.declared_name}")
        print(f"   Trigger: {wf.trigger}")
        print(f"   Path: {wf.path}")
        print()
    return workflows
