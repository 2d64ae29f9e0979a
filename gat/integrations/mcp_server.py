"""MCP Server — exposes gat_* tools so agents can inspect workflows and events.

Tools never start the runner; composing an event is the simulate path.
"""
from __future__ import annotations

import json

from mcp.server.fastmcp import FastMCP

from gat.config import GatConfig
from gat.discovery import discover
from gat.engine import compose, context_for
from gat.errors import GatError
from gat.store import ScenarioStore


def _error(e: GatError) -> str:
    payload = {"error": str(e)}
    if e.hint:
        payload["hint"] = e.hint
    return json.dumps(payload, ensure_ascii=False)


def list_workflows(config: GatConfig) -> str:
    try:
        return json.dumps([
            {
                "ordinal": wf.ordinal,
                "basename": wf.basename,
                "name": wf.declared_name,
                "trigger": wf.trigger,
                "path": wf.path,
            }
            for wf in discover(config.workflows_dir)
        ], ensure_ascii=False, indent=2)
    except GatError as e:
        return _error(e)


def list_scenarios(config: GatConfig, workflow: str) -> str:
    try:
        scenario_set = ScenarioStore(config.config_dir).load(workflow)
    except GatError as e:
        return _error(e)
    return json.dumps({
        "workflow": scenario_set.workflow_path,
        "trigger": scenario_set.trigger,
        "scenarios": [
            {"number": n, "name": s.name, "description": s.description}
            for n, s in enumerate(scenario_set.scenarios, 1)
        ],
    }, ensure_ascii=False, indent=2)


def compose_event(config: GatConfig, workflow: str, scenario: int) -> str:
    try:
        scenario_set = ScenarioStore(config.config_dir).load(workflow)
        if not 1 <= scenario <= len(scenario_set.scenarios):
            return json.dumps({"error": f"Scenario number {scenario} out of range"})
        event = compose(scenario_set.scenario(scenario), context_for(config))
    except GatError as e:
        return _error(e)
    return json.dumps(event, ensure_ascii=False, indent=2)


def create_server(config: GatConfig) -> FastMCP:
    mcp = FastMCP("gat")

    @mcp.tool()
    def gat_list_workflows() -> str:
        """List discovered workflows with their ordinal, name and trigger."""
        return list_workflows(config)

    @mcp.tool()
    def gat_list_scenarios(workflow: str) -> str:
        """List the scenarios stored for a workflow basename, numbered from 1."""
        return list_scenarios(config, workflow)

    @mcp.tool()
    def gat_compose_event(workflow: str, scenario: int) -> str:
        """Return the event that `gat test <workflow> <scenario>` would send."""
        return compose_event(config, workflow, scenario)

    return mcp


def run_server(config: GatConfig):
    create_server(config).run()
