"""gat test <workflow> <num> [--act] — run one scenario."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gat import console
from gat.discovery import workflow_file_for
from gat.engine import compose, context_for, execute, simulate, write_event
from gat.errors import ExternalProcessError, ValidationError
from gat.store import ScenarioStore

if TYPE_CHECKING:
    from gat.config import GatConfig


def parse_scenario_number(value: str | int, count: int) -> int:
    """Validate an operator-facing (1-based) scenario number."""
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Scenario number must be an integer, got: {value!r}") from e
    if not 1 <= number <= count:
        raise ValidationError(
            f"Scenario number {number} out of range (1-{count})" if count else "Workflow has no scenarios",
            hint="Run: gat list-scenarios <workflow>",
        )
    return number


def cmd_test(basename: str | None, number: str | int | None, use_act: bool, config: GatConfig) -> int:
    if not basename or number is None:
        raise ValidationError("Usage: test <workflow-name> <scenario-number> [--act]")

    # Load first: a missing scenario file must not leave an event file behind
    scenario_set = ScenarioStore(config.config_dir).load(basename)
    scenario = scenario_set.scenario(parse_scenario_number(number, len(scenario_set.scenarios)))

    event = compose(scenario, context_for(config))
    event_file = write_event(event, config.config_dir)

    if not use_act:
        simulate(event_file, scenario.name)
        return 0

    workflow_file = workflow_file_for(basename, config.workflows_dir, scenario_set.workflow_path)
    try:
        return execute(workflow_file, str(event_file), scenario_set.trigger, config)
    except ExternalProcessError as e:
        print()
        console.warning(str(e))
        return e.returncode
