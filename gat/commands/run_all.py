"""gat test-all <workflow> [--act] — run every scenario in order."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gat import console
from gat.commands.run import cmd_test
from gat.errors import GatError, ValidationError
from gat.store import ScenarioStore

if TYPE_CHECKING:
    from gat.config import GatConfig


def cmd_test_all(basename: str | None, use_act: bool, config: GatConfig) -> int:
    """Run scenarios 1..N sequentially; returns the first non-zero exit code."""
    if not basename:
        raise ValidationError("Usage: test-all <workflow-name> [--act]")

    scenario_set = ScenarioStore(config.config_dir).load(basename)

    first_failure = 0
    for number in range(1, len(scenario_set.scenarios) + 1):
        print()
        print(console.RULE)
        try:
            code = cmd_test(basename, number, use_act, config)
        except GatError as e:
            # One broken scenario must not stop the rest
            console.warning(f"Scenario {number}: {e}")
            if e.hint:
                console.info(e.hint)
            code = 1
        if code and not first_failure:
            first_failure = code
    return first_failure
