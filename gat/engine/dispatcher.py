"""Simulate or execute a composed event.

Execute mode runs act from the repository root with an argument list,
never through a shell.
"""
from __future__ import annotations

import json
import logging
import os
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from gat import console
from gat.errors import ConfigurationError, EngineUnavailableError, ExternalProcessError, ToolUnavailableError
from gat.paths import rebase, resolve_root

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gat.config import GatConfig

logger = logging.getLogger(__name__)

RUNNER = "act"
ENGINE = "docker"
SECRETS_FILE = ".secrets"


def simulate(event_file: str | Path, scenario_name: str) -> None:
    """Print the composed event for inspection; no process is started."""
    try:
        event = json.loads(Path(event_file).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read event file {event_file}: {e}") from e

    console.step(f"Simulating: {scenario_name}")
    print()
    console.info("Event Data:")
    print(json.dumps(event, indent=2, ensure_ascii=False))
    print()
    console.success("Event JSON generated successfully")
    console.info("This would trigger the workflow with the above event data")


def check_runner() -> None:
    if shutil.which(RUNNER) is None:
        raise ToolUnavailableError(RUNNER)
    try:
        probe = subprocess.run([ENGINE, "info"], capture_output=True, text=True)
    except FileNotFoundError as e:
        raise EngineUnavailableError(ENGINE) from e
    if probe.returncode != 0:
        raise EngineUnavailableError(ENGINE)


def build_command(
    trigger: str,
    workflow: str,
    event: str,
    extra_flags: Sequence[str] = (),
    secrets_file: str | None = None,
) -> list[str]:
    argv = [RUNNER, trigger, "-W", workflow, "-e", event, *extra_flags]
    if secrets_file:
        argv += ["--secret-file", secrets_file]
    return argv


def execute(workflow_file: str, event_file: str, trigger: str, config: GatConfig) -> int:
    """Run act against the event and return its exit code.

    Raises:
        ToolUnavailableError / EngineUnavailableError: before anything runs
        NotAProjectError: no repository root to run from
        ExternalProcessError: act exited non-zero (carries the code)
    """
    check_runner()

    console.step("Running with Act (Docker)")
    console.info(f"Workflow: {workflow_file}")
    console.info(f"Event: {event_file}")
    print()

    root = resolve_root(config.project_dir)
    workflow_rel = rebase(workflow_file, root)
    event_rel = rebase(event_file, root)

    console.info(f"Git root: {root}")
    console.info(f"Workflow (relative): {workflow_rel}")
    console.info(f"Event (relative): {event_rel}")
    print()

    secrets = SECRETS_FILE if os.path.isfile(os.path.join(root, SECRETS_FILE)) else None
    argv = build_command(trigger, workflow_rel, event_rel, config.act_flags, secrets)

    console.info(f"Running from: {root}")
    console.info(f"Command: {shlex.join(argv)}")
    print()
    logger.debug("exec %r in %s", argv, root)

    returncode = subprocess.run(argv, cwd=root).returncode
    if returncode != 0:
        raise ExternalProcessError(returncode, RUNNER)
    return returncode
