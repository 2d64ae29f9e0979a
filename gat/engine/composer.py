"""Build the event document handed to the runner.

Repository metadata is best-effort: anything git cannot tell us falls
back to a placeholder instead of failing the test run.
"""
from __future__ import annotations

import copy
import json
import os
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

from gat import vcs
from gat.errors import ConfigurationError, NotAProjectError
from gat.paths import resolve_root
from gat.types import RepositoryContext

if TYPE_CHECKING:
    from gat.config import GatConfig
    from gat.types import Scenario

EVENT_FILENAME = "event.json"

PLACEHOLDER = RepositoryContext()

# git@github.com:owner/repo.git, https://github.com/owner/repo(.git)
_OWNER_RE = re.compile(r"[:/]([^/:]+)/[^/:]+?(?:\.git)?/?$")


def owner_from_url(url: str | None) -> str:
    if not url:
        return PLACEHOLDER.owner
    m = _OWNER_RE.search(url.strip())
    return m.group(1) if m else PLACEHOLDER.owner


def derive_context(root: str | None) -> RepositoryContext:
    if not root:
        return PLACEHOLDER
    return RepositoryContext(
        name=os.path.basename(root.rstrip(os.sep)) or PLACEHOLDER.name,
        owner=owner_from_url(vcs.remote_url(root)),
        default_branch=vcs.default_branch(root) or PLACEHOLDER.default_branch,
    )


def context_for(config: GatConfig) -> RepositoryContext:
    """Repository context for the configured project; placeholders outside git."""
    try:
        root = resolve_root(config.project_dir)
    except NotAProjectError:
        root = None
    return derive_context(root)


def compose(scenario: Scenario, context: RepositoryContext) -> dict[str, Any]:
    """Overlay `repository` onto the scenario event. The synthesized key always wins."""
    if not isinstance(scenario.event, dict):
        raise ConfigurationError(
            f'Event for scenario "{scenario.name}" must be a JSON object, '
            f"got {type(scenario.event).__name__}"
        )
    return {**copy.deepcopy(scenario.event), "repository": context.as_event_fragment()}


def write_event(event: dict[str, Any], config_dir: str | Path) -> Path:
    directory = Path(config_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / EVENT_FILENAME
    path.write_text(json.dumps(event, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path
