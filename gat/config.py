"""Per-invocation configuration, built once from CLI flags."""
from __future__ import annotations

import os
import shlex
from dataclasses import dataclass

DEFAULT_WORKFLOWS_DIR = ".github/workflows"
DEFAULT_CONFIG_DIR = ".github/workflow-tests"


@dataclass(frozen=True)
class GatConfig:
    workflows_dir: str = DEFAULT_WORKFLOWS_DIR
    config_dir: str = DEFAULT_CONFIG_DIR
    project_dir: str | None = None  # None = auto-detect git root
    act_flags: tuple[str, ...] = ()

    @classmethod
    def from_flags(
        cls,
        workflows_dir: str | None = None,
        config_dir: str | None = None,
        project_dir: str | None = None,
        act_flags: str | None = None,
    ) -> GatConfig:
        """Build a config the way the flags combine.

        A project dir moves both default directories under it; explicit
        -w/-c values still win.
        """
        if project_dir:
            workflows_dir = workflows_dir or os.path.join(project_dir, DEFAULT_WORKFLOWS_DIR)
            config_dir = config_dir or os.path.join(project_dir, DEFAULT_CONFIG_DIR)
        return cls(
            workflows_dir=workflows_dir or DEFAULT_WORKFLOWS_DIR,
            config_dir=config_dir or DEFAULT_CONFIG_DIR,
            project_dir=project_dir or None,
            act_flags=tuple(shlex.split(act_flags)) if act_flags else (),
        )

    def non_default_settings(self) -> list[str]:
        """Human-readable lines for every setting that differs from the defaults."""
        lines = []
        if self.config_dir != DEFAULT_CONFIG_DIR:
            lines.append(f"Using config directory: {self.config_dir}")
        if self.workflows_dir != DEFAULT_WORKFLOWS_DIR:
            lines.append(f"Using workflows directory: {self.workflows_dir}")
        if self.project_dir:
            lines.append(f"Using git project directory: {self.project_dir}")
        if self.act_flags:
            lines.append(f"Act flags: {shlex.join(self.act_flags)}")
        return lines
