"""Find workflow files and resolve operator workflow selectors."""
from __future__ import annotations

import os
from pathlib import Path

from gat.discovery.inspector import inspect
from gat.errors import (
    NoWorkflowsDirectoryError,
    NoWorkflowsFoundError,
    ValidationError,
    WorkflowNotFoundError,
)
from gat.types import WorkflowDescriptor

WORKFLOW_EXTENSIONS = (".yml", ".yaml")


def workflow_basename(path: str | Path) -> str:
    """File name with the workflow extension stripped."""
    name = Path(path).name
    for ext in WORKFLOW_EXTENSIONS:
        if name.endswith(ext):
            return name[: -len(ext)]
    return name


def describe(path: str, ordinal: int = 0) -> WorkflowDescriptor:
    info = inspect(path)
    return WorkflowDescriptor(
        path=path,
        basename=workflow_basename(path),
        declared_name=info.declared_name,
        trigger=info.trigger,
        ordinal=ordinal,
    )


def discover(workflows_dir: str) -> list[WorkflowDescriptor]:
    """List workflow files under `workflows_dir`, numbered from 1 by sorted path.

    Ordinals are only meaningful within this one call.
    """
    if not os.path.isdir(workflows_dir):
        raise NoWorkflowsDirectoryError(workflows_dir)

    files: list[str] = []
    for dirpath, _dirnames, filenames in os.walk(workflows_dir):
        for filename in filenames:
            if filename.endswith(WORKFLOW_EXTENSIONS):
                files.append(os.path.join(dirpath, filename))

    if not files:
        raise NoWorkflowsFoundError(workflows_dir)

    return [describe(path, ordinal) for ordinal, path in enumerate(sorted(files), 1)]


def resolve_workflow(selector: str, workflows_dir: str) -> WorkflowDescriptor:
    """Resolve a 1-based ordinal, a file path, or a basename to one workflow."""
    if selector.isdigit():
        workflows = discover(workflows_dir)
        number = int(selector)
        if not 1 <= number <= len(workflows):
            raise ValidationError(
                f"Workflow number {number} out of range (1-{len(workflows)})",
                hint="Run: gat list",
            )
        return workflows[number - 1]

    if os.path.isfile(selector):
        return describe(selector)

    for wf in discover(workflows_dir):
        if selector in (wf.basename, wf.filename):
            return wf
    raise WorkflowNotFoundError(selector)


def workflow_file_for(basename: str, workflows_dir: str, stored_path: str = "") -> str:
    """Pick the workflow file the runner should execute for a scenario set."""
    candidates = [os.path.join(workflows_dir, basename + ext) for ext in WORKFLOW_EXTENSIONS]
    for candidate in candidates:
        if os.path.isfile(candidate):
            return candidate
    if stored_path and os.path.isfile(stored_path):
        return stored_path
    return candidates[0]
