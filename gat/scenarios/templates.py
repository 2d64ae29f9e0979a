"""Starter scenario sets, one template per trigger kind.

Templates are rebuilt on every call so a caller mutating the result
never changes what the next caller gets.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from gat.types import Scenario, ScenarioSet

if TYPE_CHECKING:
    from collections.abc import Callable


class TriggerKind(Enum):
    ISSUES = "issues"
    PUSH = "push"
    PULL_REQUEST = "pull_request"
    WORKFLOW_DISPATCH = "workflow_dispatch"
    OTHER = "other"


def classify(trigger: str) -> TriggerKind:
    for kind in TriggerKind:
        if kind is not TriggerKind.OTHER and kind.value == trigger:
            return kind
    return TriggerKind.OTHER


def _labeled_issue(number: int, title: str, labels: list[str]) -> dict:
    return {
        "action": "labeled",
        "issue": {
            "number": number,
            "title": title,
            "labels": [{"name": label} for label in labels],
        },
    }


def _issues() -> list[Scenario]:
    critical = _labeled_issue(102, "[Bug]: Security vulnerability in auth", ["bug", "planned"])
    critical["severity"] = "Critical"
    regular = _labeled_issue(103, "[Bug]: Fix typo in documentation", ["bug", "planned"])
    regular["severity"] = "Low"
    return [
        Scenario(
            name="Feature from version branch",
            description="Test feature branch creation from 1.x",
            event=_labeled_issue(
                101, "[Enhancement]: Add user authentication", ["enhancement", "planned", "1.x"]
            ),
        ),
        Scenario(
            name="Critical hotfix",
            description="Test critical bug creates hotfix from default branch",
            event=critical,
        ),
        Scenario(
            name="Regular bugfix",
            description="Test regular bugfix from dev branch",
            event=regular,
        ),
    ]


def _push() -> list[Scenario]:
    return [
        Scenario(
            name="Push to main",
            description="Test push event to main branch",
            event={
                "ref": "refs/heads/main",
                "commits": [
                    {
                        "message": "Fix: resolve security issue",
                        "author": {"name": "Test User"},
                    }
                ],
            },
        )
    ]


def _pull_request() -> list[Scenario]:
    return [
        Scenario(
            name="PR opened",
            description="Test pull request opened event",
            event={
                "action": "opened",
                "pull_request": {
                    "number": 1,
                    "title": "Add new feature",
                    "base": {"ref": "main"},
                    "head": {"ref": "feature/test"},
                },
            },
        )
    ]


def _workflow_dispatch() -> list[Scenario]:
    return [
        Scenario(
            name="Manual trigger",
            description="Test manual workflow dispatch",
            event={"inputs": {"environment": "staging"}},
        )
    ]


def _default() -> list[Scenario]:
    return [
        Scenario(
            name="Default scenario",
            description="Customize this scenario for your workflow",
            event={},
        )
    ]


TEMPLATE_BUILDERS: dict[TriggerKind, Callable[[], list[Scenario]]] = {
    TriggerKind.ISSUES: _issues,
    TriggerKind.PUSH: _push,
    TriggerKind.PULL_REQUEST: _pull_request,
    TriggerKind.WORKFLOW_DISPATCH: _workflow_dispatch,
    TriggerKind.OTHER: _default,
}


def generate(trigger: str) -> ScenarioSet:
    """Return the starter scenario set for `trigger` with the workflow path left blank."""
    return ScenarioSet(
        workflow_path="",
        trigger=trigger,
        scenarios=TEMPLATE_BUILDERS[classify(trigger)](),
    )
