from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# ─── Workflow discovery ───

@dataclass
class WorkflowInfo:
    declared_name: str = ""
    trigger: str = ""


@dataclass
class WorkflowDescriptor:
    path: str
    basename: str  # file name without .yml/.yaml
    declared_name: str = ""
    trigger: str = ""
    ordinal: int = 0  # 1-based position in one discovery call, 0 = not discovered

    @property
    def filename(self) -> str:
        return Path(self.path).name


# ─── Scenario sets (persisted as JSON) ───

@dataclass
class Scenario:
    name: str
    description: str = ""
    event: Any = field(default_factory=dict)  # trigger-specific, opaque

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "event": copy.deepcopy(self.event),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Scenario:
        event = raw.get("event")
        return cls(
            name=str(raw.get("name", "")),
            description=str(raw.get("description", "")),
            # null merges like an empty object
            event={} if event is None else copy.deepcopy(event),
        )


@dataclass
class ScenarioSet:
    workflow_path: str = ""
    trigger: str = ""
    scenarios: list[Scenario] = field(default_factory=list)

    def scenario(self, number: int) -> Scenario:
        """Return scenario by its 1-based operator-facing number."""
        if not 1 <= number <= len(self.scenarios):
            raise IndexError(f"scenario number {number} out of range 1..{len(self.scenarios)}")
        return self.scenarios[number - 1]

    def to_dict(self) -> dict[str, Any]:
        return {
            "workflow": self.workflow_path,
            "trigger": self.trigger,
            "scenarios": [s.to_dict() for s in self.scenarios],
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ScenarioSet:
        return cls(
            workflow_path=raw.get("workflow") or "",
            trigger=raw.get("trigger") or "",
            scenarios=[Scenario.from_dict(s) for s in raw.get("scenarios") or []],
        )


# ─── Repository context (never persisted) ───

@dataclass(frozen=True)
class RepositoryContext:
    name: str = "test-repo"
    owner: str = "test-owner"
    default_branch: str = "main"

    def as_event_fragment(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "owner": {"login": self.owner},
            "default_branch": self.default_branch,
        }
