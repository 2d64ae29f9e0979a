"""Extract a workflow's declared name and first trigger.

Two strategies share one contract and are tried in order: a real YAML
reader, then a line-based heuristic that is deliberately approximate.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from gat.types import WorkflowInfo

# Lines scanned after `on:` by the text heuristic
TEXT_TRIGGER_WINDOW = 5

_TEXT_NAME_RE = re.compile(r"^name:(.*)$")
_TEXT_ON_RE = re.compile(r"^on:")
_TEXT_TRIGGER_RE = re.compile(r"^\s+([a-z_]+):")


class InspectorUnavailable(Exception):
    """The strategy cannot handle this file; try the next one."""


class YamlInspector:
    name = "yaml"

    def inspect(self, content: str) -> WorkflowInfo:
        try:
            raw = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise InspectorUnavailable(str(e)) from e
        if not isinstance(raw, dict):
            raise InspectorUnavailable("expected a mapping at the top level")

        name = raw.get("name")
        # YAML 1.1 reads a bare `on` key as boolean True
        triggers = raw["on"] if "on" in raw else raw.get(True)
        return WorkflowInfo(
            declared_name="" if name is None else str(name),
            trigger=_first_trigger(triggers),
        )


def _first_trigger(triggers: Any) -> str:
    if isinstance(triggers, dict):
        return str(next(iter(triggers), ""))
    if isinstance(triggers, list):
        return str(triggers[0]) if triggers else ""
    if isinstance(triggers, str):
        return triggers
    return ""


class TextInspector:
    name = "text"

    def inspect(self, content: str) -> WorkflowInfo:
        lines = content.splitlines()
        return WorkflowInfo(declared_name=self._name(lines), trigger=self._trigger(lines))

    def _name(self, lines: list[str]) -> str:
        for line in lines:
            m = _TEXT_NAME_RE.match(line)
            if m:
                return m.group(1).strip().strip("\"'")
        return ""

    def _trigger(self, lines: list[str]) -> str:
        for idx, line in enumerate(lines):
            if not _TEXT_ON_RE.match(line):
                continue
            for follower in lines[idx + 1: idx + 1 + TEXT_TRIGGER_WINDOW]:
                m = _TEXT_TRIGGER_RE.match(follower)
                if m:
                    return m.group(1)
            return ""
        return ""


DEFAULT_STRATEGIES = (YamlInspector(), TextInspector())


def inspect_content(content: str, strategies=DEFAULT_STRATEGIES) -> WorkflowInfo:
    for strategy in strategies:
        try:
            return strategy.inspect(content)
        except InspectorUnavailable:
            continue
    return WorkflowInfo()


def inspect(file: str | Path, strategies=DEFAULT_STRATEGIES) -> WorkflowInfo:
    content = Path(file).read_text(encoding="utf-8", errors="replace")
    return inspect_content(content, strategies)
