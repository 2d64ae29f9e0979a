from gat.discovery.inspector import TextInspector, YamlInspector, inspect
from gat.discovery.workflows import discover, resolve_workflow, workflow_basename, workflow_file_for

__all__ = [
    "TextInspector",
    "YamlInspector",
    "discover",
    "inspect",
    "resolve_workflow",
    "workflow_basename",
    "workflow_file_for",
]
