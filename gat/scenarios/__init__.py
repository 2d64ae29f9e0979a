from gat.scenarios.templates import TriggerKind, classify, generate

__all__ = ["TriggerKind", "classify", "generate"]
