from gat.engine.composer import compose, context_for, derive_context, write_event
from gat.engine.dispatcher import build_command, execute, simulate

__all__ = [
    "build_command",
    "compose",
    "context_for",
    "derive_context",
    "execute",
    "simulate",
    "write_event",
]
