"""Operator-facing output helpers."""
from __future__ import annotations

import sys

RULE = "━" * 51


def step(message: str) -> None:
    print(f"=== {message}")


def success(message: str) -> None:
    print(f"✓ {message}")


def info(message: str) -> None:
    print(f"ℹ {message}")


def warning(message: str) -> None:
    print(f"⚠ {message}", file=sys.stderr)


def error(message: str) -> None:
    print(f"✗ {message}", file=sys.stderr)
