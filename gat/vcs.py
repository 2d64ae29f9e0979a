"""Git queries run as subprocesses.

Each query returns None when git is missing or the command fails;
callers decide whether that is fatal.
"""
from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)

ORIGIN_HEAD_PREFIX = "refs/remotes/origin/"


def run_git(args: list[str], cwd: str | None = None) -> str | None:
    """Run a git command and return its stripped stdout, or None on failure."""
    cmd = ["git"]
    if cwd:
        cmd += ["-C", cwd]
    cmd += args
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        logger.debug("git executable not found")
        return None
    if result.returncode != 0:
        logger.debug("%s failed (%d): %s", " ".join(cmd), result.returncode, result.stderr.strip())
        return None
    return result.stdout.strip()


def toplevel(directory: str | None = None) -> str | None:
    return run_git(["rev-parse", "--show-toplevel"], cwd=directory) or None


def remote_url(root: str, remote: str = "origin") -> str | None:
    return run_git(["config", "--get", f"remote.{remote}.url"], cwd=root) or None


def default_branch(root: str) -> str | None:
    ref = run_git(["symbolic-ref", "refs/remotes/origin/HEAD"], cwd=root)
    if not ref:
        return None
    return ref.removeprefix(ORIGIN_HEAD_PREFIX) or None
