"""Project-root resolution and path rebasing for the runner.

act is started from the repository root, so the workflow and event
paths handed to it must be relative to that root, while the operator
may have given them relative to wherever gat was started.
"""
from __future__ import annotations

import os

from gat import vcs
from gat.errors import DirectoryNotFoundError, NotAProjectError


def resolve_root(override: str | None = None) -> str:
    """Return the git working-tree root to run from.

    Raises:
        DirectoryNotFoundError: the explicit override does not exist
        NotAProjectError: no git working tree could be found
    """
    if override:
        if not os.path.isdir(override):
            raise DirectoryNotFoundError(override)
        root = vcs.toplevel(override)
        if not root:
            raise NotAProjectError(f"Specified directory is not a git repository: {override}")
        return root

    root = vcs.toplevel()
    if not root:
        raise NotAProjectError()
    return root


def rebase(path: str, root: str, base: str | None = None) -> str:
    """Make `path` relative to `root`.

    Relative paths are taken against `base` (default: the working
    directory), unless only the root-relative reading names an existing
    file, in which case the path is already rebased. A path outside
    `root` comes back exactly as given.
    """
    if os.path.isabs(path):
        absolute = path
    else:
        absolute = os.path.join(base or os.getcwd(), path)
        from_root = os.path.join(root, path)
        if not os.path.exists(absolute) and os.path.exists(from_root):
            absolute = from_root
    absolute = os.path.normpath(absolute)
    prefix = root.rstrip(os.sep) + os.sep
    if absolute.startswith(prefix) and len(absolute) > len(prefix):
        return absolute[len(prefix):]
    return path


def relative_to_cwd(path: str) -> str:
    try:
        return os.path.relpath(os.path.realpath(path), os.path.realpath(os.getcwd()))
    except ValueError:
        # different drive on Windows
        return path
