"""Shared fixtures for gat tests."""
from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from gat.config import GatConfig
from gat.store import ScenarioStore

WORKFLOW_FIXTURES = Path(__file__).parent / "fixtures" / "workflows"

HAS_GIT = shutil.which("git") is not None


class ProjectHarness:
    """A throwaway project directory with the fixture workflows copied in.

    The working directory is switched into the project for the duration
    of the test, mirroring how gat is run from a repository checkout.
    """

    def __init__(self, root: Path):
        self.root = root
        self.workflows_dir = root / ".github" / "workflows"
        self.config_dir = root / ".github" / "workflow-tests"
        self.workflows_dir.mkdir(parents=True)
        for src in sorted(WORKFLOW_FIXTURES.iterdir()):
            shutil.copy2(src, self.workflows_dir / src.name)
        self.config = GatConfig()

    @property
    def store(self) -> ScenarioStore:
        return ScenarioStore(self.config.config_dir)

    def add_workflow(self, filename: str, content: str) -> Path:
        path = self.workflows_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    def files_under(self, directory: Path) -> list[Path]:
        if not directory.exists():
            return []
        return sorted(p for p in directory.rglob("*") if p.is_file())

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", "-C", str(self.root), *args],
            capture_output=True, text=True, check=True,
        )
        return result.stdout.strip()

    def init_git(self, remote: str | None = None, default_branch: str | None = None) -> None:
        self.git("init", "-q")
        if remote:
            self.git("remote", "add", "origin", remote)
        if default_branch:
            self.git("symbolic-ref", "refs/remotes/origin/HEAD", f"refs/remotes/origin/{default_branch}")


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ProjectHarness:
    # Resolve symlinks so paths compare equal to what git reports (/private/tmp on macOS)
    root = (tmp_path / "repo").resolve()
    root.mkdir()
    # Keep git from walking up into an enclosing repository
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.resolve()))
    monkeypatch.chdir(root)
    return ProjectHarness(root)


@pytest.fixture
def git_project(project: ProjectHarness) -> ProjectHarness:
    if not HAS_GIT:
        pytest.skip("git not installed")
    project.init_git(remote="git@github.com:acme/widgets.git", default_branch="develop")
    return project


_real_run = subprocess.run


class FakeRunner:
    """Stands in for act and docker; records every act invocation.

    Anything else (git) still goes to the real subprocess.run.
    """

    def __init__(self, act_installed=True, docker_ok=True, act_exit=0):
        self.act_installed = act_installed
        self.docker_ok = docker_ok
        self.act_exit = act_exit
        self.calls: list[dict] = []

    def which(self, name):
        if name == "act":
            return "/usr/local/bin/act" if self.act_installed else None
        return None

    def run(self, argv, *args, **kwargs):
        if argv[0] == "docker":
            return subprocess.CompletedProcess(argv, 0 if self.docker_ok else 1, "", "")
        if argv[0] == "act":
            self.calls.append({"argv": list(argv), "cwd": kwargs.get("cwd")})
            return subprocess.CompletedProcess(argv, self.act_exit)
        return _real_run(argv, *args, **kwargs)


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    from gat.engine import dispatcher

    fake = FakeRunner()
    monkeypatch.setattr(dispatcher.shutil, "which", fake.which)
    monkeypatch.setattr(dispatcher.subprocess, "run", fake.run)
    return fake
