"""Tests for simulate/execute dispatch.

act and docker are faked by the `runner` fixture; git queries still go
to the real subprocess module.
"""
from __future__ import annotations

import pytest

from gat.config import GatConfig
from gat.engine import build_command, execute, simulate, write_event
from gat.errors import (
    ConfigurationError,
    EngineUnavailableError,
    ExternalProcessError,
    NotAProjectError,
    ToolUnavailableError,
)


def _event_file(project) -> str:
    write_event({"action": "opened"}, project.config_dir)
    return ".github/workflow-tests/event.json"


class TestBuildCommand:
    def test_argument_order(self):
        argv = build_command("issues", "wf.yml", "ev.json", ["--container-architecture", "linux/amd64"])
        assert argv == [
            "act", "issues", "-W", "wf.yml", "-e", "ev.json",
            "--container-architecture", "linux/amd64",
        ]

    def test_secrets_last(self):
        argv = build_command("push", "wf.yml", "ev.json", secrets_file=".secrets")
        assert argv[-2:] == ["--secret-file", ".secrets"]

    def test_paths_with_spaces_stay_single_arguments(self):
        argv = build_command("push", "my flows/ci.yml", "ev.json")
        assert "my flows/ci.yml" in argv


class TestSimulate:
    def test_prints_event(self, tmp_path, capsys):
        path = write_event({"action": "labeled"}, tmp_path)
        simulate(path, "Critical hotfix")

        out = capsys.readouterr().out
        assert "Simulating: Critical hotfix" in out
        assert '"action": "labeled"' in out
        assert "Event JSON generated successfully" in out

    def test_unreadable_event(self, tmp_path):
        with pytest.raises(ConfigurationError):
            simulate(tmp_path / "missing.json", "x")


class TestExecute:
    def test_runner_not_installed(self, git_project, runner):
        runner.act_installed = False
        with pytest.raises(ToolUnavailableError):
            execute(".github/workflows/ci.yaml", _event_file(git_project), "push", GatConfig())
        assert runner.calls == []

    def test_engine_not_running(self, git_project, runner):
        runner.docker_ok = False
        with pytest.raises(EngineUnavailableError):
            execute(".github/workflows/ci.yaml", _event_file(git_project), "push", GatConfig())
        assert runner.calls == []

    def test_outside_repository_never_invokes_runner(self, project, runner):
        with pytest.raises(NotAProjectError):
            execute(".github/workflows/ci.yaml", _event_file(project), "push", GatConfig())
        assert runner.calls == []

    def test_runs_from_root_with_rebased_paths(self, git_project, runner, monkeypatch):
        event = str(git_project.config_dir / "event.json")
        write_event({}, git_project.config_dir)
        monkeypatch.chdir(git_project.workflows_dir)

        code = execute("ci.yaml", event, "push", GatConfig(act_flags=("--verbose",)))

        assert code == 0
        [call] = runner.calls
        assert call["cwd"] == str(git_project.root)
        assert call["argv"] == [
            "act", "push",
            "-W", ".github/workflows/ci.yaml",
            "-e", ".github/workflow-tests/event.json",
            "--verbose",
        ]

    def test_secrets_file_passed_when_present(self, git_project, runner):
        (git_project.root / ".secrets").write_text("TOKEN=x\n", encoding="utf-8")
        execute(".github/workflows/ci.yaml", _event_file(git_project), "push", GatConfig())

        assert runner.calls[0]["argv"][-2:] == ["--secret-file", ".secrets"]

    def test_path_outside_root_passed_through(self, git_project, runner, tmp_path):
        outside = tmp_path / "elsewhere.yml"
        execute(str(outside), _event_file(git_project), "push", GatConfig())

        argv = runner.calls[0]["argv"]
        assert argv[argv.index("-W") + 1] == str(outside)

    def test_nonzero_exit_propagates(self, git_project, runner):
        runner.act_exit = 3
        with pytest.raises(ExternalProcessError) as exc:
            execute(".github/workflows/ci.yaml", _event_file(git_project), "push", GatConfig())
        assert exc.value.returncode == 3
