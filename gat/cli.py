"""Thin CLI router — parses flags, then dispatches to commands."""
from __future__ import annotations

import logging
import sys

from gat import __version__, console
from gat.config import GatConfig
from gat.errors import DispatchUnavailableError, GatError

USAGE = """\
gat — GitHub Actions workflow tester

Usage:
  gat [flags] <command> [options]

Flags:
  -c, --config-dir <path>       Set config directory (default: .github/workflow-tests)
  -w, --workflows-dir <path>    Set workflows directory (default: .github/workflows)
  -p, --project-dir <path>      Set git project directory (default: auto-detect)
  -a, --act-flags <flags>       Additional flags to pass to act
  -v, --version                 Show version
  -h, --help                    Show this help message
      --debug                   Log git and runner details

Commands:
  list, ls                      List all workflows
  init <workflow>               Initialize test scenarios for a workflow
  list-scenarios <workflow>     List scenarios for a workflow
  test <workflow> <num>         Test a specific scenario (simulate)
  test <workflow> <num> --act   Test with act (requires Docker)
  test-all <workflow> [--act]   Test all scenarios for a workflow
  help                          Show this help message

Internal:
  mcp-server                    Start MCP Server

Arguments:
  <workflow>  Workflow name (filename without extension) or number from list
  <num>       Scenario number from list-scenarios
"""

_VALUE_FLAGS = {
    "-c": "config_dir", "--config-dir": "config_dir",
    "-w": "workflows_dir", "--workflows-dir": "workflows_dir",
    "-p": "project_dir", "--project-dir": "project_dir",
    "-a": "act_flags", "--act-flags": "act_flags",
}
_ACT_MARKERS = ("--act", "-a")


def parse_args(argv: list[str]) -> tuple[dict[str, str], list[str], set[str]]:
    """Split argv into value flags, positionals and switch flags.

    `-a` before the command takes a value (act flags); after it, `-a`
    and `--act` select execute mode.
    """
    values: dict[str, str] = {}
    positionals: list[str] = []
    switches: set[str] = set()
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in _ACT_MARKERS and positionals:
            switches.add("act")
        elif arg in _VALUE_FLAGS:
            if i + 1 >= len(argv):
                raise GatError(f"Missing value for {arg}")
            values[_VALUE_FLAGS[arg]] = argv[i + 1]
            i += 1
        elif arg in ("-h", "--help"):
            switches.add("help")
        elif arg in ("-v", "--version"):
            switches.add("version")
        elif arg == "--debug":
            switches.add("debug")
        else:
            positionals.append(arg)
        i += 1
    return values, positionals, switches


def run(argv: list[str]) -> int:
    values, args, switches = parse_args(argv)

    if "help" in switches:
        print(USAGE)
        return 0
    if "version" in switches:
        print(f"gat version {__version__}")
        return 0

    logging.basicConfig(
        level=logging.DEBUG if "debug" in switches else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = GatConfig.from_flags(**values)
    command = args[0] if args else None
    arg1 = args[1] if len(args) > 1 else None
    arg2 = args[2] if len(args) > 2 else None
    use_act = "act" in switches

    if command not in ("help", None):
        notes = config.non_default_settings()
        for note in notes:
            console.info(note)
        if notes:
            print()

    if command in ("list", "ls"):
        from gat.commands.list import cmd_list
        cmd_list(config)

    elif command == "init":
        from gat.commands.init import cmd_init
        cmd_init(arg1, config)

    elif command in ("list-scenarios", "scenarios"):
        from gat.commands.scenarios import cmd_list_scenarios
        cmd_list_scenarios(arg1, config)

    elif command == "test":
        from gat.commands.run import cmd_test
        return cmd_test(arg1, arg2, use_act, config)

    elif command == "test-all":
        from gat.commands.run_all import cmd_test_all
        return cmd_test_all(arg1, use_act, config)

    elif command == "mcp-server":
        from gat.integrations.mcp_server import run_server
        run_server(config)

    elif command in ("help", None):
        print(USAGE)

    else:
        console.error(f"Unknown command: {command}")
        print()
        print(USAGE)
        return 1
    return 0


def main():
    try:
        code = run(sys.argv[1:])
    except DispatchUnavailableError as e:
        console.warning(str(e))
        if e.hint:
            console.info(e.hint)
        code = 1
    except GatError as e:
        console.error(str(e))
        if e.hint:
            console.info(e.hint)
        code = 1
    sys.exit(code)
