"""Error kinds raised by gat commands.

Every error carries an optional remediation hint that the CLI prints
below the message.
"""
from __future__ import annotations


class GatError(Exception):
    def __init__(self, message: str, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self):
        return self.message


# ─── Configuration ───

class ConfigurationError(GatError):
    """Missing or unusable on-disk configuration (always fatal)."""


class NoWorkflowsDirectoryError(ConfigurationError):
    def __init__(self, workflows_dir: str):
        super().__init__(
            f"No workflows directory found: {workflows_dir}",
            hint="Use -w/--workflows-dir to point at your workflows",
        )
        self.workflows_dir = workflows_dir


class NoWorkflowsFoundError(ConfigurationError):
    def __init__(self, workflows_dir: str):
        super().__init__(f"No workflow files found in {workflows_dir}")
        self.workflows_dir = workflows_dir


class WorkflowNotFoundError(ConfigurationError):
    def __init__(self, selector: str):
        super().__init__(
            f"Workflow file not found: {selector}",
            hint="Run: gat list",
        )
        self.selector = selector


class ScenarioSetNotFoundError(ConfigurationError):
    def __init__(self, basename: str, path: str):
        super().__init__(
            f"No scenarios found for workflow: {basename}",
            hint="Run: gat init <workflow> first",
        )
        self.basename = basename
        self.path = path


# ─── Operator input ───

class ValidationError(GatError):
    """Bad operator input such as a scenario number out of range."""


# ─── Project root ───

class NotAProjectError(GatError):
    def __init__(self, message: str = "Not inside a git repository", hint: str | None = None):
        super().__init__(
            message,
            hint=hint or "Use -p/--project-dir to specify the git repository path",
        )


class DirectoryNotFoundError(NotAProjectError):
    def __init__(self, path: str):
        super().__init__(f"Specified project directory does not exist: {path}")
        self.path = path


# ─── External runner ───

class DispatchUnavailableError(GatError):
    """The runner cannot be started at all; reported as a warning."""


class ToolUnavailableError(DispatchUnavailableError):
    def __init__(self, tool: str = "act"):
        super().__init__(f"{tool} is not installed", hint=f"Install with: brew install {tool}")
        self.tool = tool


class EngineUnavailableError(DispatchUnavailableError):
    def __init__(self, engine: str = "docker"):
        super().__init__(f"{engine.capitalize()} is not running")
        self.engine = engine


class ExternalProcessError(GatError):
    def __init__(self, returncode: int, program: str = "act"):
        super().__init__(f"{program.capitalize()} exited with code: {returncode}")
        self.returncode = returncode
        self.program = program
