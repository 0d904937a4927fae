"""
Thin wrapper around the Firebase command-line tool.

Every command is run as an argument list (never through a shell) and
any failure is raised as UpstreamDeploymentError.
"""

import json
import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Optional

from provisioning.errors import UpstreamDeploymentError

logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


@dataclass(frozen=True)
class FirebaseProject:
    """A Firebase project visible to the logged-in account."""

    project_id: str
    display_name: str


class FirebaseCLI:
    """Runs `firebase` subcommands.

    Args:
        runner: Callable with the signature of `subprocess.run`.
        executable: Name or path of the Firebase binary.
    """

    def __init__(self, runner: Runner = subprocess.run, executable: str = "firebase") -> None:
        self._runner = runner
        self._executable = executable

    def run(self, *args: str, capture: bool = False, hint: Optional[str] = None) -> str:
        """Run a Firebase subcommand and return its stripped stdout.

        Args:
            args: Subcommand and arguments.
            capture: Capture output instead of streaming it to the terminal.
            hint: Advice attached to the error if the command fails.
        """
        command = [self._executable, *args]
        logger.debug("Running %s", " ".join(command[:2]))
        try:
            result = self._runner(
                command,
                check=True,
                text=True,
                capture_output=capture,
            )
        except FileNotFoundError as exc:
            raise UpstreamDeploymentError(
                command, "executable not found", "npm install -g firebase-tools"
            ) from exc
        except subprocess.CalledProcessError as exc:
            raise UpstreamDeploymentError(
                command, f"exit status {exc.returncode}", hint
            ) from exc
        return (result.stdout or "").strip()

    def version(self) -> str:
        """Return the installed CLI version."""
        return self.run("--version", capture=True, hint="npm install -g firebase-tools")

    def list_projects(self) -> list[FirebaseProject]:
        """Return the projects of the logged-in account."""
        output = self.run(
            "projects:list", "--json", capture=True, hint="firebase login"
        )
        try:
            payload = json.loads(output)
        except json.JSONDecodeError as exc:
            raise UpstreamDeploymentError(
                [self._executable, "projects:list", "--json"], "unparseable project list"
            ) from exc
        return [
            FirebaseProject(
                project_id=item["projectId"],
                display_name=item.get("displayName", ""),
            )
            for item in payload.get("result") or []
        ]

    def use(self, project_id: str) -> None:
        """Make `project_id` the active project."""
        self.run("use", project_id)

    def set_function_config(self, key: str, value: str) -> None:
        """Set a Cloud Functions runtime config value."""
        self.run(
            "functions:config:set",
            f"{key}={value}",
            hint="Make sure you are logged in and an active project is set.",
        )

    def deploy_functions(self) -> None:
        """Deploy the project's Cloud Functions."""
        self.run(
            "deploy",
            "--only",
            "functions",
            hint="Check the Firebase configuration and network connectivity.",
        )
