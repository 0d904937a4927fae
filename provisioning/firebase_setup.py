"""
Interactive Firebase project setup.

Checks the Firebase CLI, selects and activates a project, pushes a new
encryption key and the allowed origins, then deploys the functions.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from provisioning.errors import SetupAbortedError
from provisioning.firebase import FirebaseCLI, FirebaseProject
from provisioning.security_setup import generate_encryption_key, mask

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]


@dataclass(frozen=True)
class FirebaseSetupSummary:
    """What the setup configured."""

    project_id: str
    encryption_key: str
    allowed_origins: str


def choose_project(projects: list[FirebaseProject], choice: str) -> FirebaseProject:
    """Resolve an operator choice (1-based number or project id).

    Raises:
        SetupAbortedError: The choice matches no project.
    """
    choice = choice.strip()
    if choice.isdigit():
        index = int(choice) - 1
        if 0 <= index < len(projects):
            return projects[index]
    else:
        for project in projects:
            if project.project_id == choice:
                return project
    raise SetupAbortedError(f"Invalid project choice: {choice!r}")


def run_firebase_setup(firebase: FirebaseCLI, prompt: Prompt = input) -> FirebaseSetupSummary:
    """Run the Firebase project setup flow.

    Raises:
        SetupAbortedError: No project exists, the choice is invalid, or
            no allowed origins were given.
        UpstreamDeploymentError: A Firebase command failed.
    """
    logger.info("Firebase CLI %s", firebase.version())

    projects = firebase.list_projects()
    if not projects:
        raise SetupAbortedError(
            "No Firebase projects found",
            "Create one at https://console.firebase.google.com/",
        )

    for number, project in enumerate(projects, start=1):
        logger.info("%d. %s (%s)", number, project.project_id, project.display_name)

    project = choose_project(projects, prompt("Project number or id: "))
    firebase.use(project.project_id)
    logger.info("Active project: %s", project.project_id)

    encryption_key = generate_encryption_key()
    firebase.set_function_config("app.encryption_key", encryption_key)
    logger.info("Encryption key %s pushed to the cloud function config", mask(encryption_key))

    allowed_origins = prompt("Allowed origins (comma-separated, * allows all): ").strip()
    if not allowed_origins:
        raise SetupAbortedError("Allowed origins are required")
    firebase.set_function_config("app.allowed_origins", allowed_origins)

    firebase.deploy_functions()
    logger.info("Cloud functions deployed")

    return FirebaseSetupSummary(
        project_id=project.project_id,
        encryption_key=encryption_key,
        allowed_origins=allowed_origins,
    )
