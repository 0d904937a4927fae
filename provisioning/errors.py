"""
Errors raised by the provisioning scripts.

The CLI turns every ProvisioningError into a logged message, an
optional hint, and exit status 1.
"""

from typing import Optional


class ProvisioningError(Exception):
    """Base error for provisioning failures."""

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        self.message = message
        self.hint = hint
        super().__init__(self.message)


class SetupAbortedError(ProvisioningError):
    """Raised when operator input makes the setup impossible to continue."""


class UpstreamDeploymentError(ProvisioningError):
    """Raised when a Firebase CLI command fails."""

    def __init__(self, command: list[str], reason: str, hint: Optional[str] = None) -> None:
        super().__init__(f"Command failed: {' '.join(command)} ({reason})", hint)
        self.command = command
        self.reason = reason
