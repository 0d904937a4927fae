"""
Interactive security setup.

Generates the encryption key shared between the front end and the
cloud function, writes it with the function URL into `.env`, pushes the
key and the allowed origins to the function config, and deploys.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from provisioning.errors import SetupAbortedError
from provisioning.firebase import FirebaseCLI

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]

ENCRYPTION_KEY_BYTES = 32  # 256-bit key


@dataclass(frozen=True)
class SecuritySetupSummary:
    """What the setup configured."""

    encryption_key: str
    function_url: str
    allowed_origins: Optional[str]
    env_written: bool


def generate_encryption_key() -> str:
    """Return a 256-bit key as 64 hex characters."""
    return secrets.token_hex(ENCRYPTION_KEY_BYTES)


def mask(secret: str) -> str:
    """Return the first characters of `secret` for display."""
    return f"{secret[:8]}..."


def render_env_file(
    encryption_key: str, function_url: str, generated_at: Optional[datetime] = None
) -> str:
    """Return the contents of the front-end `.env` file."""
    generated_at = generated_at or datetime.now(timezone.utc)
    return (
        "# Front-end environment configuration\n"
        f"# Generated at {generated_at.isoformat()}\n"
        "\n"
        "# Encryption\n"
        f"PUBLIC_ENCRYPTION_KEY={encryption_key}\n"
        "\n"
        "# Cloud function\n"
        f"PUBLIC_FIREBASE_FUNCTION_URL={function_url}\n"
        f"PUBLIC_CLOUD_FUNCTION_URL={function_url}\n"
        "\n"
        "# Development\n"
        "NODE_ENV=development\n"
    )


def write_env_file(env_path: Path, content: str, prompt: Prompt) -> bool:
    """Write `content` to `env_path`, asking before overwriting.

    Returns:
        True if the file was written.
    """
    if env_path.exists():
        answer = prompt(f"{env_path} already exists, overwrite? (y/N): ")
        if answer.strip().lower() != "y":
            logger.info("Keeping existing %s", env_path)
            return False
    env_path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s", env_path)
    return True


def run_security_setup(
    firebase: FirebaseCLI,
    prompt: Prompt = input,
    env_path: Path = Path(".env"),
) -> SecuritySetupSummary:
    """Run the security setup flow.

    Args:
        firebase: Firebase CLI wrapper with an active project.
        prompt: Reads one line of operator input.
        env_path: Where to write the front-end environment file.

    Returns:
        Summary of what was configured.

    Raises:
        SetupAbortedError: The function URL is not an HTTPS URL.
        UpstreamDeploymentError: A Firebase command failed.
    """
    encryption_key = generate_encryption_key()
    logger.info("Generated encryption key %s", mask(encryption_key))

    function_url = prompt("Cloud function URL (e.g. https://your-function-url): ").strip()
    if not function_url.startswith("https://"):
        raise SetupAbortedError(
            "A valid HTTPS function URL is required", "The URL must start with https://"
        )

    env_written = write_env_file(
        env_path, render_env_file(encryption_key, function_url), prompt
    )

    firebase.set_function_config("app.encryption_key", encryption_key)
    logger.info("Encryption key pushed to the cloud function config")

    allowed_origins = prompt("Allowed origins (comma-separated, * allows all): ").strip()
    if allowed_origins:
        firebase.set_function_config("app.allowed_origins", allowed_origins)
        logger.info("Allowed origins pushed to the cloud function config")
    else:
        logger.warning("No allowed origins given; leaving the current value")

    firebase.deploy_functions()
    logger.info("Cloud functions deployed")

    return SecuritySetupSummary(
        encryption_key=encryption_key,
        function_url=function_url,
        allowed_origins=allowed_origins or None,
        env_written=env_written,
    )
