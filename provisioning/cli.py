"""
CLI entry point for deployment provisioning.

Usage:
    # Generate the encryption key, write .env, configure and deploy functions
    python -m provisioning.cli security

    # Same, writing the environment file elsewhere
    python -m provisioning.cli security --env-file deploy/.env

    # Pick a Firebase project, configure it and deploy functions
    python -m provisioning.cli firebase
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from provisioning.errors import ProvisioningError
from provisioning.firebase import FirebaseCLI
from provisioning.firebase_setup import run_firebase_setup
from provisioning.security_setup import run_security_setup

logger = logging.getLogger(__name__)


def cmd_security(args: argparse.Namespace) -> None:
    """Run the security setup and print its summary."""
    summary = run_security_setup(
        FirebaseCLI(executable=args.firebase), env_path=Path(args.env_file)
    )
    print("Configuration summary")
    print("=" * 32)
    print(f"Encryption key:  {summary.encryption_key}")
    print(f"Function URL:    {summary.function_url}")
    print(f"Allowed origins: {summary.allowed_origins or 'not set'}")
    print(f"Env file:        {'written' if summary.env_written else 'unchanged'}")
    print("Keep the key out of version control and rotate it regularly.")


def cmd_firebase(args: argparse.Namespace) -> None:
    """Run the Firebase project setup and print its summary."""
    summary = run_firebase_setup(FirebaseCLI(executable=args.firebase))
    print("Configuration summary")
    print("=" * 32)
    print(f"Project:         {summary.project_id}")
    print(f"Encryption key:  {summary.encryption_key}")
    print(f"Allowed origins: {summary.allowed_origins}")
    print("Check function logs with: firebase functions:log")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per setup flow."""
    parser = argparse.ArgumentParser(
        prog="provisioning", description="BananaEditor deployment provisioning"
    )
    parser.add_argument(
        "--firebase", default="firebase", help="Firebase CLI executable (default firebase)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    security_parser = subparsers.add_parser(
        "security", help="Generate keys, write .env and deploy functions"
    )
    security_parser.add_argument(
        "--env-file", default=".env", dest="env_file",
        help="Environment file to write (default .env)",
    )
    security_parser.set_defaults(func=cmd_security)

    firebase_parser = subparsers.add_parser(
        "firebase", help="Select a Firebase project, configure and deploy functions"
    )
    firebase_parser.set_defaults(func=cmd_firebase)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments and run the selected setup flow.

    Exits with status 1 when the flow fails.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    )
    try:
        args.func(args)
    except ProvisioningError as exc:
        logger.error("%s", exc.message)
        if exc.hint:
            logger.error("Hint: %s", exc.hint)
        sys.exit(1)


if __name__ == "__main__":
    main()
