#!/usr/bin/env python3
"""
Command-line front end for the sonarqube_webhook resource.

Connection settings come from the environment (or .env at the repo root):
SONAR_HOST, SONAR_TOKEN (or SONAR_USER/SONAR_PASS), SONAR_TLS_INSECURE_SKIP_VERIFY.

Usage:
  python sonarqube_cli.py create --name build-notify --url https://ci.example/hook
  python sonarqube_cli.py read AVxyz --project my_project
  python sonarqube_cli.py update AVxyz --name renamed --url https://ci.example/hook
  python sonarqube_cli.py delete AVxyz
  python sonarqube_cli.py import my_project/AVxyz

Exit codes: 0 ok, 1 SonarQube/protocol error, 2 configuration or usage error,
3 the webhook does not exist (read/update).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from cli.webhook_args import add_webhook_args
from cli.webhook_commands import COMMANDS
from sonarqube_provider.config import load_provider_configuration
from sonarqube_provider.errors import SonarQubeConfigError, SonarQubeError
from sonarqube_provider.resources import get_resource

EXIT_ERROR = 1
EXIT_CONFIG = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage SonarQube webhooks.")
    parser.add_argument(
        "--show-secret",
        action="store_true",
        help="Print webhook secrets instead of redacting them",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP calls (DEBUG)")
    add_webhook_args(parser)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_provider_configuration()
    except SonarQubeConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG

    resource = get_resource("sonarqube_webhook")
    try:
        return COMMANDS[args.command](args, cfg, resource)
    except SonarQubeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
