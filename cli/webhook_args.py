from __future__ import annotations

import argparse


def _add_spec_args(parser: argparse.ArgumentParser, *, required: bool) -> None:
    """Flags that make up a webhook's declared configuration."""
    parser.add_argument("--name", required=required, help="Webhook display name")
    parser.add_argument("--url", required=required, help="Callback URL SonarQube will POST to")
    parser.add_argument("--secret", help="Optional HMAC secret sent with each delivery")


def _add_project_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project",
        help="Project key. Omit for a global webhook. Cannot change after creation.",
    )


def add_webhook_args(parser: argparse.ArgumentParser) -> None:
    """Register the sonarqube_webhook subcommands on ``parser``.

    - create : --name --url [--project] [--secret]
    - read   : KEY [--project]
    - update : KEY --name --url [--project] [--secret]
    - delete : KEY
    - import : ID  (<key> or <project>/<key>)
    """
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("create", help="Create a webhook")
    _add_spec_args(p, required=True)
    _add_project_arg(p)

    p = sub.add_parser("read", help="Show a webhook (exit code 3 when it no longer exists)")
    p.add_argument("key", help="Webhook key")
    _add_project_arg(p)

    p = sub.add_parser("update", help="Replace a webhook's name/url/secret")
    p.add_argument("key", help="Webhook key")
    _add_spec_args(p, required=True)
    _add_project_arg(p)

    p = sub.add_parser("delete", help="Delete a webhook")
    p.add_argument("key", help="Webhook key")

    p = sub.add_parser("import", help="Adopt an existing webhook by id")
    p.add_argument("import_id", metavar="ID", help="<key> for a global webhook, <project>/<key> otherwise")
