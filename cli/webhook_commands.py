"""cli.webhook_commands

One function per subcommand. Each takes parsed args plus a provider
configuration and returns a process exit code; output goes to stdout as JSON.
"""

from __future__ import annotations

import argparse
import json
from typing import Callable, Dict, Optional

from sonarqube_provider.resources import Resource
from sonarqube_provider.types import ProviderConfiguration, WebhookSpec, WebhookState

EXIT_OK = 0
EXIT_ABSENT = 3


def _spec_from_args(args: argparse.Namespace) -> WebhookSpec:
    return WebhookSpec(
        name=args.name,
        url=args.url,
        project=getattr(args, "project", None),
        secret=getattr(args, "secret", None),
    )


def _state_from_args(args: argparse.Namespace) -> WebhookState:
    return WebhookState(id=args.key, key=args.key, project=getattr(args, "project", None))


def _print_state(state: Optional[WebhookState], *, show_secret: bool) -> None:
    if state is None:
        print(json.dumps({"id": None}, indent=2))
        return
    print(json.dumps(state.to_dict(show_secret=show_secret), indent=2))


def run_create(args: argparse.Namespace, cfg: ProviderConfiguration, resource: Resource) -> int:
    state = resource.create(cfg, _spec_from_args(args))
    _print_state(state, show_secret=args.show_secret)
    return EXIT_OK


def run_read(args: argparse.Namespace, cfg: ProviderConfiguration, resource: Resource) -> int:
    state = resource.read(cfg, _state_from_args(args))
    _print_state(state, show_secret=args.show_secret)
    return EXIT_OK if state is not None else EXIT_ABSENT


def run_update(args: argparse.Namespace, cfg: ProviderConfiguration, resource: Resource) -> int:
    state = resource.update(cfg, _state_from_args(args), _spec_from_args(args))
    _print_state(state, show_secret=args.show_secret)
    return EXIT_OK if state is not None else EXIT_ABSENT


def run_delete(args: argparse.Namespace, cfg: ProviderConfiguration, resource: Resource) -> int:
    resource.delete(cfg, _state_from_args(args))
    print(f"Deleted webhook {args.key}")
    return EXIT_OK


def run_import(args: argparse.Namespace, cfg: ProviderConfiguration, resource: Resource) -> int:
    state = resource.importer(cfg, args.import_id)
    _print_state(state, show_secret=args.show_secret)
    return EXIT_OK


COMMANDS: Dict[str, Callable[[argparse.Namespace, ProviderConfiguration, Resource], int]] = {
    "create": run_create,
    "read": run_read,
    "update": run_update,
    "delete": run_delete,
    "import": run_import,
}
