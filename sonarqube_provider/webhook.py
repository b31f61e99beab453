"""sonarqube_provider/webhook.py

Lifecycle of the ``sonarqube_webhook`` resource.

  create  -> POST api/webhooks/create  (200) -> read
  read    -> GET  api/webhooks/list    (200), scan for the key
  update  -> POST api/webhooks/update  (204) -> read
  delete  -> POST api/webhooks/delete  (204)
  import  -> read, starting from an externally supplied key

Every operation takes the provider configuration and immutable inputs and
returns a new :class:`WebhookState`. A read that cannot find the key returns
``None``: the webhook is absent, which is not an error.

The server is authoritative: after create and update the returned state comes
from the list endpoint, not from what was sent.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional

from sonarqube_provider.api import call, decode_json
from sonarqube_provider.errors import (
    SonarQubeError,
    WebhookNotFoundError,
    WebhookValidationError,
)
from sonarqube_provider.schema import requires_replacement
from sonarqube_provider.types import ProviderConfiguration, Webhook, WebhookSpec, WebhookState

logger = logging.getLogger(__name__)

CREATE_PATH = "api/webhooks/create"
LIST_PATH = "api/webhooks/list"
UPDATE_PATH = "api/webhooks/update"
DELETE_PATH = "api/webhooks/delete"

HTTP_OK = 200
HTTP_NO_CONTENT = 204


def create(cfg: ProviderConfiguration, spec: WebhookSpec) -> WebhookState:
    """Create a webhook and return the server-confirmed state."""
    ctx = "create webhook"
    spec.validate()

    resp = call(cfg, "POST", CREATE_PATH, HTTP_OK, ctx, spec.to_params())
    data = decode_json(resp, ctx)

    created = data.get("webhook")
    if created is not None and not isinstance(created, dict):
        raise WebhookValidationError(f"{ctx}: 'webhook' is not an object: {created!r}")
    key = (created or {}).get("key")
    if not key or not isinstance(key, str):
        raise WebhookValidationError(f"{ctx}: Create response did not contain the webhook's key")

    logger.info("Created webhook %s (%s)", key, spec.name)

    state = read(cfg, WebhookState(id=key, project=spec.project))
    if state is None:
        raise WebhookNotFoundError(key, spec.project, context=ctx)
    return state


def list_webhooks(cfg: ProviderConfiguration, project: Optional[str] = None) -> List[Webhook]:
    """All webhooks of ``project`` (global webhooks when no project is given)."""
    ctx = "read webhook"
    params = {"project": project} if project else None

    resp = call(cfg, "GET", LIST_PATH, HTTP_OK, ctx, params)
    data = decode_json(resp, ctx)

    raw = data.get("webhooks")
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise WebhookValidationError(f"{ctx}: 'webhooks' is not a list: {raw!r}")
    return [Webhook.from_json(item, context=ctx) for item in raw]


def read(cfg: ProviderConfiguration, state: WebhookState) -> Optional[WebhookState]:
    """Refresh ``state`` from the server, or ``None`` when the key is gone."""
    state.require_id("read webhook")
    for hook in list_webhooks(cfg, state.project):
        if hook.key == state.id:
            return dataclasses.replace(
                state,
                id=hook.key,
                key=hook.key,
                name=hook.name,
                url=hook.url,
                secret=hook.secret,
            )

    logger.info("Webhook %s no longer exists; marking it absent", state.id)
    return None


def update(cfg: ProviderConfiguration, state: WebhookState, spec: WebhookSpec) -> Optional[WebhookState]:
    """Send the full desired configuration, then re-read."""
    ctx = "update webhook"
    state.require_id(ctx)
    spec.validate()

    replace = requires_replacement(state, spec)
    if replace:
        raise WebhookValidationError(
            f"{ctx}: cannot update {', '.join(replace)} in place; the webhook must be replaced"
        )

    params = {"webhook": state.id}
    params.update(spec.to_params())
    try:
        call(cfg, "POST", UPDATE_PATH, HTTP_NO_CONTENT, ctx, params)
    except SonarQubeError as e:
        raise e.with_context("error updating SonarQube webhook") from e

    return read(cfg, state)


def delete(cfg: ProviderConfiguration, state: WebhookState) -> None:
    """Delete the webhook. Success is the 204 alone; nothing is re-read."""
    ctx = "delete webhook"
    state.require_id(ctx)
    try:
        call(cfg, "POST", DELETE_PATH, HTTP_NO_CONTENT, ctx, {"webhook": state.id})
    except SonarQubeError as e:
        raise e.with_context("failed to delete webhook") from e
    logger.info("Deleted webhook %s", state.id)


def parse_import_id(import_id: str) -> WebhookState:
    """``<key>`` for a global webhook, ``<project>/<key>`` for a project one."""
    raw = (import_id or "").strip()
    project, sep, key = raw.rpartition("/")
    if not key or (sep and not project):
        raise WebhookValidationError(
            f"invalid import id {import_id!r}: expected '<key>' or '<project>/<key>'"
        )
    return WebhookState(id=key, project=project or None)


def import_state(cfg: ProviderConfiguration, import_id: str) -> WebhookState:
    """Adopt an existing webhook by key."""
    initial = parse_import_id(import_id)
    state = read(cfg, initial)
    if state is None:
        raise WebhookNotFoundError(initial.id, initial.project, context="import webhook")
    return state
