"""sonarqube_provider/schema.py

Field declarations for provider resources.

A resource's schema is a plain tuple of :class:`FieldSchema`. It is pure data:
no network calls, no state. The lifecycle code in ``webhook.py`` uses it to
decide which changes can be applied in place and which need a replacement.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from sonarqube_provider.types import WebhookSpec, WebhookState


@dataclass(frozen=True)
class FieldSchema:
    """One attribute of a resource."""

    name: str
    type: str = "string"
    required: bool = False
    optional: bool = False
    computed: bool = False
    # Changing the value destroys and recreates the remote object.
    force_new: bool = False
    sensitive: bool = False


WEBHOOK_SCHEMA: Tuple[FieldSchema, ...] = (
    FieldSchema("key", optional=True, computed=True),
    FieldSchema("project", optional=True, force_new=True),
    FieldSchema("name", required=True),
    FieldSchema("url", required=True),
    FieldSchema("secret", optional=True, sensitive=True),
)

WEBHOOK_FIELDS: Dict[str, FieldSchema] = {f.name: f for f in WEBHOOK_SCHEMA}


def requires_replacement(state: WebhookState, spec: WebhookSpec) -> List[str]:
    """Names of force-new fields whose declared value differs from ``state``."""
    out: List[str] = []
    for f in WEBHOOK_SCHEMA:
        if not f.force_new or not hasattr(spec, f.name):
            continue
        if getattr(state, f.name) != getattr(spec, f.name):
            out.append(f.name)
    return out
