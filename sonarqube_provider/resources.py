"""sonarqube_provider/resources.py

Central registry of provider resources.

Each entry bundles a resource's schema with its lifecycle hooks so callers
(the CLI, an embedding engine) look things up by resource type name instead
of importing per-resource modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from sonarqube_provider import webhook
from sonarqube_provider.schema import WEBHOOK_SCHEMA, FieldSchema
from sonarqube_provider.types import ProviderConfiguration, WebhookSpec, WebhookState


@dataclass(frozen=True)
class Resource:
    """Static description of one resource type."""

    name: str
    schema: Tuple[FieldSchema, ...]
    create: Callable[[ProviderConfiguration, WebhookSpec], WebhookState]
    read: Callable[[ProviderConfiguration, WebhookState], Optional[WebhookState]]
    update: Callable[[ProviderConfiguration, WebhookState, WebhookSpec], Optional[WebhookState]]
    delete: Callable[[ProviderConfiguration, WebhookState], None]
    importer: Callable[[ProviderConfiguration, str], WebhookState]

    def field(self, name: str) -> FieldSchema:
        for f in self.schema:
            if f.name == name:
                return f
        raise KeyError(f"{self.name} has no field {name!r}")


def resource_sonarqube_webhook() -> Resource:
    return Resource(
        name="sonarqube_webhook",
        schema=WEBHOOK_SCHEMA,
        create=webhook.create,
        read=webhook.read,
        update=webhook.update,
        delete=webhook.delete,
        importer=webhook.import_state,
    )


RESOURCES: Dict[str, Resource] = {
    "sonarqube_webhook": resource_sonarqube_webhook(),
}


def get_resource(name: str) -> Resource:
    try:
        return RESOURCES[name]
    except KeyError:
        known = ", ".join(sorted(RESOURCES))
        raise KeyError(f"Unknown resource type {name!r} (known: {known})") from None
