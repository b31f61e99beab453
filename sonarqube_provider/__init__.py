"""SonarQube provider resources.

Split into:
  - types.py     : small shared data structures (config, webhook, state)
  - config.py    : env / .env loading into a ProviderConfiguration
  - api.py       : the one place HTTP requests are issued
  - errors.py    : exception hierarchy
  - schema.py    : resource field declarations
  - webhook.py   : the sonarqube_webhook lifecycle (create/read/update/delete/import)
  - resources.py : registry of resource name -> lifecycle hooks

sonarqube_cli.py is the command-line entrypoint on top of this package.
"""

from sonarqube_provider.errors import (
    SonarQubeAPIError,
    SonarQubeConfigError,
    SonarQubeError,
    SonarQubeRequestError,
    WebhookDecodeError,
    WebhookNotFoundError,
    WebhookValidationError,
)
from sonarqube_provider.types import (
    ProviderConfiguration,
    Webhook,
    WebhookSpec,
    WebhookState,
)

__all__ = [
    "ProviderConfiguration",
    "SonarQubeAPIError",
    "SonarQubeConfigError",
    "SonarQubeError",
    "SonarQubeRequestError",
    "Webhook",
    "WebhookDecodeError",
    "WebhookNotFoundError",
    "WebhookSpec",
    "WebhookState",
    "WebhookValidationError",
]
