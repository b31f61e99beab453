from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from sonarqube_provider.errors import WebhookValidationError


def _optional(value: Optional[str]) -> Optional[str]:
    # Empty strings are "unset", the same way an unset optional field reads.
    return value if value else None


@dataclass(frozen=True)
class ProviderConfiguration:
    """Connection settings shared (read-only) by every resource operation."""

    base_url: str
    session: requests.Session = field(repr=False, compare=False)
    timeout: float = 30.0


@dataclass(frozen=True)
class Webhook:
    """One webhook as reported by SonarQube's JSON API."""

    key: str
    name: str
    url: str
    secret: Optional[str] = None

    @classmethod
    def from_json(cls, raw: Any, *, context: str) -> "Webhook":
        if not isinstance(raw, dict):
            raise WebhookValidationError(f"{context}: webhook entry is not an object: {raw!r}")

        values: Dict[str, Optional[str]] = {}
        for name in ("key", "name", "url", "secret"):
            value = raw.get(name)
            if value is not None and not isinstance(value, str):
                raise WebhookValidationError(
                    f"{context}: webhook field '{name}' must be a string, got {type(value).__name__}"
                )
            values[name] = value

        missing = [name for name in ("key", "name", "url") if not values[name]]
        if missing:
            raise WebhookValidationError(
                f"{context}: webhook entry is missing {', '.join(missing)}: {raw!r}"
            )

        return cls(
            key=values["key"] or "",
            name=values["name"] or "",
            url=values["url"] or "",
            secret=_optional(values["secret"]),
        )


@dataclass(frozen=True)
class WebhookSpec:
    """Desired configuration of a webhook (what the user declared)."""

    name: str
    url: str
    project: Optional[str] = None
    secret: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "project", _optional(self.project))
        object.__setattr__(self, "secret", _optional(self.secret))

    def validate(self) -> "WebhookSpec":
        if not self.name:
            raise WebhookValidationError("webhook 'name' is required")
        if not self.url:
            raise WebhookValidationError("webhook 'url' is required")
        return self

    def to_params(self) -> Dict[str, str]:
        """Query parameters shared by create and update."""
        params = {"name": self.name, "url": self.url}
        if self.project:
            params["project"] = self.project
        if self.secret:
            params["secret"] = self.secret
        return params


@dataclass(frozen=True)
class WebhookState:
    """Local mirror of one webhook that exists on the server.

    ``id`` is the identifier the lifecycle is keyed on and always equals
    ``key`` once a read has succeeded. An absent webhook has no state at all
    (operations return ``None``).
    """

    id: str
    key: str = ""
    name: str = ""
    url: str = ""
    project: Optional[str] = None
    secret: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "project", _optional(self.project))
        object.__setattr__(self, "secret", _optional(self.secret))

    def require_id(self, context: str) -> "WebhookState":
        if not self.id or not self.id.strip():
            raise WebhookValidationError(f"{context}: webhook identifier is empty")
        return self

    def to_dict(self, *, show_secret: bool = False) -> Dict[str, Any]:
        secret = self.secret
        if secret and not show_secret:
            secret = "(sensitive)"
        return {
            "id": self.id,
            "key": self.key,
            "name": self.name,
            "url": self.url,
            "project": self.project,
            "secret": secret,
        }
