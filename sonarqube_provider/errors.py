"""sonarqube_provider/errors.py

Exception hierarchy for the provider.

Everything raised on purpose derives from :class:`SonarQubeError` so callers
(the CLI, tests, an embedding engine) can catch one type. Errors are never
swallowed or retried here; they abort the current operation.
"""

from __future__ import annotations

from typing import List, Optional


class SonarQubeError(Exception):
    """Base class for provider errors."""

    def with_context(self, prefix: str) -> "SonarQubeError":
        """Same error type, message prefixed with ``prefix``."""
        return type(self)(f"{prefix}: {self}")


class SonarQubeConfigError(SonarQubeError):
    """Provider configuration is missing or invalid."""


class SonarQubeRequestError(SonarQubeError):
    """The HTTP request failed at transport level (DNS, TLS, timeout...)."""


class SonarQubeAPIError(SonarQubeError):
    """SonarQube answered with a status code other than the expected one."""

    def __init__(
        self,
        context: str,
        status_code: int,
        expected_status: int,
        messages: Optional[List[str]] = None,
        body: str = "",
    ) -> None:
        self.context = context
        self.status_code = status_code
        self.expected_status = expected_status
        self.messages = list(messages or [])
        self.body = body

        detail = "; ".join(self.messages) if self.messages else body[:200]
        msg = (
            f"{context}: API returned an unexpected status code "
            f"{status_code} (expected {expected_status})"
        )
        if detail:
            msg += f": {detail}"
        super().__init__(msg)

    def with_context(self, prefix: str) -> "SonarQubeAPIError":
        return SonarQubeAPIError(
            f"{prefix}: {self.context}",
            self.status_code,
            self.expected_status,
            messages=self.messages,
            body=self.body,
        )


class WebhookDecodeError(SonarQubeError):
    """A response body could not be decoded as JSON."""


class WebhookValidationError(SonarQubeError):
    """Well-formed data that breaks an expected invariant (e.g. empty key)."""


class WebhookNotFoundError(SonarQubeError):
    """A webhook that must exist is missing from the server's list."""

    def __init__(self, key: str, project: Optional[str] = None, context: str = "") -> None:
        self.key = key
        self.project = project
        self.context = context
        scope = f"project '{project}'" if project else "global webhooks"
        prefix = f"{context}: " if context else ""
        super().__init__(f"{prefix}webhook '{key}' not found in {scope}")

    def with_context(self, prefix: str) -> "WebhookNotFoundError":
        ctx = f"{prefix}: {self.context}" if self.context else prefix
        return WebhookNotFoundError(self.key, self.project, context=ctx)
