"""sonarqube_provider/api.py

All SonarQube HTTP calls go through here.

Design goals:
  - Resources build a path + params and state which status code they expect.
  - This module performs the request and turns every failure into a
    SonarQubeError subclass. There are no retries at this layer.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import urlencode

import requests

from sonarqube_provider.errors import (
    SonarQubeAPIError,
    SonarQubeRequestError,
    WebhookDecodeError,
)
from sonarqube_provider.types import ProviderConfiguration

logger = logging.getLogger(__name__)


def build_url(cfg: ProviderConfiguration, path: str, params: Optional[Mapping[str, str]] = None) -> str:
    """Join the configured base URL with an API path and query string."""
    url = f"{cfg.base_url.rstrip('/')}/{path.lstrip('/')}"
    if params:
        url = f"{url}?{urlencode(sorted(params.items()))}"
    return url


def _error_messages(resp: requests.Response) -> List[str]:
    """Extract SonarQube's ``{"errors": [{"msg": ...}]}`` messages, if any."""
    try:
        data = resp.json()
    except ValueError:
        return []
    if not isinstance(data, dict):
        return []
    out: List[str] = []
    for err in data.get("errors") or []:
        if isinstance(err, dict) and err.get("msg"):
            out.append(str(err["msg"]))
    return out


def http_request_helper(
    session: requests.Session,
    method: str,
    url: str,
    expected_status: int,
    error_context: str,
    *,
    timeout: Optional[float] = None,
) -> requests.Response:
    """Perform one request and check the status code.

    Returns the response when its status equals ``expected_status``.

    Raises:
        SonarQubeRequestError: transport failure.
        SonarQubeAPIError: any other status code.
    """
    logger.debug("%s: %s %s", error_context, method, url)
    try:
        resp = session.request(method, url, timeout=timeout)
    except requests.RequestException as e:
        raise SonarQubeRequestError(f"{error_context}: failed to execute http request: {e}") from e

    if resp.status_code != expected_status:
        messages = _error_messages(resp)
        logger.debug("%s: HTTP %s %r", error_context, resp.status_code, resp.text[:200])
        raise SonarQubeAPIError(
            error_context,
            resp.status_code,
            expected_status,
            messages=messages,
            body=resp.text or "",
        )
    return resp


def call(
    cfg: ProviderConfiguration,
    method: str,
    path: str,
    expected_status: int,
    error_context: str,
    params: Optional[Mapping[str, str]] = None,
) -> requests.Response:
    """``http_request_helper`` bound to a provider configuration."""
    return http_request_helper(
        cfg.session,
        method,
        build_url(cfg, path, params),
        expected_status,
        error_context,
        timeout=cfg.timeout,
    )


def decode_json(resp: requests.Response, error_context: str) -> Dict[str, Any]:
    """Decode a JSON object body. Any parse failure is fatal."""
    try:
        data = resp.json()
    except ValueError as e:
        raise WebhookDecodeError(f"{error_context}: failed to decode JSON response: {e}") from e
    if not isinstance(data, dict):
        raise WebhookDecodeError(
            f"{error_context}: failed to decode JSON response: expected an object, got {type(data).__name__}"
        )
    return data
