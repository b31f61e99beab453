"""sonarqube_provider/config.py

Build a :class:`ProviderConfiguration` from the environment.

A ``.env`` file at the repo root is loaded first (values already exported in
the shell win), so terminal runs and IDE runs behave the same.

Variables:
  SONAR_HOST                      base URL (default http://localhost:9000)
  SONAR_TOKEN                     user token
  SONAR_USER / SONAR_PASS         basic auth, used when no token is set
  SONAR_TLS_INSECURE_SKIP_VERIFY  true/1/yes disables TLS verification
  SONAR_HTTP_TIMEOUT              per-request timeout in seconds (default 30)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional
from urllib.parse import urlparse

import requests
from dotenv import load_dotenv

from sonarqube_provider.errors import SonarQubeConfigError
from sonarqube_provider.types import ProviderConfiguration

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parents[1]
ENV_PATH = ROOT_DIR / ".env"

SONAR_HOST_DEFAULT = "http://localhost:9000"
HTTP_TIMEOUT_DEFAULT = 30.0

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def build_session(
    *,
    token: Optional[str] = None,
    user: Optional[str] = None,
    password: Optional[str] = None,
    verify_tls: bool = True,
) -> requests.Session:
    """Create an authenticated session.

    SonarQube accepts a token as the basic-auth login with an empty password.
    """
    session = requests.Session()
    if token:
        session.auth = (token, "")
    elif user and password:
        session.auth = (user, password)
    else:
        raise SonarQubeConfigError(
            "Missing credentials: set SONAR_TOKEN, or both SONAR_USER and SONAR_PASS."
        )
    session.verify = verify_tls
    session.headers.update({"Accept": "application/json"})
    return session


def load_provider_configuration(
    env: Optional[Mapping[str, str]] = None,
    *,
    dotenv_path: Optional[Path] = ENV_PATH,
) -> ProviderConfiguration:
    """Read provider settings from ``env`` (default: ``os.environ``)."""
    if env is None:
        if dotenv_path is not None and dotenv_path.exists():
            load_dotenv(dotenv_path, override=False)
        env = os.environ

    host = (env.get("SONAR_HOST") or SONAR_HOST_DEFAULT).strip()
    parsed = urlparse(host)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise SonarQubeConfigError(f"SONAR_HOST must be an http(s) URL, got {host!r}")

    raw_timeout = env.get("SONAR_HTTP_TIMEOUT")
    try:
        timeout = float(raw_timeout) if raw_timeout else HTTP_TIMEOUT_DEFAULT
    except ValueError:
        raise SonarQubeConfigError(f"SONAR_HTTP_TIMEOUT must be a number, got {raw_timeout!r}") from None
    if timeout <= 0:
        raise SonarQubeConfigError(f"SONAR_HTTP_TIMEOUT must be positive, got {timeout}")

    insecure = _flag(env.get("SONAR_TLS_INSECURE_SKIP_VERIFY"))
    if insecure:
        logger.warning("TLS verification is disabled for %s", host)

    session = build_session(
        token=env.get("SONAR_TOKEN"),
        user=env.get("SONAR_USER"),
        password=env.get("SONAR_PASS"),
        verify_tls=not insecure,
    )
    return ProviderConfiguration(base_url=host.rstrip("/"), session=session, timeout=timeout)
