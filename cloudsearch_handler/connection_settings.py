"""Connection settings for Amazon CloudSearch clients.

Credentials are never handled here: boto3 resolves them through its own
provider chain (env vars, shared config, instance roles).

All settings can be overridden via environment variables or by passing
values directly to ``ConnectionConfig``.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass
class ConnectionConfig:
    """Client configuration for the CloudSearch config and domain APIs."""

    region: Optional[str] = None
    profile: Optional[str] = None
    endpoint: Optional[str] = None
    connect_timeout: int = 10
    read_timeout: int = 30
    max_retries: int = 0
    verify_ssl: bool = True

    @property
    def endpoint_url(self) -> Optional[str]:
        """Return the document/search endpoint as a URL boto3 accepts."""
        if not self.endpoint:
            return None
        if self.endpoint.startswith(("http://", "https://")):
            return self.endpoint
        return f"https://{self.endpoint}"

    @property
    def retries(self) -> dict:
        return {"max_attempts": self.max_retries, "mode": "standard"}


def load_config(**overrides) -> ConnectionConfig:
    """Build a ConnectionConfig with env-var and keyword overrides.

    Resolution order (later wins):
      1. Dataclass defaults
      2. Environment variables (``CLOUDSEARCH_REGION``, etc.)
      3. Explicit keyword arguments

    Supported env vars:
      - CLOUDSEARCH_REGION / CLOUDSEARCH_PROFILE
      - CLOUDSEARCH_ENDPOINT  (document/search endpoint of a domain)
      - CLOUDSEARCH_CONNECT_TIMEOUT / CLOUDSEARCH_READ_TIMEOUT
      - CLOUDSEARCH_MAX_RETRIES
      - CLOUDSEARCH_VERIFY_SSL  ("true"/"false")
    """
    cfg = ConnectionConfig()

    # Env-var layer
    region = os.getenv("CLOUDSEARCH_REGION")
    if region:
        cfg.region = region

    profile = os.getenv("CLOUDSEARCH_PROFILE")
    if profile:
        cfg.profile = profile

    endpoint = os.getenv("CLOUDSEARCH_ENDPOINT")
    if endpoint:
        cfg.endpoint = endpoint

    connect_timeout = os.getenv("CLOUDSEARCH_CONNECT_TIMEOUT")
    if connect_timeout:
        cfg.connect_timeout = int(connect_timeout)

    read_timeout = os.getenv("CLOUDSEARCH_READ_TIMEOUT")
    if read_timeout:
        cfg.read_timeout = int(read_timeout)

    max_retries = os.getenv("CLOUDSEARCH_MAX_RETRIES")
    if max_retries:
        cfg.max_retries = int(max_retries)

    verify_env = os.getenv("CLOUDSEARCH_VERIFY_SSL")
    if verify_env is not None:
        cfg.verify_ssl = _parse_bool(verify_env)

    # Explicit overrides layer
    for key, value in overrides.items():
        if hasattr(cfg, key):
            setattr(cfg, key, value)
        else:
            raise TypeError(f"Unknown config key: {key!r}")

    return cfg
