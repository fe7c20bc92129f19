"""Client factory for the CloudSearch config and domain services."""

import logging
from typing import Any, Optional

import boto3
from botocore.config import Config

from .connection_settings import ConnectionConfig, load_config

logger = logging.getLogger(__name__)

CONFIG_SERVICE = "cloudsearch"
DOMAIN_SERVICE = "cloudsearchdomain"


def _session(config: ConnectionConfig) -> boto3.session.Session:
    return boto3.session.Session(
        profile_name=config.profile,
        region_name=config.region,
    )


def create_client(
    service: str = CONFIG_SERVICE,
    config: Optional[ConnectionConfig] = None,
    **overrides,
) -> Any:
    """Create and return a boto3 client for *service*.

    Args:
        service: ``"cloudsearch"`` for domain configuration or
            ``"cloudsearchdomain"`` for document upload and search.
        config: An explicit :class:`ConnectionConfig`.  When ``None``,
            one is built via :func:`load_config` (env vars + *overrides*).
        **overrides: Passed to :func:`load_config` when *config* is ``None``.

    Returns:
        A configured boto3 client.  ``cloudsearchdomain`` clients are bound
        to ``config.endpoint`` and raise ``ValueError`` without one.
    """
    if config is None:
        config = load_config(**overrides)

    kwargs: dict = {
        "config": Config(
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            retries=config.retries,
        ),
        "verify": config.verify_ssl,
    }

    if service == DOMAIN_SERVICE:
        if not config.endpoint_url:
            raise ValueError(
                "A domain endpoint is required for cloudsearchdomain clients. "
                "Set CLOUDSEARCH_ENDPOINT or pass endpoint=..."
            )
        kwargs["endpoint_url"] = config.endpoint_url
    elif service != CONFIG_SERVICE:
        raise ValueError(f"Unsupported service: {service!r}")

    logger.debug("Creating %s client (region=%s)", service, config.region)
    return _session(config).client(service, **kwargs)
