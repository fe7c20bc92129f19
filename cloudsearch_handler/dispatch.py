"""Execute request descriptors against boto3 clients."""

import logging
from dataclasses import replace
from typing import Any, Optional

from botocore import xform_name

from .client import CONFIG_SERVICE, DOMAIN_SERVICE, create_client
from .connection_settings import ConnectionConfig, load_config
from .descriptors import CLOUDSEARCH, CLOUDSEARCH_DOMAIN, RequestDescriptor

logger = logging.getLogger(__name__)

SERVICE_NAMES = {
    CLOUDSEARCH: CONFIG_SERVICE,
    CLOUDSEARCH_DOMAIN: DOMAIN_SERVICE,
}


def _service_name(request: RequestDescriptor) -> str:
    try:
        return SERVICE_NAMES[request.service]
    except KeyError:
        raise ValueError(f"Unknown service in request: {request.service!r}") from None


def client_for(
    request: RequestDescriptor,
    config: Optional[ConnectionConfig] = None,
) -> Any:
    """Create a client matching the descriptor's service and endpoint."""
    service = _service_name(request)

    if config is None:
        config = load_config()

    endpoint = (request.options or {}).get("endpoint")
    if endpoint:
        config = replace(config, endpoint=endpoint)
    return create_client(service, config=config)


def execute(
    request: RequestDescriptor,
    client: Any = None,
    config: Optional[ConnectionConfig] = None,
) -> dict:
    """Run one descriptor and return the service response.

    Args:
        request: Descriptor built by :mod:`cloudsearch_handler.descriptors`.
        client: boto3 client to call.  When ``None``, a client is created
            for this call only, from *config* and the descriptor's endpoint.
        config: Used only when *client* is ``None``.

    Service errors (``botocore.exceptions.ClientError`` etc.) are raised
    unchanged.
    """
    _service_name(request)
    if client is None:
        client = client_for(request, config=config)

    method = getattr(client, xform_name(request.method))
    logger.debug("Calling %s.%s", request.service, request.method)
    return method(**request.params)
