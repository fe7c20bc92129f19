"""Document upload (``cloudsearchdomain`` service)."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from . import descriptors
from .batch import Documents, encode_body
from .dispatch import execute


def upload(client: Any, domain: str, documents: Documents) -> dict:
    """Upload add/delete operations to a domain.

    Args:
        client: ``cloudsearchdomain`` client bound to the domain's document
            endpoint, or ``None`` to create one for *domain*.  An injected
            client keeps its own endpoint; *domain* does not redirect it.
        domain: Document endpoint of the domain.  Only used when *client*
            is ``None``.
        documents: ``UploadDocument`` objects, dicts with ``type``/``id``/
            ``fields``, or an already-built batch (see
            :func:`cloudsearch_handler.batch.needs_batching`).  A pre-built
            batch given as a list is JSON-encoded without validation.

    Returns:
        The ``UploadDocuments`` response (``status``, ``adds``, ``deletes``,
        ``warnings``).

    Raises:
        ValueError: If *documents* is an empty sequence.
    """
    request = descriptors.upload(domain, documents)
    params = {**request.params, "documents": encode_body(request.params["documents"])}
    return execute(replace(request, params=params), client)
