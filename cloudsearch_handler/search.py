"""Search helpers (``cloudsearchdomain`` service)."""

from __future__ import annotations

import json
from typing import Any, Iterator, Mapping, Optional

from . import descriptors
from .dispatch import execute

INITIAL_CURSOR = "initial"


def search(
    client: Any,
    domain: str,
    query: str,
    options: Optional[Mapping[str, Any]] = None,
) -> dict:
    """Run a search request.

    *client* is a ``cloudsearchdomain`` client bound to the domain's search
    endpoint.  An injected client keeps its own endpoint; *domain* is only
    used to create a client when *client* is ``None``.

    Options are sent untouched:
      - cursor: pagination id (``"initial"`` for the first page)
      - expr: numeric expressions for sorting and filtering (JSON string)
      - filterQuery: structured query used to filter results
      - queryOptions: parser options (JSON string), e.g. ``defaultOperator``,
        ``fields``, ``operators``, ``phraseFields``, ``phraseSlop``,
        ``explicitPhraseSlop``, ``tieBreaker``
      - queryParser: ``simple``, ``structured``, ``lucene`` or ``dismax``
      - return: fields to return
      - size: max number of hits
      - sort: e.g. ``"year desc,title asc"``
      - start: offset of the first hit
    """
    return execute(descriptors.search(domain, query, options), client)


def iter_search_pages(
    client: Any,
    domain: str,
    query: str,
    options: Optional[Mapping[str, Any]] = None,
) -> Iterator[dict]:
    """Yield search responses page by page using cursor pagination.

    *client* and *domain* behave as in :func:`search`.  ``start`` is
    removed because the service rejects it together with ``cursor``.
    Iteration stops on an empty page or a missing cursor.
    """
    params = {k: v for k, v in (options or {}).items() if k != "start"}
    cursor = params.pop("cursor", INITIAL_CURSOR)

    while cursor:
        response = search(client, domain, query, {**params, "cursor": cursor})
        hits = response.get("hits", {})
        if not hits.get("hit"):
            return
        yield response
        next_cursor = hits.get("cursor")
        if next_cursor == cursor:
            return
        cursor = next_cursor


def dump_query_options(**options: Any) -> str:
    """Serialize ``queryOptions`` keyword arguments to the JSON string form."""
    return json.dumps(options, separators=(",", ":"))


def dump_expressions(**expressions: str) -> str:
    """Serialize named ``expr`` expressions to the JSON string form."""
    return json.dumps(expressions, separators=(",", ":"))
