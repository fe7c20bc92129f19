"""Domain configuration operations (``cloudsearch`` service)."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from . import descriptors
from .dispatch import execute


def create_domain(client: Any, domain: str) -> dict:
    """Create a new search domain."""
    return execute(descriptors.create_domain(domain), client)


def get_analysis_schemes(
    client: Any,
    domain: str,
    names: Union[str, Sequence[str]],
) -> dict:
    """Describe one or more analysis schemes of a domain."""
    return execute(descriptors.get_analysis_schemes(domain, names), client)


def set_analysis_scheme(
    client: Any,
    domain: str,
    name: str,
    stemming: Optional[str] = None,
    stopwords: Optional[str] = None,
    synonyms: Optional[str] = None,
) -> dict:
    """Define (create or replace) an English analysis scheme."""
    request = descriptors.set_analysis_scheme(
        domain,
        name,
        stemming=stemming,
        stopwords=stopwords,
        synonyms=synonyms,
    )
    return execute(request, client)


def get_indexes(
    client: Any,
    domain: str,
    fields: Optional[Sequence[str]] = None,
) -> dict:
    """Describe index fields; all of them when *fields* is ``None``."""
    return execute(descriptors.get_indexes(domain, fields), client)


def set_index(
    client: Any,
    domain: str,
    field: str,
    options: Optional[Mapping[str, Any]] = None,
) -> dict:
    """Define an index field from short-form options.

    Example::

        set_index(client, "movies", "year", {"type": "int", "facet": True, "sort": True})
    """
    return execute(descriptors.set_index(domain, field, options), client)
