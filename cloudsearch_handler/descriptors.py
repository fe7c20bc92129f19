"""Deferred request descriptors.

Every function here is pure: it shapes the parameters of one CloudSearch
operation and returns a :class:`RequestDescriptor` without touching the
network.  Descriptors can be executed later with
:func:`cloudsearch_handler.dispatch.execute` or handed to any other runner
that understands ``{service, options, method, params}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from .batch import CONTENT_TYPE, Documents, prepare_documents
from .options import build_index_field

CLOUDSEARCH = "CloudSearch"
CLOUDSEARCH_DOMAIN = "CloudSearchDomain"

ANALYSIS_LANGUAGE = "en"

ANALYSIS_OPTION_KEYS = {
    "stemming": "StemmingDictionary",
    "stopwords": "Stopwords",
    "synonyms": "Synonyms",
}


@dataclass(frozen=True)
class RequestDescriptor:
    """Inert description of one service call."""

    service: str
    method: str
    params: dict[str, Any]
    options: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"service": self.service}
        if self.options is not None:
            data["options"] = dict(self.options)
        data["method"] = self.method
        data["params"] = dict(self.params)
        return data


def create_domain(domain: str) -> RequestDescriptor:
    return RequestDescriptor(CLOUDSEARCH, "createDomain", {"DomainName": domain})


def get_analysis_schemes(domain: str, names: Union[str, Sequence[str]]) -> RequestDescriptor:
    """Describe analysis schemes; a single name is wrapped in a list."""
    if isinstance(names, str):
        names = [names]
    params = {"DomainName": domain, "AnalysisSchemeNames": list(names)}
    return RequestDescriptor(CLOUDSEARCH, "describeAnalysisSchemes", params)


def set_analysis_scheme(
    domain: str,
    name: str,
    stemming: Optional[str] = None,
    stopwords: Optional[str] = None,
    synonyms: Optional[str] = None,
) -> RequestDescriptor:
    """Define an English analysis scheme.

    ``stemming``, ``stopwords`` and ``synonyms`` are sent unchanged as
    ``StemmingDictionary``, ``Stopwords`` and ``Synonyms``.  The service
    expects JSON strings for each.
    """
    values = {"stemming": stemming, "stopwords": stopwords, "synonyms": synonyms}
    analysis_options = {
        ANALYSIS_OPTION_KEYS[key]: value for key, value in values.items() if value is not None
    }

    params = {
        "DomainName": domain,
        "AnalysisScheme": {
            "AnalysisSchemeName": name,
            "AnalysisSchemeLanguage": ANALYSIS_LANGUAGE,
            "AnalysisOptions": analysis_options,
        },
    }
    return RequestDescriptor(CLOUDSEARCH, "defineAnalysisScheme", params)


def get_indexes(domain: str, fields: Optional[Sequence[str]] = None) -> RequestDescriptor:
    """Describe index fields.

    ``fields=None`` describes every field.  An explicit empty list is sent
    as ``FieldNames: []``.
    """
    params: dict[str, Any] = {"DomainName": domain}
    if fields is not None:
        params["FieldNames"] = list(fields)
    return RequestDescriptor(CLOUDSEARCH, "describeIndexFields", params)


def set_index(
    domain: str,
    field: str,
    options: Optional[Mapping[str, Any]] = None,
) -> RequestDescriptor:
    params = {"DomainName": domain, "IndexField": build_index_field(field, options)}
    return RequestDescriptor(CLOUDSEARCH, "defineIndexField", params)


def upload(domain: str, documents: Documents) -> RequestDescriptor:
    """Upload a batch to the domain's document endpoint."""
    params = {"contentType": CONTENT_TYPE, "documents": prepare_documents(documents)}
    return RequestDescriptor(
        CLOUDSEARCH_DOMAIN,
        "uploadDocuments",
        params,
        options={"endpoint": domain},
    )


def search(
    domain: str,
    query: str,
    options: Optional[Mapping[str, Any]] = None,
) -> RequestDescriptor:
    """Search the domain's search endpoint.

    *options* are copied verbatim next to ``query``:
    ``cursor``, ``expr``, ``facet``, ``filterQuery``, ``highlight``,
    ``partial``, ``queryOptions``, ``queryParser``, ``return``, ``size``,
    ``sort``, ``start``, ``stats``.
    """
    params = {**(options or {}), "query": query}
    return RequestDescriptor(
        CLOUDSEARCH_DOMAIN,
        "search",
        params,
        options={"endpoint": domain},
    )
