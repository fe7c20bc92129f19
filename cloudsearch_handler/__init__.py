"""Convenience helpers for Amazon CloudSearch.

Two explicit modes:

- direct: the functions exported here take a boto3 client, run the call
  and return the response.
- deferred: :mod:`cloudsearch_handler.descriptors` returns
  ``RequestDescriptor`` values for an external runner; nothing is executed.
"""

from . import descriptors
from .batch import PreBatched, UploadDocument, batch_documents, needs_batching, prepare_documents
from .client import create_client
from .connection_settings import ConnectionConfig, load_config
from .descriptors import RequestDescriptor
from .dispatch import execute
from .document import upload
from .domain import (
    create_domain,
    get_analysis_schemes,
    get_indexes,
    set_analysis_scheme,
    set_index,
)
from .options import OPTION_KEYS, options_container_key, translate_field_options
from .search import dump_expressions, dump_query_options, iter_search_pages, search

__all__ = [
    # client
    "create_client",
    # config
    "ConnectionConfig",
    "load_config",
    # descriptors / dispatch
    "descriptors",
    "RequestDescriptor",
    "execute",
    # domain
    "create_domain",
    "get_analysis_schemes",
    "set_analysis_scheme",
    "get_indexes",
    "set_index",
    # options
    "OPTION_KEYS",
    "translate_field_options",
    "options_container_key",
    # documents
    "UploadDocument",
    "PreBatched",
    "needs_batching",
    "batch_documents",
    "prepare_documents",
    "upload",
    # search
    "search",
    "iter_search_pages",
    "dump_query_options",
    "dump_expressions",
]
