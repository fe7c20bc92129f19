"""Index field option translation.

Callers describe a field with short option names::

    {"type": "int", "facet": True, "sort": True, "default": 0}

and the CloudSearch API wants them under long names, nested in a
``<Type>Options`` container of the ``IndexField`` structure.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

DEFAULT_FIELD_TYPE = "text"

# Service names that plain pascal-casing gets wrong.
CONTAINER_KEY_OVERRIDES: dict[str, str] = {
    "latlon": "LatLonOptions",
}

OPTION_KEYS: dict[str, str] = {
    "default": "DefaultValue",
    "facet": "FacetEnabled",
    "return": "ReturnEnabled",
    "search": "SearchEnabled",
    "sort": "SortEnabled",
    "source": "SourceField",
    "analysis": "AnalysisScheme",
    "highlight": "HighlightEnabled",
}


def translate_field_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Rename short option keys to their API names.

    Only keys in :data:`OPTION_KEYS` are kept; ``type`` and anything
    unrecognised are dropped without error.
    """
    known = {key: value for key, value in options.items() if key in OPTION_KEYS}
    return {OPTION_KEYS[key]: value for key, value in known.items()}


def options_container_key(field_type: str) -> str:
    """Return the options container name for a field type.

    >>> options_container_key("text")
    'TextOptions'
    >>> options_container_key("text-array")
    'TextArrayOptions'
    >>> options_container_key("latlon")
    'LatLonOptions'
    """
    if field_type in CONTAINER_KEY_OVERRIDES:
        return CONTAINER_KEY_OVERRIDES[field_type]
    parts = re.split(r"[_\-\s]+", f"{field_type}_options")
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


def build_index_field(name: str, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build the ``IndexField`` structure for ``DefineIndexField``."""
    options = options or {}
    field_type = options.get("type") or DEFAULT_FIELD_TYPE

    index_field: dict[str, Any] = {
        "IndexFieldName": name,
        "IndexFieldType": field_type,
    }

    extra = translate_field_options(options)
    if extra:
        index_field[options_container_key(field_type)] = extra
    return index_field
