"""Document batches for ``UploadDocuments``.

The upload API takes one JSON array of add/delete operations::

    [
        {"type": "add", "id": "tt0484562", "fields": {"title": "The Seeker"}},
        {"type": "delete", "id": "tt0484575"}
    ]

``upload`` accepts either per-document input (``UploadDocument`` objects or
plain dicts with ``type``/``id``/``fields``) which is serialized here, or an
already-built batch which is sent as is.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, Mapping, Sequence, Union

from pydantic import BaseModel, Field

CONTENT_TYPE = "application/json"


class UploadDocument(BaseModel):
    """Single add or delete operation inside a batch."""

    type: Literal["add", "delete"]
    id: str
    fields: dict[str, Any] = Field(default_factory=dict)

    def to_wire(self) -> dict[str, Any]:
        data = self.model_dump(mode="json")
        if self.type == "delete":
            data.pop("fields")
        return data


@dataclass(frozen=True)
class PreBatched:
    """Tag for a batch that is already in wire form."""

    body: Any


Documents = Union[PreBatched, bytes, str, Sequence[Any]]


def _member(doc: Any, name: str) -> Any:
    if isinstance(doc, Mapping):
        return doc.get(name)
    return getattr(doc, name, None)


def _is_wire_value(documents: Any) -> bool:
    return isinstance(documents, (bytes, bytearray, str)) or hasattr(documents, "read")


def needs_batching(documents: Documents) -> bool:
    """Return True when *documents* must go through :func:`batch_documents`.

    Only the first element of a sequence is inspected.  It counts as a
    per-document entry when it is an :class:`UploadDocument` or exposes
    truthy ``type``, ``id`` and ``fields``.  This is a heuristic: a delete
    entry without ``fields`` in first position makes the whole sequence
    look pre-batched.  Use ``UploadDocument`` or :class:`PreBatched` when
    the shape is known.

    Raises:
        ValueError: If *documents* is an empty sequence.
    """
    if isinstance(documents, PreBatched) or _is_wire_value(documents):
        return False
    if not documents:
        raise ValueError("At least one document is required for upload")

    first = documents[0]
    if isinstance(first, UploadDocument):
        return True
    return all(_member(first, name) for name in ("type", "id", "fields"))


def batch_documents(documents: Sequence[Any]) -> bytes:
    """Serialize per-document entries into the JSON batch body."""
    batch = []
    for doc in documents:
        if not isinstance(doc, UploadDocument):
            doc = UploadDocument.model_validate(doc, from_attributes=not isinstance(doc, Mapping))
        batch.append(doc.to_wire())
    return json.dumps(batch).encode("utf-8")


def prepare_documents(documents: Documents) -> Any:
    """Apply the batch gate and return the value to send as ``documents``."""
    if isinstance(documents, PreBatched):
        return documents.body
    if needs_batching(documents):
        return batch_documents(documents)
    return documents


def encode_body(documents: Any) -> Any:
    """Return *documents* in a form the upload API accepts as its body.

    Wire values (bytes, str, file-like) are returned as is.  Any other
    sequence is JSON-encoded unchanged; entries are not validated.
    """
    if _is_wire_value(documents):
        return documents
    return json.dumps(list(documents)).encode("utf-8")
