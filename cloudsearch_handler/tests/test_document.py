from __future__ import annotations

import json

import boto3
import pytest
from botocore.stub import Stubber

from cloudsearch_handler.batch import UploadDocument
from cloudsearch_handler.document import upload

UPLOAD_RESPONSE = {"status": "success", "adds": 1, "deletes": 1}


class DummyClient:
    def __init__(self):
        self.calls = []

    def upload_documents(self, **kwargs):
        self.calls.append(kwargs)
        return UPLOAD_RESPONSE


@pytest.fixture
def domain_client():
    session = boto3.session.Session(
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name="us-east-1",
    )
    client = session.client(
        "cloudsearchdomain",
        endpoint_url="https://doc-movies.us-east-1.cloudsearch.amazonaws.com",
    )
    with Stubber(client) as stubber:
        yield client, stubber


def test_upload_serializes_documents():
    client = DummyClient()

    response = upload(
        client,
        "doc-movies",
        [
            UploadDocument(type="add", id="tt1", fields={"title": "The Seeker"}),
            UploadDocument(type="delete", id="tt2"),
        ],
    )

    assert response["status"] == "success"
    sent = client.calls[0]
    assert sent["contentType"] == "application/json"
    assert json.loads(sent["documents"]) == [
        {"type": "add", "id": "tt1", "fields": {"title": "The Seeker"}},
        {"type": "delete", "id": "tt2"},
    ]


def test_upload_sends_pre_batched_body_unchanged():
    client = DummyClient()
    body = b'[{"type": "delete", "id": "tt3"}]'

    upload(client, "doc-movies", body)

    assert client.calls[0]["documents"] is body


def test_upload_empty_list_raises():
    client = DummyClient()
    with pytest.raises(ValueError):
        upload(client, "doc-movies", [])
    assert client.calls == []


def test_upload_empty_fields_first_is_sent_without_validation():
    client = DummyClient()
    docs = [{"type": "add", "id": "1", "fields": {}}, {"type": "replace", "id": "2"}]

    upload(client, "doc-movies", docs)

    assert json.loads(client.calls[0]["documents"]) == docs


def test_upload_delete_first_batch_reaches_real_client(domain_client):
    client, stubber = domain_client
    docs = [{"type": "delete", "id": "2"}, {"type": "add", "id": "1", "fields": {"a": 1}}]
    stubber.add_response(
        "upload_documents",
        UPLOAD_RESPONSE,
        {"contentType": "application/json", "documents": json.dumps(docs).encode("utf-8")},
    )

    assert upload(client, "doc-movies", docs)["status"] == "success"
    stubber.assert_no_pending_responses()


def test_upload_per_document_batch_reaches_real_client(domain_client):
    client, stubber = domain_client
    stubber.add_response("upload_documents", UPLOAD_RESPONSE)

    response = upload(
        client,
        "doc-movies",
        [{"type": "add", "id": "1", "fields": {"title": "Alien"}}],
    )

    assert response["adds"] == 1
    stubber.assert_no_pending_responses()
