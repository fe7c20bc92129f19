from __future__ import annotations

from datetime import datetime, timezone

import boto3
from botocore.stub import Stubber

from cloudsearch_handler.domain import (
    create_domain,
    get_analysis_schemes,
    get_indexes,
    set_analysis_scheme,
    set_index,
)


class DummyClient:
    def create_domain(self, **kwargs):
        return kwargs

    def describe_analysis_schemes(self, **kwargs):
        return kwargs

    def define_analysis_scheme(self, **kwargs):
        return kwargs

    def describe_index_fields(self, **kwargs):
        return kwargs

    def define_index_field(self, **kwargs):
        return kwargs


def test_domain_params():
    client = DummyClient()

    assert create_domain(client, "movies") == {"DomainName": "movies"}

    assert get_analysis_schemes(client, "movies", "movie_en") == {
        "DomainName": "movies",
        "AnalysisSchemeNames": ["movie_en"],
    }

    assert set_analysis_scheme(client, "movies", "movie_en", stopwords='["the"]') == {
        "DomainName": "movies",
        "AnalysisScheme": {
            "AnalysisSchemeName": "movie_en",
            "AnalysisSchemeLanguage": "en",
            "AnalysisOptions": {"Stopwords": '["the"]'},
        },
    }

    assert get_indexes(client, "movies") == {"DomainName": "movies"}
    assert get_indexes(client, "movies", ["title", "year"]) == {
        "DomainName": "movies",
        "FieldNames": ["title", "year"],
    }

    assert set_index(client, "movies", "title", {"search": True, "return": True}) == {
        "DomainName": "movies",
        "IndexField": {
            "IndexFieldName": "title",
            "IndexFieldType": "text",
            "TextOptions": {"SearchEnabled": True, "ReturnEnabled": True},
        },
    }


def test_set_index_latlon_accepted_by_real_client():
    session = boto3.session.Session(
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name="us-east-1",
    )
    client = session.client("cloudsearch")
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    index_field = {
        "IndexFieldName": "loc",
        "IndexFieldType": "latlon",
        "LatLonOptions": {"FacetEnabled": True},
    }

    with Stubber(client) as stubber:
        stubber.add_response(
            "define_index_field",
            {
                "IndexField": {
                    "Options": index_field,
                    "Status": {"CreationDate": now, "UpdateDate": now, "State": "Processing"},
                }
            },
            {"DomainName": "movies", "IndexField": index_field},
        )

        response = set_index(client, "movies", "loc", {"type": "latlon", "facet": True})

    assert response["IndexField"]["Options"]["LatLonOptions"] == {"FacetEnabled": True}
