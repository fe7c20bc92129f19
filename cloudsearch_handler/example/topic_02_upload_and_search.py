"""Topic 02: upload documents and page through search results.

Set ``CLOUDSEARCH_ENDPOINT`` to the domain's document/search endpoint.
"""

import _path_setup  # noqa: F401

from cloudsearch_handler import (
    UploadDocument,
    create_client,
    dump_query_options,
    iter_search_pages,
    load_config,
    search,
    upload,
)


def main() -> None:
    config = load_config()
    client = create_client("cloudsearchdomain", config=config)

    result = upload(
        client,
        config.endpoint,
        [
            UploadDocument(type="add", id="tt0076759", fields={"title": "Star Wars", "year": 1977}),
            UploadDocument(type="add", id="tt0080684", fields={"title": "The Empire Strikes Back", "year": 1980}),
            UploadDocument(type="delete", id="tt0000000"),
        ],
    )
    print(f"Upload: status={result['status']} adds={result['adds']} deletes={result['deletes']}")

    response = search(
        client,
        config.endpoint,
        "star",
        {
            "queryOptions": dump_query_options(fields=["title^3"], defaultOperator="and"),
            "return": "title,year",
            "sort": "year asc",
            "size": 10,
        },
    )
    print(f"Found: {response['hits']['found']}")

    for page in iter_search_pages(client, config.endpoint, "star", {"size": 1}):
        for hit in page["hits"]["hit"]:
            print(f"  {hit['id']}: {hit.get('fields', {}).get('title')}")


if __name__ == "__main__":
    main()
