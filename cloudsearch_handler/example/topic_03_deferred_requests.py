"""Topic 03: build request descriptors and execute them later."""

import json

import _path_setup  # noqa: F401

from cloudsearch_handler import descriptors, execute, load_config


def main() -> None:
    requests = [
        descriptors.get_indexes("example-movies", ["title"]),
        descriptors.search("search-example-movies.us-east-1.cloudsearch.amazonaws.com", "star", {"size": 3}),
    ]

    for request in requests:
        print(json.dumps(request.to_dict(), indent=2))

    config = load_config()
    for request in requests:
        response = execute(request, config=config)
        print(f"{request.method}: {sorted(response)}")


if __name__ == "__main__":
    main()
