"""Topic 01: create a domain, an analysis scheme and index fields."""

import _path_setup  # noqa: F401

from cloudsearch_handler import (
    create_client,
    create_domain,
    get_analysis_schemes,
    get_indexes,
    load_config,
    set_analysis_scheme,
    set_index,
)

DOMAIN_NAME = "example-movies"


def main() -> None:
    client = create_client("cloudsearch", config=load_config())

    status = create_domain(client, DOMAIN_NAME)["DomainStatus"]
    print(f"Domain: {status['DomainName']} (created={status['Created']})")

    set_analysis_scheme(
        client,
        DOMAIN_NAME,
        "movie_en",
        stopwords='["a", "an", "the"]',
        synonyms='{"groups": [["film", "movie"]]}',
    )
    schemes = get_analysis_schemes(client, DOMAIN_NAME, "movie_en")["AnalysisSchemes"]
    print(f"Analysis schemes: {[s['Options']['AnalysisSchemeName'] for s in schemes]}")

    set_index(client, DOMAIN_NAME, "title", {"analysis": "movie_en", "highlight": True})
    set_index(client, DOMAIN_NAME, "year", {"type": "int", "facet": True, "sort": True})
    set_index(client, DOMAIN_NAME, "genres", {"type": "literal-array", "facet": True})

    fields = get_indexes(client, DOMAIN_NAME)["IndexFields"]
    for field in fields:
        options = field["Options"]
        print(f"  {options['IndexFieldName']}: {options['IndexFieldType']}")


if __name__ == "__main__":
    main()
