"""Tests for path and parameter string helpers."""

from urllib.parse import parse_qs

from algolia_client.util.paths import api_path, build_params_string


class TestApiPath:
    """Tests for api_path."""

    def test_arguments_are_escaped(self):
        assert (
            api_path("/1/indexes/%s/synonyms/%s", "my index", "a/b")
            == "/1/indexes/my%20index/synonyms/a%2Fb"
        )

    def test_non_string_arguments(self):
        assert api_path("/1/indexes/%s/task/%s", "products", 42) == (
            "/1/indexes/products/task/42"
        )


class TestBuildParamsString:
    """Tests for build_params_string."""

    def test_scalars(self):
        params = parse_qs(build_params_string({"query": "red shoes", "page": 2}))
        assert params == {"query": ["red shoes"], "page": ["2"]}

    def test_booleans_are_lowercase(self):
        assert build_params_string({"analytics": False}) == "analytics=false"

    def test_lists_are_compact_json(self):
        params = parse_qs(build_params_string({"facets": ["brand", "type"]}))
        assert params == {"facets": ['["brand","type"]']}

    def test_empty(self):
        assert build_params_string({}) == ""
