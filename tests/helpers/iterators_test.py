"""Tests for the browse and page iterators."""

from algolia_client.helpers.iterators import ObjectIterator, RuleIterator, SynonymIterator


async def collect(iterator):
    return [item async for item in iterator]


class TestObjectIterator:
    """Tests for cursor based browsing."""

    async def test_follows_cursor(self, search_client, fake_api):
        """Test that each page after the first sends only the cursor."""
        fake_api.queue(
            {
                "hits": [{"objectID": "1"}, {"objectID": "2"}],
                "cursor": "c1",
                "processingTimeMS": 1,
            },
            {"hits": [{"objectID": "3"}], "cursor": "c2"},
            {"hits": [{"objectID": "4"}]},
        )

        records = await collect(
            ObjectIterator(
                search_client.transport, "products", {"attributesToRetrieve": ["a"]}
            )
        )

        assert [record["objectID"] for record in records] == ["1", "2", "3", "4"]
        assert [request.url.path for request in fake_api.requests] == [
            "/1/indexes/products/browse"
        ] * 3
        assert fake_api.body(0) == {"attributesToRetrieve": ["a"]}
        assert fake_api.body(1) == {"attributesToRetrieve": ["a"], "cursor": "c1"}
        assert fake_api.body(2)["cursor"] == "c2"

    async def test_empty_index(self, search_client, fake_api):
        fake_api.queue({"hits": []})

        assert await collect(ObjectIterator(search_client.transport, "products")) == []
        assert len(fake_api.requests) == 1

    async def test_index_name_is_escaped(self, search_client, fake_api):
        fake_api.queue({"hits": []})

        await collect(ObjectIterator(search_client.transport, "a/b c"))

        assert fake_api.requests[0].url.raw_path.startswith(b"/1/indexes/a%2Fb%20c/")


class TestPageIterators:
    """Tests for the synonym and rule page iterators."""

    async def test_synonyms_until_last_page(self, search_client, fake_api):
        """Test that iteration stops once nbPages is reached."""
        fake_api.queue(
            {
                "hits": [
                    {"objectID": "s1", "_highlightResult": {"synonyms": []}},
                    {"objectID": "s2"},
                ],
                "nbPages": 2,
            },
            {"hits": [{"objectID": "s3"}], "nbPages": 2},
        )

        synonyms = await collect(
            SynonymIterator(search_client.transport, "products", {"hitsPerPage": 2})
        )

        assert synonyms == [{"objectID": "s1"}, {"objectID": "s2"}, {"objectID": "s3"}]
        assert fake_api.requests[0].url.path == "/1/indexes/products/synonyms/search"
        assert fake_api.body(0) == {"hitsPerPage": 2, "query": "", "page": 0}
        assert fake_api.body(1)["page"] == 1

    async def test_rules_stop_on_short_page(self, search_client, fake_api):
        """Test that a page smaller than hitsPerPage ends the iteration."""
        fake_api.queue({"hits": [{"objectID": "r1"}]})

        rules = await collect(RuleIterator(search_client.transport, "products"))

        assert rules == [{"objectID": "r1"}]
        assert len(fake_api.requests) == 1
        assert fake_api.requests[0].url.path == "/1/indexes/products/rules/search"
        assert fake_api.body() == {"query": "", "hitsPerPage": 1000, "page": 0}

    async def test_full_pages_continue(self, search_client, fake_api):
        fake_api.queue(
            {"hits": [{"objectID": "r1"}]},
            {"hits": [{"objectID": "r2"}]},
            {"hits": []},
        )

        rules = await collect(
            RuleIterator(search_client.transport, "products", {"hitsPerPage": 1})
        )

        assert [rule["objectID"] for rule in rules] == ["r1", "r2"]
        assert len(fake_api.requests) == 3
