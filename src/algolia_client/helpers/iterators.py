"""Async iterators over browse and paginated search endpoints.

Each iterator yields records one by one and fetches the next page only when
the current one is exhausted.
"""

from typing import Any, AsyncIterator

from algolia_client.models.search import BrowseResponse
from algolia_client.transport.request_options import RequestOptions
from algolia_client.transport.requester import Transport
from algolia_client.util.paths import api_path


class ObjectIterator:
    """Iterates over every record of an index with the browse cursor."""

    def __init__(
        self,
        transport: Transport,
        index_name: str,
        request_options: RequestOptions | dict[str, Any] | None = None,
    ):
        self._transport = transport
        self._index_name = index_name
        self._request_options = RequestOptions.create(request_options)

    def __aiter__(self) -> AsyncIterator[dict[str, Any]]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[dict[str, Any]]:
        path = api_path("/1/indexes/%s/browse", self._index_name)
        body: dict[str, Any] = {}
        while True:
            response = await self._transport.read(
                "POST", path, body=body, options=self._request_options
            )
            page = BrowseResponse.model_validate(response)
            for hit in page.hits:
                yield hit

            if not page.cursor:
                return
            body = {"cursor": page.cursor}


class _PageIterator:
    """Pages through a search endpoint until the last page."""

    HITS_PER_PAGE = 1000
    PATH_TEMPLATE = ""

    def __init__(
        self,
        transport: Transport,
        index_name: str,
        request_options: RequestOptions | dict[str, Any] | None = None,
    ):
        self._transport = transport
        self._index_name = index_name
        self._request_options = RequestOptions.create(
            request_options, {"query": "", "hitsPerPage": self.HITS_PER_PAGE}
        )

    def __aiter__(self) -> AsyncIterator[dict[str, Any]]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[dict[str, Any]]:
        path = api_path(self.PATH_TEMPLATE, self._index_name)
        hits_per_page = self._request_options.body["hitsPerPage"]
        page = 0
        while True:
            response = await self._transport.read(
                "POST",
                path,
                body={"page": page},
                options=self._request_options,
            )
            hits = response.get("hits", [])
            for hit in hits:
                hit.pop("_highlightResult", None)
                yield hit

            page += 1
            nb_pages = response.get("nbPages")
            if nb_pages is not None and page >= nb_pages:
                return
            if len(hits) < hits_per_page:
                return


class SynonymIterator(_PageIterator):
    """Iterates over every synonym of an index."""

    PATH_TEMPLATE = "/1/indexes/%s/synonyms/search"


class RuleIterator(_PageIterator):
    """Iterates over every rule of an index."""

    PATH_TEMPLATE = "/1/indexes/%s/rules/search"
