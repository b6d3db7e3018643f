"""Client for the catalog search service.

SearchClient owns the configuration (base URL, transport, log hook) and exposes
a single ``search`` operation composing query encoding, request building,
response classification and hit decoding.
"""

from collections.abc import Callable, Iterable
from typing import Any

import httpx

from catalogsearch.classifier import interpret_response
from catalogsearch.query import (
    QueryParams,
    SearchQuery,
    encode_query,
    ensure_type_field,
    normalize_params,
)
from catalogsearch.request import RequestOption, build_search_url, parse_base_url
from catalogsearch.response import Response
from catalogsearch.settings import Settings

LogFunc = Callable[..., None]


def _discard_log(fmt: str, *args: Any) -> None:  # noqa: ANN401
    pass


class SearchClient:
    """Async client for the search service.

    Args:
        base_url: Service base URL. Defaults to ``Settings.BASE_URL``.
        http_client: Transport used for every request. It must be safe for
            concurrent use and the caller keeps ownership of it. When omitted,
            each search opens a short-lived ``httpx.AsyncClient``.
        logf: Printf-style log hook, ``logf("GET %s", url)``. No-op by default.
        settings: Settings to use instead of loading them from the environment.

    Raises:
        InvalidURLError: If the base URL is not an absolute URL.
    """

    def __init__(
        self,
        base_url: str | httpx.URL | None = None,
        http_client: httpx.AsyncClient | None = None,
        logf: LogFunc | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.base_url = parse_base_url(base_url or self.settings.BASE_URL)
        self.http_client = http_client
        self.logf = logf or _discard_log

    async def search(
        self, query: SearchQuery | QueryParams, *options: RequestOption
    ) -> Response:
        """Perform a search and return the decoded result.

        Args:
            query: A SearchQuery or a free-form mapping of query parameters.
            *options: Request options applied in order, e.g.
                :func:`catalogsearch.request.set_request_id`.

        Returns:
            The Response with total hit count, hits in service order and meta.

        Raises:
            SearchError: Any error from :func:`interpret_response`; the partial
                Response is available on ``error.response``.
            httpx.TransportError: Network failures, propagated unchanged.
        """
        params = ensure_type_field(normalize_params(query))
        url = build_search_url(self.base_url, encode_query(params))

        if self.http_client is not None:
            return await self._send(self.http_client, url, options)
        async with httpx.AsyncClient(timeout=self.settings.TIMEOUT) as client:
            return await self._send(client, url, options)

    async def _send(
        self,
        client: httpx.AsyncClient,
        url: httpx.URL,
        options: Iterable[RequestOption],
    ) -> Response:
        request = client.build_request("GET", url)
        for option in options:
            option(request)

        self.logf("GET %s", url)

        # Reason: send() without stream=True reads the whole body and closes
        # the response before returning.
        http_response = await client.send(request)
        return interpret_response(http_response)
