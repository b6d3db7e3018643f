"""Request building for the search endpoint.

Composes ``{base_url}/search?{query}`` and defines request options: callables
that receive the built ``httpx.Request`` and may mutate its headers before it
is sent.
"""

from collections.abc import Callable

import httpx

from catalogsearch.errors import InvalidURLError

SEARCH_PATH = "/search"
REQUEST_ID_HEADER = "X-Request-Id"

RequestOption = Callable[[httpx.Request], None]


def parse_base_url(raw_url: str | httpx.URL) -> httpx.URL:
    """Parse *raw_url* into an absolute URL.

    Raises:
        InvalidURLError: If the URL does not parse or has no scheme or host.
    """
    try:
        url = httpx.URL(raw_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidURLError(f"invalid base URL {raw_url!r}: {exc}") from exc
    if not url.scheme or not url.host:
        raise InvalidURLError(f"invalid base URL {raw_url!r}: scheme and host required")
    return url


def build_search_url(base_url: str | httpx.URL, query_string: str = "") -> httpx.URL:
    """Join the base URL path with ``/search`` and attach *query_string*.

    ``https://host/`` and ``https://host`` both give ``https://host/search``;
    ``https://host/api/`` gives ``https://host/api/search``. Any query or
    fragment on the base URL is dropped.
    """
    base = parse_base_url(base_url)
    path = base.path.rstrip("/") + SEARCH_PATH
    try:
        return base.copy_with(
            path=path,
            query=query_string.encode("ascii") if query_string else None,
            fragment=None,
        )
    except (httpx.InvalidURL, UnicodeEncodeError) as exc:
        raise InvalidURLError(f"cannot build search URL from {base}: {exc}") from exc


def set_request_id(request_id: str) -> RequestOption:
    """Request option setting the ``X-Request-Id`` header."""

    def option(request: httpx.Request) -> None:
        request.headers[REQUEST_ID_HEADER] = request_id

    return option
