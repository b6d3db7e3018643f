"""Result containers returned by SearchClient.search()."""

from dataclasses import dataclass, field

import httpx

from catalogsearch.models.hits import Hit


@dataclass
class Meta:
    """Request/response meta information."""

    status_code: int
    headers: httpx.Headers
    request_url: httpx.URL

    @classmethod
    def from_http_response(cls, http_response: httpx.Response) -> "Meta":
        """Capture status, headers and resolved URL of *http_response*."""
        return cls(
            status_code=http_response.status_code,
            headers=http_response.headers,
            request_url=http_response.url,
        )


@dataclass
class Response:
    """The result as received from the search service.

    ``hits`` keeps the order of the service's array. On failure the same object
    is attached to the raised error, with ``hits`` left empty.
    """

    meta: Meta
    total_hits: int = 0
    hits: list[Hit] = field(default_factory=list)
