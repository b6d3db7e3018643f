"""Error taxonomy for the catalog search client.

Every error raised after the HTTP exchange carries the (possibly partial)
``Response`` on ``error.response`` so callers can inspect status code, headers,
the resolved request URL and ``total_hits`` on failure.

Transport failures (connection errors, timeouts, cancellation) are not wrapped:
httpx and asyncio exceptions propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

if TYPE_CHECKING:
    from catalogsearch.response import Response


def reason_phrase(status_code: int) -> str:
    """Return the standard reason phrase for *status_code* ("" if unknown)."""
    return httpx.codes.get_reason_phrase(status_code)


class SearchError(Exception):
    """Base class for all errors raised by the search client."""

    def __init__(self, message: str, response: Response | None = None) -> None:
        super().__init__(message)
        self.response = response


class InvalidURLError(SearchError, ValueError):
    """Raised when the base URL cannot be parsed or joined with the search path."""


class HTTPStatusError(SearchError):
    """Non-200 response without a JSON body."""

    def __init__(self, status_code: int, response: Response | None = None) -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase(status_code)
        super().__init__(f"{status_code} {self.reason_phrase}", response)


class MalformedAPIError(SearchError):
    """Non-200 JSON response whose body is not a valid error object."""

    def __init__(
        self, status_code: int, detail: str, response: Response | None = None
    ) -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase(status_code)
        self.detail = detail
        super().__init__(
            f"{status_code} {self.reason_phrase}; "
            f"JSON response body malformed ({detail})",
            response,
        )


class APIError(SearchError):
    """Structured error reported by the search service.

    This is the error callers are expected to handle: ``code`` is the numeric
    code from the error body and ``message`` its human readable text.
    """

    def __init__(
        self, code: int, message: str, response: Response | None = None
    ) -> None:
        self.code = code
        self.message = message
        super().__init__(
            f"search: HTTP {code} {reason_phrase(code)}: {message}", response
        )


class ContentTypeError(SearchError):
    """200 response that is not JSON."""

    def __init__(self, response: Response | None = None) -> None:
        super().__init__("Content-Type not JSON", response)


class MalformedResponseError(SearchError):
    """200 JSON response whose envelope cannot be decoded."""

    def __init__(self, detail: str, response: Response | None = None) -> None:
        self.detail = detail
        super().__init__(f"JSON response body malformed ({detail})", response)


class TypeMissingError(SearchError):
    """A hit in the response has no ``type`` discriminator."""

    def __init__(self, index: int, response: Response | None = None) -> None:
        self.index = index
        super().__init__(f"type missing for hit {index}", response)


class HitDecodeError(SearchError):
    """A hit could not be decoded into its variant model."""

    def __init__(
        self, index: int, detail: str, response: Response | None = None
    ) -> None:
        self.index = index
        self.detail = detail
        super().__init__(f"failed to decode hit {index}: {detail}", response)


def describe_validation_error(exc: ValidationError) -> str:
    """Condense a pydantic ValidationError into a single line."""
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)
