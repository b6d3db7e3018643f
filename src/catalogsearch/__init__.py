# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""catalogsearch - async client for the media catalog search service."""

from catalogsearch.__about__ import __version__
from catalogsearch.client import SearchClient
from catalogsearch.errors import (
    APIError,
    ContentTypeError,
    HitDecodeError,
    HTTPStatusError,
    InvalidURLError,
    MalformedAPIError,
    MalformedResponseError,
    SearchError,
    TypeMissingError,
)
from catalogsearch.models.hits import Asset, Hit, HitSubset, Series
from catalogsearch.query import SearchQuery
from catalogsearch.request import set_request_id
from catalogsearch.response import Meta, Response

__all__ = [
    "__version__",
    "SearchClient",
    "SearchQuery",
    "set_request_id",
    "Response",
    "Meta",
    "Hit",
    "HitSubset",
    "Asset",
    "Series",
    "SearchError",
    "InvalidURLError",
    "HTTPStatusError",
    "MalformedAPIError",
    "APIError",
    "ContentTypeError",
    "MalformedResponseError",
    "TypeMissingError",
    "HitDecodeError",
]
