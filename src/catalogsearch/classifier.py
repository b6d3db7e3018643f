"""Classification of search service responses.

Decides, from status code and content type, whether a response is a search
result, a structured API error, or a plain HTTP/protocol error:

- status != 200, not JSON      -> HTTPStatusError
- status != 200, JSON, bad body -> MalformedAPIError
- status != 200, JSON error    -> APIError
- status == 200, not JSON      -> ContentTypeError
- status == 200, JSON          -> decoded Response

The Response built from the response meta is attached to every raised error.
"""

import httpx
from pydantic import AliasChoices, BaseModel, Field, ValidationError

from catalogsearch.decoder import decode_hits
from catalogsearch.errors import (
    APIError,
    ContentTypeError,
    HTTPStatusError,
    MalformedAPIError,
    describe_validation_error,
)
from catalogsearch.response import Meta, Response

JSON_MEDIA_TYPE = "application/json"


class APIErrorBody(BaseModel):
    """Error object returned by the service on failed requests.

    Older service revisions used ``status_code``/``error`` instead of
    ``code``/``message``; both spellings are accepted. A code sent as a string
    makes the body malformed.
    """

    code: int = Field(
        default=0, strict=True, validation_alias=AliasChoices("code", "status_code")
    )
    message: str = Field(default="", validation_alias=AliasChoices("message", "error"))


def is_json_response(http_response: httpx.Response) -> bool:
    """Return True if the Content-Type media type is ``application/json``.

    Parameters such as ``charset`` are ignored.
    """
    content_type = http_response.headers.get("Content-Type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE


def interpret_response(http_response: httpx.Response) -> Response:
    """Turn a received httpx response into a search Response.

    Raises:
        HTTPStatusError: Non-200 response without a JSON body.
        MalformedAPIError: Non-200 JSON response that is not an error object.
        APIError: Error reported by the search service.
        ContentTypeError: 200 response that is not JSON.
        MalformedResponseError, TypeMissingError, HitDecodeError: see
            :func:`catalogsearch.decoder.decode_hits`.
    """
    response = Response(meta=Meta.from_http_response(http_response))
    status_code = http_response.status_code

    if status_code != httpx.codes.OK:
        if not is_json_response(http_response):
            raise HTTPStatusError(status_code, response)
        try:
            body = APIErrorBody.model_validate_json(http_response.content)
        except ValidationError as exc:
            raise MalformedAPIError(
                status_code, describe_validation_error(exc), response
            ) from exc
        # A body without a code still describes this HTTP failure.
        raise APIError(body.code or status_code, body.message, response)

    if not is_json_response(http_response):
        raise ContentTypeError(response)

    return decode_hits(http_response.content, response)
