"""Decoding of search hits.

The service returns a heterogeneous ``assets`` array without schema tags, so
each element is decoded in two passes:

1. Peek at the ``type`` discriminator only.
2. Decode the same element into the variant it selects: ``"series"`` gives a
   Series, every other value (including types this client does not know yet)
   gives an Asset. A missing or empty discriminator is malformed input.
"""

import logging
from typing import Any

from pydantic import Field, ValidationError

from catalogsearch.errors import (
    HitDecodeError,
    MalformedResponseError,
    TypeMissingError,
    describe_validation_error,
)
from catalogsearch.models.hits import Asset, CatalogModel, Hit, Series
from catalogsearch.response import Response

logger = logging.getLogger(__name__)

SERIES_TYPE = "series"

HIT_VARIANTS: dict[str, type[Hit]] = {SERIES_TYPE: Series}
DEFAULT_VARIANT: type[Hit] = Asset


class _Envelope(CatalogModel):
    total_hits: int = 0
    assets: list[Any] = Field(default_factory=list)


class _Discriminator(CatalogModel):
    type: str = ""


def decode_hit(
    raw: Any, index: int = 0, response: Response | None = None  # noqa: ANN401
) -> Hit:
    """Decode a single raw hit into its variant.

    Args:
        raw: One element of the ``assets`` array, as parsed from JSON.
        index: Position of the element, used in error messages.
        response: Partial response attached to any raised error.

    Returns:
        An Asset or Series instance.

    Raises:
        TypeMissingError: If the element has no ``type`` discriminator.
        HitDecodeError: If the element does not match its variant model.
    """
    if raw is None:
        raise TypeMissingError(index, response)

    try:
        discriminator = _Discriminator.model_validate(raw).type
    except ValidationError as exc:
        raise HitDecodeError(index, describe_validation_error(exc), response) from exc

    if not discriminator:
        raise TypeMissingError(index, response)

    variant = HIT_VARIANTS.get(discriminator, DEFAULT_VARIANT)
    try:
        return variant.model_validate(raw)
    except ValidationError as exc:
        raise HitDecodeError(index, describe_validation_error(exc), response) from exc


def decode_hits(body: bytes, response: Response) -> Response:
    """Decode a 200 JSON search body into *response*.

    ``total_hits`` is recorded before any hit is decoded. Hits are attached only
    once every element decoded, so a response carried by an error has none.

    Args:
        body: Raw response body.
        response: Response already holding the request/response meta.

    Returns:
        *response*, populated with ``total_hits`` and ``hits``.

    Raises:
        MalformedResponseError: If the body is not a valid search envelope.
        TypeMissingError: If a hit has no discriminator.
        HitDecodeError: If a hit fails to decode.
    """
    try:
        envelope = _Envelope.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedResponseError(describe_validation_error(exc), response) from exc

    response.total_hits = envelope.total_hits

    hits = [
        decode_hit(raw, index, response) for index, raw in enumerate(envelope.assets)
    ]
    response.hits = hits
    logger.debug("Decoded %d hits (total_hits=%d)", len(hits), response.total_hits)
    return response
