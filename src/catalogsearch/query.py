"""Query encoding for search requests.

SearchQuery holds the documented search parameters. The encoder turns either a
SearchQuery or a free-form mapping of parameters into a canonical URL query
string: keys sorted alphabetically, list values comma-joined, everything
percent-encoded.
"""

from collections.abc import Mapping, Sequence
from urllib.parse import urlencode

from pydantic import BaseModel, Field

DISCRIMINATOR_FIELD = "type"
FIELDS_PARAM = "fields"

QueryParams = Mapping[str, str | Sequence[str]]


class SearchQuery(BaseModel):
    """Search fields that can be sent to the search service.

    Empty fields are left out of the request. Values are passed through as-is;
    the service does the validation.
    """

    # Mandatory for the service
    device_type: str = ""
    language: str = Field(default="", serialization_alias="lang")
    site: str = ""

    brand_id: str = ""
    episode: str = ""
    page_size: str = ""
    season: str = ""
    season_id: str = ""
    type: str = ""
    video_ids: list[str] = Field(default_factory=list)

    # Sorting
    sort_by: str = ""
    order: str = ""

    def to_params(self) -> dict[str, list[str]]:
        """Return the non-empty fields keyed by wire name."""
        params: dict[str, list[str]] = {}
        for name, value in self.model_dump(by_alias=True).items():
            if isinstance(value, list):
                value = ",".join(value)
            if value:
                params[name] = [value]
        return params

    def encode(self) -> str:
        """Encode the query into a raw URL query string."""
        return encode_query(self.to_params())


def normalize_params(query: SearchQuery | QueryParams) -> dict[str, list[str]]:
    """Convert a SearchQuery or free-form mapping into ``{key: [values]}``."""
    if isinstance(query, SearchQuery):
        return query.to_params()
    params: dict[str, list[str]] = {}
    for key, values in query.items():
        params[key] = [values] if isinstance(values, str) else list(values)
    return params


def encode_query(params: QueryParams) -> str:
    """Encode *params* deterministically, sorted by key.

    An empty mapping encodes to ``""``.
    """
    pairs: list[tuple[str, str]] = []
    for key in sorted(params):
        values = params[key]
        if isinstance(values, str):
            values = [values]
        pairs.extend((key, value) for value in values)
    return urlencode(pairs)


def ensure_type_field(params: Mapping[str, list[str]]) -> dict[str, list[str]]:
    """Make sure a ``fields`` selection always includes the ``type`` field.

    The decoder needs the discriminator on every hit. The check matches whole
    comma-separated tokens, so ``typeahead`` does not count. Returns a new
    mapping; *params* is left untouched.
    """
    result = {key: list(values) for key, values in params.items()}
    fields = result.get(FIELDS_PARAM)
    if fields is None:
        return result

    tokens = [token.strip() for value in fields for token in value.split(",")]
    if DISCRIMINATOR_FIELD in tokens:
        return result

    if fields and fields[-1]:
        fields[-1] = f"{fields[-1]},{DISCRIMINATOR_FIELD}"
    elif fields:
        fields[-1] = DISCRIMINATOR_FIELD
    else:
        fields.append(DISCRIMINATOR_FIELD)
    return result
