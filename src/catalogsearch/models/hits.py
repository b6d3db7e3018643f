"""Data models for catalog search hits.

This module defines the typed representation of the entries returned by the
search service.
- Asset and Series are the concrete hit variants; the decoder picks one based
  on the ``type`` discriminator of each array element.
- HitSubset is the normalized view of the fields both variants share, so
  callers can list mixed results without branching on the variant.
- Brand, Season and the smaller value models mirror nested objects of the wire
  format.

Design:
- CatalogModel ignores unknown keys and treats JSON ``null`` as absent, so new
  service fields or sparse payloads never break decoding.
- Localized fields exist for the Danish, Finnish, Norwegian and Swedish
  locales (``_da``, ``_fi``, ``_nb``, ``_sv``).
- Hit.subset() memoizes its result on the instance. Recomputing it is pure, so
  a race on first access only wastes work. The memo takes no part in
  equality or hashing.
"""

from abc import abstractmethod
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

LOCALES = ("da", "fi", "nb", "sv")

Tags = dict[str, list[str]]


class CatalogModel(BaseModel):
    """Base model for every object decoded from the search service."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:  # noqa: ANN401
        # Reason: null on the wire means "not set"; fall back to field defaults.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def __hash__(self) -> int:
        # Reason: list and dict fields make the generated field-tuple hash fail.
        return hash((type(self), self.model_dump_json()))


class LocalizedImage(CatalogModel):
    """A locale-specific version of an image."""

    caption: str = ""
    copyright: str = ""
    language: str = ""
    url: str = ""


class Image(CatalogModel):
    """An image attribute (poster, landscape, etc.), possibly localized."""

    caption: str = ""
    copyright: str = ""
    localizations: list[LocalizedImage] = Field(default_factory=list)
    url: str = ""

    def for_language(self, language: str) -> str:
        """Return the URL localized for *language*, falling back to the default."""
        for localized in self.localizations:
            if localized.language == language and localized.url:
                return localized.url
        return self.url


class Genre(CatalogModel):
    """Main genre and its sub genres, e.g. Horror / [Action, Drama]."""

    main: str = ""
    sub: list[str] = Field(default_factory=list)


class Credit(CatalogModel):
    """One entry in the credit list of a hit."""

    function: str = ""
    nid: str = ""
    name: str = ""
    rolename: str = ""


class Event(CatalogModel):
    """Publication window of a hit for a site, device types and products."""

    site: str = ""
    device_types: list[str] = Field(default_factory=list)
    products: list[str] = Field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None
    publish_time: datetime | None = None


class ExternalReference(CatalogModel):
    """Reference to additional information held by a different system."""

    locator: str = ""
    type: str = ""
    value: str = ""


class Keyword(CatalogModel):
    """A keyword with a URL-friendly ID and a human-friendly text."""

    nid: str = ""
    text: str = ""


class OriginalTitle(CatalogModel):
    """Title of an asset in its original language."""

    language: str = ""
    text: str = ""
    type: str = ""


class ParentalRating(CatalogModel):
    """Parental rating for a given country and rating system."""

    country: str = ""
    system: str = ""
    value: str = ""


class LocationRestrictions(CatalogModel):
    include_countries: list[str] = Field(default_factory=list)


class LocationRights(CatalogModel):
    location_restrictions: LocationRestrictions = Field(
        default_factory=LocationRestrictions
    )
    product: str = ""


class PublicationRights(CatalogModel):
    """Location based publication rights of an asset."""

    location_rights: LocationRights = Field(default_factory=LocationRights)


class Team(CatalogModel):
    """A team taking part in a sports asset."""

    name: str = ""
    nid: str = ""


class CatalogEntity(CatalogModel):
    """Localized texts, artwork and classification shared by catalog objects."""

    title_da: str = ""
    title_fi: str = ""
    title_nb: str = ""
    title_sv: str = ""

    description_extended_da: str = ""
    description_extended_fi: str = ""
    description_extended_nb: str = ""
    description_extended_sv: str = ""
    description_long_da: str = ""
    description_long_fi: str = ""
    description_long_nb: str = ""
    description_long_sv: str = ""
    description_medium_da: str = ""
    description_medium_fi: str = ""
    description_medium_nb: str = ""
    description_medium_sv: str = ""
    description_short_da: str = ""
    description_short_fi: str = ""
    description_short_nb: str = ""
    description_short_sv: str = ""
    description_tiny_da: str = ""
    description_tiny_fi: str = ""
    description_tiny_nb: str = ""
    description_tiny_sv: str = ""

    genre_description_da: str = ""
    genre_description_fi: str = ""
    genre_description_nb: str = ""
    genre_description_sv: str = ""
    genres: list[Genre] = Field(default_factory=list)

    cinemascope: Image = Field(default_factory=Image)
    fifteen_by_seven: Image = Field(default_factory=Image)
    four_by_three: Image = Field(default_factory=Image)
    landscape: Image = Field(default_factory=Image)
    poster: Image = Field(default_factory=Image)

    country: list[str] = Field(default_factory=list)
    external_references: list[ExternalReference] = Field(default_factory=list)
    studio: str = ""

    def title(self, language: str) -> str:
        """Return the title for *language* (one of da, fi, nb, sv).

        Raises:
            ValueError: If *language* is not a supported locale.
        """
        if language not in LOCALES:
            raise ValueError(f"Unsupported language: {language}")
        return getattr(self, f"title_{language}")


class Brand(CatalogEntity):
    """The brand of an asset, e.g. Idol or Harry Potter."""

    id: str = ""


class Season(CatalogEntity):
    """A season of a brand, e.g. "Idol season 2"."""

    id: str = ""
    season_number: int = 0
    number_of_episodes: int = 0


class SharedHitFields(CatalogEntity):
    """Fields present on every hit variant."""

    content_source: str = ""
    credits: list[Credit] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)
    keywords_da: list[Keyword] = Field(default_factory=list)
    keywords_fi: list[Keyword] = Field(default_factory=list)
    keywords_nb: list[Keyword] = Field(default_factory=list)
    keywords_sv: list[Keyword] = Field(default_factory=list)
    spoken_languages: list[str] = Field(default_factory=list)
    tags: Tags = Field(default_factory=dict)
    timestamp: str = ""


class HitSubset(SharedHitFields):
    """Normalized view of the fields common to all hit variants.

    ``id`` is the variant's primary identifier: the video ID of an asset or the
    brand ID of a series.
    """

    id: str = ""
    type: str = ""


class Hit(SharedHitFields):
    """A single search hit. Concrete variants are Asset and Series."""

    type: str = ""

    _subset: HitSubset | None = PrivateAttr(default=None)

    def __eq__(self, other: object) -> bool:
        # Compare decoded fields only; the memoized subset is not part of a hit.
        if not isinstance(other, Hit):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__

    __hash__ = CatalogModel.__hash__

    @property
    @abstractmethod
    def hit_id(self) -> str:
        """Identifier exposed as ``HitSubset.id``."""
        raise NotImplementedError

    def subset(self) -> HitSubset:
        """Return the common view of this hit.

        The view is built on first access and the same instance is returned on
        every later call.
        """
        if self._subset is not None:
            return self._subset
        shared = {name: getattr(self, name) for name in SharedHitFields.model_fields}
        self._subset = HitSubset(id=self.hit_id, type=self.type, **shared)
        return self._subset


class Asset(Hit):
    """A playable hit: episode, movie, clip or live event."""

    arena: str = ""
    awayteam: Team = Field(default_factory=Team)
    brand: Brand = Field(default_factory=Brand)
    drm_restrictions: bool = False
    duration: int = 0
    episode_number: int = 0
    hometeam: Team = Field(default_factory=Team)
    items_published: bool = False
    league: str = ""
    league_da: str = ""
    league_fi: str = ""
    league_nb: str = ""
    league_sv: str = ""
    live: bool = False
    live_event_end: datetime | None = None
    logoawayteam: Image = Field(default_factory=Image)
    logohometeam: Image = Field(default_factory=Image)
    mlt_nids: list[str] = Field(default_factory=list)
    original_title: OriginalTitle = Field(default_factory=OriginalTitle)
    parental_ratings: list[ParentalRating] = Field(default_factory=list)
    production_year: str = ""
    publication_rights: PublicationRights = Field(default_factory=PublicationRights)
    season: Season = Field(default_factory=Season)
    vman_id: str = ""
    video_id: str = ""

    @property
    def hit_id(self) -> str:
        return self.video_id


class Series(Hit):
    """A series hit, the container of one or more seasons."""

    brand_id: str = ""
    id: str = ""
    seasons: list[int] = Field(default_factory=list)

    @property
    def hit_id(self) -> str:
        return self.brand_id
