"""Typed models for catalog search hits."""

from catalogsearch.models.hits import (
    Asset,
    Brand,
    CatalogEntity,
    Credit,
    Event,
    ExternalReference,
    Genre,
    Hit,
    HitSubset,
    Image,
    Keyword,
    LocalizedImage,
    OriginalTitle,
    ParentalRating,
    PublicationRights,
    Season,
    Series,
    Team,
)

__all__ = [
    "Asset",
    "Brand",
    "CatalogEntity",
    "Credit",
    "Event",
    "ExternalReference",
    "Genre",
    "Hit",
    "HitSubset",
    "Image",
    "Keyword",
    "LocalizedImage",
    "OriginalTitle",
    "ParentalRating",
    "PublicationRights",
    "Season",
    "Series",
    "Team",
]
