"""Query criteria and collaborator contracts for the catalog services."""

from jellyqueue.api.query import (
    EpisodesQuery,
    ItemField,
    ItemFilter,
    ItemsQuery,
    MediaType,
    SortBy,
)
from jellyqueue.api.services import ItemRegistry, ItemsService, TvShowsService, UserProvider

__all__ = [
    "EpisodesQuery",
    "ItemField",
    "ItemFilter",
    "ItemRegistry",
    "ItemsQuery",
    "ItemsService",
    "MediaType",
    "SortBy",
    "TvShowsService",
    "UserProvider",
]
