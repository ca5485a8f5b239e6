"""Query criteria types for the Items and TV-episode services."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum


class SortBy(StrEnum):
    """Server sort keys used when requesting playable items."""

    RANDOM = "Random"
    SORT_NAME = "SortName"


class ItemFilter(StrEnum):
    """Server-side item filters."""

    IS_FOLDER = "IsFolder"
    IS_NOT_FOLDER = "IsNotFolder"
    IS_PLAYED = "IsPlayed"
    IS_UNPLAYED = "IsUnplayed"


class ItemField(StrEnum):
    """Extra metadata fields the server can include in responses."""

    CHAPTERS = "Chapters"
    MEDIA_SOURCES = "MediaSources"
    OVERVIEW = "Overview"
    PRIMARY_IMAGE_ASPECT_RATIO = "PrimaryImageAspectRatio"


class MediaType(StrEnum):
    """Playable media types."""

    AUDIO = "Audio"
    VIDEO = "Video"


def _join(values: Sequence[str]) -> str:
    """Join list values the way the server expects them."""
    return ",".join(str(v) for v in values)


def _bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class ItemsQuery:
    """Criteria for an Items service request.

    Attributes:
        ids: Explicit item ids to fetch.
        parent_id: Container whose children are requested.
        artist_ids: Restrict to items by these artists.
        genre_ids: Restrict to items in these genres.
        filters: Server-side filters.
        recursive: Descend into nested containers.
        media_types: Restrict to these media types.
        sort_by: Sort key, None for the server's natural order.
        limit: Maximum number of items to return.
    """

    ids: tuple[str, ...] | None = None
    parent_id: str | None = None
    artist_ids: tuple[str, ...] | None = None
    genre_ids: tuple[str, ...] | None = None
    filters: tuple[ItemFilter, ...] | None = None
    recursive: bool | None = None
    media_types: tuple[MediaType, ...] | None = None
    sort_by: SortBy | None = None
    limit: int | None = None

    def to_params(self) -> dict[str, str]:
        """Convert to server query parameters, omitting unset fields."""
        params: dict[str, str] = {}
        if self.ids is not None:
            params["Ids"] = _join(self.ids)
        if self.parent_id is not None:
            params["ParentId"] = self.parent_id
        if self.artist_ids is not None:
            params["ArtistIds"] = _join(self.artist_ids)
        if self.genre_ids is not None:
            params["GenreIds"] = _join(self.genre_ids)
        if self.filters is not None:
            params["Filters"] = _join(self.filters)
        if self.recursive is not None:
            params["Recursive"] = _bool(self.recursive)
        if self.media_types is not None:
            params["MediaTypes"] = _join(self.media_types)
        if self.sort_by is not None:
            params["SortBy"] = str(self.sort_by)
        if self.limit is not None:
            params["Limit"] = str(self.limit)
        return params


@dataclass(frozen=True)
class EpisodesQuery:
    """Criteria for a TV-episode service request.

    Attributes:
        series_id: Series whose episodes are requested.
        is_missing: Filter on missing (not on disk) episodes.
        fields: Extra metadata fields to include.
        start_item_id: Episode to start the listing from.
        limit: Maximum number of episodes to return.
    """

    series_id: str
    is_missing: bool | None = None
    fields: tuple[ItemField, ...] | None = None
    start_item_id: str | None = None
    limit: int | None = None

    def to_params(self) -> dict[str, str]:
        """Convert to server query parameters, omitting unset fields."""
        params: dict[str, str] = {"SeriesId": self.series_id}
        if self.is_missing is not None:
            params["IsMissing"] = _bool(self.is_missing)
        if self.fields is not None:
            params["Fields"] = _join(self.fields)
        if self.start_item_id is not None:
            params["StartItemId"] = self.start_item_id
        if self.limit is not None:
            params["Limit"] = str(self.limit)
        return params
