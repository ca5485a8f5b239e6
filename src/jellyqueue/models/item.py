"""Catalog item model representing a server-described media entity."""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class ItemKind(StrEnum):
    """Known catalog item kinds, as reported in the server's ``Type`` field."""

    AGGREGATE_FOLDER = "AggregateFolder"
    AUDIO = "Audio"
    AUDIO_BOOK = "AudioBook"
    BOX_SET = "BoxSet"
    CHANNEL = "Channel"
    COLLECTION_FOLDER = "CollectionFolder"
    EPISODE = "Episode"
    FOLDER = "Folder"
    LIVE_TV_CHANNEL = "LiveTvChannel"
    LIVE_TV_PROGRAM = "LiveTvProgram"
    MOVIE = "Movie"
    MUSIC_ALBUM = "MusicAlbum"
    MUSIC_ARTIST = "MusicArtist"
    MUSIC_GENRE = "MusicGenre"
    MUSIC_VIDEO = "MusicVideo"
    PHOTO = "Photo"
    PHOTO_ALBUM = "PhotoAlbum"
    PLAYLIST = "Playlist"
    PROGRAM = "Program"
    SEASON = "Season"
    SERIES = "Series"
    TRAILER = "Trailer"
    TV_CHANNEL = "TvChannel"
    USER_VIEW = "UserView"
    VIDEO = "Video"


def parse_kind(value: object) -> ItemKind | str | None:
    """Parse a raw ``Type`` value into an ItemKind.

    Unknown kinds are returned unchanged so that newer server types still
    reach the fallback path instead of failing.
    """
    if value is None or value == "":
        return None
    raw = str(value)
    try:
        return ItemKind(raw)
    except ValueError:
        logger.debug("Unknown item kind %r, keeping raw value", raw)
        return raw


@dataclass(frozen=True, slots=True)
class CatalogItem:
    """A catalog item (track, folder, playlist, artist, episode, ...).

    Attributes:
        id: Opaque server identifier, None for transient items.
        type: Item kind; ItemKind for known kinds, raw string otherwise.
        is_folder: Whether the item is a browsable container.
        channel_id: Playable channel for live-TV programs.
        series_id: Parent series for episodes.
        name: Display name (empty string if unset).
        media_type: Server media type, e.g. "Audio" or "Video".
    """

    id: str | None = None
    type: ItemKind | str | None = None
    is_folder: bool = False
    channel_id: str | None = None
    series_id: str | None = None
    name: str = ""
    media_type: str = ""

    @property
    def display_name(self) -> str:
        """Return name, falling back to the id for log output."""
        return self.name or self.id or "<unnamed>"

    def is_kind(self, kind: ItemKind) -> bool:
        """Return True if this item's type equals the given kind."""
        return self.type == kind

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CatalogItem":
        """Create an item from a server DTO payload.

        Missing keys default to None/False; no key is required.
        """
        return cls(
            id=_optional_str(data.get("Id")),
            type=parse_kind(data.get("Type")),
            is_folder=bool(data.get("IsFolder", False)),
            channel_id=_optional_str(data.get("ChannelId")),
            series_id=_optional_str(data.get("SeriesId")),
            name=str(data.get("Name") or ""),
            media_type=str(data.get("MediaType") or ""),
        )


def _optional_str(value: object) -> str | None:
    """Return value as a string, or None when empty/absent."""
    if value is None or value == "":
        return None
    return str(value)
