"""Playback queue resolution.

Turns a single catalog item of any kind (track, folder, playlist, artist,
genre, live-TV program, episode, ...) into the ordered list of playable
item ids that should be handed to the playback engine.

Dispatch is an ordered table of (branch, predicate) pairs; the first
matching predicate wins. Folder-like special cases (playlists, artists,
genres) come before the generic folder branch because the server often
flags them as folders too.
"""

import logging
import time
from collections.abc import Callable, Collection, Coroutine
from enum import StrEnum
from typing import Any

from jellyqueue.api.query import (
    EpisodesQuery,
    ItemField,
    ItemFilter,
    ItemsQuery,
    MediaType,
    SortBy,
)
from jellyqueue.api.services import ItemRegistry, ItemsService, TvShowsService, UserProvider
from jellyqueue.models.item import CatalogItem, ItemKind

logger = logging.getLogger(__name__)

# Folder kinds that keep their curated order even when shuffling
DEFAULT_UNSORTED_FOLDER_TYPES: tuple[str, ...] = (ItemKind.BOX_SET.value,)

_EPISODE_FIELDS = (ItemField.CHAPTERS, ItemField.PRIMARY_IMAGE_ASPECT_RATIO)

TimingCallback = Callable[["PlaybackBranch", float], None]


class InvalidItemError(TypeError):
    """The item to resolve is missing."""


class PlaybackBranch(StrEnum):
    """How an item is turned into a playback queue."""

    PROGRAM_CHANNEL = "program_channel"
    PLAYLIST = "playlist"
    MUSIC_ARTIST = "music_artist"
    MUSIC_GENRE = "music_genre"
    FOLDER = "folder"
    EPISODE = "episode"
    SINGLE = "single"


_DISPATCH: tuple[tuple[PlaybackBranch, Callable[[CatalogItem], bool]], ...] = (
    (
        PlaybackBranch.PROGRAM_CHANNEL,
        lambda item: item.is_kind(ItemKind.PROGRAM) and bool(item.channel_id),
    ),
    (PlaybackBranch.PLAYLIST, lambda item: item.is_kind(ItemKind.PLAYLIST)),
    (
        PlaybackBranch.MUSIC_ARTIST,
        lambda item: item.is_kind(ItemKind.MUSIC_ARTIST) and bool(item.id),
    ),
    (
        PlaybackBranch.MUSIC_GENRE,
        lambda item: item.is_kind(ItemKind.MUSIC_GENRE) and bool(item.id),
    ),
    (PlaybackBranch.FOLDER, lambda item: item.is_folder),
    (PlaybackBranch.EPISODE, lambda item: item.is_kind(ItemKind.EPISODE)),
)


def classify(item: CatalogItem) -> PlaybackBranch:
    """Return the branch that resolves the given item.

    Args:
        item: Item to classify.

    Returns:
        The first matching branch, PlaybackBranch.SINGLE if none matches.
    """
    for branch, matches in _DISPATCH:
        if matches(item):
            return branch
    return PlaybackBranch.SINGLE


def _sort_key(shuffle: bool) -> SortBy:
    return SortBy.RANDOM if shuffle else SortBy.SORT_NAME


class PlaybackResolver:
    """Resolves catalog items into playback queues.

    Example:
        resolver = PlaybackResolver(items, tv_shows, auth, store)
        queue = await resolver.resolve(album, shuffle=True, limit=100)
    """

    def __init__(
        self,
        items: ItemsService,
        tv_shows: TvShowsService,
        user_provider: UserProvider,
        registry: ItemRegistry,
        *,
        unsorted_folder_types: Collection[str] = DEFAULT_UNSORTED_FOLDER_TYPES,
        on_timing: TimingCallback | None = None,
        log_timing: bool = False,
    ) -> None:
        """Initialize the resolver.

        Args:
            items: Items query service.
            tv_shows: TV-episode query service.
            user_provider: Source of the current user's preferences.
            registry: Store that single items are registered with.
            unsorted_folder_types: Folder kinds queried without a sort key.
            on_timing: Called with (branch, seconds) after each resolution.
            log_timing: Log elapsed time at INFO instead of DEBUG.
        """
        self._items = items
        self._tv_shows = tv_shows
        self._user_provider = user_provider
        self._registry = registry
        self._unsorted_folder_types = frozenset(unsorted_folder_types)
        self._on_timing = on_timing
        self._log_timing = log_timing

        self._items_builders: dict[
            PlaybackBranch, Callable[[CatalogItem, bool, int | None], ItemsQuery]
        ] = {
            PlaybackBranch.PROGRAM_CHANNEL: self._channel_query,
            PlaybackBranch.PLAYLIST: self._playlist_query,
            PlaybackBranch.MUSIC_ARTIST: self._artist_query,
            PlaybackBranch.MUSIC_GENRE: self._genre_query,
            PlaybackBranch.FOLDER: self._folder_query,
        }

    @property
    def unsorted_folder_types(self) -> frozenset[str]:
        """Return the folder kinds that are never sorted."""
        return self._unsorted_folder_types

    def resolve(
        self,
        item: CatalogItem | None,
        shuffle: bool = False,
        limit: int | None = None,
    ) -> Coroutine[Any, Any, list[str]]:
        """Resolve an item into the ids to enqueue for playback.

        The item is validated immediately, before any awaitable is created.

        Args:
            item: Item to play.
            shuffle: Ask the server for a randomized order.
            limit: Maximum number of ids to request from the server. Not
                applied when the item resolves to itself.

        Returns:
            Awaitable producing the ordered list of playable item ids.

        Raises:
            InvalidItemError: If item is None.
        """
        if item is None:
            raise InvalidItemError("item must be defined")
        return self._resolve(item, shuffle, limit)

    async def _resolve(self, item: CatalogItem, shuffle: bool, limit: int | None) -> list[str]:
        start = time.perf_counter()
        branch = classify(item)
        logger.debug("Resolving %s (%s) via %s", item.display_name, item.type, branch)

        queue: list[str] = []
        response: list[str] | None = None

        builder = self._items_builders.get(branch)
        if builder is not None:
            response = await self._items.get_items(builder(item, shuffle, limit))
        elif branch is PlaybackBranch.EPISODE and item.series_id and self._autoplay_enabled():
            response = await self._tv_shows.get_episodes(self._episodes_query(item, limit))
        else:
            # Item is playable on its own
            await self._registry.add_items([item])
            queue.append(item.id or "")

        if response:
            queue.extend(response)

        self._report_timing(branch, time.perf_counter() - start, len(queue))
        return queue

    def _autoplay_enabled(self) -> bool:
        user = self._user_provider.user
        return user is not None and user.autoplay_next_episode

    # -- Query builders --------------------------------------------------------

    def _channel_query(self, item: CatalogItem, shuffle: bool, limit: int | None) -> ItemsQuery:
        """Live-TV programs play their channel, not the program itself."""
        assert item.channel_id is not None
        return ItemsQuery(ids=(item.channel_id,), sort_by=_sort_key(shuffle), limit=limit)

    def _playlist_query(self, item: CatalogItem, shuffle: bool, limit: int | None) -> ItemsQuery:
        """Playlists keep their server-defined order unless shuffling."""
        return ItemsQuery(
            parent_id=item.id,
            sort_by=SortBy.RANDOM if shuffle else None,
            limit=limit,
        )

    def _artist_query(self, item: CatalogItem, shuffle: bool, limit: int | None) -> ItemsQuery:
        assert item.id is not None
        return ItemsQuery(
            artist_ids=(item.id,),
            filters=(ItemFilter.IS_NOT_FOLDER,),
            recursive=True,
            media_types=(MediaType.AUDIO,),
            sort_by=_sort_key(shuffle),
            limit=limit,
        )

    def _genre_query(self, item: CatalogItem, shuffle: bool, limit: int | None) -> ItemsQuery:
        assert item.id is not None
        return ItemsQuery(
            genre_ids=(item.id,),
            filters=(ItemFilter.IS_NOT_FOLDER,),
            recursive=True,
            media_types=(MediaType.AUDIO,),
            sort_by=_sort_key(shuffle),
            limit=limit,
        )

    def _folder_query(self, item: CatalogItem, shuffle: bool, limit: int | None) -> ItemsQuery:
        unsorted = item.type is not None and str(item.type) in self._unsorted_folder_types
        return ItemsQuery(
            parent_id=item.id,
            filters=(ItemFilter.IS_NOT_FOLDER,),
            recursive=True,
            media_types=(MediaType.AUDIO, MediaType.VIDEO),
            sort_by=None if unsorted else _sort_key(shuffle),
            limit=limit,
        )

    def _episodes_query(self, item: CatalogItem, limit: int | None) -> EpisodesQuery:
        """Remaining episodes of the series, starting at this one."""
        assert item.series_id is not None
        return EpisodesQuery(
            series_id=item.series_id,
            is_missing=False,
            fields=_EPISODE_FIELDS,
            start_item_id=item.id,
            limit=limit,
        )

    # -- Diagnostics -----------------------------------------------------------

    def _report_timing(self, branch: PlaybackBranch, elapsed: float, count: int) -> None:
        level = logging.INFO if self._log_timing else logging.DEBUG
        logger.log(level, "Resolved %d item(s) via %s in %.1f ms", count, branch, elapsed * 1000)
        if self._on_timing is not None:
            self._on_timing(branch, elapsed)
