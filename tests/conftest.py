"""Test fixtures for jellyqueue tests."""

import os
from collections.abc import Sequence

import pytest

# Headless CI has no display for the QApplication created by pytest-qt
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from jellyqueue.api.query import EpisodesQuery, ItemsQuery
from jellyqueue.api.services import ItemRegistry, ItemsService, TvShowsService, UserProvider
from jellyqueue.core.resolver import PlaybackResolver
from jellyqueue.models.item import CatalogItem
from jellyqueue.models.user import User, UserConfiguration


class FakeItemsService(ItemsService):
    """Items service returning canned ids and recording every query."""

    def __init__(self, response: list[str] | None = None) -> None:
        self.response = response
        self.error: Exception | None = None
        self.queries: list[ItemsQuery] = []

    async def get_items(self, query: ItemsQuery) -> list[str] | None:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return None if self.response is None else list(self.response)


class FakeTvShowsService(TvShowsService):
    """TV-episode service returning canned ids and recording every query."""

    def __init__(self, response: list[str] | None = None) -> None:
        self.response = response
        self.error: Exception | None = None
        self.queries: list[EpisodesQuery] = []

    async def get_episodes(self, query: EpisodesQuery) -> list[str] | None:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return None if self.response is None else list(self.response)


class FakeUserProvider(UserProvider):
    """User provider with a settable current user."""

    def __init__(self, user: User | None = None) -> None:
        self._user = user

    @property
    def user(self) -> User | None:
        return self._user

    def set_autoplay(self, enabled: bool) -> None:
        self._user = User(
            id="user-1",
            name="tester",
            configuration=UserConfiguration(enable_next_episode_auto_play=enabled),
        )


class FakeItemRegistry(ItemRegistry):
    """Registry recording each add_items call."""

    def __init__(self) -> None:
        self.calls: list[list[CatalogItem]] = []
        self.error: Exception | None = None

    async def add_items(self, items: Sequence[CatalogItem]) -> None:
        if self.error is not None:
            raise self.error
        self.calls.append(list(items))


@pytest.fixture
def items_service() -> FakeItemsService:
    """Return an items service answering with two track ids."""
    return FakeItemsService(["track-1", "track-2"])


@pytest.fixture
def tv_service() -> FakeTvShowsService:
    """Return a TV service answering with three episode ids."""
    return FakeTvShowsService(["ep-2", "ep-3", "ep-4"])


@pytest.fixture
def user_provider() -> FakeUserProvider:
    """Return a provider whose user has autoplay disabled."""
    provider = FakeUserProvider()
    provider.set_autoplay(False)
    return provider


@pytest.fixture
def registry() -> FakeItemRegistry:
    """Return an empty recording registry."""
    return FakeItemRegistry()


@pytest.fixture
def resolver(
    items_service: FakeItemsService,
    tv_service: FakeTvShowsService,
    user_provider: FakeUserProvider,
    registry: FakeItemRegistry,
) -> PlaybackResolver:
    """Return a resolver wired to the fake collaborators."""
    return PlaybackResolver(items_service, tv_service, user_provider, registry)
