"""Collaborator contracts consumed by the playback resolver.

The resolver only depends on these abstract interfaces. Concrete
implementations (HTTP clients, session handling, application stores)
live outside this package, which keeps them swappable in tests.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from jellyqueue.api.query import EpisodesQuery, ItemsQuery
from jellyqueue.models.item import CatalogItem
from jellyqueue.models.user import User


class ItemsService(ABC):
    """Queries the catalog for playable item ids."""

    @abstractmethod
    async def get_items(self, query: ItemsQuery) -> list[str] | None:
        """Fetch ids of the items matching the query.

        Args:
            query: Request criteria.

        Returns:
            Item ids in server order, or None if the server returned nothing.
        """


class TvShowsService(ABC):
    """Queries episodes of a TV series."""

    @abstractmethod
    async def get_episodes(self, query: EpisodesQuery) -> list[str] | None:
        """Fetch ids of the episodes matching the query.

        Args:
            query: Request criteria.

        Returns:
            Episode ids in server order, or None if the server returned nothing.
        """


class UserProvider(ABC):
    """Exposes the currently authenticated user."""

    @property
    @abstractmethod
    def user(self) -> User | None:
        """Return the current user, or None if nobody is logged in."""


class ItemRegistry(ABC):
    """Shared store that playable items are registered with."""

    @abstractmethod
    async def add_items(self, items: Sequence[CatalogItem]) -> None:
        """Register items so their metadata is available to playback.

        Args:
            items: Items to register.
        """
