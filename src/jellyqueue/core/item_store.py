"""Item registry with Qt signals for reactive updates.

The ItemStore keeps metadata for items that are about to be played and
emits Qt signals when items are registered, so views and the playback
engine can react without polling.
"""

import logging
from collections.abc import Sequence

from PySide6.QtCore import QObject, Signal

from jellyqueue.api.services import ItemRegistry
from jellyqueue.models.item import CatalogItem

logger = logging.getLogger(__name__)


class ItemStore(QObject):
    """Central item registry emitting Qt signals on changes.

    Implements the ItemRegistry contract consumed by PlaybackResolver.
    Items without an id are stored under the empty string, matching the
    id the resolver enqueues for them.

    Example:
        store = ItemStore()
        store.items_added.connect(lambda items: print(f"Added: {items}"))
        await store.add_items([item])
    """

    # Emits the list of CatalogItem objects added by one call
    # Note: Using object for complex types (PySide6 limitation)
    items_added = Signal(object)
    cleared = Signal()

    def __init__(self) -> None:
        """Initialize an empty store."""
        super().__init__()
        self._items: dict[str, CatalogItem] = {}
        self._items_cache: list[CatalogItem] | None = None

    @property
    def items(self) -> list[CatalogItem]:
        """Return all registered items (cached)."""
        if self._items_cache is None:
            self._items_cache = list(self._items.values())
        return self._items_cache

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def get_item(self, item_id: str) -> CatalogItem | None:
        """Get a registered item by ID.

        Args:
            item_id: The item ID to look up.

        Returns:
            The CatalogItem if registered, else None.
        """
        return self._items.get(item_id)

    async def add_items(self, items: Sequence[CatalogItem]) -> None:
        """Register items, replacing existing entries with the same id.

        Args:
            items: Items to register.
        """
        if not items:
            return

        added = list(items)
        for item in added:
            self._items[item.id or ""] = item
        self._items_cache = None

        logger.debug("Registered %d item(s), %d total", len(added), len(self._items))
        self.items_added.emit(added)

    def clear(self) -> None:
        """Remove all registered items."""
        had_items = bool(self._items)
        self._items.clear()
        self._items_cache = None

        if had_items:
            self.cleared.emit()


# QObject's metaclass cannot be combined with ABCMeta, so register virtually
ItemRegistry.register(ItemStore)
