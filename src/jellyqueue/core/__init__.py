"""Core playback logic.

Classes:
    PlaybackResolver: Turns a catalog item into a playback queue.
    ItemStore: Item registry with Qt signals.
    ConfigManager: QSettings wrapper for configuration.
"""

from jellyqueue.core.config import ConfigManager
from jellyqueue.core.item_store import ItemStore
from jellyqueue.core.resolver import (
    InvalidItemError,
    PlaybackBranch,
    PlaybackResolver,
    classify,
)

__all__ = [
    "ConfigManager",
    "InvalidItemError",
    "ItemStore",
    "PlaybackBranch",
    "PlaybackResolver",
    "classify",
]
