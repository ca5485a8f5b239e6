"""Configuration manager using QSettings for persistent storage."""

import logging
from typing import cast

from PySide6.QtCore import QSettings

from jellyqueue.api.services import ItemRegistry, ItemsService, TvShowsService, UserProvider
from jellyqueue.core.resolver import (
    DEFAULT_UNSORTED_FOLDER_TYPES,
    PlaybackResolver,
    TimingCallback,
)

logger = logging.getLogger(__name__)

# Playback
_KEY_UNSORTED_FOLDER_TYPES = "playback/unsorted_folder_types"

# Diagnostics
_KEY_TIMING_ENABLED = "diagnostics/timing_enabled"


class ConfigManager:
    """Wrapper around QSettings for type-safe config access.

    QSettings stores config in platform-specific locations:
    - Windows: HKEY_CURRENT_USER\\Software\\jellyqueue\\jellyqueue
    - macOS: ~/Library/Preferences/com.jellyqueue.jellyqueue.plist
    - Linux: ~/.config/jellyqueue/jellyqueue.conf

    Example:
        config = ConfigManager()
        config.set_timing_enabled(True)
        resolver = config.create_resolver(items, tv_shows, auth, store)
    """

    def __init__(self, organization: str = "jellyqueue", application: str = "jellyqueue") -> None:
        """Initialize the config manager.

        Args:
            organization: Organization name for QSettings.
            application: Application name for QSettings.
        """
        self._settings = QSettings(organization, application)

    @property
    def settings(self) -> QSettings:
        """Return the underlying QSettings instance."""
        return self._settings

    # -- Playback settings -----------------------------------------------------

    def get_unsorted_folder_types(self) -> list[str]:
        """Return the folder kinds that keep their curated order.

        Returns:
            List of item kind names (default ["BoxSet"]).
        """
        raw_data = self._settings.value(_KEY_UNSORTED_FOLDER_TYPES, None)
        if raw_data is None:
            return list(DEFAULT_UNSORTED_FOLDER_TYPES)

        # Stored as a comma-separated string; an empty list stays distinguishable
        if isinstance(raw_data, str):
            return [kind.strip() for kind in raw_data.split(",") if kind.strip()]

        # Hand-edited config files may contain a real list
        if isinstance(raw_data, list):
            data = cast(list[object], raw_data)
            return [str(kind).strip() for kind in data if kind]

        logger.warning("Ignoring invalid %s value: %r", _KEY_UNSORTED_FOLDER_TYPES, raw_data)
        return list(DEFAULT_UNSORTED_FOLDER_TYPES)

    def set_unsorted_folder_types(self, kinds: list[str]) -> None:
        """Set the folder kinds that are never sorted.

        Args:
            kinds: Item kind names, e.g. ["BoxSet"]. An empty list sorts every folder.
        """
        self._settings.setValue(
            _KEY_UNSORTED_FOLDER_TYPES, ",".join(str(k).strip() for k in kinds if k)
        )

    # -- Diagnostics settings --------------------------------------------------

    def get_timing_enabled(self) -> bool:
        """Return whether resolution timing is logged at INFO level.

        Returns:
            True if timing output is enabled (default False).
        """
        return bool(self._settings.value(_KEY_TIMING_ENABLED, False, bool))

    def set_timing_enabled(self, enabled: bool) -> None:
        """Enable or disable timing output.

        Args:
            enabled: Whether to log resolution timing at INFO level.
        """
        self._settings.setValue(_KEY_TIMING_ENABLED, enabled)

    # -- Factories -------------------------------------------------------------

    def create_resolver(
        self,
        items: ItemsService,
        tv_shows: TvShowsService,
        user_provider: UserProvider,
        registry: ItemRegistry,
        on_timing: TimingCallback | None = None,
    ) -> PlaybackResolver:
        """Build a PlaybackResolver configured from the stored settings.

        Args:
            items: Items query service.
            tv_shows: TV-episode query service.
            user_provider: Source of the current user's preferences.
            registry: Item registry sink.
            on_timing: Optional timing callback.

        Returns:
            A configured PlaybackResolver.
        """
        return PlaybackResolver(
            items,
            tv_shows,
            user_provider,
            registry,
            unsorted_folder_types=self.get_unsorted_folder_types(),
            on_timing=on_timing,
            log_timing=self.get_timing_enabled(),
        )

    # -- General settings ------------------------------------------------------

    def clear(self) -> None:
        """Clear all settings (useful for testing or reset)."""
        self._settings.clear()

    def sync(self) -> None:
        """Force settings to be written to disk."""
        self._settings.sync()
