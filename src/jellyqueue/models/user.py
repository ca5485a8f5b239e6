"""Authenticated user model and playback preferences."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UserConfiguration:
    """Playback preferences for a user.

    Attributes:
        enable_next_episode_auto_play: Continue into the following episodes
            of a series after the current one.
        play_default_audio_track: Prefer the default audio stream.
        subtitle_language_preference: Preferred subtitle language code.
    """

    enable_next_episode_auto_play: bool = False
    play_default_audio_track: bool = True
    subtitle_language_preference: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserConfiguration":
        """Create configuration from a server DTO payload."""
        return cls(
            enable_next_episode_auto_play=bool(data.get("EnableNextEpisodeAutoPlay", False)),
            play_default_audio_track=bool(data.get("PlayDefaultAudioTrack", True)),
            subtitle_language_preference=str(data.get("SubtitleLanguagePreference") or ""),
        )


@dataclass(frozen=True)
class User:
    """The authenticated user.

    Attributes:
        id: User identifier.
        name: User name.
        configuration: Preferences, None if the server omitted them.
    """

    id: str
    name: str = ""
    configuration: UserConfiguration | None = None

    @property
    def autoplay_next_episode(self) -> bool:
        """Return True if sequential episode auto-continuation is enabled."""
        return self.configuration is not None and self.configuration.enable_next_episode_auto_play

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        """Create a user from a server DTO payload."""
        config_data = data.get("Configuration")
        configuration = (
            UserConfiguration.from_dict(config_data) if isinstance(config_data, dict) else None
        )
        return cls(
            id=str(data.get("Id") or ""),
            name=str(data.get("Name") or ""),
            configuration=configuration,
        )
