"""Sound effects, background music and the persisted volume settings."""

from __future__ import annotations

import os
import random
import re
import time
from enum import Enum
from pathlib import Path
from typing import Protocol

DEFAULT_VOLUME = 0.2

_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class SoundName(Enum):
    """The sound effects the game knows by name."""

    PLACE = "placeSound"
    MENU = "menuSound"
    INVALID = "invalidSound"


def resolve_sound(name: str) -> SoundName:
    """Map a sound name to its :class:`SoundName`, or ``SoundName.INVALID``."""
    if name == SoundName.PLACE.value:
        return SoundName.PLACE
    if name == SoundName.MENU.value:
        return SoundName.MENU
    return SoundName.INVALID


class AudioPlayer(Protocol):
    """The audio output a :class:`SoundManager` drives."""

    def play_sound(self, sound: SoundName) -> None: ...

    def set_sound_volume(self, sound: SoundName, volume: float) -> None: ...

    def set_music_volume(self, track: int, volume: float) -> None: ...

    def play_music(self, track: int) -> None: ...

    def is_music_playing(self, track: int) -> bool: ...

    def update_music(self, track: int) -> None: ...

    def unload_music(self, track: int) -> None: ...

    def unload_sound(self, sound: SoundName) -> None: ...


class _MemoryPlayer:
    """An audio output without a device that keeps its state in memory."""

    def __init__(self) -> None:
        self.sound_volumes: dict[SoundName, float] = {}
        self.music_volumes: dict[int, float] = {}
        self.playing: set[int] = set()
        self.sounds_played: list[SoundName] = []
        self.unloaded_sounds: set[SoundName] = set()
        self.stream_updates = 0

    def play_sound(self, sound: SoundName) -> None:
        if sound not in self.unloaded_sounds:
            self.sounds_played.append(sound)

    def set_sound_volume(self, sound: SoundName, volume: float) -> None:
        self.sound_volumes[sound] = volume

    def set_music_volume(self, track: int, volume: float) -> None:
        self.music_volumes[track] = volume

    def play_music(self, track: int) -> None:
        self.playing.add(track)

    def is_music_playing(self, track: int) -> bool:
        return track in self.playing

    def update_music(self, track: int) -> None:
        if track in self.playing:
            self.stream_updates += 1

    def unload_music(self, track: int) -> None:
        self.playing.discard(track)
        self.music_volumes.pop(track, None)

    def unload_sound(self, sound: SoundName) -> None:
        self.unloaded_sounds.add(sound)
        self.sound_volumes.pop(sound, None)


def _parse_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise ValueError(f"not a volume: {text!r}")
    return float(match.group(1))


def _format_float(value: float) -> str:
    return f"{value:g}"


class SoundManager:
    """Plays effects and music and keeps the music and effect volumes on disk.

    The settings file holds the music volume on its first line and the
    effects volume on its second. A missing file or blank line keeps the
    default volume of 0.2.
    """

    def __init__(
        self,
        settings_path: str | os.PathLike[str] = "Sound.setting",
        player: AudioPlayer | None = None,
        track_count: int = 2,
    ) -> None:
        if track_count < 1:
            raise ValueError("at least one music track is needed")
        self.settings_path = Path(settings_path)
        self.player: AudioPlayer = player if player is not None else _MemoryPlayer()
        self.track_count = track_count
        self.music_volume = DEFAULT_VOLUME
        self.sfx_volume = DEFAULT_VOLUME
        self.currently_playing = 0

        if self.settings_path.is_file():
            lines = self.settings_path.read_text(encoding="ascii").splitlines()
            if len(lines) > 0 and lines[0] != "":
                self.music_volume = _parse_float(lines[0])
            if len(lines) > 1 and lines[1] != "":
                self.sfx_volume = _parse_float(lines[1])

        self._apply_sfx_volume()

    def _apply_sfx_volume(self) -> None:
        self.player.set_sound_volume(SoundName.PLACE, self.sfx_volume)
        self.player.set_sound_volume(SoundName.MENU, self.sfx_volume)

    def _save(self) -> None:
        self.settings_path.write_text(
            f"{_format_float(self.music_volume)}\n{_format_float(self.sfx_volume)}",
            encoding="ascii",
        )

    def play_sound(self, name: str) -> None:
        """Play the effect called ``name``; raise ``ValueError`` if unknown."""
        sound = resolve_sound(name)
        if sound is SoundName.INVALID:
            raise ValueError(f"unknown sound: {name!r}")
        self.player.play_sound(sound)

    def check_music_playing(self) -> bool:
        """Return whether any track plays, remembering the first one that does."""
        for track in range(self.track_count):
            if self.player.is_music_playing(track):
                self.currently_playing = track
                return True
        return False

    def play_random_music(self, rng: random.Random | None = None) -> int:
        """Start a randomly chosen track at the music volume and return it."""
        if rng is None:
            rng = random.Random(int(time.time()))
        self.currently_playing = rng.randrange(self.track_count)
        self.player.set_music_volume(self.currently_playing, self.music_volume)
        self.player.play_music(self.currently_playing)
        return self.currently_playing

    def update_current_music(self) -> None:
        """Keep the current track streaming."""
        self.player.update_music(self.currently_playing)

    def close(self) -> None:
        """Release every track and effect."""
        for track in range(self.track_count):
            self.player.unload_music(track)
        self.player.unload_sound(SoundName.PLACE)
        self.player.unload_sound(SoundName.MENU)

    def set_music_volume(self, volume: float) -> None:
        """Set and save the music volume and apply it to the current track."""
        self.music_volume = volume
        self._save()
        self.player.set_music_volume(self.currently_playing, volume)

    def set_sfx_volume(self, volume: float) -> None:
        """Set and save the effects volume and apply it to every effect."""
        self.sfx_volume = volume
        self._save()
        self._apply_sfx_volume()