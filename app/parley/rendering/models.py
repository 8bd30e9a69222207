"""Payloads handed to an audience by the render adapter."""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Optional

from parley.exceptions import UnknownSoundSourceError


class SoundSource(str, Enum):
    """Sound categories an audience can play sounds in."""

    MASTER = "master"
    MUSIC = "music"
    RECORD = "record"
    WEATHER = "weather"
    BLOCK = "block"
    HOSTILE = "hostile"
    NEUTRAL = "neutral"
    PLAYER = "player"
    AMBIENT = "ambient"
    VOICE = "voice"

    @classmethod
    def from_name(cls, name: str) -> "SoundSource":
        """Resolve a category name, ignoring case.

        Raises:
            UnknownSoundSourceError: If name is not a known category.
        """
        try:
            return cls(name.lower())
        except ValueError as e:
            raise UnknownSoundSourceError(f"Unknown sound source: {name}") from e


@dataclass(frozen=True)
class TitleTimes:
    """Title timings; the defaults match the client's own."""

    fade_in: timedelta = timedelta(milliseconds=500)
    stay: timedelta = timedelta(milliseconds=3500)
    fade_out: timedelta = timedelta(milliseconds=1000)


DEFAULT_TIMES = TitleTimes()


@dataclass(frozen=True)
class Title:
    """A decoded title ready to be shown.

    Attributes:
        title: Decoded title component.
        subtitle: Decoded subtitle component.
        times: Timings, None to keep the audience's current ones.
    """

    title: Any
    subtitle: Any
    times: Optional[TitleTimes] = DEFAULT_TIMES


@dataclass(frozen=True)
class Sound:
    """A sound ready to be played.

    Attributes:
        key: Namespaced sound key.
        source: Category, MASTER unless the message names one.
        volume: Volume.
        pitch: Pitch.
        seed: Optional random seed.
    """

    key: str
    source: SoundSource = SoundSource.MASTER
    volume: float = 1.0
    pitch: float = 1.0
    seed: Optional[int] = None
