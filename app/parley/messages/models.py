"""Message models.

Defines the closed set of message variants delivered to an audience. All
variants are frozen dataclasses and compare structurally.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Optional, Tuple


class Message:
    """Base class of every message variant.

    See EmptyMessage, TextMessage, ActionbarMessage, TitleMessage,
    SoundMessage and CompositeMessage.
    """

    __slots__ = ()


@dataclass(frozen=True)
class EmptyMessage(Message):
    """A message that does nothing when sent."""

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = EmptyMessage()


@dataclass(frozen=True)
class TextMessage(Message):
    """A chat message.

    Attributes:
        text: Raw text, decoded by the render adapter.
    """

    text: str


@dataclass(frozen=True)
class ActionbarMessage(Message):
    """A message shown in the action bar.

    Attributes:
        actionbar: Raw text, decoded by the render adapter.
    """

    actionbar: str


@dataclass(frozen=True)
class TitleMessage(Message):
    """A title shown in the middle of the screen.

    When every attribute is None the message resets the audience's title
    instead of showing one (see RESET_TITLE).

    Attributes:
        title: Title text.
        subtitle: Subtitle text.
        fade_in: Fade-in duration.
        stay: Time the title stays on screen.
        fade_out: Fade-out duration.
    """

    title: Optional[str] = None
    subtitle: Optional[str] = None
    fade_in: Optional[timedelta] = None
    stay: Optional[timedelta] = None
    fade_out: Optional[timedelta] = None

    @property
    def is_reset(self) -> bool:
        """True if this title carries no data and resets the title instead."""
        return (
            self.title is None
            and self.subtitle is None
            and self.fade_in is None
            and self.stay is None
            and self.fade_out is None
        )


RESET_TITLE = TitleMessage()


@dataclass(frozen=True)
class SoundMessage(Message):
    """A sound played to the audience.

    Attributes:
        sound: Namespaced sound key (e.g. "minecraft:entity.pig.ambient").
        source: Sound category name, resolved by the render adapter.
        volume: Volume, 1.0 by default.
        pitch: Pitch, 1.0 by default.
        seed: Optional random seed for sound variants.
    """

    sound: str
    source: Optional[str] = None
    volume: float = 1.0
    pitch: float = 1.0
    seed: Optional[int] = None


@dataclass(frozen=True)
class CompositeMessage(Message):
    """A sequence of messages delivered in order.

    Attributes:
        messages: Sub-messages, order preserved. May be empty.
    """

    messages: Tuple[Message, ...] = ()

    def __post_init__(self):
        # Accept any iterable but store a tuple so the message stays hashable
        object.__setattr__(self, "messages", tuple(self.messages))

    def __iter__(self):
        return iter(self.messages)


def composite(messages: Iterable[Message]) -> CompositeMessage:
    """Build a CompositeMessage; an empty iterable yields an empty composite."""
    return CompositeMessage(tuple(messages))


def or_empty(message: Optional[Message]) -> Message:
    """Return message, or EMPTY when it is None."""
    return EMPTY if message is None else message
