"""Sending messages to an audience.

An audience is anything that can show chat, action bar and title output
and play sounds, e.g. a player or a whole server wrapper. Raw message text
goes through a decoder first, turning a string into whatever component type
the audience expects.
"""

from typing import Any, Callable, Protocol, runtime_checkable

from parley.messages.models import (
    ActionbarMessage,
    CompositeMessage,
    EmptyMessage,
    Message,
    SoundMessage,
    TextMessage,
    TitleMessage,
)
from parley.rendering.models import (
    DEFAULT_TIMES,
    Sound,
    SoundSource,
    Title,
    TitleTimes,
)


MessageDecoder = Callable[[str], Any]


def plain_text_decoder(text: str) -> str:
    """Default decoder: keep text as-is."""
    return text


@runtime_checkable
class Audience(Protocol):
    """Receiver of rendered messages."""

    def send_message(self, component: Any) -> None: ...

    def send_action_bar(self, component: Any) -> None: ...

    def show_title(self, title: Title) -> None: ...

    def reset_title(self) -> None: ...

    def play_sound(self, sound: Sound) -> None: ...


def _or_default(value, default):
    return default if value is None else value


def to_title(
    message: TitleMessage, decoder: MessageDecoder = plain_text_decoder
) -> Title:
    """Convert a non-reset TitleMessage into a Title.

    Missing text decodes from the empty string; missing timings take the
    defaults.
    """
    return Title(
        title=decoder(message.title or ""),
        subtitle=decoder(message.subtitle or ""),
        times=TitleTimes(
            fade_in=_or_default(message.fade_in, DEFAULT_TIMES.fade_in),
            stay=_or_default(message.stay, DEFAULT_TIMES.stay),
            fade_out=_or_default(message.fade_out, DEFAULT_TIMES.fade_out),
        ),
    )


def to_sound(message: SoundMessage) -> Sound:
    """Convert a SoundMessage into a Sound.

    Raises:
        UnknownSoundSourceError: If message.source is not a known category.
    """
    source = SoundSource.MASTER
    if message.source is not None:
        source = SoundSource.from_name(message.source)
    return Sound(
        key=message.sound,
        source=source,
        volume=message.volume,
        pitch=message.pitch,
        seed=message.seed,
    )


def send_message(
    audience: Audience,
    message: Message,
    decoder: MessageDecoder = plain_text_decoder,
) -> None:
    """Deliver a message to an audience.

    Composite messages are delivered element by element, in order. A title
    with no fields resets the audience's title.

    Args:
        audience: Receiver.
        message: Message to deliver.
        decoder: Turns raw text into the audience's component type.

    Raises:
        UnknownSoundSourceError: For a sound in an unknown category.
        TypeError: For an object that is not a Message.
    """
    if isinstance(message, EmptyMessage):
        return
    if isinstance(message, TextMessage):
        audience.send_message(decoder(message.text))
    elif isinstance(message, ActionbarMessage):
        audience.send_action_bar(decoder(message.actionbar))
    elif isinstance(message, TitleMessage):
        if message.is_reset:
            audience.reset_title()
        else:
            audience.show_title(to_title(message, decoder))
    elif isinstance(message, SoundMessage):
        audience.play_sound(to_sound(message))
    elif isinstance(message, CompositeMessage):
        for element in message.messages:
            send_message(audience, element, decoder)
    else:
        raise TypeError(f"Unsupported message type: {type(message).__name__}")
