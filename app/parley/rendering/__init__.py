"""Render adapter: delivers messages to an audience."""

from parley.rendering.audience import (
    Audience,
    MessageDecoder,
    plain_text_decoder,
    send_message,
    to_sound,
    to_title,
)
from parley.rendering.models import (
    DEFAULT_TIMES,
    Sound,
    SoundSource,
    Title,
    TitleTimes,
)

__all__ = [
    "Audience",
    "MessageDecoder",
    "plain_text_decoder",
    "send_message",
    "to_sound",
    "to_title",
    "Sound",
    "SoundSource",
    "Title",
    "TitleTimes",
    "DEFAULT_TIMES",
]
