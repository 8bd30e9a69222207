"""Message model and tree parsing.

Main components:
- models: Message variants (empty, text, actionbar, title, sound, composite)
- durations: duration string grammar used by title fields
- parser: MessageNodeParser and MessageMapParser for document trees
"""

from parley.messages.durations import parse_duration
from parley.messages.models import (
    EMPTY,
    RESET_TITLE,
    ActionbarMessage,
    CompositeMessage,
    EmptyMessage,
    Message,
    SoundMessage,
    TextMessage,
    TitleMessage,
    composite,
    or_empty,
)
from parley.messages.parser import (
    MessageMapParser,
    MessageNodeParser,
    is_message_node,
    parse_message,
    parse_message_map,
)

__all__ = [
    "Message",
    "EmptyMessage",
    "EMPTY",
    "TextMessage",
    "ActionbarMessage",
    "TitleMessage",
    "RESET_TITLE",
    "SoundMessage",
    "CompositeMessage",
    "composite",
    "or_empty",
    "parse_duration",
    "MessageNodeParser",
    "MessageMapParser",
    "is_message_node",
    "parse_message",
    "parse_message_map",
]
