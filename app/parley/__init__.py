"""parley - message abstraction and translation library.

Main components:
- messages: Message variants, tree parsing, duration strings
- i18n: Locale, TranslationRegistry, Translator, resource loading
- rendering: Audience dispatch for parsed messages
"""

from parley.messages import (
    ActionbarMessage,
    CompositeMessage,
    EMPTY,
    EmptyMessage,
    Message,
    SoundMessage,
    TextMessage,
    TitleMessage,
)
from parley.i18n import Locale, TranslationRegistry, Translator

__all__ = [
    "Message",
    "EmptyMessage",
    "EMPTY",
    "TextMessage",
    "ActionbarMessage",
    "TitleMessage",
    "SoundMessage",
    "CompositeMessage",
    "Locale",
    "TranslationRegistry",
    "Translator",
]
