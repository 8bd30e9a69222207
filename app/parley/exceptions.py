"""Custom exceptions for parley.

Missing translations and unrecognised locale file names are not errors and
have no exception here.
"""

from typing import Any


class ParleyError(Exception):
    """Base exception for all parley errors.

    Example:
        try:
            registry.register("greeting", message)
        except ParleyError as e:
            logger.error("parley_error", error=str(e))
    """

    pass


class MessageParseError(ParleyError, ValueError):
    """Raised when a tree node cannot be converted into a Message.

    Covers unrecognised node shapes as well as malformed duration and
    numeric fields.

    Example:
        >>> parse_message({"colour": "red"})
        Traceback (most recent call last):
        ...
        MessageParseError: Cannot parse node: {'colour': 'red'}
    """

    pass


class DuplicateTranslationError(ParleyError, ValueError):
    """Raised when a key is registered twice for the same locale.

    Attributes:
        key: The translation key.
        locale: The locale the key already exists in.
    """

    def __init__(self, key: str, locale: Any, message: Any = None):
        self.key = key
        self.locale = locale
        kind = type(message).__name__ if message is not None else "Message"
        super().__init__(f"Translation already registered: {key} ({kind}) in {locale}")


class TranslationLoadError(ParleyError):
    """Raised when a translation resource file cannot be read or decoded."""

    pass


class UnknownSoundSourceError(ParleyError, ValueError):
    """Raised by the render adapter for a sound source outside the known categories."""

    pass
