"""Translation registry.

Stores one key -> Message dictionary per locale and resolves keys through
the locale fallback chain: requested locale, its language-only locale, then
the registry default locale.

All operations are safe to call from multiple threads. A single register()
call checks for duplicates and inserts under one lock, so two threads
racing on the same (locale, key) cannot both succeed.
"""

import threading
from collections.abc import Mapping
from typing import Dict, Iterable, List, Optional, Tuple, Union

from parley.core.logging import get_module_logger
from parley.exceptions import DuplicateTranslationError
from parley.i18n.locales import ENGLISH, Locale
from parley.messages.models import Message

logger = get_module_logger()

Dictionary = Union[Mapping, Iterable[Tuple[str, Message]]]


class TranslationRegistry:
    """Per-locale registry of translated messages.

    Example:
        registry = TranslationRegistry(default_locale=ENGLISH)
        registry.register("greeting", TextMessage("Hello"))
        registry.register("greeting", TextMessage("Bonjour"), FRENCH)

        registry.get("greeting", CANADA_FRENCH)  # TextMessage("Bonjour")
        registry["greeting", GERMAN]  # TextMessage("Hello")

    Attributes:
        default_locale: Locale used when none is given, and the last step
            of the fallback chain. May be reassigned at any time.
    """

    def __init__(self, default_locale: Locale = ENGLISH):
        self.default_locale = default_locale
        self._dictionaries: Dict[Locale, Dict[str, Message]] = {}
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return (
            f"TranslationRegistry(default_locale={self.default_locale}, "
            f"locales={[str(locale) for locale in self.locales()]})"
        )

    def contains(self, key: str) -> bool:
        """Check if any locale holds a translation for key."""
        with self._lock:
            return any(key in dictionary for dictionary in self._dictionaries.values())

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def get(self, key: str, locale: Optional[Locale] = None) -> Optional[Message]:
        """Retrieve the message for key in locale, following the fallback chain.

        Args:
            key: Translation key.
            locale: Requested locale, defaults to default_locale.

        Returns:
            The message, or None if neither the locale, its language, nor the
            default locale holds the key.
        """
        if locale is None:
            locale = self.default_locale

        with self._lock:
            for candidate in (locale, locale.language_only, self.default_locale):
                dictionary = self._dictionaries.get(candidate)
                if dictionary is not None and key in dictionary:
                    return dictionary[key]
        return None

    def __getitem__(self, item: Union[str, Tuple[str, Locale]]) -> Optional[Message]:
        """registry[key] or registry[key, locale]; same as get()."""
        if isinstance(item, tuple):
            key, locale = item
            return self.get(key, locale)
        return self.get(item)

    def register(
        self,
        key: str,
        message: Message,
        locale: Optional[Locale] = None,
    ) -> "TranslationRegistry":
        """Register a message for key in locale.

        Args:
            key: Translation key.
            message: Message to register.
            locale: Target locale, defaults to default_locale.

        Returns:
            This registry, for chaining.

        Raises:
            DuplicateTranslationError: If key is already registered for locale.
        """
        if locale is None:
            locale = self.default_locale

        with self._lock:
            dictionary = self._dictionaries.setdefault(locale, {})
            if key in dictionary:
                raise DuplicateTranslationError(key, locale, message)
            dictionary[key] = message

        logger.debug("translation_registered", key=key, locale=str(locale))
        return self

    def __setitem__(self, item: Tuple[Locale, str], message: Message) -> None:
        """registry[locale, key] = message; same as register()."""
        locale, key = item
        self.register(key, message, locale)

    def register_all(
        self,
        dictionary: Dictionary,
        locale: Optional[Locale] = None,
    ) -> "TranslationRegistry":
        """Register many messages into one locale.

        Stops at the first failing key; keys registered before it stay
        registered.

        Args:
            dictionary: Mapping of key -> Message, or (key, Message) pairs.
            locale: Target locale, defaults to default_locale.

        Returns:
            This registry, for chaining.

        Raises:
            DuplicateTranslationError: On the first key already registered.
        """
        if locale is None:
            locale = self.default_locale

        pairs = dictionary.items() if isinstance(dictionary, Mapping) else dictionary
        count = 0
        for key, message in pairs:
            self.register(key, message, locale)
            count += 1

        logger.info("registered_translations", locale=str(locale), count=count)
        return self

    def unregister_all(self, key: str) -> None:
        """Remove key from every locale. Does nothing if key is absent."""
        with self._lock:
            for dictionary in self._dictionaries.values():
                dictionary.pop(key, None)

    def __delitem__(self, key: str) -> None:
        self.unregister_all(key)

    def locales(self) -> List[Locale]:
        """Locales that have had at least one translation registered."""
        with self._lock:
            return list(self._dictionaries)

    def keys(self, locale: Optional[Locale] = None) -> List[str]:
        """Keys registered directly in locale (no fallback)."""
        if locale is None:
            locale = self.default_locale
        with self._lock:
            return list(self._dictionaries.get(locale, {}))
