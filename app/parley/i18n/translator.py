"""Translators resolve keys to messages through translation registries.

A missing translation is not an error: translate() returns EMPTY.
"""

import threading
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Protocol, Tuple, Union, runtime_checkable

from parley.core.logging import get_module_logger
from parley.i18n.locales import ENGLISH, Locale
from parley.i18n.registry import TranslationRegistry
from parley.messages.models import EMPTY, Message

logger = get_module_logger()


@runtime_checkable
class Translatable(Protocol):
    """Any object exposing a translation key, e.g. an enum of message keys."""

    @property
    def key(self) -> str: ...


TranslationKey = Union[str, Translatable]


def _key_of(key: TranslationKey) -> str:
    return key if isinstance(key, str) else key.key


class Translator(ABC):
    """Translates keys into localized messages."""

    def translate(
        self,
        key: TranslationKey,
        locale: Optional[Locale] = None,
    ) -> Message:
        """Translate key into a message for locale.

        Args:
            key: Translation key, or a Translatable carrying one.
            locale: Requested locale. None selects the translator's default.

        Returns:
            The translated message, or EMPTY if no translation exists.
        """
        resolved_key = _key_of(key)
        message = self._lookup(resolved_key, locale)
        if message is None:
            logger.debug(
                "translation_not_found",
                key=resolved_key,
                locale=str(locale) if locale else None,
            )
            return EMPTY
        return message

    @abstractmethod
    def _lookup(self, key: str, locale: Optional[Locale]) -> Optional[Message]:
        """Resolve key, returning None when no source holds it."""
        pass


class RegistryTranslator(Translator):
    """Translator backed by a single registry.

    A None locale falls through to the registry's own default locale.
    """

    def __init__(self, registry: TranslationRegistry):
        self.registry = registry

    def _lookup(self, key: str, locale: Optional[Locale]) -> Optional[Message]:
        return self.registry.get(key, locale)


class AggregateTranslator(Translator):
    """Translator that queries several registries, first match wins.

    Sources are queried in the order they were added. Adding a registry
    that is already a source does nothing. translate() iterates a snapshot
    of the sources, so sources may be added or removed concurrently.

    Instances are meant to be constructed and passed explicitly; the shared
    process-wide instance lives in parley.i18n.providers.

    Attributes:
        default_locale: Locale substituted when translate() receives None.
            Registries' own default locales still apply during fallback.
    """

    def __init__(
        self,
        sources: Iterable[TranslationRegistry] = (),
        default_locale: Locale = ENGLISH,
    ):
        self.default_locale = default_locale
        self._sources: Tuple[TranslationRegistry, ...] = ()
        self._lock = threading.Lock()
        for source in sources:
            self.add_source(source)

    @property
    def sources(self) -> Tuple[TranslationRegistry, ...]:
        """Snapshot of the current sources, in query order."""
        return self._sources

    def add_source(self, registry: TranslationRegistry) -> "AggregateTranslator":
        """Append a registry to the sources."""
        with self._lock:
            if not any(source is registry for source in self._sources):
                self._sources = self._sources + (registry,)
        return self

    def remove_source(self, registry: TranslationRegistry) -> None:
        """Remove a registry from the sources. Does nothing if absent."""
        with self._lock:
            self._sources = tuple(
                source for source in self._sources if source is not registry
            )

    def clear_sources(self) -> None:
        """Remove every source."""
        with self._lock:
            self._sources = ()

    def _lookup(self, key: str, locale: Optional[Locale]) -> Optional[Message]:
        if locale is None:
            locale = self.default_locale
        for source in self._sources:
            message = source.get(key, locale)
            if message is not None:
                return message
        return None
