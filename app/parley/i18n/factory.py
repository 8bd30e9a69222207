"""Factory functions for creating i18n components from settings."""

from pathlib import Path
from typing import Iterable, Optional

from parley.core.config import settings
from parley.core.logging import get_module_logger
from parley.i18n.loader import TranslationLoader
from parley.i18n.locales import Locale
from parley.i18n.registry import TranslationRegistry
from parley.i18n.translator import AggregateTranslator
from parley.messages.parser import MessageMapParser

logger = get_module_logger()


def create_loader(path_separator: Optional[str] = None) -> TranslationLoader:
    """Create a TranslationLoader flattening keys with the configured separator."""
    separator = path_separator or settings.translations.TRANSLATIONS_PATH_SEPARATOR
    return TranslationLoader(parser=MessageMapParser(path_separator=separator))


def create_registry(
    translations_dir: Optional[Path] = None,
    default_locale: Optional[Locale] = None,
    path_separator: Optional[str] = None,
) -> TranslationRegistry:
    """Create a TranslationRegistry, preloaded when a directory is known.

    Args:
        translations_dir: Resource directory (default: TRANSLATIONS_DIR).
        default_locale: Registry default locale
            (default: TRANSLATIONS_DEFAULT_LOCALE).
        path_separator: Key separator (default: TRANSLATIONS_PATH_SEPARATOR).

    Returns:
        TranslationRegistry: Empty if no directory is configured.

    Usage:
        # Use settings
        registry = create_registry()

        # Explicit directory
        registry = create_registry(Path("resources/lang"), Locale("fr"))
    """
    if default_locale is None:
        default_locale = Locale.from_string(
            settings.translations.TRANSLATIONS_DEFAULT_LOCALE
        )
    if translations_dir is None:
        translations_dir = settings.translations.TRANSLATIONS_DIR

    registry = TranslationRegistry(default_locale)
    if translations_dir is None:
        logger.info("registry_created_empty", default_locale=str(default_locale))
        return registry

    create_loader(path_separator).register_directory(registry, translations_dir)
    logger.info(
        "registry_created_with_preload",
        translations_dir=str(translations_dir),
        locale_count=len(registry.locales()),
    )
    return registry


def create_translator(
    sources: Iterable[TranslationRegistry] = (),
    default_locale: Optional[Locale] = None,
) -> AggregateTranslator:
    """Create an AggregateTranslator over sources."""
    if default_locale is None:
        default_locale = Locale.from_string(
            settings.translations.TRANSLATIONS_DEFAULT_LOCALE
        )
    return AggregateTranslator(sources, default_locale)
