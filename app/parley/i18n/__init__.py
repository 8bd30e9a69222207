"""Translation registries and translators.

Main components:
- locales: Locale value object and file name mapping
- registry: TranslationRegistry with locale fallback
- translator: Translator, RegistryTranslator, AggregateTranslator
- loader: TranslationLoader for JSON/YAML resource directories
- factory / providers: settings-driven construction, global translator
"""

from parley.i18n.loader import (
    TranslationLoader,
    load_registry,
    register_from_directory,
    register_from_file,
)
from parley.i18n.locales import Locale, parse_locale_name
from parley.i18n.registry import TranslationRegistry
from parley.i18n.translator import (
    AggregateTranslator,
    RegistryTranslator,
    Translatable,
    Translator,
)

__all__ = [
    "Locale",
    "parse_locale_name",
    "TranslationRegistry",
    "Translator",
    "RegistryTranslator",
    "AggregateTranslator",
    "Translatable",
    "TranslationLoader",
    "load_registry",
    "register_from_file",
    "register_from_directory",
]
