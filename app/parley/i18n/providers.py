"""Process-wide translator provider.

get_global_translator() returns one shared AggregateTranslator per process.
Its sources and default_locale are shared mutable state: any caller can add
or remove registries and change the default locale, and every other caller
sees the change. Prefer constructing an AggregateTranslator and passing it
explicitly; use the global one for code that has no way to receive it.
"""

from functools import lru_cache

from parley.i18n.factory import create_translator
from parley.i18n.translator import AggregateTranslator


@lru_cache
def get_global_translator() -> AggregateTranslator:
    """Get the process-wide AggregateTranslator singleton.

    Starts with no sources and the configured default locale.

    Usage:
        registry = create_registry(Path("resources/lang"))
        get_global_translator().add_source(registry)

        get_global_translator().translate("greeting", Locale("fr"))
    """
    return create_translator()
