"""Translation resource loading.

Reads locale-named resource files (JSON or YAML), flattens each document
into path-keyed messages and registers them into a TranslationRegistry.

File base names map to locales: "en.yml" -> en, "en_US.json" -> en_US,
"en_US_POSIX.json" -> en_US_POSIX. Files whose names do not map to a
locale, and files with unsupported suffixes, are skipped.
"""

import json
from collections import defaultdict
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

from parley.core.logging import get_module_logger
from parley.exceptions import TranslationLoadError
from parley.i18n.locales import ENGLISH, Locale, parse_locale_name
from parley.i18n.registry import TranslationRegistry
from parley.messages.models import Message
from parley.messages.parser import MessageMapParser

logger = get_module_logger()

LocaleMapper = Callable[[str], Optional[Locale]]


def _read_json(stream) -> Any:
    return json.load(stream)


def _read_yaml(stream) -> Any:
    return yaml.safe_load(stream)


class TranslationLoader:
    """Loads translation resource files into registries.

    Attributes:
        parser: Map parser used to flatten each document.
        locale_mapper: Maps a file base name to a Locale, or None to skip.
        readers: Document reader per lower-case file suffix.
    """

    def __init__(
        self,
        parser: Optional[MessageMapParser] = None,
        locale_mapper: LocaleMapper = parse_locale_name,
    ):
        self.parser = parser or MessageMapParser()
        self.locale_mapper = locale_mapper
        self.readers: Dict[str, Callable[[Any], Any]] = {
            ".json": _read_json,
            ".yml": _read_yaml,
            ".yaml": _read_yaml,
        }

    def supports(self, path: Path) -> bool:
        """Check whether path has a readable suffix."""
        return path.suffix.lower() in self.readers

    def read_tree(self, path: Path) -> Any:
        """Read a resource file into a document tree.

        Raises:
            TranslationLoadError: If the file cannot be read or decoded.
        """
        path = Path(path)
        reader = self.readers.get(path.suffix.lower(), _read_json)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return reader(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error("translation_file_read_error", file=str(path), error=str(e))
            raise TranslationLoadError(f"Failed to read {path}: {e}") from e

    def load_file(self, path: Path) -> Dict[str, Message]:
        """Read and flatten a resource file into path-keyed messages."""
        return self.parser.parse(self.read_tree(path))

    def discover(self, directory: Path) -> Dict[Locale, List[Path]]:
        """Find resource files under directory, grouped by locale.

        Sub-directories are searched too; every file is mapped by its own
        base name.

        Raises:
            ValueError: If directory does not exist.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise ValueError(f"Translations directory not found: {directory}")

        resources: Dict[Locale, List[Path]] = defaultdict(list)
        for path in sorted(directory.rglob("*")):
            if not path.is_file():
                continue
            if not self.supports(path):
                logger.debug("skipped_translation_file", file=str(path), reason="suffix")
                continue
            locale = self.locale_mapper(path.stem)
            if locale is None:
                logger.debug("skipped_translation_file", file=str(path), reason="locale")
                continue
            resources[locale].append(path)
        return dict(resources)

    def register_file(
        self,
        registry: TranslationRegistry,
        path: Path,
        locale: Optional[Locale] = None,
    ) -> TranslationRegistry:
        """Register every message of one file under locale.

        Args:
            registry: Target registry.
            path: Resource file.
            locale: Target locale, defaults to the registry default locale.

        Returns:
            The registry.

        Raises:
            TranslationLoadError: If the file cannot be read.
            MessageParseError: If a message node is malformed.
            DuplicateTranslationError: If a key already exists in locale.
        """
        messages = self.load_file(path)
        registry.register_all(messages, locale)
        logger.info(
            "loaded_translation_file",
            file=str(path),
            locale=str(locale or registry.default_locale),
            count=len(messages),
        )
        return registry

    def register_directory(
        self,
        registry: TranslationRegistry,
        directory: Path,
    ) -> TranslationRegistry:
        """Register every locale-named resource file found under directory."""
        resources = self.discover(directory)
        for locale, paths in resources.items():
            for path in paths:
                self.register_file(registry, path, locale)

        logger.info(
            "loaded_translation_directory",
            directory=str(directory),
            locale_count=len(resources),
        )
        return registry


def register_from_file(
    registry: TranslationRegistry,
    path: Path,
    locale: Optional[Locale] = None,
    loader: Optional[TranslationLoader] = None,
) -> TranslationRegistry:
    """Register one resource file into registry under locale."""
    return (loader or TranslationLoader()).register_file(registry, path, locale)


def register_from_directory(
    registry: TranslationRegistry,
    directory: Path,
    loader: Optional[TranslationLoader] = None,
) -> TranslationRegistry:
    """Register every locale-named resource file under directory."""
    return (loader or TranslationLoader()).register_directory(registry, directory)


def load_registry(
    directory: Path,
    default_locale: Locale = ENGLISH,
    loader: Optional[TranslationLoader] = None,
) -> TranslationRegistry:
    """Create a registry populated from a directory of resource files."""
    return register_from_directory(
        TranslationRegistry(default_locale), directory, loader
    )
