"""Locale value object and locale name parsing."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Locale:
    """A language, optionally narrowed to a region and variant.

    Language is stored lower case and region upper case, so Locale("EN", "us")
    equals Locale("en", "US"). Frozen to stay hashable as a dictionary key.

    Attributes:
        language: ISO 639 language code (e.g. "en").
        region: ISO 3166 region code (e.g. "US"), empty if absent.
        variant: Free-form variant, empty if absent.
    """

    language: str
    region: str = ""
    variant: str = ""

    def __post_init__(self):
        object.__setattr__(self, "language", self.language.lower())
        object.__setattr__(self, "region", self.region.upper())

    def __str__(self) -> str:
        """Return the underscore form (e.g. "en_US", "fr")."""
        parts = [self.language]
        if self.region or self.variant:
            parts.append(self.region)
        if self.variant:
            parts.append(self.variant)
        return "_".join(parts)

    @property
    def language_only(self) -> "Locale":
        """This locale reduced to its language (e.g. fr_CA -> fr)."""
        if not self.region and not self.variant:
            return self
        return Locale(self.language)

    @classmethod
    def from_string(cls, value: str) -> "Locale":
        """Create a Locale from "en", "en_US", "en-US" or "en_US_POSIX".

        Raises:
            ValueError: If value has no language or more than three parts.
        """
        locale = parse_locale_name(value.replace("-", "_"))
        if locale is None or not locale.language:
            raise ValueError(f"Invalid locale: {value!r}")
        return locale


ENGLISH = Locale("en")
FRENCH = Locale("fr")
GERMAN = Locale("de")
US = Locale("en", "US")
UK = Locale("en", "GB")
FRANCE = Locale("fr", "FR")
CANADA_FRENCH = Locale("fr", "CA")


def parse_locale_name(name: str) -> Optional[Locale]:
    """Map a resource file base name to a Locale.

    "en" -> language, "en_US" -> language + region, "en_US_x" -> language +
    region + variant. Any other shape yields None.
    """
    parts = name.split("_")
    if len(parts) == 1:
        return Locale(parts[0])
    if len(parts) == 2:
        return Locale(parts[0], parts[1])
    if len(parts) == 3:
        return Locale(parts[0], parts[1], parts[2])
    return None
