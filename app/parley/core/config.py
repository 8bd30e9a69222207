"""parley configuration settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TranslationSettings(BaseSettings):
    """Translation registry configuration.

    Environment Variables:
        TRANSLATIONS_DEFAULT_LOCALE: Registry default locale (default: en)
        TRANSLATIONS_DIR: Directory of locale-named resource files
        TRANSLATIONS_PATH_SEPARATOR: Separator for flattened keys (default: ".")

    Example:
        ```python
        from parley.core.config import settings

        directory = settings.translations.TRANSLATIONS_DIR
        ```
    """

    TRANSLATIONS_DEFAULT_LOCALE: str = Field(
        default="en", alias="TRANSLATIONS_DEFAULT_LOCALE"
    )
    TRANSLATIONS_DIR: Optional[Path] = Field(default=None, alias="TRANSLATIONS_DIR")
    TRANSLATIONS_PATH_SEPARATOR: str = Field(
        default=".", alias="TRANSLATIONS_PATH_SEPARATOR"
    )

    @field_validator("TRANSLATIONS_PATH_SEPARATOR")
    @classmethod
    def validate_path_separator(cls, v: str) -> str:
        """Path separator must be a single character."""
        if len(v) != 1:
            raise ValueError("TRANSLATIONS_PATH_SEPARATOR must be a single character")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """parley configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    translations: TranslationSettings

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "translations" not in kwargs:
            kwargs["translations"] = TranslationSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
