"""Variant menu models and providers.

The menu lists the localized variants of the site a visitor can be sent to:
one entry per language, each with its own regional variants. Providers build
it per request; the resolver only reads it.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from urllib.parse import urljoin

from babel import Locale, UnknownLocaleError
from pydantic import BaseModel, Field, validator

from locale_redirect.redirect.context import RedirectContext

logger = logging.getLogger(__name__)

# Territory names are only used to validate region codes
_TERRITORIES = Locale("en").territories


class MenuConfigurationError(ValueError):
    """Raised when a menu definition cannot be loaded."""


def _normalize_code(value: str) -> str:
    value = value.strip().lower()
    if len(value) != 2 or not value.isalpha():
        raise ValueError("Code must be exactly two letters")
    return value


class RegionVariant(BaseModel):
    """A regional variant of a language, e.g. fr-CA."""

    code: str = Field(..., description="Two letter ISO 3166 region code")
    url: str = Field(..., min_length=1, description="Target URL of the variant")
    available: bool = True

    @validator("code")
    def validate_code(cls, value: str) -> str:
        """Ensure the region code is a known territory."""
        value = _normalize_code(value)
        if value.upper() not in _TERRITORIES:
            raise ValueError(f"Unknown region code: {value}")
        return value


class LanguageVariant(BaseModel):
    """A language of the site with its regional variants."""

    code: str = Field(..., description="Two letter ISO 639-1 language code")
    url: str = Field(..., min_length=1, description="Fallback URL for the language")
    available: bool = True
    regions: List[RegionVariant] = Field(default_factory=list)

    @validator("code")
    def validate_code(cls, value: str) -> str:
        """Ensure the language code is a locale babel knows about."""
        value = _normalize_code(value)
        try:
            Locale.parse(value)
        except (UnknownLocaleError, ValueError):
            raise ValueError(f"Unknown language code: {value}") from None
        return value


class MenuProvider(ABC):
    """Supplies the variant menu for the current request."""

    @abstractmethod
    def get_language_menu(self, context: RedirectContext) -> List[LanguageVariant]:
        """Return the languages in the order they should be matched."""
        pass


class StaticMenuProvider(MenuProvider):
    """Serves a fixed menu."""

    def __init__(self, languages: Optional[List[LanguageVariant]] = None) -> None:
        self.languages = list(languages or [])

    def get_language_menu(self, context: RedirectContext) -> List[LanguageVariant]:
        return self.languages


class JsonMenuProvider(MenuProvider):
    """Serves a menu read from a JSON file.

    The file holds ``{"languages": [...]}`` where each language and region is
    an object with ``code``, ``url`` and an optional ``available`` flag.
    Relative URLs are resolved against the URL of the current request.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self.languages = self._load(path)
        logger.info(f"Loaded {len(self.languages)} languages from {path}")

    @staticmethod
    def _load(path: str) -> List[LanguageVariant]:
        try:
            with open(path, encoding="utf-8") as menu_file:
                data = json.load(menu_file)
        except (OSError, ValueError) as e:
            raise MenuConfigurationError(f"Could not read menu file {path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("languages"), list):
            raise MenuConfigurationError(
                f"Menu file {path} must contain a 'languages' list"
            )

        try:
            return [LanguageVariant(**language) for language in data["languages"]]
        except (TypeError, ValueError) as e:
            raise MenuConfigurationError(f"Invalid menu file {path}: {e}") from e

    def get_language_menu(self, context: RedirectContext) -> List[LanguageVariant]:
        return [
            LanguageVariant(
                code=language.code,
                url=urljoin(context.url, language.url),
                available=language.available,
                regions=[
                    RegionVariant(
                        code=region.code,
                        url=urljoin(context.url, region.url),
                        available=region.available,
                    )
                    for region in language.regions
                ],
            )
            for language in self.languages
        ]


def build_menu_provider(config) -> MenuProvider:
    """Create the menu provider described by the configuration."""
    if config.MENU_FILE:
        return JsonMenuProvider(config.MENU_FILE)

    logger.warning("No menu file configured, locale redirects are inactive")
    return StaticMenuProvider()
