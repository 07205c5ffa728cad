"""Locale redirect package."""

from .config import RedirectConfig, redirect_config, is_truthy
from .context import RedirectContext
from .preferences import (
    AcceptedPreferences,
    PreferenceEntry,
    parse_preference_header,
    get_language_priority,
    get_region_priority,
)
from .menu import (
    LanguageVariant,
    RegionVariant,
    MenuProvider,
    StaticMenuProvider,
    JsonMenuProvider,
    MenuConfigurationError,
    build_menu_provider,
)
from .resolver import LocaleRedirectResolver, RedirectDecision, resolve_redirect_url
from .middleware import LocaleRedirectMiddleware

__all__ = [
    "RedirectConfig",
    "redirect_config",
    "is_truthy",
    "RedirectContext",
    "AcceptedPreferences",
    "PreferenceEntry",
    "parse_preference_header",
    "get_language_priority",
    "get_region_priority",
    "LanguageVariant",
    "RegionVariant",
    "MenuProvider",
    "StaticMenuProvider",
    "JsonMenuProvider",
    "MenuConfigurationError",
    "build_menu_provider",
    "LocaleRedirectResolver",
    "RedirectDecision",
    "resolve_redirect_url",
    "LocaleRedirectMiddleware",
]
