"""Resolve the localized target of a root page request."""

import logging
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote, urlsplit

from locale_redirect.redirect.config import is_truthy, redirect_config
from locale_redirect.redirect.context import RedirectContext
from locale_redirect.redirect.menu import LanguageVariant, MenuProvider
from locale_redirect.redirect.preferences import AcceptedPreferences

logger = logging.getLogger(__name__)

# Characters RedirectResponse leaves unescaped in the Location header
_LOCATION_SAFE_CHARS = ":/%#?=@[]!$&'()*+,;"


def to_location(url: str) -> str:
    """Percent-encode a URL the way it is sent in a Location header."""
    return quote(url, safe=_LOCATION_SAFE_CHARS)


@dataclass
class RedirectDecision:
    """Outcome of evaluating a request."""

    url: Optional[str] = None
    same_url: bool = False

    @property
    def should_redirect(self) -> bool:
        return self.url is not None and not self.same_url


def is_root_page(context: RedirectContext) -> bool:
    return context.path == "/"


def is_local_referer(context: RedirectContext) -> bool:
    """Whether the visitor arrived from another page of the same host."""
    if not context.referer:
        return False

    try:
        referer_host = urlsplit(context.referer).hostname or ""
    except ValueError:
        return False
    return referer_host.lower() == context.host.lower()


def is_disabled(context: RedirectContext) -> bool:
    """Whether a previous pass or the visitor switched the redirect off."""
    if context.marker or context.already_evaluated:
        return True
    return is_truthy(context.disable_cookie)


def resolve_redirect_url(
    language_priority: List[str],
    region_priority: List[str],
    menu: List[LanguageVariant],
) -> Optional[str]:
    """Pick the target URL for the given priorities.

    The first available language matching the most preferred language code
    wins. Regions are only looked up inside that language; without a region
    match the language URL is used. Later preferred languages are never
    considered once a language matched.
    """
    for language_code in language_priority:
        for language in menu:
            if language.available and language.code.lower() == language_code.lower():
                for region_code in region_priority:
                    for region in language.regions:
                        if (
                            region.available
                            and region.code.lower() == region_code.lower()
                        ):
                            return region.url

                return language.url

    return None


class LocaleRedirectResolver:
    """Runs the redirect guards and matches preferences against the menu."""

    def __init__(self, menu_provider: MenuProvider, config=redirect_config) -> None:
        self.menu_provider = menu_provider
        self.config = config

    def resolve(self, context: RedirectContext) -> Optional[str]:
        """Return the redirect target for the request, or None to pass through."""
        if not is_root_page(context):
            return None

        if is_local_referer(context):
            logger.debug(f"Skipping locale redirect, local referer {context.referer}")
            return None

        if is_disabled(context):
            logger.debug("Skipping locale redirect, disabled for this request")
            return None

        preferences = AcceptedPreferences.from_header(context.accept_language)
        if preferences is None:
            logger.debug("Skipping locale redirect, no usable Accept-Language")
            return None

        menu = self.menu_provider.get_language_menu(context)
        url = resolve_redirect_url(preferences.languages, preferences.regions, menu)
        if url is None:
            logger.debug(
                f"No localized variant for languages {preferences.languages}"
            )
        return url

    def decide(self, context: RedirectContext) -> RedirectDecision:
        """Resolve the target and flag targets equal to the current URL."""
        url = self.resolve(context)
        if url is None:
            return RedirectDecision()

        # The request URL is already percent-encoded, menu URLs may not be
        same_url = url == context.url or to_location(url) == context.url
        return RedirectDecision(url=url, same_url=same_url)
