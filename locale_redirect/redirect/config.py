"""Locale redirect configuration."""

import os
from typing import Optional

from dotenv import load_dotenv

from locale_redirect.constants import (
    DISABLE_COOKIE_NAME,
    FALSY_FLAG_VALUES,
    REDIRECT_HEADER,
)

load_dotenv()


def is_truthy(value: Optional[str]) -> bool:
    """Interpret a cookie or environment flag value."""
    if value is None:
        return False
    return value.strip().lower() not in FALSY_FLAG_VALUES


class RedirectConfig:
    """Configuration for the locale redirect middleware."""

    # Whether the middleware is installed at all
    ENABLED: bool = is_truthy(os.getenv("LOCALE_REDIRECT_ENABLED", "true"))

    # Marker header used to detect a previous pass through the middleware
    REDIRECT_HEADER: str = os.getenv("LOCALE_REDIRECT_HEADER", REDIRECT_HEADER)

    # Opt-out cookie
    DISABLE_COOKIE_NAME: str = os.getenv(
        "LOCALE_REDIRECT_DISABLE_COOKIE", DISABLE_COOKIE_NAME
    )
    DISABLE_COOKIE_MAX_AGE: int = 31536000  # 1 year

    # Temporary redirect, keeps method and body
    REDIRECT_STATUS_CODE: int = 307

    # JSON file describing the available languages and regions
    MENU_FILE: Optional[str] = os.getenv("LOCALE_REDIRECT_MENU_FILE")

    def get_middleware_kwargs(self, menu_provider) -> dict:
        """Get kwargs for LocaleRedirectMiddleware configuration."""
        return {
            "menu_provider": menu_provider,
            "config": self,
        }


redirect_config = RedirectConfig()
