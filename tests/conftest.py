"""Pytest configuration and shared fixtures."""

from typing import Generator, List

import pytest
from fastapi.testclient import TestClient

from locale_redirect.main import create_app
from locale_redirect.redirect.config import RedirectConfig
from locale_redirect.redirect.context import RedirectContext
from locale_redirect.redirect.menu import (
    LanguageVariant,
    RegionVariant,
    StaticMenuProvider,
)


@pytest.fixture
def sample_menu() -> List[LanguageVariant]:
    """Provide a menu with English, French and an unavailable German site."""
    return [
        LanguageVariant(code="en", url="https://example.com/en/"),
        LanguageVariant(
            code="fr",
            url="https://example.com/fr/",
            regions=[
                RegionVariant(code="ca", url="https://example.com/fr-ca/"),
                RegionVariant(
                    code="be", url="https://example.com/fr-be/", available=False
                ),
            ],
        ),
        LanguageVariant(code="de", url="https://example.com/de/", available=False),
    ]


@pytest.fixture
def menu_provider(sample_menu: List[LanguageVariant]) -> StaticMenuProvider:
    """Provide a static menu provider for the sample menu."""
    return StaticMenuProvider(sample_menu)


@pytest.fixture
def redirect_config() -> RedirectConfig:
    """Provide a fresh redirect configuration."""
    return RedirectConfig()


@pytest.fixture
def root_context() -> RedirectContext:
    """Provide a context for a fresh visit to the site root."""
    return RedirectContext(
        path="/",
        host="example.com",
        url="https://example.com/",
        accept_language="fr-CA,fr;q=0.9,en;q=0.8",
    )


@pytest.fixture
def test_client(
    menu_provider: StaticMenuProvider, redirect_config: RedirectConfig
) -> Generator[TestClient, None, None]:
    """Provide a FastAPI test client for an app serving the sample menu."""
    app = create_app(menu_provider=menu_provider, config=redirect_config)
    with TestClient(app) as client:
        yield client
