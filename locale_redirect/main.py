"""Main FastAPI application module."""

import logging
from typing import Optional

from fastapi import FastAPI
from mangum import Mangum

from locale_redirect.redirect.config import RedirectConfig, redirect_config
from locale_redirect.redirect.menu import MenuProvider, build_menu_provider
from locale_redirect.redirect.middleware import LocaleRedirectMiddleware
from locale_redirect.redirect.routes import router as redirect_router


logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def create_app(
    menu_provider: Optional[MenuProvider] = None,
    config: RedirectConfig = redirect_config,
) -> FastAPI:
    """Build the application around a menu provider."""
    if menu_provider is None:
        menu_provider = build_menu_provider(config)

    app = FastAPI(
        title="Locale Redirect",
        description="Sends root page visitors to their localized site",
        version="1.0.0",
    )
    app.state.menu_provider = menu_provider
    app.state.redirect_config = config

    # Middleware
    if config.ENABLED:
        app.add_middleware(
            LocaleRedirectMiddleware, **config.get_middleware_kwargs(menu_provider)
        )
    else:
        logger.info("Locale redirect disabled by configuration")

    # Routes
    app.include_router(redirect_router)

    @app.get("/health")
    async def health_check() -> dict[str, object]:
        """Health check endpoint."""
        return {"status": "healthy", "redirect_enabled": bool(config.ENABLED)}

    return app


app = create_app()
handler = Mangum(app)
