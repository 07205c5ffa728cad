"""Middleware redirecting root page visitors to their localized site."""

import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from locale_redirect.constants import REDIRECT_MARKER, SAME_URL_MARKER
from locale_redirect.redirect.config import redirect_config
from locale_redirect.redirect.context import EVALUATED_STATE_KEY, RedirectContext
from locale_redirect.redirect.menu import MenuProvider
from locale_redirect.redirect.resolver import LocaleRedirectResolver

logger = logging.getLogger(__name__)


class LocaleRedirectMiddleware(BaseHTTPMiddleware):
    """Redirect root page requests based on the Accept-Language header."""

    def __init__(self, app, menu_provider: MenuProvider, config=redirect_config) -> None:
        super().__init__(app)
        self.config = config
        self.resolver = LocaleRedirectResolver(menu_provider, config)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Redirect, tag or pass the request through."""
        context = RedirectContext.from_request(request, self.config)

        # Nested passes through the pipeline must not evaluate again
        setattr(request.state, EVALUATED_STATE_KEY, True)

        decision = self.resolver.decide(context)

        if decision.should_redirect:
            logger.info(f"Redirecting {context.url} to {decision.url}")
            return RedirectResponse(
                url=decision.url,
                status_code=self.config.REDIRECT_STATUS_CODE,
                headers={self.config.REDIRECT_HEADER: REDIRECT_MARKER},
            )

        response = await call_next(request)
        if decision.same_url:
            response.headers[self.config.REDIRECT_HEADER] = SAME_URL_MARKER
        return response
