"""Routes for the root page and the redirect opt-out."""

from typing import Any, Dict, List

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from locale_redirect.redirect.context import RedirectContext

router = APIRouter()


def _back_to_referer(request: Request) -> RedirectResponse:
    referrer = request.headers.get("referer", "/")
    return RedirectResponse(url=referrer, status_code=302)


@router.get("/")
async def root(request: Request) -> Dict[str, List[Dict[str, Any]]]:
    """List the available localized variants of the site."""
    context = RedirectContext.from_request(request, request.app.state.redirect_config)
    menu = request.app.state.menu_provider.get_language_menu(context)

    return {
        "languages": [
            {
                "code": language.code,
                "url": language.url,
                "regions": [
                    {"code": region.code, "url": region.url}
                    for region in language.regions
                    if region.available
                ],
            }
            for language in menu
            if language.available
        ]
    }


@router.get("/redirect/disable")
async def disable_redirect(request: Request) -> RedirectResponse:
    """Stop redirecting this visitor automatically."""
    config = request.app.state.redirect_config
    response = _back_to_referer(request)
    response.set_cookie(
        key=config.DISABLE_COOKIE_NAME,
        value="1",
        max_age=config.DISABLE_COOKIE_MAX_AGE,
        path="/",
        samesite="lax",
    )
    return response


@router.get("/redirect/enable")
async def enable_redirect(request: Request) -> RedirectResponse:
    """Resume automatic redirects for this visitor."""
    config = request.app.state.redirect_config
    response = _back_to_referer(request)
    response.delete_cookie(key=config.DISABLE_COOKIE_NAME, path="/")
    return response
