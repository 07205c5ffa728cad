"""Per-request inputs of the locale redirect."""

from dataclasses import dataclass
from typing import Optional

from starlette.requests import Request

EVALUATED_STATE_KEY = "locale_redirect_evaluated"


@dataclass
class RedirectContext:
    """Everything the resolver reads from a request, passed explicitly."""

    path: str
    host: str
    url: str
    referer: Optional[str] = None
    accept_language: Optional[str] = None
    disable_cookie: Optional[str] = None
    marker: Optional[str] = None
    already_evaluated: bool = False

    @classmethod
    def from_request(cls, request: Request, config) -> "RedirectContext":
        """Collect the redirect inputs from a Starlette request."""
        return cls(
            path=request.url.path,
            host=request.url.hostname or "",
            url=str(request.url),
            referer=request.headers.get("referer"),
            accept_language=request.headers.get("accept-language"),
            disable_cookie=request.cookies.get(config.DISABLE_COOKIE_NAME),
            marker=request.headers.get(config.REDIRECT_HEADER),
            already_evaluated=bool(
                getattr(request.state, EVALUATED_STATE_KEY, False)
            ),
        )
