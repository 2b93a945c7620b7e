"""
Request Localization Middleware

Resolves the culture of every request that is not excluded and attaches it
to request.state.request_culture for downstream handlers:

  1. Excluded routes (regex rules) skip resolution; request_culture is None.
  2. The provider chain runs in order; the first provider that returns a
     result wins. RouteCultureProvider always closes the chain.
  3. The response carries a Content-Language header and, when enabled,
     the culture cookie.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from localizer.context import reset_current_culture, set_current_culture
from localizer.i18n.cookie import make_cookie_value, parse_cookie_value
from localizer.providers.base import RequestCultureContext
from localizer.providers.route import RouteCultureProvider
from localizer.utils.excluded_routes import is_excluded_route

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from fastapi import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

    from localizer.options import LocalizationOptions
    from localizer.providers.base import ProviderCultureResult, RequestCultureProvider

logger = logging.getLogger(__name__)


def build_culture_context(request: Request, cookie_name: str) -> RequestCultureContext:
    """Collect the path, Accept-Language header, culture cookie and query string of a request."""
    raw_cookie = request.cookies.get(cookie_name)
    culture_cookie = None
    if raw_cookie and raw_cookie.strip():
        culture_cookie = parse_cookie_value(raw_cookie)
        if culture_cookie is None:
            logger.debug("Ignoring malformed culture cookie %r", raw_cookie)

    return RequestCultureContext(
        path=request.url.path,
        accept_language=request.headers.get("Accept-Language", ""),
        culture_cookie=culture_cookie,
        query_params=dict(request.query_params),
    )


class RequestLocalizationMiddleware(BaseHTTPMiddleware):
    """
    Determine the request culture and attach it to request.state.request_culture.

    Extra providers (e.g. QueryStringCultureProvider) are consulted before the
    route provider.
    """

    def __init__(
        self,
        app: ASGIApp,
        options: LocalizationOptions,
        providers: Sequence[RequestCultureProvider] | None = None,
    ):
        super().__init__(app)
        self.options = options
        self.providers: list[RequestCultureProvider] = [*(providers or []), RouteCultureProvider(options)]

    def resolve(self, context: RequestCultureContext) -> ProviderCultureResult:
        for provider in self.providers:
            result = provider.resolve(context)
            if result is not None:
                return result
        # RouteCultureProvider never defers
        raise AssertionError("culture provider chain produced no result")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path

        if is_excluded_route(self.options.excluded_routes, path):
            request.state.request_culture = None
            return await call_next(request)

        context = build_culture_context(request, self.options.culture_cookie_name)
        result = self.resolve(context)
        request.state.request_culture = result
        logger.debug("Resolved culture %s (ui %s) for %s", result.culture, result.ui_culture, path)

        if self.options.redirect_to_culture_path and len(path) <= 1:
            response: Response = RedirectResponse(url=f"/{result.culture}", status_code=307)
        else:
            token = set_current_culture(result)
            try:
                response = await call_next(request)
            finally:
                reset_current_culture(token)

        response.headers["Content-Language"] = result.culture
        if self.options.set_culture_cookie:
            response.set_cookie(
                key=self.options.culture_cookie_name,
                value=make_cookie_value(result),
                max_age=self.options.culture_cookie_max_age,
                httponly=True,
                samesite="lax",
            )

        return response
