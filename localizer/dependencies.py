"""
FastAPI dependencies for route handlers that need localization data.
"""

from fastapi import Request

from localizer.options import LocalizationOptions
from localizer.providers.base import ProviderCultureResult


def get_localization_options(request: Request) -> LocalizationOptions:
    """Return the options create_app() stored on the application."""
    return request.app.state.localization_options


def get_request_culture(request: Request) -> ProviderCultureResult:
    """
    Return the culture resolved for this request.

    Excluded routes (and apps without RequestLocalizationMiddleware) get the
    configured default culture pair.
    """
    result = getattr(request.state, "request_culture", None)
    if result is not None:
        return result

    options = get_localization_options(request)
    return ProviderCultureResult(options.default_culture.name, options.default_ui_culture.name)
