import logging

import uvicorn
from fastapi import Depends, FastAPI

from localizer.config import Settings, settings
from localizer.dependencies import get_request_culture
from localizer.exception_handlers import register_exception_handlers
from localizer.i18n.culture import get_language_info
from localizer.middleware.localization import RequestLocalizationMiddleware
from localizer.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from localizer.options import LocalizationOptions
from localizer.providers.base import ProviderCultureResult, RequestCultureProvider
from localizer.routes.cultures import i18n_router

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    providers: list[RequestCultureProvider] | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        app_settings: Settings to build the app from (defaults to the environment)
        providers: Culture providers consulted before the route provider
    """
    app_settings = app_settings or settings
    options = LocalizationOptions.from_settings(app_settings)

    app = FastAPI(
        title=app_settings.app_name,
        description="Request culture resolution for localized sites",
        debug=app_settings.debug,
        version=app_settings.app_version,
    )
    app.state.localization_options = options

    register_exception_handlers(app)

    # Starlette middleware is LIFO: logging wraps localization
    app.add_middleware(RequestLocalizationMiddleware, options=options, providers=providers)
    app.add_middleware(StructuredLoggingMiddleware)

    app.include_router(i18n_router, prefix="/api/v1/i18n")

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    @app.get("/")
    async def root(result: ProviderCultureResult = Depends(get_request_culture)):
        return {"culture": result.culture, "ui_culture": result.ui_culture}

    @app.get("/{culture}")
    @app.get("/{culture}/{page:path}")
    async def localized_page(
        culture: str,
        page: str = "",
        result: ProviderCultureResult = Depends(get_request_culture),
    ):
        return {
            "page": page,
            "culture": result.culture,
            "ui_culture": result.ui_culture,
            "language": get_language_info(result.culture),
        }

    logger.info(
        "Localization configured: cultures=%s default=%s excluded_routes=%d",
        options.supported_culture_names,
        options.default_culture.name,
        len(options.excluded_routes),
    )
    return app


setup_structured_logging(log_level=settings.log_level, json_format=settings.log_json)
app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
