"""
Culture information routes

i18n_router  (prefix: /api/v1/i18n)
    GET    /cultures            → list supported cultures (public)
    GET    /cultures/{name}     → describe one supported culture (public)
    GET    /culture             → the culture pair resolved for this request
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from localizer.dependencies import get_localization_options, get_request_culture
from localizer.exceptions import UnsupportedCultureError
from localizer.i18n.culture import get_language_info
from localizer.options import LocalizationOptions
from localizer.providers.base import ProviderCultureResult

i18n_router = APIRouter(tags=["Internationalization"])
logger = logging.getLogger(__name__)


class CultureInfo(BaseModel):
    code: str
    name: str
    two_letter: str
    three_letter: str
    is_rtl: bool
    is_default: bool = False


class RequestCultureResponse(BaseModel):
    culture: str
    ui_culture: str


def _culture_info(code: str, options: LocalizationOptions) -> CultureInfo:
    return CultureInfo(**get_language_info(code), is_default=code == options.default_culture.name)


@i18n_router.get("/cultures", response_model=list[CultureInfo])
async def list_supported_cultures(
    options: LocalizationOptions = Depends(get_localization_options),
) -> list[CultureInfo]:
    """List all supported cultures in configured order."""
    return [_culture_info(code, options) for code in options.supported_culture_names]


@i18n_router.get("/cultures/{name}", response_model=CultureInfo)
async def get_supported_culture(
    name: str,
    options: LocalizationOptions = Depends(get_localization_options),
) -> CultureInfo:
    supported = options.supported_culture_names
    if name not in supported:
        raise UnsupportedCultureError(name, supported)
    return _culture_info(name, options)


@i18n_router.get("/culture", response_model=RequestCultureResponse)
async def get_current_request_culture(
    result: ProviderCultureResult = Depends(get_request_culture),
) -> RequestCultureResponse:
    """Report the culture pair for this request (the default pair on excluded routes)."""
    return RequestCultureResponse(culture=result.culture, ui_culture=result.ui_culture)
