"""
i18n (Internationalization) package

Provides the Culture type, culture metadata, and the culture cookie codec
used by the culture providers and localization middleware.
"""

from .cookie import CookieCultureValue, make_cookie_value, parse_cookie_value
from .culture import (
    CULTURE_PATTERN,
    LANGUAGE_NAMES,
    RTL_LOCALES,
    Culture,
    get_language_info,
    is_rtl_locale,
    is_well_formed_culture,
)

__all__ = [
    "CULTURE_PATTERN",
    "LANGUAGE_NAMES",
    "RTL_LOCALES",
    "CookieCultureValue",
    "Culture",
    "get_language_info",
    "is_rtl_locale",
    "is_well_formed_culture",
    "make_cookie_value",
    "parse_cookie_value",
]
