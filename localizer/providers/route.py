"""
Route culture provider

Determines the request culture with reference to the following criteria:

1. the culture segment of the URL path (e.g. ``/ga/about``)
2. for root requests only, the culture cookie, then the Accept-Language header
3. the default culture

A culture found in the path is trusted as-is; it is only checked for shape,
not against the supported cultures. A root request always ends with the
same culture for content and UI.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localizer.i18n.culture import is_well_formed_culture
from localizer.providers.base import ProviderCultureResult, RequestCultureProvider

if TYPE_CHECKING:
    from localizer.i18n.culture import Culture
    from localizer.options import LocalizationOptions
    from localizer.providers.base import RequestCultureContext

logger = logging.getLogger(__name__)


class RouteCultureProvider(RequestCultureProvider):
    """Resolve the culture from the route, falling back to cookie, header and default.

    Never defers: every call produces a culture pair.
    """

    def __init__(self, options: LocalizationOptions):
        self.supported_cultures = options.supported_cultures
        self.default_culture = options.default_culture
        self.default_ui_culture = options.default_ui_culture
        self.culture_parameter_index = options.culture_parameter_index

    def resolve(self, context: RequestCultureContext) -> ProviderCultureResult:
        path = context.path

        # No culture in the URL: infer from headers and cookies
        if len(path) <= 1:
            locale = self._infer_culture(context)
            logger.debug("Inferred culture %s for root request", locale)
            return ProviderCultureResult(locale, locale)

        parameters = path.split("/")
        if self.culture_parameter_index >= len(parameters):
            return self._default_result()

        culture = parameters[self.culture_parameter_index]
        if not is_well_formed_culture(culture):
            logger.debug("Path segment %r is not a culture, using default", culture)
            return self._default_result()

        return ProviderCultureResult(culture, culture)

    def _infer_culture(self, context: RequestCultureContext) -> str:
        locale = self.default_culture.name

        # Header tokens are compared verbatim: no trimming, no q-values
        accept_languages = context.accept_language.split(",")
        match = self._first_supported(accept_languages)
        if match is not None:
            locale = match.name

        # A cookie match overrides the header
        if context.culture_cookie is not None:
            match = self._first_supported(context.culture_cookie.cultures)
            if match is not None:
                locale = match.name

        return locale

    def _first_supported(self, candidates: list[str]) -> Culture | None:
        for supported_culture in self.supported_cultures:
            if supported_culture.matches_any(candidates):
                return supported_culture
        return None

    def _default_result(self) -> ProviderCultureResult:
        return ProviderCultureResult(self.default_culture.name, self.default_ui_culture.name)
