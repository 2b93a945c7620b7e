"""
Query string culture provider

Reads ``?culture=ga&ui-culture=ga`` style overrides. Unlike the route
provider, values are only accepted when they name a supported culture.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from localizer.i18n.culture import is_well_formed_culture
from localizer.providers.base import ProviderCultureResult, RequestCultureProvider

if TYPE_CHECKING:
    from localizer.options import LocalizationOptions
    from localizer.providers.base import RequestCultureContext


class QueryStringCultureProvider(RequestCultureProvider):
    def __init__(
        self,
        options: LocalizationOptions,
        query_key: str = "culture",
        ui_query_key: str = "ui-culture",
    ):
        self.supported_names = frozenset(options.supported_culture_names)
        self.query_key = query_key
        self.ui_query_key = ui_query_key

    def _accept(self, value: str | None) -> str | None:
        if value and is_well_formed_culture(value) and value in self.supported_names:
            return value
        return None

    def resolve(self, context: RequestCultureContext) -> ProviderCultureResult | None:
        culture = self._accept(context.query_params.get(self.query_key))
        ui_culture = self._accept(context.query_params.get(self.ui_query_key))

        if culture is None and ui_culture is None:
            return None

        return ProviderCultureResult(culture or ui_culture, ui_culture or culture)
