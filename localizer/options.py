"""
Localization options

The read-only configuration handle shared by the culture providers and the
localization middleware. Built once at startup and passed explicitly to
every component that needs it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from localizer.exceptions import ConfigurationError
from localizer.i18n.culture import Culture

if TYPE_CHECKING:
    from collections.abc import Iterable

    from localizer.config import Settings


@dataclass(frozen=True)
class LocalizationOptions:
    supported_cultures: tuple[Culture, ...]
    default_culture: Culture
    default_ui_culture: Culture
    culture_parameter_index: int = 1
    excluded_routes: tuple[str, ...] = ()
    culture_cookie_name: str = "culture"
    culture_cookie_max_age: int = 60 * 60 * 24 * 365
    set_culture_cookie: bool = False
    redirect_to_culture_path: bool = False

    def __post_init__(self):
        if self.culture_parameter_index < 0:
            raise ConfigurationError(
                "culture_parameter_index must be zero or greater",
                details={"culture_parameter_index": self.culture_parameter_index},
            )

    @classmethod
    def create(
        cls,
        supported_cultures: Iterable[str],
        default_culture: str,
        default_ui_culture: str | None = None,
        culture_parameter_index: int = 1,
        excluded_routes: Iterable[str] = (),
        **kwargs,
    ) -> LocalizationOptions:
        """Build options from plain culture names.

        Raises:
            InvalidCultureError: if any culture name is not of the form xx or xx-YY.
        """
        return cls(
            supported_cultures=tuple(Culture.from_name(name) for name in supported_cultures),
            default_culture=Culture.from_name(default_culture),
            default_ui_culture=Culture.from_name(default_ui_culture or default_culture),
            culture_parameter_index=culture_parameter_index,
            excluded_routes=tuple(excluded_routes),
            **kwargs,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> LocalizationOptions:
        return cls.create(
            supported_cultures=settings.supported_cultures,
            default_culture=settings.default_culture,
            default_ui_culture=settings.default_ui_culture,
            culture_parameter_index=settings.culture_parameter_index,
            excluded_routes=settings.excluded_routes,
            culture_cookie_name=settings.culture_cookie_name,
            culture_cookie_max_age=settings.culture_cookie_max_age,
            set_culture_cookie=settings.set_culture_cookie,
            redirect_to_culture_path=settings.redirect_to_culture_path,
        )

    @property
    def supported_culture_names(self) -> list[str]:
        return [culture.name for culture in self.supported_cultures]
