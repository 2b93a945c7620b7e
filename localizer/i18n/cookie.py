"""
Culture cookie codec

The culture cookie stores the last resolved culture pair as
``c=<culture>|uic=<ui culture>``, e.g. ``c=ga|uic=ga``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from localizer.providers.base import ProviderCultureResult

CULTURE_PREFIX = "c="
UI_CULTURE_PREFIX = "uic="
COOKIE_SEPARATOR = "|"


class CookieCultureValue(NamedTuple):
    """Candidate culture codes recovered from a culture cookie."""

    cultures: list[str]
    ui_cultures: list[str]


def make_cookie_value(result: ProviderCultureResult) -> str:
    """Serialise a resolved culture pair into a cookie value."""
    return f"{CULTURE_PREFIX}{result.culture}{COOKIE_SEPARATOR}{UI_CULTURE_PREFIX}{result.ui_culture}"


def parse_cookie_value(value: str | None) -> CookieCultureValue | None:
    """Parse a culture cookie value.

    Accepts ``c=xx|uic=yy``, ``c=xx`` or ``uic=yy``; a missing half takes
    the value of the other one.

    Returns:
        The parsed cultures, or None when the value is blank or malformed.
    """
    if not value or not value.strip():
        return None

    parts = value.split(COOKIE_SEPARATOR)
    if len(parts) > 2:
        return None

    culture = ""
    ui_culture = ""
    for part in parts:
        if part.startswith(CULTURE_PREFIX):
            culture = part[len(CULTURE_PREFIX) :]
        elif part.startswith(UI_CULTURE_PREFIX):
            ui_culture = part[len(UI_CULTURE_PREFIX) :]
        else:
            return None

    if not culture and not ui_culture:
        return None
    if not culture:
        culture = ui_culture
    if not ui_culture:
        ui_culture = culture

    return CookieCultureValue(cultures=[culture], ui_cultures=[ui_culture])
