"""
Culture helpers

Pure functions and constants for the cultures an application supports:
- the Culture value type with its three comparable name forms
- the culture-name shape check shared by configuration and resolution
- display-name and RTL metadata
"""

from __future__ import annotations

import re
from typing import NamedTuple

from localizer.exceptions import InvalidCultureError

# ── Constants ─────────────────────────────────────────────────────────────────

# Lowercase language, then any number of "-" + uppercase region groups
CULTURE_PATTERN: re.Pattern[str] = re.compile(r"^[a-z]{2}(-[A-Z]{2})*$")

# Base language codes whose scripts read right-to-left
RTL_LOCALES: frozenset[str] = frozenset({"ar", "he", "fa", "ur", "yi", "ku"})

# Human-readable names for common cultures
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "ga": "Gaeilge",
    "gd": "Gàidhlig",
    "cy": "Cymraeg",
    "fr": "Français",
    "de": "Deutsch",
    "es": "Español",
    "ar": "العربية",
    "zh": "中文",
    "ja": "日本語",
    "pt": "Português",
    "it": "Italiano",
    "nl": "Nederlands",
}

# ISO 639-1 → ISO 639-2/T three-letter language codes
THREE_LETTER_ISO_NAMES: dict[str, str] = {
    "ar": "ara",
    "br": "bre",
    "cs": "ces",
    "cy": "cym",
    "da": "dan",
    "de": "deu",
    "el": "ell",
    "en": "eng",
    "es": "spa",
    "eu": "eus",
    "fa": "fas",
    "fi": "fin",
    "fr": "fra",
    "ga": "gle",
    "gd": "gla",
    "gv": "glv",
    "he": "heb",
    "hi": "hin",
    "hu": "hun",
    "is": "isl",
    "it": "ita",
    "ja": "jpn",
    "ko": "kor",
    "ku": "kur",
    "kw": "cor",
    "nl": "nld",
    "no": "nor",
    "pl": "pol",
    "pt": "por",
    "ro": "ron",
    "ru": "rus",
    "sv": "swe",
    "tr": "tur",
    "uk": "ukr",
    "ur": "urd",
    "yi": "yid",
    "zh": "zho",
}


# ── Types ─────────────────────────────────────────────────────────────────────


class Culture(NamedTuple):
    """A supported culture and the three names it can be matched by."""

    name: str
    two_letter_iso_language_name: str
    three_letter_iso_language_name: str

    @classmethod
    def from_name(cls, name: str) -> Culture:
        """Build a Culture from a name such as "ga" or "en-IE".

        Raises:
            InvalidCultureError: if the name is not of the form xx or xx-YY.
        """
        if not is_well_formed_culture(name):
            raise InvalidCultureError(name)
        two_letter = name.split("-")[0].lower()
        return cls(
            name=name,
            two_letter_iso_language_name=two_letter,
            three_letter_iso_language_name=THREE_LETTER_ISO_NAMES.get(two_letter, two_letter),
        )

    def matches_any(self, candidates: list[str] | tuple[str, ...]) -> bool:
        """True when any of this culture's three names appears verbatim in candidates."""
        return (
            self.name in candidates
            or self.two_letter_iso_language_name in candidates
            or self.three_letter_iso_language_name in candidates
        )


# ── Public helpers ────────────────────────────────────────────────────────────


def is_well_formed_culture(name: str) -> bool:
    """Return True when name has the shape xx or xx-YY.

    Only the shape is checked: "zz" passes even though no such language
    exists.
    """
    return CULTURE_PATTERN.match(name) is not None


def is_rtl_locale(locale: str) -> bool:
    """Return True when the given locale is right-to-left.

    Compares only the base language tag, so both "ar" and "ar-SA" are RTL.
    """
    base = locale.split("-")[0].lower()
    return base in RTL_LOCALES


def get_language_info(locale: str) -> dict[str, str | bool]:
    """Return a metadata dict describing the given locale.

    Returns:
        Dict with keys: ``code``, ``name``, ``two_letter``, ``three_letter``
        and ``is_rtl``.
    """
    two_letter = locale.split("-")[0].lower()
    return {
        "code": locale,
        "name": LANGUAGE_NAMES.get(locale, LANGUAGE_NAMES.get(two_letter, locale)),
        "two_letter": two_letter,
        "three_letter": THREE_LETTER_ISO_NAMES.get(two_letter, two_letter),
        "is_rtl": is_rtl_locale(locale),
    }
