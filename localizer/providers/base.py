"""
Culture provider interface

A provider inspects one request and either settles its culture or
declines, leaving the decision to the next provider in the chain.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import NamedTuple

from localizer.i18n.cookie import CookieCultureValue


class ProviderCultureResult(NamedTuple):
    """The culture pair resolved for a request."""

    culture: str
    ui_culture: str


@dataclass(frozen=True)
class RequestCultureContext:
    """The parts of an HTTP request that culture providers look at.

    ``accept_language`` is the raw header value; ``culture_cookie`` is the
    already-parsed culture cookie, or None when the request has no usable
    cookie.
    """

    path: str
    accept_language: str = ""
    culture_cookie: CookieCultureValue | None = None
    query_params: Mapping[str, str] = field(default_factory=dict)


class RequestCultureProvider(ABC):
    """Strategy for determining the culture of a request."""

    @abstractmethod
    def resolve(self, context: RequestCultureContext) -> ProviderCultureResult | None:
        """Return the request's culture pair, or None to defer to the next provider."""
