"""Request-scoped culture using contextvars.

Set by RequestLocalizationMiddleware for the duration of a request so
code without access to the Request object can read the resolved culture.
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from localizer.providers.base import ProviderCultureResult

_culture_context: ContextVar[ProviderCultureResult | None] = ContextVar("request_culture", default=None)


def get_current_culture() -> ProviderCultureResult | None:
    """Get the culture resolved for the current request, if any."""
    return _culture_context.get()


def set_current_culture(result: ProviderCultureResult | None) -> Token:
    return _culture_context.set(result)


def reset_current_culture(token: Token) -> None:
    _culture_context.reset(token)
