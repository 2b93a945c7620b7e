"""
Culture providers: strategies that determine a request's culture.
"""

from .base import ProviderCultureResult, RequestCultureContext, RequestCultureProvider
from .query_string import QueryStringCultureProvider
from .route import RouteCultureProvider

__all__ = [
    "ProviderCultureResult",
    "QueryStringCultureProvider",
    "RequestCultureContext",
    "RequestCultureProvider",
    "RouteCultureProvider",
]
