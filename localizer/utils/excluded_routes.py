"""
Excluded route matching

Decides whether a request path opts out of culture resolution. Each rule
is a regular expression searched anywhere in the path; rules that need a
full match anchor themselves with ^ and $.
"""

import functools
import logging
import re
from collections.abc import Sequence

from localizer.exceptions import InvalidExcludedRouteError

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=256)
def _compile_route(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.error("Invalid excluded route pattern %r: %s", pattern, e)
        raise InvalidExcludedRouteError(pattern, str(e)) from e


def is_excluded_route(excluded_routes: Sequence[str], path: str) -> bool:
    """
    Check whether a request path is excluded from localization.

    Args:
        excluded_routes: Regular expressions identifying excluded routes, tried in order
        path: The request path

    Returns:
        True on the first rule that matches, False if none does or there are no rules

    Raises:
        InvalidExcludedRouteError: if a rule reached before a match fails to compile
    """
    if not excluded_routes:
        return False

    for route in excluded_routes:
        if _compile_route(route).search(path):
            return True

    return False
