from __future__ import annotations

import re
from collections.abc import Iterable

from core.errors import InvalidFilterError
from models.check import Check

MATCH_ALL = ".*"


def compile_filter(pattern: str | None) -> re.Pattern[str]:
    """Compile an annotation query into a hostname matcher.

    An empty or missing pattern matches every check.
    """
    if not pattern:
        pattern = MATCH_ALL
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidFilterError(pattern, str(exc)) from exc


def filter_checks(checks: Iterable[Check], matcher: re.Pattern[str]) -> list[Check]:
    """Return the checks whose hostname matches, keeping source order.

    Matching is unanchored: the pattern may hit anywhere in the hostname.
    """
    return [chk for chk in checks if matcher.search(chk.hostname)]
