from __future__ import annotations

import pytest

from core.check_filter import compile_filter, filter_checks
from core.errors import InvalidFilterError
from models.check import Check

CHECKS = [
    Check(id=1, name="API", hostname="api.example.com"),
    Check(id=2, name="Web", hostname="www.example.org"),
    Check(id=3, name="Status", hostname="status.example.com"),
]


@pytest.mark.parametrize("pattern", ["", None])
def test_empty_pattern_matches_everything_in_order(pattern) -> None:
    assert filter_checks(CHECKS, compile_filter(pattern)) == CHECKS


def test_pattern_matches_hostname_not_name() -> None:
    matcher = compile_filter(r"\.com$")
    assert [c.id for c in filter_checks(CHECKS, matcher)] == [1, 3]

    assert filter_checks(CHECKS, compile_filter("^API$")) == []


def test_pattern_is_unanchored() -> None:
    assert [c.id for c in filter_checks(CHECKS, compile_filter("example"))] == [1, 2, 3]
    assert [c.id for c in filter_checks(CHECKS, compile_filter("status"))] == [3]


def test_invalid_pattern_raises() -> None:
    with pytest.raises(InvalidFilterError) as excinfo:
        compile_filter("([a-z")
    assert excinfo.value.pattern == "([a-z"
