from __future__ import annotations

from core.annotations import build_annotations
from core.tags import DOWN_TAG, compose_tags
from models.check import Check, OutageSummary

from fakes import at, state


def test_tags_are_sorted_and_include_down() -> None:
    chk = Check(id=1, name="Web", hostname="h.example.com", tags=("b", "a"))
    assert compose_tags(chk) == ("a", "b", "down")
    assert compose_tags(chk, include_hostname=True) == ("a", "b", "down", "h.example.com")


def test_tags_for_untagged_check() -> None:
    assert compose_tags(Check(id=1, name="Web", hostname="h")) == (DOWN_TAG,)


def test_duplicate_tags_are_kept() -> None:
    chk = Check(id=1, name="Web", hostname="h", tags=("prod", "down", "prod"))
    assert compose_tags(chk) == ("down", "down", "prod", "prod")


def test_only_down_states_become_annotations() -> None:
    chk = Check(id=7, name="Web", hostname="www.example.com", tags=("prod",))
    summary = OutageSummary(
        check_id=7,
        states=(
            state("up", 0, 100),
            state("down", 100, 160),
            state("unknown", 160, 200),
            state("down", 200, 260),
            state("up", 260, 3600),
        ),
    )
    tags = compose_tags(chk)

    anns = build_annotations(chk, summary, tags)

    assert [(a.start, a.end) for a in anns] == [(at(100), at(160)), (at(200), at(260))]
    assert all(a.title == "Web" and a.text == "www.example.com" for a in anns)
    assert all(a.tags is tags for a in anns)


def test_no_down_states_means_no_annotations() -> None:
    chk = Check(id=7, name="Web", hostname="www.example.com")
    summary = OutageSummary(
        check_id=7,
        states=tuple(state("up", i * 10, i * 10 + 10) for i in range(20)),
    )
    assert build_annotations(chk, summary, compose_tags(chk)) == []
