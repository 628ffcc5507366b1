from __future__ import annotations

from models.annotation import Annotation
from models.check import Check, OutageSummary

DOWN_STATUS = "down"


def build_annotations(
    check: Check,
    summary: OutageSummary,
    tags: tuple[str, ...],
) -> list[Annotation]:
    """Turn the ``down`` intervals of an outage summary into annotations.

    States with any other status are skipped.  Output follows the order of
    ``summary.states`` and every annotation shares the same ``tags`` tuple.
    """
    return [
        Annotation(
            start=state.start,
            end=state.end,
            title=check.name,
            text=check.hostname,
            tags=tags,
        )
        for state in summary.states
        if state.status == DOWN_STATUS
    ]
