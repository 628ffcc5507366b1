from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Annotation:
    """Time-ranged marker for a downtime interval, rendered by Grafana.

    Fields:
        start: When the check went down (UTC).
        end:   When the interval closed (UTC).
        title: Display name of the check.
        text:  Hostname of the check.
        tags:  Lexicographically sorted tags, always including ``"down"``.
    """

    start: datetime
    end: datetime
    title: str
    text: str
    tags: tuple[str, ...]
