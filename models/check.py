from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


def from_unix(ts: int | float) -> datetime:
    """Convert a provider unix timestamp (seconds) to an aware UTC datetime."""
    return datetime.fromtimestamp(ts, tz=timezone.utc)


@dataclass(frozen=True)
class Check:
    """A monitored endpoint as reported by the provider's check listing.

    Fields:
        id:        Provider check identifier.
        name:      Display name of the check.
        hostname:  Host the check targets; filter patterns match against it.
        tags:      Tag names attached to the check, in provider order.

    The remaining fields are the snapshot values returned alongside the
    listing and are ``None`` when the provider omits them.  Nothing reads
    them yet; they are kept for populating the gauges in
    :mod:`core.metrics`, whose ``collect()`` is still empty.
    """

    id: int
    name: str
    hostname: str
    tags: tuple[str, ...] = ()
    status: str | None = None
    resolution: int | None = None
    last_error_time: datetime | None = None
    last_test_time: datetime | None = None
    last_response_time: int | None = None


@dataclass(frozen=True)
class QueryWindow:
    """Inclusive ``[start, end]`` range for outage and result lookups."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(
                f"query window ends before it starts ({self.start} > {self.end})"
            )

    @property
    def from_ts(self) -> int:
        return int(self.start.timestamp())

    @property
    def to_ts(self) -> int:
        return int(self.end.timestamp())


@dataclass(frozen=True)
class OutageState:
    status: str
    start: datetime
    end: datetime


@dataclass(frozen=True)
class OutageSummary:
    """Ordered status intervals for one check over one query window."""

    check_id: int
    states: tuple[OutageState, ...] = ()


@dataclass(frozen=True)
class CheckResult:
    """A single raw probe result for a check."""

    time: datetime
    status: str
    response_time_ms: int | None = None
    probe_id: int | None = None
    status_desc: str = ""
    status_desc_long: str = ""
