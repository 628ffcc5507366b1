from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

from models.check import Check, CheckResult, OutageState, OutageSummary, QueryWindow
from providers.base import CheckProvider, ProviderError

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
T1 = T0 + timedelta(hours=1)


def at(seconds: int) -> datetime:
    return T0 + timedelta(seconds=seconds)


def state(status: str, start: int, end: int) -> OutageState:
    return OutageState(status=status, start=at(start), end=at(end))


class FakeProvider(CheckProvider):
    """In-memory provider recording every outage lookup."""

    def __init__(
        self,
        checks: list[Check],
        outages: dict[int, list[OutageState]] | None = None,
        failing: set[int] | None = None,
        list_error: Exception | None = None,
    ) -> None:
        self._checks = checks
        self._outages = outages or {}
        self._failing = failing or set()
        self._list_error = list_error
        self.list_calls = 0
        self.outage_calls: list[tuple[int, QueryWindow]] = []

    @property
    def name(self) -> str:
        return "Fake"

    async def list_checks(self, include_tags: bool = True) -> list[Check]:
        self.list_calls += 1
        if self._list_error is not None:
            raise self._list_error
        return list(self._checks)

    async def summary_outage(self, check_id: int, window: QueryWindow) -> OutageSummary:
        self.outage_calls.append((check_id, window))
        await asyncio.sleep(0)
        if check_id in self._failing:
            raise ProviderError(f"check {check_id} unavailable", status_code=503)
        return OutageSummary(check_id=check_id, states=tuple(self._outages.get(check_id, ())))

    async def results(
        self,
        check_id: int,
        window: QueryWindow | None = None,
        limit: int | None = None,
    ) -> list[CheckResult]:
        return []


