from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from models.check import Check, OutageSummary, QueryWindow
from providers.base import CheckProvider

log = logging.getLogger(__name__)

DEFAULT_CONCURRENCY_LIMIT = 20


class OutageFetcher:
    """Fans out one outage-summary request per check.

    Each check is fetched in its own asyncio task.  Every call to
    :meth:`fetch` gets its own ``asyncio.Semaphore`` bounding the number of
    concurrent outbound requests, so one stalled request never holds
    another request's slots.

    A failing check is logged and left out of the result; it never cancels
    its siblings.  Cancelling the caller cancels every in-flight fetch.
    """

    def __init__(
        self,
        provider: CheckProvider,
        concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
    ) -> None:
        if concurrency_limit < 1:
            raise ValueError("concurrency_limit must be at least 1")
        self._provider = provider
        self._concurrency_limit = concurrency_limit

    @property
    def concurrency_limit(self) -> int:
        return self._concurrency_limit

    async def _fetch_one(
        self,
        check: Check,
        window: QueryWindow,
        semaphore: asyncio.Semaphore,
    ) -> OutageSummary | None:
        async with semaphore:
            try:
                return await self._provider.summary_outage(check.id, window)
            except Exception as exc:
                log.warning(
                    "Outage list failed for check %s (%s): %s",
                    check.id,
                    check.hostname,
                    exc,
                )
                return None

    async def fetch(
        self,
        checks: Sequence[Check],
        window: QueryWindow,
    ) -> list[tuple[Check, OutageSummary]]:
        """Fetch outage summaries for ``checks`` over ``window``.

        Returns ``(check, summary)`` pairs in the order of ``checks``,
        omitting checks whose fetch failed.
        """
        if not checks:
            return []

        semaphore = asyncio.Semaphore(self._concurrency_limit)
        tasks = [
            asyncio.create_task(
                self._fetch_one(chk, window, semaphore),
                name=f"outage-{chk.id}",
            )
            for chk in checks
        ]
        # gather cancels every child task when the caller is cancelled.
        summaries = await asyncio.gather(*tasks)

        fetched = [
            (chk, summary)
            for chk, summary in zip(checks, summaries)
            if summary is not None
        ]
        if len(fetched) < len(checks):
            log.info(
                "Fetched outages for %d of %d check(s)",
                len(fetched),
                len(checks),
            )
        return fetched
