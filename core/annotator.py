from __future__ import annotations

import logging

from core.annotations import build_annotations
from core.check_filter import compile_filter, filter_checks
from core.errors import CheckListError
from core.outage_fetcher import OutageFetcher
from core.tags import compose_tags
from models.annotation import Annotation
from models.check import QueryWindow
from providers.base import CheckProvider

log = logging.getLogger(__name__)


class Annotator:
    """Builds Grafana outage annotations from provider check history.

    One call to :meth:`annotations` is one request: compile the filter,
    list checks, keep those whose hostname matches, fetch their outage
    summaries and turn every ``down`` interval into an annotation.

    Request-fatal problems (bad filter, failed check listing) raise a
    :class:`~core.errors.BridgeError`.  A failed outage fetch only drops
    that check from the response.
    """

    def __init__(
        self,
        provider: CheckProvider,
        fetcher: OutageFetcher | None = None,
        include_hostname_tag: bool = False,
    ) -> None:
        self._provider = provider
        self._fetcher = fetcher or OutageFetcher(provider)
        self._include_hostname_tag = include_hostname_tag

    async def annotations(self, window: QueryWindow, query: str = "") -> list[Annotation]:
        matcher = compile_filter(query)

        try:
            checks = await self._provider.list_checks(include_tags=True)
        except Exception as exc:
            log.error("Failed to list checks from %s: %s", self._provider.name, exc)
            raise CheckListError(f"failed to list checks: {exc}") from exc

        selected = filter_checks(checks, matcher)
        log.debug(
            "Filter %r selected %d of %d check(s)",
            matcher.pattern,
            len(selected),
            len(checks),
        )

        anns: list[Annotation] = []
        for chk, summary in await self._fetcher.fetch(selected, window):
            tags = compose_tags(chk, include_hostname=self._include_hostname_tag)
            anns.extend(build_annotations(chk, summary, tags))

        log.info(
            "Built %d annotation(s) from %d check(s) for %s .. %s",
            len(anns),
            len(selected),
            window.start.isoformat(),
            window.end.isoformat(),
        )
        return anns
