from __future__ import annotations

from abc import ABC, abstractmethod

from models.check import Check, CheckResult, OutageSummary, QueryWindow


class ProviderError(Exception):
    """Raised when the monitoring provider cannot satisfy a request.

    Covers transport failures, non-2xx API responses and payloads that do
    not have the expected shape.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CheckProvider(ABC):
    """Abstract capability interface over an uptime-monitoring provider.

    The annotation engine only depends on this interface, so it can run
    against an in-memory substitute in tests.  Implementations own all
    authentication and connection details.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name (e.g. 'Pingdom')."""

    @abstractmethod
    async def list_checks(self, include_tags: bool = True) -> list[Check]:
        """Return every check visible to the configured account."""

    @abstractmethod
    async def summary_outage(self, check_id: int, window: QueryWindow) -> OutageSummary:
        """Return the ordered status intervals of one check within ``window``."""

    @abstractmethod
    async def results(
        self,
        check_id: int,
        window: QueryWindow | None = None,
        limit: int | None = None,
    ) -> list[CheckResult]:
        """Return raw probe results for one check, newest first."""
