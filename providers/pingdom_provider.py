from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import httpx

from models.check import Check, CheckResult, OutageState, OutageSummary, QueryWindow, from_unix
from providers.base import CheckProvider, ProviderError

DEFAULT_API_URL = "https://api.pingdom.com/api/2.0"
DEFAULT_TIMEOUT_SECONDS = 30.0

log = logging.getLogger(__name__)


def _optional_time(raw: Any) -> datetime | None:
    if raw in (None, 0):
        return None
    return from_unix(int(raw))


def _parse_check(raw: dict[str, Any]) -> Check:
    tags = tuple(str(t["name"]) for t in raw.get("tags") or () if t.get("name") is not None)
    return Check(
        id=int(raw["id"]),
        name=str(raw.get("name", "")),
        hostname=str(raw.get("hostname", "")),
        tags=tags,
        status=raw.get("status"),
        resolution=raw.get("resolution"),
        last_error_time=_optional_time(raw.get("lasterrortime")),
        last_test_time=_optional_time(raw.get("lasttesttime")),
        last_response_time=raw.get("lastresponsetime"),
    )


def _parse_state(raw: dict[str, Any]) -> OutageState:
    return OutageState(
        status=str(raw["status"]),
        start=from_unix(int(raw["timefrom"])),
        end=from_unix(int(raw["timeto"])),
    )


def _parse_result(raw: dict[str, Any]) -> CheckResult:
    return CheckResult(
        time=from_unix(int(raw["time"])),
        status=str(raw["status"]),
        response_time_ms=raw.get("responsetime"),
        probe_id=raw.get("probeid"),
        status_desc=str(raw.get("statusdesc", "")),
        status_desc_long=str(raw.get("statusdesclong", "")),
    )


class PingdomProvider(CheckProvider):
    """Provider adapter for the Pingdom 2.0 REST API.

    A shared ``httpx.AsyncClient`` is injected at construction time.  Use
    :meth:`build_client` to create one carrying Pingdom's basic-auth
    credentials and ``App-Key`` header.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @staticmethod
    def build_client(
        email: str,
        password: str,
        api_key: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=base_url,
            auth=httpx.BasicAuth(email, password),
            headers={"App-Key": api_key},
            timeout=timeout,
            transport=transport,
        )

    @property
    def name(self) -> str:
        return "Pingdom"

    async def list_checks(self, include_tags: bool = True) -> list[Check]:
        params = {"include_tags": "true"} if include_tags else {}
        payload = await self._get("/checks", params)
        try:
            return [_parse_check(raw) for raw in payload["checks"]]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ProviderError(f"malformed check listing: {exc!r}") from exc

    async def summary_outage(self, check_id: int, window: QueryWindow) -> OutageSummary:
        params = {"from": window.from_ts, "to": window.to_ts}
        payload = await self._get(f"/summary.outage/{check_id}", params)
        try:
            states = tuple(_parse_state(raw) for raw in payload["summary"]["states"])
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ProviderError(
                f"malformed outage summary for check {check_id}: {exc!r}"
            ) from exc
        return OutageSummary(check_id=check_id, states=states)

    async def results(
        self,
        check_id: int,
        window: QueryWindow | None = None,
        limit: int | None = None,
    ) -> list[CheckResult]:
        params: dict[str, Any] = {}
        if window is not None:
            params["from"] = window.from_ts
            params["to"] = window.to_ts
        if limit is not None:
            params["limit"] = limit

        payload = await self._get(f"/results/{check_id}", params)
        try:
            return [_parse_result(raw) for raw in payload["results"]]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ProviderError(
                f"malformed results for check {check_id}: {exc!r}"
            ) from exc

    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        try:
            resp = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise ProviderError(f"[{self.name}] HTTP error on {path}: {exc}") from exc

        if resp.status_code != 200:
            raise ProviderError(
                f"[{self.name}] {path} returned {resp.status_code}: {self._error_message(resp)}",
                status_code=resp.status_code,
            )

        try:
            payload = resp.json()
        except ValueError as exc:
            raise ProviderError(f"[{self.name}] {path} returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise ProviderError(f"[{self.name}] {path} returned unexpected payload")
        log.debug("[%s] GET %s ok", self.name, path)
        return payload

    @staticmethod
    def _error_message(resp: httpx.Response) -> str:
        """Pull Pingdom's error description out of a failed response."""
        try:
            err = resp.json()["error"]
            return f"{err.get('statusdesc', '')}: {err.get('errormessage', '')}".strip(": ")
        except (ValueError, KeyError, TypeError, AttributeError):
            return resp.reason_phrase or "unknown error"
