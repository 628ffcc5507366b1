"""Pingdom Grafana bridge -- entry point.

Assembles the request pipeline:

    FastAPI Simple JSON endpoints
        -> Annotator (filter checks by hostname)
        -> OutageFetcher (one asyncio task per check)
        -> PingdomProvider (shared httpx.AsyncClient)

A semaphore inside the fetcher caps concurrent Pingdom requests.
The Prometheus collector is registered on a private registry and
served from /metrics.
"""
from __future__ import annotations

import asyncio
import logging
import sys

import uvicorn
from prometheus_client import CollectorRegistry

from core.annotator import Annotator
from core.config import Settings
from core.errors import ConfigError
from core.metrics import PingdomCollector
from core.outage_fetcher import OutageFetcher
from providers.pingdom_provider import PingdomProvider
from server.app import create_app

log = logging.getLogger("pingdom-bridge")


async def run(settings: Settings) -> None:
    client = PingdomProvider.build_client(
        settings.email,
        settings.password,
        settings.api_key,
        base_url=settings.api_url,
        timeout=settings.timeout_seconds,
    )
    async with client:
        provider = PingdomProvider(client=client)
        annotator = Annotator(
            provider,
            fetcher=OutageFetcher(provider, concurrency_limit=settings.concurrency_limit),
            include_hostname_tag=settings.tag_hostname,
        )

        registry = CollectorRegistry()
        registry.register(PingdomCollector())

        server = uvicorn.Server(
            uvicorn.Config(
                create_app(annotator, registry),
                host=settings.listen_host,
                port=settings.listen_port,
                log_config=None,
            )
        )

        log.info("Start server on %s:%d", settings.listen_host, settings.listen_port)
        await server.serve()
        log.info("Stopped server")


def main() -> None:
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        settings.require_credentials()
    except ConfigError as exc:
        log.error("%s", exc)
        sys.exit(2)

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
