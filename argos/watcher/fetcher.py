# argos/watcher/fetcher.py
"""
Fetcher module: performs the GET request for the watched page and
normalizes whatever comes back into a FetchOutcome.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Protocol

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout

from argos.config import MonitorConfig
from argos.logger import logger
from argos.watcher.models import FailureKind, FetchFailure, FetchOutcome, UrlResponse

__all__ = ["Fetcher", "HttpFetcher", "normalize_response"]


class Fetcher(Protocol):
    """Anything able to turn a URL into a FetchOutcome."""

    async def fetch(self, url: str) -> FetchOutcome: ...


def _describe(exc: BaseException) -> str:
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__


async def normalize_response(response: ClientResponse) -> FetchOutcome:
    """
    Read the full body of *response*.

    Any status code yields a UrlResponse; undecodable bytes are replaced,
    only a failure while reading the body yields a FetchFailure.
    """
    try:
        body = await response.text(errors="replace")
    except (ClientError, asyncio.TimeoutError) as exc:
        return FetchFailure(FailureKind.BODY, f"body read error: {_describe(exc)}")
    return UrlResponse(status=response.status, body=body)


class HttpFetcher:
    """aiohttp-backed fetcher; owns a single ClientSession for the whole run."""

    def __init__(self, config: MonitorConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> HttpFetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> FetchOutcome:
        if not self.session:
            raise RuntimeError("Session not initialized")
        logger.debug("GET %s", url)
        try:
            async with self.session.get(url) as resp:
                outcome = await normalize_response(resp)
        except (ClientError, asyncio.TimeoutError) as exc:
            outcome = FetchFailure(FailureKind.TRANSPORT, _describe(exc))

        if isinstance(outcome, FetchFailure):
            logger.warning("Fetching %s failed (%s): %s", url, outcome.kind.value, outcome.reason)
        else:
            logger.debug("%s -> HTTP %s, %d chars", url, outcome.status, len(outcome.body))
        return outcome
