# === FILE: argos/watcher/monitor.py ===
"""argos.watcher.monitor: the poll, fingerprint and compare loop for a single page."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Protocol

from argos.config import MonitorConfig
from argos.logger import logger
from argos.watcher.failures import FailureTracker
from argos.watcher.fetcher import Fetcher
from argos.watcher.fingerprint import Fingerprint, fingerprint
from argos.watcher.models import (
    CycleReport,
    FetchFailure,
    ReportKind,
    Termination,
    UrlResponse,
)

__all__ = ("EyeOfArgos", "MonitorState", "Reporter")

SleepFunc = Callable[[float], Awaitable[None]]


class Reporter(Protocol):
    def report(self, report: CycleReport) -> None: ...

    def terminated(self, termination: Termination) -> None: ...


@dataclass(slots=True)
class MonitorState:
    """State carried from one cycle to the next."""
    failures: FailureTracker
    last_fingerprint: Optional[Fingerprint] = None

    @property
    def consecutive_failures(self) -> int:
        return self.failures.count


class EyeOfArgos:
    """
    Watches a single page: fetch, hash, compare with the previous hash, wait.

    The loop never exits the process itself; ``watch`` returns a Termination
    once the configured number of consecutive failures is reached.
    """

    def __init__(
        self,
        config: MonitorConfig,
        fetcher: Fetcher,
        reporter: Optional[Reporter] = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self.config = config
        self.fetcher = fetcher
        self.reporter = reporter
        self._sleep = sleep
        self.state = MonitorState(failures=FailureTracker(config.max_num_of_failures))

    async def poll_once(self) -> CycleReport:
        url = str(self.config.web_address)
        outcome = await self.fetcher.fetch(url)

        reason: Optional[str] = None
        if isinstance(outcome, FetchFailure):
            reason = outcome.reason
            outcome = UrlResponse.invalid()

        if outcome.is_valid:
            report = self._on_success(outcome)
        else:
            count = self.state.failures.increment()
            logger.warning(
                "Check of %s failed with status %s (%d/%d consecutive)",
                url, outcome.status, count, self.state.failures.max_failures,
            )
            report = CycleReport(
                kind=ReportKind.FAILED,
                status=outcome.status,
                consecutive_failures=count,
                reason=reason,
            )

        if self.reporter is not None:
            self.reporter.report(report)
        return report

    def _on_success(self, response: UrlResponse) -> CycleReport:
        self.state.failures.reset()
        current = fingerprint(response.body)
        logger.debug("Fingerprint of %s: %s", self.config.web_address, current)

        if current != self.state.last_fingerprint:
            if self.state.last_fingerprint is not None:
                logger.info("Content of %s changed", self.config.web_address)
            self.state.last_fingerprint = current
            kind = ReportKind.CHANGED
        else:
            kind = ReportKind.UNCHANGED
        return CycleReport(kind=kind, status=response.status, consecutive_failures=0, fingerprint=current)

    async def watch(self, max_cycles: Optional[int] = None) -> Optional[Termination]:
        """
        Run poll cycles until the failure threshold is reached.

        With *max_cycles* set, returns None after that many cycles without
        termination; otherwise loops forever.
        """
        logger.info(
            "Watching %s every %ss (max %d consecutive failures)",
            self.config.web_address,
            self.config.check_interval_sec,
            self.config.max_num_of_failures,
        )
        cycles = 0
        while True:
            await self.poll_once()
            cycles += 1

            if self.state.failures.threshold_reached():
                termination = Termination(consecutive_failures=self.state.consecutive_failures)
                logger.error(
                    "Giving up on %s after %d consecutive failures",
                    self.config.web_address, termination.consecutive_failures,
                )
                if self.reporter is not None:
                    self.reporter.terminated(termination)
                return termination

            if max_cycles is not None and cycles >= max_cycles:
                return None

            await self._sleep(self.config.check_interval.total_seconds())
