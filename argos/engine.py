# File: argos/engine.py
"""argos.engine: wires the HTTP fetcher, the watcher and the console reporter together."""

from __future__ import annotations

from typing import Optional

from argos.config import MonitorConfig
from argos.logger import logger
from argos.report.console import ConsoleReporter
from argos.watcher.fetcher import HttpFetcher
from argos.watcher.monitor import EyeOfArgos, Reporter

__all__ = ["run_monitor"]


async def run_monitor(config: MonitorConfig, reporter: Optional[Reporter] = None) -> int:
    """Watch the configured page until the failure threshold is hit; return the exit code."""
    async with HttpFetcher(config) as fetcher:
        monitor = EyeOfArgos(config, fetcher, reporter or ConsoleReporter())
        termination = await monitor.watch()

    if termination is None:
        return 0
    logger.info("Monitor stopped with exit code %d", termination.exit_code)
    return termination.exit_code
