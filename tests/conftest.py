# File: tests/conftest.py
from __future__ import annotations

import logging
from typing import Iterable, List

import pytest

from argos.config import MonitorConfig
from argos.watcher.models import CycleReport, FetchOutcome, Termination, UrlResponse


class ScriptedFetcher:
    """Returns a fixed sequence of outcomes, one per call."""

    def __init__(self, outcomes: Iterable[FetchOutcome]) -> None:
        self.outcomes: List[FetchOutcome] = list(outcomes)
        self.calls: List[str] = []

    async def fetch(self, url: str) -> FetchOutcome:
        self.calls.append(url)
        if len(self.calls) > len(self.outcomes):
            raise AssertionError(f"unexpected fetch #{len(self.calls)} of {url}")
        return self.outcomes[len(self.calls) - 1]


class RecordingReporter:
    def __init__(self) -> None:
        self.reports: List[CycleReport] = []
        self.terminations: List[Termination] = []

    def report(self, report: CycleReport) -> None:
        self.reports.append(report)

    def terminated(self, termination: Termination) -> None:
        self.terminations.append(termination)


class FakeSleep:
    def __init__(self) -> None:
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def ok(body: str) -> UrlResponse:
    return UrlResponse(status=200, body=body)


def status(code: int) -> UrlResponse:
    return UrlResponse(status=code, body="")


@pytest.fixture()
def monitor_config() -> MonitorConfig:
    """Config matching the reference scenarios: 30 s interval, 3 failures."""
    return MonitorConfig(
        web_address="http://example.com",
        check_interval_sec=30,
        max_num_of_failures=3,
    )


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def fake_sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture(autouse=True)
def reset_argos_logger():
    """The CLI binds handlers to CliRunner's streams; drop them after each test."""
    yield
    lg = logging.getLogger("Argos")
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()
    lg.setLevel(logging.NOTSET)
    lg.propagate = True
