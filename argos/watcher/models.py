# argos/watcher/models.py
"""
Data models for the Argos watcher.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from argos.watcher.fingerprint import Fingerprint

HTTP_OK = 200
HTTP_NO_CONTENT = 204


@dataclass(slots=True, frozen=True)
class UrlResponse:
    """Status code and decoded body of a fetched page; all the watcher cares about."""

    status: int
    body: str

    @classmethod
    def invalid(cls) -> UrlResponse:
        """Placeholder used when no response could be obtained at all."""
        return cls(status=HTTP_NO_CONTENT, body="")

    @property
    def is_valid(self) -> bool:
        return self.status == HTTP_OK


class FailureKind(str, Enum):
    TRANSPORT = "transport"
    BODY = "body"


@dataclass(slots=True, frozen=True)
class FetchFailure:
    """The request failed before a usable response body was obtained."""

    kind: FailureKind
    reason: str


FetchOutcome = Union[UrlResponse, FetchFailure]


class ReportKind(str, Enum):
    CHANGED = "changed"
    UNCHANGED = "unchanged"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class CycleReport:
    """What happened during one poll cycle."""

    kind: ReportKind
    status: int
    consecutive_failures: int
    fingerprint: Optional[Fingerprint] = None
    reason: Optional[str] = None


@dataclass(slots=True, frozen=True)
class Termination:
    """Returned by the watch loop once the failure threshold is reached."""

    consecutive_failures: int
    exit_code: int = 1
