"""argos.watcher: fetch, fingerprint and compare loop."""
from .failures import FailureTracker
from .fetcher import Fetcher, HttpFetcher, normalize_response
from .fingerprint import Fingerprint, fingerprint
from .models import CycleReport, FailureKind, FetchFailure, FetchOutcome, ReportKind, Termination, UrlResponse
from .monitor import EyeOfArgos, MonitorState

__all__ = [
    "CycleReport",
    "EyeOfArgos",
    "FailureKind",
    "FailureTracker",
    "FetchFailure",
    "FetchOutcome",
    "Fetcher",
    "Fingerprint",
    "HttpFetcher",
    "MonitorState",
    "ReportKind",
    "Termination",
    "UrlResponse",
    "fingerprint",
    "normalize_response",
]
