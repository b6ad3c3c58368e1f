"""argos.watcher.failures: counter of consecutive failed fetches."""

from __future__ import annotations

__all__ = ["FailureTracker"]


class FailureTracker:
    """Counts back-to-back failures and tells when the watcher must give up."""

    def __init__(self, max_failures: int) -> None:
        if max_failures < 1:
            raise ValueError("max_failures must be >= 1")
        self.max_failures = max_failures
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def reset(self) -> None:
        self._count = 0

    def increment(self) -> int:
        self._count += 1
        return self._count

    def threshold_reached(self) -> bool:
        return self._count >= self.max_failures
