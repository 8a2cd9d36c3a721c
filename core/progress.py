"""
Throttled progress reporting for long-running builds.

Progress is emitted through logging rather than drawn on a terminal, so
it lands wherever the entry point routes log records.
"""
from __future__ import annotations

import logging
import time


def progress_update_interval(count: int) -> int:
    """
    How many items to process between progress reports.

    Below 1_000 items the interval is the whole job, so a small job
    reports once, on completion. Larger jobs report roughly every 1%,
    clamped to [1_000, 100_000] items.
    """
    if count < 1_000:
        return max(count, 1)
    one_percent = max(count // 100, 1)
    return min(max(one_percent, 1_000), 100_000)


class ProgressReporter:
    """Log ``label: pos/total (pct%)`` at a throttled interval."""

    def __init__(
        self,
        total: int,
        label: str,
        logger: logging.Logger | None = None,
        interval: int | None = None,
    ) -> None:
        self.total = total
        self.label = label
        self.position = 0
        self.logger = logger or logging.getLogger(__name__)
        self.interval = interval or progress_update_interval(total)
        self._next_report = self.interval
        self._started = time.monotonic()

    def advance(self, n: int = 1) -> None:
        self.position += n
        if self.position >= self._next_report or self.position >= self.total:
            self._report()
            while self._next_report <= self.position:
                self._next_report += self.interval

    def _report(self) -> None:
        pct = (100 * self.position // self.total) if self.total else 100
        elapsed = time.monotonic() - self._started
        self.logger.info(
            f"{self.label}: {self.position}/{self.total} ({pct}%) [{elapsed:.1f}s]"
        )

    def finish(self) -> None:
        if self.position < self.total:
            self._report()


__all__ = ["progress_update_interval", "ProgressReporter"]
