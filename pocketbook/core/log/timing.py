"""Duration logging for procedure calls and cache round trips."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Iterator, Optional


@dataclass
class RoundTrip:
    label: str
    unit: str
    count: Optional[int] = None
    started: float = field(default_factory=perf_counter)

    def set_count(self, count: int) -> None:
        self.count = count

    @property
    def elapsed_ms(self) -> float:
        return (perf_counter() - self.started) * 1000


@contextmanager
def timeit(
    label: str,
    *,
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    unit: str = "rows",
) -> Iterator[RoundTrip]:
    """Log how long the block took, plus an optional count set inside it.

    Failures are logged at WARNING with the elapsed time and re-raised; the
    caller decides how the error itself is reported.
    """

    log = logger or logging.getLogger("pocketbook.timing")
    trip = RoundTrip(label=label, unit=unit)
    try:
        yield trip
    except Exception:
        log.warning("%s failed after %.1fms", label, trip.elapsed_ms)
        raise
    if trip.count is None:
        log.log(level, "%s took %.1fms", label, trip.elapsed_ms)
    else:
        log.log(level, "%s took %.1fms (%d %s)", label, trip.elapsed_ms, trip.count, trip.unit)
