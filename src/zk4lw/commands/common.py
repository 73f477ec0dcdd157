"""Value types shared by several command responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MetricSample:
    """Snapshot of a metric at collection time.

    Which of the optional fields are filled depends on the server version;
    a missing value is ``None``, never zero.
    """

    avg: float
    max: int
    min: int
    count: Optional[int] = None
    sum: Optional[int] = None
    p50: Optional[int] = None
    p95: Optional[int] = None
    p99: Optional[int] = None
    p999: Optional[int] = None
