import statistics
from dataclasses import dataclass, field
from typing import Optional

@dataclass(frozen=True)
class Attempt:
    seq: int
    latency_ms: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.latency_ms is not None

@dataclass
class RunStatistics:
    packets_sent: int = 0
    packets_received: int = 0
    latencies: list[float] = field(default_factory=list)
    attempts: list[Attempt] = field(default_factory=list)

    def record(self, attempt: Attempt) -> None:
        self.attempts.append(attempt)
        self.packets_sent += 1
        if attempt.ok:
            self.packets_received += 1
            self.latencies.append(attempt.latency_ms)

    @property
    def loss_percent(self) -> float:
        if not self.packets_sent:
            return 0.0
        return (self.packets_sent - self.packets_received) / self.packets_sent * 100.0

@dataclass(frozen=True)
class Summary:
    sent: int
    received: int
    loss_percent: float
    min_ms: float
    avg_ms: float
    max_ms: float
    stddev_ms: float

def summarize(stats: RunStatistics) -> Optional[Summary]:
    """Final figures for a run, None when no attempt succeeded."""
    samples = stats.latencies
    if not samples:
        return None

    # population deviation: divide by n, not n - 1
    return Summary(
        sent=stats.packets_sent,
        received=stats.packets_received,
        loss_percent=stats.loss_percent,
        min_ms=min(samples),
        avg_ms=statistics.fmean(samples),
        max_ms=max(samples),
        stddev_ms=statistics.pstdev(samples),
    )

def format_summary(host: str, summary: Summary) -> list[str]:
    return [
        "",
        f"--- {host} tcp ping statistics ---",
        f"{summary.sent} packets transmitted, {summary.received} packets received, "
        f"{summary.loss_percent:.1f}% packet loss",
        "round-trip min/avg/max/stddev = "
        f"{summary.min_ms:.3f}/{summary.avg_ms:.3f}/{summary.max_ms:.3f}/{summary.stddev_ms:.3f} ms",
    ]
