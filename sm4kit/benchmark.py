"""Throughput measurement for block ciphers."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from time import perf_counter_ns
from typing import TextIO

NS_PER_S = 1_000_000_000

_UNITS = (("bps", 1), ("Kbps", 1 << 10), ("Mbps", 1 << 20), ("Gbps", 1 << 30))


@dataclass(frozen=True)
class ThroughputReport:
    """Timings of a benchmark and the amount of data processed."""

    times_ns: tuple[int, ...]
    rounds: int
    block_bits: int
    label: str = ""

    @property
    def benches(self) -> int:
        return len(self.times_ns)

    @property
    def total_ns(self) -> int:
        return sum(self.times_ns)

    @property
    def bits(self) -> int:
        return self.benches * self.rounds * self.block_bits

    @property
    def seconds(self) -> float:
        return self.total_ns / NS_PER_S

    def rate(self) -> tuple[float, str]:
        """Throughput as (value, unit), using the smallest unit below 1000."""
        seconds = self.seconds
        value = 0.0
        for unit, scale in _UNITS:
            amount = self.bits / scale
            value = amount / seconds if seconds else (math.inf if amount else math.nan)
            if value < 1000:
                return value, unit
        return value, _UNITS[-1][0]

    def render(self) -> str:
        """The report as printed: execution time and throughput lines."""
        value, unit = self.rate()
        return f"Execute time: {self.seconds:f} s\nThroughpt: {value:f} {unit}\n"


def summarize(times_ns: Iterable[int], rounds: int, block_bits: int) -> ThroughputReport:
    """Build a report from per-bench timings; needs at least two benches."""
    times = tuple(times_ns)
    if len(times) < 2:
        raise ValueError("Need at least two bench counts")
    return ThroughputReport(times, rounds, block_bits)


def bench(
    label: str,
    benches: int,
    rounds: int,
    setup: Callable[[], object] | None,
    func: Callable[[], object],
    block_bits: int,
    stream: TextIO | None = None,
) -> ThroughputReport:
    """Time `rounds` calls of `func`, `benches` times over, and print the throughput."""
    if benches < 2:
        raise ValueError("Need at least two bench counts")
    out = sys.stdout if stream is None else stream
    out.write(f"BLOCK_CIPHER_THROUGHPUT: {label}\n")
    times = []
    for _ in range(benches):
        if setup is not None:
            setup()
        start = perf_counter_ns()
        for _ in range(rounds):
            func()
        times.append(perf_counter_ns() - start)
    report = replace(summarize(times, rounds, block_bits), label=label)
    out.write(report.render())
    out.write("\n")
    return report