"""Operation statistics data structures and presentation utilities.

Keeps the OpStats dataclass and its table formatting out of the editor so
that `editor.MeshEditor` can focus on orchestration logic only.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class OpStats:
    attempts: int = 0
    success: int = 0
    fail: int = 0
    invariant_rejects: int = 0
    # Timing (seconds)
    time_total: float = 0.0
    time_max: float = 0.0
    time_min: float = 0.0  # 0 means uninitialized

    def record_time(self, duration: float) -> None:
        self.time_total += duration
        if duration > self.time_max:
            self.time_max = duration
        if self.time_min == 0.0 or duration < self.time_min:
            self.time_min = duration

    def reset(self) -> None:
        self.attempts = 0
        self.success = 0
        self.fail = 0
        self.invariant_rejects = 0
        self.time_total = 0.0
        self.time_max = 0.0
        self.time_min = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'attempts': self.attempts,
            'success': self.success,
            'fail': self.fail,
            'invariant_rejects': self.invariant_rejects,
            'success_rate': (self.success / self.attempts) if self.attempts else 0.0,
            'invariant_reject_rate': (self.invariant_rejects / self.attempts) if self.attempts else 0.0,
            'time_total': self.time_total,
            'time_max': self.time_max,
            'time_min': self.time_min,
            'time_avg': (self.time_total / self.attempts) if self.attempts else 0.0,
        }


def format_stats_table(stats_dict) -> str:
    """Return a human readable multi-line table summarizing op stats."""
    if not stats_dict:
        return "<no stats>"
    header = ["op", "attempts", "succ", "fail", "invRej", "succ%", "avg_ms", "min_ms", "max_ms"]
    rows = []
    for op in sorted(stats_dict.keys()):
        s = stats_dict[op]
        attempts = s['attempts']
        succ_pct = (s['success'] / attempts * 100.0) if attempts else 0.0
        rows.append([
            op, str(attempts), str(s['success']), str(s['fail']), str(s['invariant_rejects']),
            f"{succ_pct:6.2f}",
            f"{s['time_avg'] * 1000.0:8.3f}",
            f"{s['time_min'] * 1000.0:8.3f}",
            f"{s['time_max'] * 1000.0:8.3f}",
        ])
    col_w = [len(h) for h in header]
    for r in rows:
        for i, v in enumerate(r):
            col_w[i] = max(col_w[i], len(v))

    def fmt(r):
        return " ".join(r[i].rjust(col_w[i]) for i in range(len(r)))
    lines = [fmt(header), "-" * (sum(col_w) + len(col_w) - 1)] + [fmt(r) for r in rows]
    return "\n".join(lines)


def print_stats(stats_dict, file=None, pretty=True):
    out = file or sys.stdout
    if not pretty:
        print(stats_dict, file=out)
        return
    print(format_stats_table(stats_dict), file=out)


__all__ = ["OpStats", "print_stats", "format_stats_table"]
