"""Side-by-side memory accounting for delta and full-snapshot histories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from delta_engine.history.store import CheckpointStore


@dataclass(frozen=True, slots=True)
class MemoryReport:
    """Sizes are character counts, the unit the cost model calls bytes."""

    base_bytes: int
    edit_count: int
    delta_bytes: int
    snapshot_count: int
    full_bytes: int
    savings_percent: float

    @property
    def saved_bytes(self) -> int:
        return self.full_bytes - self.delta_bytes

    @classmethod
    def from_store(cls, store: "CheckpointStore") -> "MemoryReport":
        chain = store.chain
        return cls(
            base_bytes=len(chain.base_content),
            edit_count=len(chain),
            delta_bytes=store.total_delta_memory(),
            snapshot_count=len(store.snapshots),
            full_bytes=store.total_full_snapshot_memory(),
            savings_percent=store.savings_percent(),
        )


def _kb(size: int) -> str:
    return f"{size / 1024:.1f} KB"


def render_report(report: MemoryReport) -> list[str]:
    lines = [
        "Delta chain:",
        f"  base: {report.base_bytes} bytes",
        f"  edits: {report.edit_count}",
        f"  total: {report.delta_bytes} bytes ({_kb(report.delta_bytes)})",
        "Full snapshots:",
        f"  count: {report.snapshot_count}",
        f"  total: {report.full_bytes} bytes ({_kb(report.full_bytes)})",
    ]
    if report.snapshot_count:
        lines.append(
            f"Savings: {report.savings_percent:.1f}% ({report.saved_bytes} bytes)"
        )
    return lines


__all__ = ["MemoryReport", "render_report"]
