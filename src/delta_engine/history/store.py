"""Checkpoint bookkeeping for the delta chain and its full-copy shadow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from delta_engine.buffer import (
    DEFAULT_EDIT_OVERHEAD,
    Edit,
    EmptyHistory,
    IndexOutOfRange,
)

from .delta_chain import DeltaChain


@dataclass(frozen=True, slots=True)
class FullSnapshot:
    """Whole-content copy, kept only to price the naive strategy."""

    index: int
    content: str

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True, slots=True)
class Checkpoint:
    """Marker pointing at a prefix of the delta chain."""

    index: int
    edit_count: int
    label: str = ""


class CheckpointStore:
    """Owns the delta chain and prices it against full snapshots.

    The chain is the only source of truth for restores. ``snapshots`` is an
    instrumentation shadow that records what a full-copy history would have
    stored for the same checkpoints.
    """

    def __init__(
        self, base_content: str = "", *, overhead: int = DEFAULT_EDIT_OVERHEAD
    ) -> None:
        self._chain = DeltaChain(base_content, overhead=overhead)
        self._snapshots: List[FullSnapshot] = []
        self._checkpoints: List[Checkpoint] = []
        self._shadows: List[FullSnapshot] = []

    @property
    def chain(self) -> DeltaChain:
        return self._chain

    @property
    def checkpoints(self) -> tuple[Checkpoint, ...]:
        return tuple(self._checkpoints)

    @property
    def snapshots(self) -> tuple[FullSnapshot, ...]:
        return tuple(self._snapshots)

    def record_edit(self, edit: Edit) -> None:
        self._chain.record(edit)

    def record_full_snapshot(
        self, content: str, *, index: Optional[int] = None
    ) -> FullSnapshot:
        """Append a shadow copy; untagged copies take their position as index."""

        if index is None:
            index = len(self._snapshots)
        snapshot = FullSnapshot(index=index, content=content)
        self._snapshots.append(snapshot)
        return snapshot

    def checkpoint(self, content: str, *, label: str = "") -> Checkpoint:
        if not self._checkpoints and not len(self._chain):
            self._chain.reseed(content)
        marker = Checkpoint(
            index=len(self._checkpoints), edit_count=len(self._chain), label=label
        )
        self._checkpoints.append(marker)
        self._shadows.append(self.record_full_snapshot(content, index=marker.index))
        return marker

    def get_checkpoint(self, index: int) -> Checkpoint:
        try:
            return self._checkpoints[index]
        except IndexError as exc:
            raise IndexOutOfRange(
                f"No checkpoint at index {index}",
                index=index,
                limit=len(self._checkpoints),
            ) from exc

    def restore_checkpoint(self, index: int = -1) -> str:
        return self._chain.restore_up_to(self.get_checkpoint(index).edit_count)

    def pop_checkpoint(self) -> Checkpoint:
        if not self._checkpoints:
            raise EmptyHistory("No checkpoints to pop")
        marker = self._checkpoints.pop()
        shadow = self._shadows.pop()
        self._snapshots = [s for s in self._snapshots if s is not shadow]
        return marker

    def total_full_snapshot_memory(self) -> int:
        return sum(snapshot.size for snapshot in self._snapshots)

    def total_delta_memory(self) -> int:
        return self._chain.memory_usage()

    def savings_percent(self) -> float:
        full_memory = self.total_full_snapshot_memory()
        if full_memory == 0:
            return 0.0
        return (full_memory - self.total_delta_memory()) / full_memory * 100


__all__ = ["Checkpoint", "CheckpointStore", "FullSnapshot"]
