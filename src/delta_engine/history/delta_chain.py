"""Base content plus an append-only list of edits."""

from __future__ import annotations

from typing import List

from delta_engine.buffer import DEFAULT_EDIT_OVERHEAD, Edit, IndexOutOfRange


class DeltaChain:
    """Reconstructs historical content by replaying edits over a base.

    ``restore`` is a full replay every time; the chain trades restore speed
    for storing only the changed text plus a fixed per-edit ``overhead``.
    """

    def __init__(
        self, base_content: str = "", *, overhead: int = DEFAULT_EDIT_OVERHEAD
    ) -> None:
        if overhead < 0:
            raise ValueError("overhead cannot be negative")
        self._base = base_content
        self._edits: List[Edit] = []
        self.overhead = overhead

    @property
    def base_content(self) -> str:
        return self._base

    @property
    def edits(self) -> tuple[Edit, ...]:
        return tuple(self._edits)

    def __len__(self) -> int:
        return len(self._edits)

    def reseed(self, base_content: str) -> None:
        if self._edits:
            raise ValueError("Cannot reseed a chain that already holds edits")
        self._base = base_content

    def record(self, edit: Edit) -> None:
        self._edits.append(edit)

    def restore(self) -> str:
        return self.restore_up_to(len(self._edits))

    def restore_up_to(self, n: int) -> str:
        self._check_count(n)
        content = self._base
        for edit in self._edits[:n]:
            content = edit.apply(content)
        return content

    def rewind(self, content: str, n: int) -> str:
        """Invert the newest ``n`` edits starting from head ``content``."""

        self._check_count(n)
        for edit in reversed(self._edits[len(self._edits) - n :]):
            content = edit.invert(content)
        return content

    def memory_usage(self) -> int:
        return len(self._base) + sum(
            edit.memory_usage(self.overhead) for edit in self._edits
        )

    def _check_count(self, n: int) -> None:
        if n < 0 or n > len(self._edits):
            raise IndexOutOfRange(
                f"Requested {n} edits but only {len(self._edits)} recorded",
                index=n,
                limit=len(self._edits),
            )

    def __repr__(self) -> str:
        return f"DeltaChain(base={len(self._base)}, edits={len(self._edits)})"
