"""Immutable, invertible text edits."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .validation import ensure_span

DEFAULT_EDIT_OVERHEAD = 24  # kind + position + timestamp bookkeeping


class EditKind(str, Enum):
    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"


@dataclass(frozen=True, slots=True)
class Edit:
    """One positional change that can be applied to or inverted from content.

    ``position`` is the offset where the change starts. It is the same offset
    before and after the edit, so it serves both ``apply`` (pre-edit
    coordinates) and ``invert`` (post-edit coordinates). Only bounds are
    checked; ``removed_text`` is trusted to describe what sat at ``position``.
    """

    kind: EditKind
    position: int
    removed_text: str = ""
    inserted_text: str = ""
    timestamp: float = field(default_factory=time.time, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", EditKind(self.kind))
        if self.position < 0:
            raise ValueError("position cannot be negative")
        if self.kind is EditKind.INSERT and self.removed_text:
            raise ValueError("insert edits cannot remove text")
        if self.kind is EditKind.DELETE and self.inserted_text:
            raise ValueError("delete edits cannot insert text")

    @classmethod
    def insert(cls, position: int, text: str) -> "Edit":
        return cls(EditKind.INSERT, position, inserted_text=text)

    @classmethod
    def delete(cls, position: int, text: str) -> "Edit":
        return cls(EditKind.DELETE, position, removed_text=text)

    @classmethod
    def replace(cls, position: int, old: str, new: str) -> "Edit":
        return cls(EditKind.REPLACE, position, removed_text=old, inserted_text=new)

    @classmethod
    def between(cls, before: str, after: str) -> Optional["Edit"]:
        """Return the smallest single edit turning ``before`` into ``after``.

        The common prefix and suffix are trimmed; whatever differs in the
        middle becomes an insert, a delete, or a replace. ``None`` when the
        two strings are equal.
        """

        if before == after:
            return None
        limit = min(len(before), len(after))
        start = 0
        while start < limit and before[start] == after[start]:
            start += 1
        tail = 0
        while (
            tail < limit - start
            and before[len(before) - 1 - tail] == after[len(after) - 1 - tail]
        ):
            tail += 1
        removed = before[start : len(before) - tail]
        inserted = after[start : len(after) - tail]
        if not removed:
            return cls.insert(start, inserted)
        if not inserted:
            return cls.delete(start, removed)
        return cls.replace(start, removed, inserted)

    def apply(self, content: str) -> str:
        end = ensure_span(len(content), self.position, len(self.removed_text))
        return content[: self.position] + self.inserted_text + content[end:]

    def invert(self, content: str) -> str:
        end = ensure_span(len(content), self.position, len(self.inserted_text))
        return content[: self.position] + self.removed_text + content[end:]

    def inverse(self) -> "Edit":
        """Return the edit whose ``apply`` undoes this one."""

        if self.kind is EditKind.INSERT:
            return Edit.delete(self.position, self.inserted_text)
        if self.kind is EditKind.DELETE:
            return Edit.insert(self.position, self.removed_text)
        return Edit.replace(self.position, self.inserted_text, self.removed_text)

    def memory_usage(self, overhead: int = DEFAULT_EDIT_OVERHEAD) -> int:
        return len(self.removed_text) + len(self.inserted_text) + overhead

    def describe(self) -> str:
        return (
            f"[{self.kind.value}] pos={self.position}, "
            f"old={self.removed_text!r}, new={self.inserted_text!r}"
        )

    def __str__(self) -> str:
        return self.describe()


__all__ = ["DEFAULT_EDIT_OVERHEAD", "Edit", "EditKind"]
