"""Mutable text buffer that reports every change as an ``Edit``."""

from __future__ import annotations

from typing import List

from .edits import Edit
from .validation import ensure_position, ensure_span


class Document:
    """Live text buffer addressed by character offset.

    Content is held as a list of characters so appends are amortized O(1) and
    every offset is bounds checked. The document keeps no history of its own;
    each mutation returns the ``Edit`` it performed so an owner can record it.
    """

    def __init__(self, text: str = "") -> None:
        self._chars: List[str] = list(text)
        self.version = 0

    @property
    def content(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def insert(self, position: int, text: str) -> Edit:
        ensure_position(len(self._chars), position)
        self._chars[position:position] = text
        self.version += 1
        return Edit.insert(position, text)

    def delete(self, position: int, length: int) -> Edit:
        end = ensure_span(len(self._chars), position, length)
        removed = "".join(self._chars[position:end])
        del self._chars[position:end]
        self.version += 1
        return Edit.delete(position, removed)

    def replace(self, position: int, length: int, text: str) -> Edit:
        end = ensure_span(len(self._chars), position, length)
        removed = "".join(self._chars[position:end])
        self._chars[position:end] = text
        self.version += 1
        return Edit.replace(position, removed, text)

    def apply(self, edit: Edit) -> Edit:
        """Perform an edit built elsewhere, e.g. while switching checkpoints."""

        end = ensure_span(len(self._chars), edit.position, len(edit.removed_text))
        self._chars[edit.position : end] = edit.inserted_text
        self.version += 1
        return edit

    def __repr__(self) -> str:
        return f"Document(length={len(self._chars)}, version={self.version})"
