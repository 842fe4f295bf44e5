"""Error types raised by buffers, edits, and history stores."""

from __future__ import annotations


class HistoryError(RuntimeError):
    """Base class for recoverable errors raised by the engine."""


class OutOfBounds(HistoryError):
    """Raised when a position or span falls outside the content."""

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        length: int | None = None,
        content_length: int | None = None,
    ) -> None:
        super().__init__(message)
        self.position = position
        self.length = length
        self.content_length = content_length


class IndexOutOfRange(HistoryError):
    """Raised when a replay or checkpoint index exceeds what was recorded."""

    def __init__(self, message: str, *, index: int, limit: int) -> None:
        super().__init__(message)
        self.index = index
        self.limit = limit


class EmptyHistory(HistoryError):
    """Raised when popping a checkpoint from an empty history."""


__all__ = ["HistoryError", "OutOfBounds", "IndexOutOfRange", "EmptyHistory"]
