"""Bounds checks shared by documents and edits."""

from __future__ import annotations

from .errors import OutOfBounds


def ensure_position(content_length: int, position: int) -> int:
    if position < 0 or position > content_length:
        raise OutOfBounds(
            f"Position {position} outside [0, {content_length}]",
            position=position,
            content_length=content_length,
        )
    return position


def ensure_span(content_length: int, position: int, length: int) -> int:
    """Validate ``[position, position + length)`` and return its end offset."""

    if length < 0:
        raise OutOfBounds(
            f"Negative length {length}",
            position=position,
            length=length,
            content_length=content_length,
        )
    ensure_position(content_length, position)
    end = position + length
    if end > content_length:
        raise OutOfBounds(
            f"Span {position}+{length} runs past end of content ({content_length})",
            position=position,
            length=length,
            content_length=content_length,
        )
    return end
