"""Text buffer, edits, and the errors they raise."""

from .document import Document
from .edits import DEFAULT_EDIT_OVERHEAD, Edit, EditKind
from .errors import EmptyHistory, HistoryError, IndexOutOfRange, OutOfBounds
from .validation import ensure_position, ensure_span

__all__ = [
    "DEFAULT_EDIT_OVERHEAD",
    "Document",
    "Edit",
    "EditKind",
    "EmptyHistory",
    "HistoryError",
    "IndexOutOfRange",
    "OutOfBounds",
    "ensure_position",
    "ensure_span",
]
