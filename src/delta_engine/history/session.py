"""Editing session tying a document to its checkpoint history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from delta_engine.buffer import DEFAULT_EDIT_OVERHEAD, Document, Edit
from delta_engine.reporting.memory import MemoryReport
from delta_engine.runtime import telemetry
from delta_engine.runtime.telemetry import SpanHandle

from .store import Checkpoint, CheckpointStore


class EditSession:
    """Owns one ``Document`` and the ``CheckpointStore`` recording it.

    Every mutation goes through the session so that the delta chain sees each
    edit exactly once. Reporters read ``store`` but never write to it.
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: str = "default",
        overhead: int = DEFAULT_EDIT_OVERHEAD,
    ) -> None:
        self.name = name
        self._document = Document(text)
        self._store = CheckpointStore(text, overhead=overhead)

    @property
    def content(self) -> str:
        return self._document.content

    @property
    def document(self) -> Document:
        return self._document

    @property
    def store(self) -> CheckpointStore:
        return self._store

    def insert(self, position: int, text: str) -> Edit:
        with Transaction(self, "insert") as tx:
            return tx.commit(self._document.insert(position, text))

    def delete(self, position: int, length: int) -> Edit:
        with Transaction(self, "delete") as tx:
            return tx.commit(self._document.delete(position, length))

    def replace(self, position: int, length: int, text: str) -> Edit:
        with Transaction(self, "replace") as tx:
            return tx.commit(self._document.replace(position, length, text))

    def append(self, text: str) -> Edit:
        return self.insert(len(self._document), text)

    def checkpoint(self, label: str = "") -> Checkpoint:
        with telemetry.span(
            "history::checkpoint",
            component="history",
            metadata={"session": self.name},
        ):
            marker = self._store.checkpoint(self.content, label=label)
        telemetry.record_event(
            "history.checkpoint",
            level="debug",
            data={
                "session": self.name,
                "index": marker.index,
                "edit_count": marker.edit_count,
            },
        )
        return marker

    def restore(self, index: int = -1) -> str:
        """Make checkpoint ``index`` the live content and return it.

        The switch is recorded as one minimal edit, so the chain keeps
        describing every state the document has held.
        """

        with Transaction(self, "restore") as tx:
            target = self._store.restore_checkpoint(index)
            tx.handle.add_metadata("checkpoint", index)
            change = Edit.between(self.content, target)
            if change is not None:
                tx.commit(self._document.apply(change))
        telemetry.record_event(
            "history.restore",
            level="debug",
            data={"session": self.name, "index": index, "length": len(target)},
        )
        return target

    def undo(self) -> str:
        """Drop the newest checkpoint and return the document to it."""

        marker = self._store.pop_checkpoint()
        with Transaction(self, "undo") as tx:
            target = self._store.chain.restore_up_to(marker.edit_count)
            change = Edit.between(self.content, target)
            if change is not None:
                tx.commit(self._document.apply(change))
        telemetry.record_event(
            "history.undo",
            level="debug",
            data={"session": self.name, "index": marker.index},
        )
        return target

    def log(self) -> tuple[str, ...]:
        return tuple(
            f"Edit {number}: {edit.describe()}"
            for number, edit in enumerate(self._store.chain.edits, start=1)
        )

    def report(self) -> MemoryReport:
        return MemoryReport.from_store(self._store)


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one session operation in a telemetry span and records its edit."""

    def __init__(self, session: EditSession, label: str) -> None:
        self.session = session
        self.label = label
        self._span_cm: Optional[ContextManager[SpanHandle]] = None
        self._handle: Optional[SpanHandle] = None

    @property
    def handle(self) -> SpanHandle:
        if self._handle is None:
            raise RuntimeError("Transaction has not been entered")
        return self._handle

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"history::{self.label}",
            component="history",
            metadata={"session": self.session.name},
        )
        self._handle = self._span_cm.__enter__()
        return self

    def commit(self, edit: Edit) -> Edit:
        self.session.store.record_edit(edit)
        return edit

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["EditSession", "Transaction"]
