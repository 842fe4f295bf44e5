"""Controller that drives an ``EditSession`` and reports through UI hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from delta_engine.buffer import HistoryError
from delta_engine.history import EditSession
from delta_engine.reporting import render_report


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class InspectorHooks:
    """Callbacks the controller invokes to refresh host widgets."""

    update_document: Callable[[str], None]
    update_stats: Callable[[List[str]], None] = _noop
    update_checkpoints: Callable[[List[str]], None] = _noop
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class HistoryController:
    """Bridges user commands to the session and pushes fresh views to hooks.

    History errors are reported through ``update_status`` and leave the
    session untouched; the host decides what to do next.
    """

    def __init__(
        self, session: EditSession, hooks: InspectorHooks, *, commits: int = 0
    ) -> None:
        self.session = session
        self.hooks = hooks
        self._commits = commits
        self._refresh()

    def append_commit(self, text: Optional[str] = None) -> None:
        self._commits += 1
        line = text if text is not None else f"// Change {self._commits} added\n"
        edit = self.session.append(line)
        self._log_state("append ->", added=len(edit.inserted_text))
        self._finish(f"appended {len(line)} chars")

    def checkpoint(self) -> None:
        marker = self.session.checkpoint(label=f"checkpoint {self._commits}")
        self._log_state("checkpoint ->", index=marker.index)
        self._finish(f"checkpoint {marker.index} @ edit {marker.edit_count}")

    def restore(self, index: int = -1) -> None:
        try:
            self.session.restore(index)
        except HistoryError as exc:
            self._fail("restore", exc)
            return
        self._finish(f"restored checkpoint {index}")

    def undo(self) -> None:
        try:
            self.session.undo()
        except HistoryError as exc:
            self._fail("undo", exc)
            return
        self._finish("undo")

    def _finish(self, status: str) -> None:
        self.hooks.update_status(status)
        self._refresh()

    def _fail(self, operation: str, exc: HistoryError) -> None:
        self._log_state("error <-", operation=operation, error=type(exc).__name__)
        self.hooks.update_status(f"{operation} failed: {exc}")

    def _refresh(self) -> None:
        self.hooks.update_document(self.session.content)
        self.hooks.update_stats(render_report(self.session.report()))
        self.hooks.update_checkpoints(
            [
                f"#{marker.index} {marker.label or '-'} (edits={marker.edit_count})"
                for marker in self.session.store.checkpoints
            ]
        )

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "session": self.session.name,
            "length": len(self.session.document),
            "version": self.session.document.version,
        }
        snapshot.update(fields)
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["HistoryController", "InspectorHooks"]
