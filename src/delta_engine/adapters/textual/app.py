"""Executable Textual app for inspecting a checkpoint history."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when the inspector is run
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use delta_engine.adapters.textual.app"
    ) from exc

from delta_engine.buffer import DEFAULT_EDIT_OVERHEAD
from delta_engine.history import EditSession
from delta_engine.runtime import telemetry
from delta_engine.scenarios import generate_code_listing, run_large_file_scenario

from .controller import HistoryController, InspectorHooks

TAIL_LINES = 40


@dataclass
class UIState:
    document_text: str = ""
    stats: List[str] = field(default_factory=list)
    checkpoints: List[str] = field(default_factory=list)
    status_text: str = ""


class HistoryInspectorApp(App[None]):
    """Shows the live document tail next to delta vs. full-copy memory costs."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#document-view {
		width: 2fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#side-panel {
		width: 1fr;
	}

	#stats-view, #checkpoint-view {
		border: round $secondary;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("a", "append_commit", "Append"),
        ("c", "checkpoint", "Checkpoint"),
        ("r", "restore_latest", "Restore"),
        ("u", "undo", "Undo"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, session: EditSession, *, commits: int = 0) -> None:
        super().__init__()
        self.session = session
        self._commits = commits
        self.controller: HistoryController | None = None
        self._state = UIState()
        self._logger = telemetry.get_logger("delta_engine.adapters.textual")
        self._document_widget: Static | None = None
        self._stats_widget: Static | None = None
        self._checkpoint_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal():
            self._document_widget = Static("", id="document-view")
            yield self._document_widget
            with Vertical(id="side-panel"):
                self._stats_widget = Static("", id="stats-view")
                self._checkpoint_widget = Static("", id="checkpoint-view")
                yield self._stats_widget
                yield self._checkpoint_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = InspectorHooks(
            update_document=self._update_document,
            update_stats=self._update_stats,
            update_checkpoints=self._update_checkpoints,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.controller = HistoryController(
            self.session, hooks, commits=self._commits
        )

    def action_append_commit(self) -> None:
        if self.controller:
            self.controller.append_commit()

    def action_checkpoint(self) -> None:
        if self.controller:
            self.controller.checkpoint()

    def action_restore_latest(self) -> None:
        if self.controller:
            self.controller.restore(-1)

    def action_undo(self) -> None:
        if self.controller:
            self.controller.undo()

    def _update_document(self, text: str) -> None:
        self._state.document_text = "\n".join(text.splitlines()[-TAIL_LINES:])
        if self._document_widget:
            self._document_widget.update(self._state.document_text)

    def _update_stats(self, lines: List[str]) -> None:
        self._state.stats = lines
        if self._stats_widget:
            self._stats_widget.update("\n".join(lines))

    def _update_checkpoints(self, lines: List[str]) -> None:
        self._state.checkpoints = lines
        if self._checkpoint_widget:
            self._checkpoint_widget.update("\n".join(lines[-TAIL_LINES:]))

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Inspect delta vs. full-snapshot history costs."
    )
    parser.add_argument(
        "--lines",
        type=int,
        default=_env_int("DELTA_ENGINE_LINES", 5000),
        help="Size of the generated base file in class blocks (default: 5000)",
    )
    parser.add_argument(
        "--commits",
        type=int,
        default=_env_int("DELTA_ENGINE_COMMITS", 10),
        help="Number of append commits replayed before the UI opens (default: 10)",
    )
    parser.add_argument(
        "--overhead",
        type=int,
        default=_env_int("DELTA_ENGINE_OVERHEAD", DEFAULT_EDIT_OVERHEAD),
        help=f"Per-edit bookkeeping cost (default: {DEFAULT_EDIT_OVERHEAD})",
    )
    parser.add_argument(
        "--log-preset",
        choices=tuple(telemetry.PRESETS),
        default=None,
        help="Telemetry preset to activate before starting",
    )
    return parser.parse_args(argv)


def build_session(lines: int, commits: int, overhead: int) -> EditSession:
    if commits <= 0:
        session = EditSession(generate_code_listing(lines), overhead=overhead)
        session.checkpoint(label="base")
        return session
    return run_large_file_scenario(lines=lines, commits=commits, overhead=overhead)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    session = build_session(args.lines, args.commits, args.overhead)
    HistoryInspectorApp(session, commits=max(args.commits, 0)).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
