"""Textual host integration; the app module is imported on demand."""

from .controller import HistoryController, InspectorHooks

__all__ = ["HistoryController", "InspectorHooks"]
