"""Memory reporting for checkpoint histories."""

from .memory import MemoryReport, render_report

__all__ = ["MemoryReport", "render_report"]
