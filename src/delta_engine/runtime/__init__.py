"""Runtime services shared by the history engine."""

from . import telemetry

__all__ = ["telemetry"]
