"""Incremental checkpoint engine for mutable text buffers."""

__all__ = [
    "adapters",
    "buffer",
    "history",
    "reporting",
    "runtime",
    "scenarios",
]

__version__ = "0.1.0"
