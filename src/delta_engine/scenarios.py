"""Canned edit sequences used to compare the two history strategies."""

from __future__ import annotations

from typing import Iterable

from delta_engine.buffer import DEFAULT_EDIT_OVERHEAD
from delta_engine.history import EditSession


def generate_code_listing(lines: int) -> str:
    """Build a synthetic source file with ``lines`` small class blocks."""

    parts = []
    for i in range(lines):
        parts.append(
            f"public class Line{i} {{\n"
            f"    private int value = {i};\n"
            "    public int getValue() { return value; }\n"
            "}\n\n"
        )
    return "".join(parts)


def commit_lines(count: int) -> list[str]:
    return [f"// Change {i} added\n" for i in range(1, count + 1)]


def run_append_scenario(
    base: str,
    changes: Iterable[str],
    *,
    overhead: int = DEFAULT_EDIT_OVERHEAD,
    name: str = "append-scenario",
) -> EditSession:
    """Checkpoint ``base`` then append each change and checkpoint again."""

    session = EditSession(base, name=name, overhead=overhead)
    session.checkpoint(label="base")
    for number, change in enumerate(changes, start=1):
        session.append(change)
        session.checkpoint(label=f"commit {number}")
    return session


def run_large_file_scenario(
    *, lines: int = 5000, commits: int = 10, overhead: int = DEFAULT_EDIT_OVERHEAD
) -> EditSession:
    return run_append_scenario(
        generate_code_listing(lines),
        commit_lines(commits),
        overhead=overhead,
        name="large-file",
    )


__all__ = [
    "commit_lines",
    "generate_code_listing",
    "run_append_scenario",
    "run_large_file_scenario",
]
