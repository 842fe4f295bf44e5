import pytest

from delta_engine.buffer import Edit, IndexOutOfRange, OutOfBounds
from delta_engine.history import DeltaChain


def make_chain(base: str = "Hello", *edits: Edit, overhead: int = 24) -> DeltaChain:
    chain = DeltaChain(base, overhead=overhead)
    for edit in edits:
        chain.record(edit)
    return chain


def reference_fold(base: str, edits: list[Edit]) -> str:
    content = base
    for edit in edits:
        content = edit.apply(content)
    return content


def test_hello_world_example() -> None:
    chain = make_chain("Hello", Edit.insert(5, " World"))
    assert chain.restore() == "Hello World"
    assert chain.memory_usage() == 5 + 6 + 24

    chain.record(Edit.insert(11, "!"))

    assert chain.restore() == "Hello World!"
    assert chain.memory_usage() == 5 + 6 + 24 + 1 + 24


def test_restore_matches_reference_fold() -> None:
    edits = [
        Edit.insert(0, "Say: "),
        Edit.replace(5, "Hello", "Goodbye"),
        Edit.delete(0, "Say: "),
        Edit.insert(7, ", moon"),
    ]
    chain = make_chain("Hello", *edits)

    assert chain.restore() == reference_fold("Hello", edits) == "Goodbye, moon"


def test_restore_up_to_reconstructs_each_prefix() -> None:
    edits = [Edit.insert(5, " World"), Edit.insert(11, "!"), Edit.delete(0, "Hello ")]
    chain = make_chain("Hello", *edits)

    assert chain.restore_up_to(0) == "Hello"
    assert chain.restore_up_to(1) == "Hello World"
    assert chain.restore_up_to(2) == "Hello World!"
    assert chain.restore_up_to(3) == "World!"


def test_restore_up_to_rejects_counts_beyond_history() -> None:
    chain = make_chain("Hello", Edit.insert(5, "!"))

    with pytest.raises(IndexOutOfRange) as info:
        chain.restore_up_to(2)
    assert info.value.limit == 1

    with pytest.raises(IndexOutOfRange):
        chain.restore_up_to(-1)


def test_record_defers_bounds_check_to_replay() -> None:
    chain = make_chain("abc", Edit.insert(10, "x"))

    assert len(chain) == 1
    with pytest.raises(OutOfBounds):
        chain.restore()


def test_rewind_inverts_newest_edits() -> None:
    chain = make_chain(
        "Hello", Edit.insert(5, " World"), Edit.replace(6, "World", "There")
    )
    head = chain.restore()

    assert chain.rewind(head, 1) == "Hello World"
    assert chain.rewind(head, 2) == "Hello"
    assert chain.rewind(head, 0) == head
    with pytest.raises(IndexOutOfRange):
        chain.rewind(head, 3)


def test_memory_usage_is_monotonic_with_exact_increments() -> None:
    chain = make_chain("base", overhead=16)
    edits = [
        Edit.insert(4, "++"),
        Edit.delete(0, "ba"),
        Edit.replace(0, "se", "SE"),
        Edit.delete(0, ""),
    ]
    previous = chain.memory_usage()
    assert previous == 4

    for edit in edits:
        chain.record(edit)
        current = chain.memory_usage()
        expected = len(edit.removed_text) + len(edit.inserted_text) + 16
        assert current - previous == expected
        previous = current


def test_reseed_only_before_edits() -> None:
    chain = DeltaChain()
    chain.reseed("seed")
    assert chain.base_content == "seed"

    chain.record(Edit.insert(4, "!"))
    with pytest.raises(ValueError):
        chain.reseed("other")


def test_negative_overhead_rejected() -> None:
    with pytest.raises(ValueError):
        DeltaChain("x", overhead=-1)


def test_edits_view_is_immutable_copy() -> None:
    chain = make_chain("a", Edit.insert(1, "b"))

    view = chain.edits

    assert isinstance(view, tuple)
    chain.record(Edit.insert(2, "c"))
    assert len(view) == 1
