import pytest

from delta_engine.buffer import Edit, EmptyHistory, IndexOutOfRange
from delta_engine.history import CheckpointStore


def test_savings_is_zero_without_snapshots() -> None:
    store = CheckpointStore("Hello")
    store.record_edit(Edit.insert(5, "!"))

    assert store.total_full_snapshot_memory() == 0
    assert store.savings_percent() == 0


def test_full_snapshot_memory_sums_content_lengths() -> None:
    store = CheckpointStore("Hello")
    store.record_edit(Edit.insert(5, " World"))
    store.record_full_snapshot("Hello World")
    store.record_edit(Edit.insert(11, "!"))
    snapshot = store.record_full_snapshot("Hello World!")

    assert snapshot.index == 1
    assert store.total_full_snapshot_memory() == 23
    assert store.total_delta_memory() == 5 + 30 + 25
    assert store.savings_percent() == pytest.approx((23 - 60) / 23 * 100)


def test_delta_wins_on_large_base() -> None:
    base = "x" * 10_000
    store = CheckpointStore(base)
    store.checkpoint(base)
    content = base
    for i in range(10):
        edit = Edit.insert(len(content), f"line {i}\n")
        content = edit.apply(content)
        store.record_edit(edit)
        store.checkpoint(content)

    assert store.total_full_snapshot_memory() > store.total_delta_memory()
    assert store.savings_percent() > 85


def test_first_checkpoint_reseeds_base() -> None:
    store = CheckpointStore()

    marker = store.checkpoint("seeded", label="start")

    assert store.chain.base_content == "seeded"
    assert marker.index == 0
    assert marker.edit_count == 0
    assert marker.label == "start"


def test_checkpoints_restore_from_chain() -> None:
    store = CheckpointStore("Hello")
    store.checkpoint("Hello")
    store.record_edit(Edit.insert(5, " World"))
    store.checkpoint("Hello World")
    store.record_edit(Edit.replace(6, "World", "There"))
    store.record_edit(Edit.insert(11, "!"))
    store.checkpoint("Hello There!")

    assert [c.edit_count for c in store.checkpoints] == [0, 1, 3]
    assert store.restore_checkpoint(0) == "Hello"
    assert store.restore_checkpoint(1) == "Hello World"
    assert store.restore_checkpoint() == "Hello There!"
    assert store.restore_checkpoint(-2) == "Hello World"


def test_restore_unknown_checkpoint() -> None:
    store = CheckpointStore("abc")
    store.checkpoint("abc")

    with pytest.raises(IndexOutOfRange) as info:
        store.restore_checkpoint(3)
    assert info.value.limit == 1


def test_pop_checkpoint_is_lifo_and_drops_shadow() -> None:
    store = CheckpointStore("a")
    store.checkpoint("a")
    store.record_edit(Edit.insert(1, "b"))
    store.checkpoint("ab")

    popped = store.pop_checkpoint()

    assert popped.index == 1
    assert len(store.checkpoints) == 1
    assert [s.content for s in store.snapshots] == ["a"]
    assert len(store.chain) == 1

    store.pop_checkpoint()
    with pytest.raises(EmptyHistory):
        store.pop_checkpoint()


def test_pop_only_drops_its_own_snapshot() -> None:
    store = CheckpointStore("a")
    store.checkpoint("a")
    store.record_full_snapshot("manual")

    store.pop_checkpoint()

    assert [s.content for s in store.snapshots] == ["manual"]


def test_snapshots_keep_checkpoint_index_among_manual_copies() -> None:
    store = CheckpointStore("a")
    first = store.checkpoint("a")
    store.record_full_snapshot("manual")
    store.record_edit(Edit.insert(1, "b"))
    second = store.checkpoint("ab")

    assert [s.index for s in store.snapshots] == [first.index, 1, second.index]
    assert store.snapshots[-1].index == second.index == 1

    store.pop_checkpoint()
    third = store.checkpoint("ab")

    assert store.snapshots[-1].index == third.index == 1
    assert [s.content for s in store.snapshots] == ["a", "manual", "ab"]


def test_manual_snapshot_accepts_explicit_index() -> None:
    store = CheckpointStore()

    snapshot = store.record_full_snapshot("tagged", index=7)

    assert snapshot.index == 7
    assert store.total_full_snapshot_memory() == 6
