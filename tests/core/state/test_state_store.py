import json

import pytest

from sophon.core.errors import StatePersistenceError
from sophon.core.state import MonitorState, SharedState, StateStore


def test_load_missing_file_starts_fresh(tmp_path):
    store = StateStore(tmp_path / "state.json")

    state = store.load()

    assert state == MonitorState()
    assert state.pending_alerts == []


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"most_value_moved": -5}),
        json.dumps({"pending_alerts": "not a list"}),
        json.dumps([1, 2, 3]),
    ],
)
def test_load_corrupt_file_starts_fresh(tmp_path, content):
    path = tmp_path / "state.json"
    path.write_text(content, encoding="utf-8")

    assert StateStore(path).load() == MonitorState()


def test_load_ignores_unknown_fields(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"significant_radius": 13000, "legacy_field": 1}), encoding="utf-8")

    state = StateStore(path).load()

    assert state.significant_radius == 13000


def test_save_then_load(tmp_path):
    store = StateStore(tmp_path / "nested" / "state.json")
    state = MonitorState(
        significant_transfer_id=400000,
        most_value_moved=1500,
        pending_alerts=["first", "second"],
    )

    store.save(state)

    assert store.load() == state
    assert not (tmp_path / "nested" / "state.json.tmp").exists()


def test_save_failure_raises_persistence_error(tmp_path):
    # a directory where the file should be makes the rename fail
    path = tmp_path / "state.json"
    path.mkdir()

    with pytest.raises(StatePersistenceError):
        StateStore(path).save(MonitorState())


def test_negative_assignment_rejected():
    state = MonitorState()

    with pytest.raises(ValueError):
        state.most_pending_transfers = -1


# ---------- SharedState dirty flag ----------

def test_flush_only_when_dirty(tmp_path):
    path = tmp_path / "state.json"
    shared = SharedState(MonitorState(), StateStore(path))

    assert shared.flush() is False
    assert not path.exists()

    shared.state.significant_radius = 2000
    shared.mark_dirty()

    assert shared.flush() is True
    assert shared.dirty is False
    assert json.loads(path.read_text(encoding="utf-8"))["significant_radius"] == 2000


class FailingStore(StateStore):
    def __init__(self):
        super().__init__("unused.json")
        self.attempts = 0

    def save(self, state):
        self.attempts += 1
        raise StatePersistenceError("disk full")


def test_failed_flush_keeps_state_and_stays_dirty():
    store = FailingStore()
    shared = SharedState(MonitorState(), store)
    shared.state.pending_alerts.append("queued")
    shared.mark_dirty()

    assert shared.flush() is False
    assert shared.dirty is True
    assert shared.state.pending_alerts == ["queued"]

    shared.flush()
    assert store.attempts == 2


def test_from_store_loads_state(tmp_path):
    store = StateStore(tmp_path / "state.json")
    store.save(MonitorState(achievement_rank=3, pending_alerts=["a"]))

    shared = SharedState.from_store(store)

    assert shared.state.achievement_rank == 3
    assert shared.queue.peek() == "a"
    assert shared.dirty is False
