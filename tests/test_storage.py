"""
Tests for the in-memory record store
"""

import pytest
from datetime import datetime, timezone
from dataclasses import dataclass

from car_ledger.storage import InMemoryStore, RecordStore, StorageRecord


class TestInMemoryStore:
    """Test the ordering and copy guarantees the car repository relies on"""

    def setup_method(self):
        """Set up test fixtures"""
        self.store = InMemoryStore()

    def test_put_and_get(self):
        self.store.put("car-1", {"id": "car-1", "make": "Toyota"})

        assert self.store.get("car-1") == {"id": "car-1", "make": "Toyota"}
        assert self.store.get("missing") is None
        assert self.store.size() == 1

    def test_values_in_insertion_order(self):
        for record_id in ["z", "a", "m"]:
            self.store.put(record_id, {"id": record_id})

        assert [r["id"] for r in self.store.values()] == ["z", "a", "m"]

    def test_overwrite_keeps_position(self):
        """Replacing a record leaves it where it was first inserted"""
        for record_id in ["z", "a", "m"]:
            self.store.put(record_id, {"id": record_id})

        self.store.put("z", {"id": "z", "color": "Black"})

        assert [r["id"] for r in self.store.values()] == ["z", "a", "m"]
        assert self.store.get("z")["color"] == "Black"
        assert self.store.size() == 3

    def test_stored_record_is_independent_of_caller_dict(self):
        data = {"id": "r1", "tags": ["a"]}
        self.store.put("r1", data)

        data["tags"].append("b")

        assert self.store.get("r1")["tags"] == ["a"]

    def test_reads_are_snapshots(self):
        """Mutating anything handed out leaves the store untouched"""
        self.store.put("r1", {"id": "r1", "tags": ["a"]})

        self.store.get("r1")["tags"].append("c")
        snapshot = self.store.values()
        snapshot[0]["tags"].append("d")
        snapshot.clear()

        assert self.store.get("r1")["tags"] == ["a"]
        assert self.store.size() == 1

    def test_remove(self):
        self.store.put("r1", {"id": "r1"})

        assert self.store.remove("r1")
        assert self.store.get("r1") is None
        assert not self.store.remove("r1")
        assert self.store.size() == 0

    def test_clear(self):
        self.store.put("r1", {"id": "r1"})
        self.store.put("r2", {"id": "r2"})

        self.store.clear()

        assert self.store.size() == 0
        assert self.store.values() == []

    def test_is_record_store(self):
        assert isinstance(self.store, RecordStore)

    def test_abstract_store_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            RecordStore()


@dataclass
class SampleRecord(StorageRecord):
    name: str
    amount: float


class TestStorageRecord:
    """Test StorageRecord serialization"""

    def test_to_dict_converts_datetimes(self):
        now = datetime.now(timezone.utc)
        record = SampleRecord(id="s1", created_at=now, updated_at=now, name="x", amount=1.5)

        data = record.to_dict()

        assert data["created_at"] == now.isoformat()
        assert data["updated_at"] == now.isoformat()
        assert data["amount"] == 1.5

    def test_from_dict_restores_datetimes_without_mutating_input(self):
        now = datetime.now(timezone.utc)
        data = SampleRecord(id="s1", created_at=now, updated_at=now, name="x",
                            amount=1.5).to_dict()

        restored = SampleRecord.from_dict(data)

        assert restored.created_at == now
        assert restored.created_at.tzinfo is not None
        assert isinstance(data["created_at"], str)

    def test_round_trip_through_store(self):
        store = InMemoryStore()
        now = datetime.now(timezone.utc)
        record = SampleRecord(id="s1", created_at=now, updated_at=now, name="x", amount=2.0)

        store.put(record.id, record.to_dict())

        assert SampleRecord.from_dict(store.get("s1")) == record
