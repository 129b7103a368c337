"""
Record Store Module

The in-memory store behind the car repository: one ordered collection of
serialized records keyed by id. The store hands out copies only, so nothing
returned from it can change what it holds.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Any
from datetime import datetime
import copy
import threading
from dataclasses import dataclass, asdict


@dataclass
class StorageRecord:
    """Base for records kept in a store: an id plus UTC audit timestamps"""
    id: str
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['created_at'] = self.created_at.isoformat()
        data['updated_at'] = self.updated_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StorageRecord':
        fields = dict(data)
        for stamp in ('created_at', 'updated_at'):
            if isinstance(fields.get(stamp), str):
                fields[stamp] = datetime.fromisoformat(fields[stamp])
        return cls(**fields)


class RecordStore(ABC):
    """Keyed, insertion-ordered collection of serialized records"""

    @abstractmethod
    def put(self, record_id: str, data: Dict[str, Any]) -> None:
        """Insert a record, or replace it in place if the id is already held"""

    @abstractmethod
    def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        """Copy of the record, or None"""

    @abstractmethod
    def values(self) -> List[Dict[str, Any]]:
        """Copies of every record in insertion order"""

    @abstractmethod
    def remove(self, record_id: str) -> bool:
        """Drop a record; False if it was not held"""

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class InMemoryStore(RecordStore):
    """Dict-backed store; Python dicts keep first-insertion order on overwrite"""

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.RLock()

    def put(self, record_id: str, data: Dict[str, Any]) -> None:
        with self._lock:
            self._records[record_id] = copy.deepcopy(data)

    def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._records.get(record_id)
            return copy.deepcopy(record) if record is not None else None

    def values(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [copy.deepcopy(record) for record in self._records.values()]

    def remove(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def size(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
