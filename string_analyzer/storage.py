"""
In-memory storage for analyzed strings.

Two dicts back the store so both lookups are O(1):
- by_id: SHA-256 hash -> entry
- by_value: original string -> entry

Both are always updated together under one lock.
"""
import threading
from typing import Dict, List, Optional

from string_analyzer.exceptions import Conflict
from string_analyzer.models import StringEntry


class InMemoryStore:
    def __init__(self):
        self.by_id: Dict[str, StringEntry] = {}
        self.by_value: Dict[str, StringEntry] = {}
        self._lock = threading.RLock()

    def exists(self, value: str) -> bool:
        with self._lock:
            return value in self.by_value

    def insert(self, entry: StringEntry) -> StringEntry:
        """Store a new entry; never overwrites an existing one"""
        with self._lock:
            if entry.value in self.by_value or entry.id in self.by_id:
                raise Conflict()
            self.by_id[entry.id] = entry
            self.by_value[entry.value] = entry
            return entry

    def find_by_value(self, value: str) -> Optional[StringEntry]:
        with self._lock:
            return self.by_value.get(value)

    def find_by_id(self, entry_id: str) -> Optional[StringEntry]:
        with self._lock:
            return self.by_id.get(entry_id)

    def list_all(self) -> List[StringEntry]:
        """All entries in insertion order"""
        with self._lock:
            return list(self.by_value.values())

    def remove(self, value: str) -> bool:
        with self._lock:
            entry = self.by_value.pop(value, None)
            if entry is None:
                return False
            del self.by_id[entry.id]
            return True

    def count(self) -> int:
        with self._lock:
            return len(self.by_value)

    def __len__(self) -> int:
        return self.count()
