"""
Mutex-guarded dict collection: the default backing store for RecordStore.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from recordstore.domain.models import Record
from recordstore.storage.abstract import AbstractRecordCollection


class LockedDictCollection(AbstractRecordCollection):
    """
    Records keyed by id in a plain dict, every access under one lock.

    Records are frozen pydantic models, so handing the stored instance out of
    ``get``/``to_list`` cannot change what is stored; callers that need to
    mutate field values copy first.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: Dict[int, Record] = {}

    def add(self, record: Record) -> None:
        with self._lock:
            self._records[record.id] = record

    def remove(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def get(self, record_id: int) -> Optional[Record]:
        with self._lock:
            return self._records.get(record_id)

    def has(self, record_id: int) -> bool:
        with self._lock:
            return record_id in self._records

    def to_list(self) -> List[Record]:
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


__all__ = ["LockedDictCollection"]
