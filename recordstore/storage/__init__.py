"""
Storage package for the record store.

Holds the thread-safe record collections a RecordStore keeps its records in.
Keep this layer free of schema and id-assignment logic.
"""

from recordstore.storage.abstract import AbstractRecordCollection, RecordCollection
from recordstore.storage.locked_dict import LockedDictCollection

__all__ = [
    "AbstractRecordCollection",
    "RecordCollection",
    "LockedDictCollection",
]
