"""
Record collection interfaces.

A RecordStore keeps its records in a collection keyed by record id. The
collection must be safe to call from several threads at once; which
concurrent structure backs it is an implementation detail. Concrete
collections implement the RecordCollection protocol, optionally through the
AbstractRecordCollection helper.
"""

from __future__ import annotations

import abc
from typing import List, Optional, Protocol, runtime_checkable

from recordstore.domain.models import Record


@runtime_checkable
class RecordCollection(Protocol):
    """
    Thread-safe keyed set of records.

    ``add`` inserts or replaces the record stored under ``record.id``.
    """

    def add(self, record: Record) -> None:
        ...

    def remove(self, record_id: int) -> bool:
        """Remove the record if present; return whether anything was removed."""
        ...

    def get(self, record_id: int) -> Optional[Record]:
        ...

    def has(self, record_id: int) -> bool:
        ...

    def to_list(self) -> List[Record]:
        """Return a point-in-time list of the stored records, in no particular order."""
        ...

    def __len__(self) -> int:
        ...


class AbstractRecordCollection(abc.ABC):
    """
    Optional ABC helper for class-based collections.
    """

    @abc.abstractmethod
    def add(self, record: Record) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def remove(self, record_id: int) -> bool:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, record_id: int) -> Optional[Record]:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def to_list(self) -> List[Record]:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def __len__(self) -> int:  # pragma: no cover - interface only
        raise NotImplementedError

    def has(self, record_id: int) -> bool:
        return self.get(record_id) is not None


__all__ = ["RecordCollection", "AbstractRecordCollection"]
