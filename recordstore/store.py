"""
Schema-validated, thread-safe in-memory record store.

One RecordStore serves one model. Request handlers on any number of threads
share a single instance; the store serializes its own mutations.

Usage:
    from recordstore.store import RecordStore

    store = RecordStore(schema)
    record = store.insert({"name": "a", "age": "1"})
    store.apply_partial(record.id, {"age": "2"})
    rows = [r.to_row(store.schema) for r in store.snapshot()]

Validation failures raise ValidationCountError / ValidationNameError and
unknown ids raise NotFoundError, so callers can map them to distinct
responses. Values are never type-checked against the declared column types.
"""

from __future__ import annotations

import copy
import threading
from typing import Any, Dict, List, Mapping, Optional

from recordstore.domain.errors import NotFoundError
from recordstore.domain.models import ID_FIELD, Record, Schema
from recordstore.storage.abstract import RecordCollection
from recordstore.storage.locked_dict import LockedDictCollection
from recordstore.utils.logging import get_logger

log = get_logger(__name__)


def _without_id(fields: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: copy.deepcopy(value) for key, value in fields.items() if key != ID_FIELD}


class RecordStore:
    """
    Validated CRUD over a concurrent record collection.

    Identifiers come from a per-store counter that starts at zero and is
    incremented once per successful insert; deleted ids are never reused.
    The counter bump and the add happen under one lock, as does every
    existence check that guards a write.
    """

    def __init__(self, schema: Schema, collection: Optional[RecordCollection] = None) -> None:
        self._schema = schema
        self._records: RecordCollection = (
            collection if collection is not None else LockedDictCollection()
        )
        self._lock = threading.Lock()
        self._current_id = 0

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def next_id(self) -> int:
        """Identifier the next successful insert will receive."""
        with self._lock:
            return self._current_id + 1

    def __len__(self) -> int:
        return len(self._records)

    def count(self) -> int:
        return len(self._records)

    def exists(self, record_id: int) -> bool:
        return self._records.has(record_id)

    def get(self, record_id: int) -> Optional[Record]:
        """Return a copy of the record, or None when it is absent."""
        record = self._records.get(record_id)
        return record.model_copy(deep=True) if record is not None else None

    def insert(self, fields: Mapping[str, Any]) -> Record:
        """
        Validate ``fields`` and store them under the next identifier.

        Any ``id`` key in ``fields`` is ignored.
        """
        self._schema.validate_fields(fields)
        values = _without_id(fields)
        with self._lock:
            self._current_id += 1
            record = Record(id=self._current_id, fields=values)
            self._records.add(record)
        log.debug("Record inserted", extra={"record_id": record.id})
        return record.model_copy(deep=True)

    def update(self, record_id: int, fields: Mapping[str, Any]) -> Record:
        """
        Replace the fields of an existing record wholesale.

        The identifier is always ``record_id``; an ``id`` key in ``fields`` is
        ignored. Validation runs before the existence check.

        Raises
        ------
        ValidationCountError, ValidationNameError
            When ``fields`` does not match the schema.
        NotFoundError
            When no record has ``record_id``.
        """
        self._schema.validate_fields(fields)
        with self._lock:
            return self._replace_locked(record_id, _without_id(fields))

    def replace(self, record_id: int, fields: Mapping[str, Any]) -> Record:
        """
        Full-replace update: every previous value except the id is discarded.

        Unlike ``update``, a missing record is reported before the new fields
        are validated.
        """
        if not self.exists(record_id):
            raise NotFoundError(record_id)
        return self.update(record_id, fields)

    def apply_partial(
        self,
        record_id: int,
        changes: Mapping[str, Any],
        ignore_empty: bool = False,
    ) -> Record:
        """
        Merge ``changes`` into an existing record and store the result.

        Keys present in ``changes`` overwrite the stored values; other fields
        are kept. The merged set is validated like any update, so unknown keys
        fail with a count error. ``ignore_empty`` treats empty-string values
        as not provided.

        Raises
        ------
        NotFoundError
            When no record has ``record_id``.
        ValidationCountError, ValidationNameError
            When the merged fields do not match the schema.
        """
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                raise NotFoundError(record_id)
            merged = dict(current.fields)
            for key, value in changes.items():
                if key == ID_FIELD:
                    continue
                if ignore_empty and value == "":
                    continue
                merged[key] = copy.deepcopy(value)
            self._schema.validate_fields(merged)
            return self._replace_locked(record_id, merged)

    def delete(self, record_id: int) -> None:
        """Remove the record if present. Deleting an absent id is a no-op."""
        with self._lock:
            removed = self._records.remove(record_id)
        if removed:
            log.debug("Record deleted", extra={"record_id": record_id})

    def snapshot(self) -> List[Record]:
        """Copies of all records, sorted by identifier ascending."""
        records = sorted(self._records.to_list(), key=lambda record: record.id)
        return [record.model_copy(deep=True) for record in records]

    def _replace_locked(self, record_id: int, values: Dict[str, Any]) -> Record:
        if not self._records.has(record_id):
            raise NotFoundError(record_id)
        record = Record(id=record_id, fields=values)
        self._records.add(record)
        log.debug("Record updated", extra={"record_id": record_id})
        return record.model_copy(deep=True)


__all__ = ["RecordStore"]
