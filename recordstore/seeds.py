"""
Seed loading and persistence.

A seed document is a JSON file describing one model:

    {
      "resource_name": "users",
      "seeds": [{"name": "a", "age": "10"}],
      "columns": [{"name": "name", "type": "string"}, {"name": "age", "type": "integer"}]
    }

Loading validates every seed row before anything is inserted, so a bad row
leaves no half-populated store behind. Ids are assigned 1..N in seed order;
an ``id`` already present in a row (from an earlier save) is ignored.
Saving replaces ``seeds`` with the store's current records, sorted by id, and
writes through a temp file that is renamed over the target, so readers only
ever see the old document or the complete new one.
"""

from __future__ import annotations

import contextlib
import json
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from recordstore.domain.errors import FormatError, StorageIOError
from recordstore.domain.models import Schema, SeedDocument
from recordstore.store import RecordStore
from recordstore.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_INDENT = 2


def read_document(path: Path | str) -> SeedDocument:
    """
    Read and parse a seed document.

    Raises
    ------
    StorageIOError
        If the file cannot be read.
    FormatError
        If the content is not JSON or does not describe a model.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StorageIOError(path, exc) from exc
    except UnicodeDecodeError as exc:
        raise FormatError(path, exc) from exc
    try:
        return SeedDocument.model_validate_json(text)
    except PydanticValidationError as exc:
        raise FormatError(path, exc) from exc


def load_store(schema: Schema, rows: Sequence[Mapping[str, Any]]) -> RecordStore:
    """
    Build a RecordStore from seed rows.

    All rows are validated first; the first invalid row aborts the load with
    its index attached to the error. Rows are then inserted in order, giving
    them ids 1..N.
    """
    for index, row in enumerate(rows):
        schema.validate_fields(row, row=index)

    store = RecordStore(schema)
    for row in rows:
        store.insert(row)
    return store


def persist_rows(store: RecordStore) -> List[Dict[str, Any]]:
    """Flatten the store into seed rows (id first, then schema columns), sorted by id."""
    schema = store.schema
    return [record.to_row(schema) for record in store.snapshot()]


def write_document(
    path: Path | str, document: SeedDocument, indent: int = DEFAULT_INDENT
) -> None:
    """
    Atomically write ``document`` to ``path``.

    The JSON is written to a temp file next to the target and renamed over
    it. On any failure the temp file is removed and the target is left as it
    was.
    """
    path = Path(path)
    try:
        text = json.dumps(
            document.model_dump(by_alias=True), indent=indent or None, ensure_ascii=False
        )
    except (TypeError, ValueError) as exc:
        raise FormatError(path, exc) from exc

    tmp_path: Optional[Path] = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp_file:
            tmp_path = Path(tmp_file.name)
            tmp_file.write(text)
            tmp_file.write("\n")
        tmp_path.replace(path)
        tmp_path = None
    except OSError as exc:
        raise StorageIOError(path, exc) from exc
    finally:
        if tmp_path is not None:
            with contextlib.suppress(OSError):
                tmp_path.unlink()


class SeedModel:
    """
    A loaded model: its name, the document it came from and its live store.

    Saves of the same model are serialized through a per-model lock.
    """

    def __init__(self, name: str, path: Path, store: RecordStore) -> None:
        self.name = name
        self.path = path
        self.store = store
        self._save_lock = threading.Lock()

    def to_document(self) -> SeedDocument:
        return SeedDocument(
            name=self.name,
            seeds=persist_rows(self.store),
            columns=list(self.store.schema.columns),
        )

    def __repr__(self) -> str:
        return f"SeedModel(name={self.name!r}, path={str(self.path)!r}, records={len(self.store)})"


def load_model(path: Path | str) -> SeedModel:
    """
    Read a seed document and build its model.

    Raises
    ------
    StorageIOError, FormatError
        If the document cannot be read or parsed.
    ValidationCountError, ValidationNameError
        If a seed row does not match the columns; nothing is loaded.
    """
    path = Path(path)
    document = read_document(path)
    store = load_store(document.to_schema(), document.seeds)
    log.info(
        f"Model '{document.name}' loaded",
        extra={"model": document.name, "records": len(store), "path": str(path)},
    )
    return SeedModel(name=document.name, path=path, store=store)


def save_model(
    model: SeedModel, path: Path | str | None = None, indent: int = DEFAULT_INDENT
) -> Path:
    """
    Persist the model's current records back to its document (or ``path``).

    Returns the path written.
    """
    target = Path(path) if path is not None else model.path
    with model._save_lock:
        document = model.to_document()
        write_document(target, document, indent=indent)
    log.info(
        f"Model '{model.name}' saved",
        extra={"model": model.name, "records": len(document.seeds), "path": str(target)},
    )
    return target


__all__ = [
    "DEFAULT_INDENT",
    "SeedModel",
    "load_model",
    "load_store",
    "persist_rows",
    "read_document",
    "save_model",
    "write_document",
]
