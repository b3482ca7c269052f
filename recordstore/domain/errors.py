"""
Error hierarchy for the record store.

Every failure the store or the seed loader can report is a subclass of
RecordStoreError and carries its context as attributes, so the request layer
can tell "not found" apart from "validation failed" without parsing messages.
Instances are constructed per failure and never reused.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class RecordStoreError(Exception):
    """Base class for all record store failures."""


class FieldValidationError(RecordStoreError):
    """Fields do not conform to the owning schema."""

    def __init__(self, message: str, row: Optional[int] = None) -> None:
        self.row = row
        if row is not None:
            message = f"{message} (seed row {row})"
        super().__init__(message)


class ValidationCountError(FieldValidationError):
    """Fields carry a different number of entries than the schema has columns."""

    def __init__(self, expected: int, actual: int, row: Optional[int] = None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"has wrong count of columns: expected {expected}, got {actual}", row=row
        )


class ValidationNameError(FieldValidationError):
    """A schema column is missing from the submitted fields."""

    def __init__(self, column: str, row: Optional[int] = None) -> None:
        self.column = column
        super().__init__(f"has wrong column: {column}", row=row)


class NotFoundError(RecordStoreError):
    def __init__(self, record_id: int) -> None:
        self.record_id = record_id
        super().__init__(f"record[id:{record_id}] does not exist")


class FormatError(RecordStoreError):
    """A seed document could not be parsed into a model definition."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"json format error: {cause}, file: {path}")


class StorageIOError(RecordStoreError):
    """Reading or writing a seed document failed at the filesystem level."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"i/o error on {path}: {cause}")


class DuplicateModelError(RecordStoreError):
    def __init__(self, name: str, path: Path | str, first_path: Path | str) -> None:
        self.name = name
        self.path = Path(path)
        self.first_path = Path(first_path)
        super().__init__(f"model '{name}' in {path} is already defined in {first_path}")


__all__ = [
    "RecordStoreError",
    "FieldValidationError",
    "ValidationCountError",
    "ValidationNameError",
    "NotFoundError",
    "FormatError",
    "StorageIOError",
    "DuplicateModelError",
]
