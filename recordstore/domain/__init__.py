"""
Domain package for the record store.

Exports the data model (columns, schemas, records, seed documents) and the
error hierarchy shared by the store, the seed loader and the CLI.
"""

from recordstore.domain.errors import (
    DuplicateModelError,
    FieldValidationError,
    FormatError,
    NotFoundError,
    RecordStoreError,
    StorageIOError,
    ValidationCountError,
    ValidationNameError,
)
from recordstore.domain.models import ID_FIELD, Column, Record, Schema, SeedDocument

__all__ = [
    # Models
    "ID_FIELD",
    "Column",
    "Record",
    "Schema",
    "SeedDocument",
    # Errors
    "DuplicateModelError",
    "FieldValidationError",
    "FormatError",
    "NotFoundError",
    "RecordStoreError",
    "StorageIOError",
    "ValidationCountError",
    "ValidationNameError",
]
