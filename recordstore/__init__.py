"""
Record Store - schema-validated in-memory storage behind a mock REST API.

Each model is defined by a JSON seed document (name, columns, seed rows).
This package provides:

- Column/Schema/Record data models with presence-and-count validation
- A thread-safe RecordStore with monotonic, never-reused identifiers
- Partial (merge) and full (replace) update semantics
- Seed loading with fail-fast validation and atomic persistence back to disk
- A CLI for inspecting and normalizing seed directories
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from recordstore.config import Settings, get_settings
from recordstore.domain import (
    Column,
    DuplicateModelError,
    FieldValidationError,
    FormatError,
    NotFoundError,
    Record,
    RecordStoreError,
    Schema,
    SeedDocument,
    StorageIOError,
    ValidationCountError,
    ValidationNameError,
)
from recordstore.registry import LoadReport, load_models, save_all
from recordstore.seeds import (
    SeedModel,
    load_model,
    load_store,
    persist_rows,
    read_document,
    save_model,
    write_document,
)
from recordstore.store import RecordStore
from recordstore.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Data model
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
    # Store
    "RecordStore",
    # Seeds
    "SeedModel",
    "load_model",
    "load_store",
    "persist_rows",
    "read_document",
    "save_model",
    "write_document",
    # Registry
    "LoadReport",
    "load_models",
    "save_all",
    # Logging
    "configure_logging",
    "get_logger",
]
