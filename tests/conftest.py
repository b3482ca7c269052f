"""
Pytest configuration for the record store.

Provides fixtures for:
- A two-column schema and stores built on it
- Seed documents and seed directories written to tmp_path
- Settings cache isolation
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List, Optional

import pytest

from recordstore.config import get_settings
from recordstore.domain.models import Column, Schema
from recordstore.store import RecordStore

PEOPLE_ROWS: List[Dict[str, Any]] = [
    {"name": "ada", "age": "36"},
    {"name": "grace", "age": "85"},
    {"name": "linus", "age": "54"},
]


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Ensure each test sees settings built from its own environment.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def people_schema() -> Schema:
    return Schema(columns=(Column(name="name", type="string"), Column(name="age", type="integer")))


@pytest.fixture
def people_store(people_schema: Schema) -> RecordStore:
    """
    Store seeded with PEOPLE_ROWS, ids 1..3.
    """
    store = RecordStore(people_schema)
    for row in PEOPLE_ROWS:
        store.insert(row)
    return store


def _document(
    name: str,
    seeds: List[Dict[str, Any]],
    columns: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    return {
        "resource_name": name,
        "seeds": seeds,
        "columns": columns
        if columns is not None
        else [{"name": "name", "type": "string"}, {"name": "age", "type": "integer"}],
    }


@pytest.fixture
def write_seed(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory writing a seed document into tmp_path and returning its path.

    Pass ``raw`` to write arbitrary text instead of a well-formed document.
    """

    def _write(
        filename: str,
        name: str = "people",
        seeds: Optional[List[Dict[str, Any]]] = None,
        columns: Optional[List[Dict[str, str]]] = None,
        raw: Optional[str] = None,
    ) -> Path:
        path = tmp_path / filename
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            rows = seeds if seeds is not None else [dict(row) for row in PEOPLE_ROWS]
            path.write_text(json.dumps(_document(name, rows, columns)), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def seed_dir(tmp_path: Path, write_seed: Callable[..., Path]) -> Path:
    """
    Directory with two valid models: ``people`` and ``posts``.
    """
    write_seed("people.json")
    write_seed(
        "posts.json",
        name="posts",
        seeds=[{"title": "hello", "body": "first"}, {"title": "again", "body": "second"}],
        columns=[{"name": "title", "type": "string"}, {"name": "body", "type": "text"}],
    )
    return tmp_path
