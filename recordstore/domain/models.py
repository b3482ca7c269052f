"""
Domain models for the record store.

A model document on disk describes one resource: its name, an ordered list of
columns and the seed rows used to populate it. Column types are descriptive
metadata only; validation checks presence and count of fields, never value
types.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from recordstore.domain.errors import ValidationCountError, ValidationNameError

ID_FIELD = "id"


def _check_unique_names(columns: Iterable["Column"]) -> None:
    seen: set[str] = set()
    for column in columns:
        if column.name == ID_FIELD:
            raise ValueError(f"column name '{ID_FIELD}' is reserved for the record identifier")
        if column.name in seen:
            raise ValueError(f"duplicate column name '{column.name}'")
        seen.add(column.name)


class Column(BaseModel):
    """
    A named field declaration. ``type`` is not enforced.
    """

    name: str = Field(..., min_length=1, description="Field name in every record.")
    type: str = Field("string", description="Declared type, informational only.")

    model_config = {"frozen": True}


class Schema(BaseModel):
    """
    Ordered, name-unique set of columns every record of a store must carry.
    """

    columns: Tuple[Column, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @field_validator("columns")
    @classmethod
    def _unique_columns(cls, columns: Tuple[Column, ...]) -> Tuple[Column, ...]:
        _check_unique_names(columns)
        return columns

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

    def validate_fields(self, fields: Mapping[str, Any], row: Optional[int] = None) -> None:
        """
        Check that ``fields`` (ignoring any ``id`` key) names exactly this
        schema's columns.

        Parameters
        ----------
        fields : Mapping[str, Any]
            Candidate field mapping. It is not modified.
        row : int | None
            Seed row index, attached to the error when validating seed data.

        Raises
        ------
        ValidationCountError
            When the number of entries differs from the number of columns.
        ValidationNameError
            When a column is absent; the first missing column in schema order
            is reported.
        """
        names = [key for key in fields if key != ID_FIELD]
        if len(names) != len(self.columns):
            raise ValidationCountError(expected=len(self.columns), actual=len(names), row=row)

        present = set(names)
        for column in self.columns:
            if column.name not in present:
                raise ValidationNameError(column.name, row=row)


class Record(BaseModel):
    """
    A stored entity: a store-assigned identifier plus its column values.
    """

    id: int = Field(..., ge=1, description="Store-assigned identifier.")
    fields: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("fields")
    @classmethod
    def _drop_id(cls, fields: Dict[str, Any]) -> Dict[str, Any]:
        return {key: value for key, value in fields.items() if key != ID_FIELD}

    def to_row(self, schema: Optional[Schema] = None) -> Dict[str, Any]:
        """
        Flatten into a seed row with ``id`` first. With a schema, columns
        follow schema order; otherwise insertion order is kept.
        """
        row: Dict[str, Any] = {ID_FIELD: self.id}
        if schema is None:
            row.update(self.fields)
            return row
        for name in schema.column_names:
            row[name] = self.fields[name]
        return row


class SeedDocument(BaseModel):
    """
    On-disk representation of one model: name, seed rows and columns.
    """

    name: str = Field(..., alias="resource_name", min_length=1)
    seeds: List[Dict[str, Any]] = Field(default_factory=list)
    columns: List[Column] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @field_validator("columns")
    @classmethod
    def _unique_columns(cls, columns: List[Column]) -> List[Column]:
        _check_unique_names(columns)
        return columns

    def to_schema(self) -> Schema:
        return Schema(columns=tuple(self.columns))


__all__ = ["ID_FIELD", "Column", "Schema", "Record", "SeedDocument"]
