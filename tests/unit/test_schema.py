from __future__ import annotations

import pydantic
import pytest

from recordstore.domain.errors import ValidationCountError, ValidationNameError
from recordstore.domain.models import Column, Record, Schema

EXPECTED_COLUMNS = 2


def test_validate_accepts_exact_field_set(people_schema: Schema):
    people_schema.validate_fields({"name": "a", "age": "1"})


def test_validate_ignores_field_order(people_schema: Schema):
    people_schema.validate_fields({"age": "1", "name": "a"})


def test_validate_missing_field_is_count_error(people_schema: Schema):
    with pytest.raises(ValidationCountError) as exc_info:
        people_schema.validate_fields({"name": "a"})
    assert exc_info.value.expected == EXPECTED_COLUMNS
    assert exc_info.value.actual == 1


def test_validate_wrong_name_is_name_error(people_schema: Schema):
    with pytest.raises(ValidationNameError) as exc_info:
        people_schema.validate_fields({"name": "a", "email": "x"})
    assert exc_info.value.column == "age"
    assert "age" in str(exc_info.value)


def test_validate_reports_first_missing_column_in_schema_order(people_schema: Schema):
    with pytest.raises(ValidationNameError) as exc_info:
        people_schema.validate_fields({"email": "x", "phone": "y"})
    assert exc_info.value.column == "name"


def test_validate_strips_id_before_counting(people_schema: Schema):
    people_schema.validate_fields({"id": 9, "name": "a", "age": "1"})
    with pytest.raises(ValidationCountError):
        people_schema.validate_fields({"id": 9, "name": "a"})


def test_validate_does_not_mutate_input(people_schema: Schema):
    fields = {"id": 4, "name": "a", "age": "1"}
    people_schema.validate_fields(fields)
    assert fields == {"id": 4, "name": "a", "age": "1"}


def test_validate_does_not_check_value_types(people_schema: Schema):
    people_schema.validate_fields({"name": 12, "age": "not a number"})


def test_validation_errors_are_fresh_per_call(people_schema: Schema):
    errors = []
    for fields in ({"name": "a", "x": 1}, {"y": 1, "age": 2}):
        with pytest.raises(ValidationNameError) as exc_info:
            people_schema.validate_fields(fields)
        errors.append(exc_info.value)
    assert errors[0] is not errors[1]
    assert errors[0].column == "age"
    assert errors[1].column == "name"


def test_validate_attaches_row_context(people_schema: Schema):
    with pytest.raises(ValidationCountError) as exc_info:
        people_schema.validate_fields({}, row=3)
    assert exc_info.value.row == 3
    assert "seed row 3" in str(exc_info.value)


def test_schema_rejects_duplicate_column_names():
    with pytest.raises(pydantic.ValidationError, match="duplicate column name"):
        Schema(columns=(Column(name="a"), Column(name="a", type="integer")))


def test_schema_rejects_id_column():
    with pytest.raises(pydantic.ValidationError, match="reserved"):
        Schema(columns=(Column(name="id", type="integer"), Column(name="name")))


def test_schema_is_immutable(people_schema: Schema):
    with pytest.raises(pydantic.ValidationError):
        people_schema.columns = ()  # type: ignore[misc]
    assert people_schema.column_names == ["name", "age"]


def test_record_drops_id_from_fields():
    record = Record(id=1, fields={"id": 5, "name": "a"})
    assert record.fields == {"name": "a"}


def test_record_to_row_follows_schema_order(people_schema: Schema):
    record = Record(id=2, fields={"age": "1", "name": "a"})
    assert list(record.to_row(people_schema)) == ["id", "name", "age"]
    assert record.to_row() == {"id": 2, "age": "1", "name": "a"}
