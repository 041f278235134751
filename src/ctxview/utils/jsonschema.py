"""JSON Schema validation helpers."""

from __future__ import annotations

from typing import Any

from jsonschema import ValidationError, validate


def validate_jsonschema(schema: dict[str, Any], data: dict[str, Any]) -> None:
    validate(instance=data, schema=schema)


def describe_validation_error(exc: ValidationError) -> str:
    location = ".".join(str(part) for part in exc.absolute_path)
    if location:
        return f"invalid params at {location}: {exc.message}"
    return f"invalid params: {exc.message}"
