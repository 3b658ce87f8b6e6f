"""Form Validation: runs a schema over raw form fields and returns a result value.

Invariants:
    - validate_form() never raises for bad input; failures come back as Invalid
    - Error keys are the form field names (aliases), one message per field
    - Several messages for one field are joined with ", " in first-seen order

Design Decisions:
    - Result values over exceptions: validation failure is data, not control flow
      (the pipeline stops on Invalid before touching the store)
    - SanitizedStr as Annotated BeforeValidator: sanitizing happens inside the
      schema so every free-text field gets it declaratively
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any, Generic, TypeVar

import pydantic
from pydantic import BaseModel, BeforeValidator

from app.core.sanitize_input import sanitize_input

M = TypeVar("M", bound=BaseModel)

SanitizedStr = Annotated[str, BeforeValidator(sanitize_input)]


@dataclass(frozen=True)
class Validated(Generic[M]):
    """Raw input passed the schema."""
    data: M


@dataclass(frozen=True)
class Invalid:
    """Raw input failed the schema; errors keyed by form field name."""
    errors: dict[str, str]


def validate_form(schema: type[M], raw: Mapping[str, Any]) -> Validated[M] | Invalid:
    """Validate raw form fields against schema without raising."""
    try:
        return Validated(schema.model_validate(dict(raw)))
    except pydantic.ValidationError as exc:
        return Invalid(collect_field_errors(exc))


def collect_field_errors(exc: pydantic.ValidationError) -> dict[str, str]:
    """Flatten pydantic errors into {field: message}."""
    grouped: dict[str, list[str]] = {}
    for err in exc.errors():
        key = str(err["loc"][0]) if err["loc"] else "general"
        messages = grouped.setdefault(key, [])
        if err["msg"] not in messages:
            messages.append(err["msg"])
    return {key: ", ".join(messages) for key, messages in grouped.items()}


def coerce_named_entries(value: Any) -> Any:
    """Normalize a form collection into a list of {"name": ...} records.

    Accepts a list, a JSON-encoded list/object, or a bare name string.
    Anything else is passed through for the schema to reject.
    """
    if value is None:
        return []
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        try:
            decoded = json.loads(text)
        except ValueError:
            return [{"name": text}]
        if isinstance(decoded, dict):
            return [decoded]
        if not isinstance(decoded, list):
            return [{"name": text}]
        value = decoded
    if isinstance(value, (list, tuple)):
        return [{"name": item} if isinstance(item, str) else item for item in value]
    return value
