"""
Input validation for the school endpoints.

Each operation has one explicit validator that runs its Pydantic request
model and turns any ``ValidationError`` into a list of ``FieldError``.
Fields are reported in declaration order, one error per field; a missing
or blank value reads as "required", anything else as out of range.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from src.api.schemas import AddSchoolRequest, LocationQueryRequest

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    path: str
    msg: str
    location: str
    value: Any = None
    type: str = "field"

    def to_dict(self) -> dict:
        return asdict(self)


# field -> (required message, invalid message)
NEW_SCHOOL_MESSAGES = {
    "name": ("Name is required", "Name is required"),
    "address": ("Address is required", "Address is required"),
    "latitude": ("Latitude is required", "Latitude must be between -90 and 90"),
    "longitude": ("Longitude is required", "Longitude must be between -180 and 180"),
}

LOCATION_QUERY_MESSAGES = {
    "lat": ("lat is required", "lat must be between -90 and 90"),
    "lng": ("lng is required", "lng must be between -180 and 180"),
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _validate(
    model: Type[ModelT],
    data: Mapping[str, Any],
    messages: dict[str, tuple[str, str]],
    location: str,
) -> tuple[Optional[ModelT], list[FieldError]]:
    try:
        return model.model_validate(data), []
    except ValidationError as exc:
        failed = {err["loc"][0] for err in exc.errors() if err["loc"]}

    errors = []
    for field, (required, invalid) in messages.items():
        if field not in failed:
            continue
        raw = data.get(field)
        msg = required if _is_blank(raw) else invalid
        errors.append(FieldError(field, msg, location, raw))
    return None, errors


def validate_new_school(
    payload: Any,
) -> tuple[Optional[AddSchoolRequest], list[FieldError]]:
    """Validate an ``addSchool`` body.  A non-object body counts as empty."""
    data = payload if isinstance(payload, Mapping) else {}
    return _validate(AddSchoolRequest, data, NEW_SCHOOL_MESSAGES, "body")


def validate_location_query(
    params: Mapping[str, Any],
) -> tuple[Optional[LocationQueryRequest], list[FieldError]]:
    """Validate the ``lat`` / ``lng`` query parameters of ``listSchools``."""
    return _validate(
        LocationQueryRequest, dict(params), LOCATION_QUERY_MESSAGES, "query"
    )
