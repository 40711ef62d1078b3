"""
Field-presence validation for request bodies.

Errors are reported as a list of ``{"value", "msg", "param", "location"}``
items, the same shape for missing fields and for bodies pydantic rejects.
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError

from .schemas import RequestBody


class RequestValidationFailed(Exception):
    """One or more required fields were missing from the request body."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__("Request validation failed")
        self.errors = errors


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(payload: RequestBody) -> None:
    """
    Check the payload's required fields.

    Raises:
        RequestValidationFailed: listing every missing field, in declaration order.
    """
    errors = []
    for name, message in payload.required_fields.items():
        value = getattr(payload, name)
        if _is_missing(value):
            field = type(payload).model_fields[name]
            errors.append(
                {
                    "value": value,
                    "msg": message,
                    "param": field.alias or name,
                    "location": "body",
                }
            )
    if errors:
        raise RequestValidationFailed(errors)


def format_request_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Convert FastAPI/pydantic errors into the field error list."""
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        location = loc[0] if loc else "body"
        errors.append(
            {
                "value": err.get("input"),
                "msg": err.get("msg", "Invalid value"),
                "param": ".".join(loc[1:]),
                "location": location,
            }
        )
    return jsonable_encoder(errors)
