"""Request body validation helpers.

Body models mark mandatory fields with ``required(...)`` so a missing or
empty value yields a readable message, and validation failures are reported
as ``{"errors": [{"msg", "param", "location"}]}`` with status 400.
"""

from typing import Any, Callable

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError, validate_email
from pydantic_core import PydanticCustomError


class FieldMessage(ValueError):
    """Validation failure whose text is shown to the client as is."""


def required(message: str) -> Callable[[Any], Any]:
    """Validator rejecting a missing or empty value with ``message``.

    Use as a ``BeforeValidator`` on a field defaulting to None with
    ``validate_default=True``.
    """

    def check(value: Any) -> Any:
        if value is None:
            raise FieldMessage(message)
        if isinstance(value, (str, list)) and len(value) == 0:
            raise FieldMessage(message)
        return value

    return check


def min_length(length: int, message: str) -> Callable[[Any], Any]:
    """Validator rejecting strings shorter than ``length``."""

    def check(value: Any) -> Any:
        if not isinstance(value, str) or len(value) < length:
            raise FieldMessage(message)
        return value

    return check


def valid_email(message: str) -> Callable[[Any], Any]:
    """Validator accepting only a well-formed email address."""

    def check(value: Any) -> Any:
        if not isinstance(value, str):
            raise FieldMessage(message)
        try:
            _, email = validate_email(value)
        except PydanticCustomError:
            raise FieldMessage(message)
        return email

    return check


def blank_to(default: Any) -> Callable[[Any], Any]:
    """Validator turning None or an empty string into ``default``."""

    def convert(value: Any) -> Any:
        if value is None or value == "":
            return default
        return value

    return convert


def _format_error(error: dict[str, Any]) -> dict[str, str]:
    loc = error.get("loc", ())
    ctx = error.get("ctx") or {}

    if isinstance(ctx.get("error"), FieldMessage):
        message = str(ctx["error"])
    else:
        message = error.get("msg", "")

    return {
        "msg": message,
        "param": ".".join(str(part) for part in loc[1:]),
        "location": str(loc[0]) if loc else "",
    }


def _body_model(request: Request) -> type[BaseModel] | None:
    body_field = getattr(request.scope.get("route"), "body_field", None)
    field_info = getattr(body_field, "field_info", None)
    model = getattr(field_info, "annotation", None)
    if isinstance(model, type) and issubclass(model, BaseModel):
        return model
    return None


def _expand_missing_body(
    request: Request, errors: list[dict[str, Any]]
) -> list[dict[str, Any]]:
    """Validate an absent body as ``{}`` so each field reports its own message."""
    model = _body_model(request)
    expanded = []
    for error in errors:
        body_missing = error.get("type") == "missing" and tuple(
            error.get("loc", ())
        ) == ("body",)
        if not body_missing or model is None:
            expanded.append(error)
            continue
        try:
            model.model_validate({})
        except ValidationError as e:
            expanded.extend(
                {**field_error, "loc": ("body", *field_error["loc"])}
                for field_error in e.errors()
            )
        else:
            expanded.append(error)
    return expanded


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as a 400 error list."""
    errors = _expand_missing_body(request, list(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [_format_error(error) for error in errors]},
    )
