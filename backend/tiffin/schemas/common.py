"""Schema Plumbing — base models, identifier parsing and pydantic error conversion.

Invariants:
    - parse_payload() and parse_identifier() raise only InputValidationError subclasses
    - One FieldIssue per pydantic error, named by the public (camelCase) field
    - Errors without a location (e.g. body is not an object) are reported on "body"
    - Partial-update schemas reject explicit nulls on provided fields
"""

from datetime import date
from typing import Annotated, Any, TypeVar
from uuid import UUID

from pydantic import (
    BaseModel, ConfigDict, Field, TypeAdapter, ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from tiffin.core.errors import FieldIssue, InputValidationError, InvalidIdentifierError

MAX_PAGE_SIZE = 100

PageNumber = Annotated[int, Field(ge=1)]
PageSize = Annotated[int, Field(ge=1, le=MAX_PAGE_SIZE)]

_UUID_ADAPTER = TypeAdapter(UUID)

M = TypeVar("M", bound=BaseModel)


class RequestSchema(BaseModel):
    """Base for every inbound schema."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
    )


class PartialUpdateSchema(RequestSchema):
    """All fields optional; a field that is sent must not be null."""

    @field_validator("*")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    def changes(self) -> dict[str, Any]:
        """Only the fields the client actually sent, by attribute name."""
        return self.model_dump(exclude_unset=True)


class ReadSchema(BaseModel):
    """Base for outbound representations built from core records."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DateRangeQuery(RequestSchema):
    """fromDate/toDate pair; either may be omitted, but never inverted."""
    from_date: date | None = None
    to_date: date | None = None

    @field_validator("to_date")
    @classmethod
    def check_range_order(cls, v: date | None, info) -> date | None:
        start = info.data.get("from_date")
        if v is not None and start is not None and v < start:
            raise ValueError("toDate must not be earlier than fromDate")
        return v


def issues_from(exc: ValidationError) -> list[FieldIssue]:
    """Convert pydantic errors to public field issues."""
    issues = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "body"
        ctx_error = (err.get("ctx") or {}).get("error")
        message = str(ctx_error) if err["type"] == "value_error" and ctx_error else err["msg"]
        issues.append(FieldIssue(field, message))
    return issues


def parse_payload(schema: type[M], data: Any, message: str) -> M:
    """Validate data against schema or raise InputValidationError(message)."""
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise InputValidationError(message, issues_from(exc)) from exc


def parse_identifier(raw: Any, field_name: str = "id") -> UUID:
    """Confirm raw is a well-formed store key before any lookup."""
    if not isinstance(raw, (str, UUID)):
        raise InvalidIdentifierError(field_name)
    try:
        return _UUID_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise InvalidIdentifierError(field_name) from exc


def dump(schema: type[ReadSchema], record: Any) -> dict:
    """JSON-ready camelCase representation of a record."""
    return schema.model_validate(record).model_dump(by_alias=True, mode="json")
