"""
Request validation for the users endpoints.

Each ``validate_*`` / ``parse_*`` function returns a ``ValidationResult``
instead of raising, so the controller can reject bad input with a 400
before any service method is called.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from users_api.errors import ValidationError

T = TypeVar("T")

MAX_NAME_LENGTH = 255
MAX_EMAIL_LENGTH = 255
# Largest value a 32-bit INTEGER column can hold
MAX_INTEGER = 2_147_483_647
MAX_AGE = MAX_INTEGER
MAX_USER_ID = MAX_INTEGER

_USER_ID_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    ok: bool
    value: Optional[T] = None
    errors: List[Any] = field(default_factory=list)

    @classmethod
    def valid(cls, value: T) -> "ValidationResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def invalid(cls, error: ValidationError) -> "ValidationResult[T]":
        return cls(ok=False, errors=error.errors)


def _check_email(value: Optional[str]) -> Optional[str]:
    # Syntax check only; the address is stored exactly as sent
    if value is None:
        return value
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"invalid email address: {exc}") from exc
    return value


def _integral_float_to_int(value: Any) -> Any:
    # JSON has one number type, so 45.0 is the integer 45
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class UserCreateRequest(BaseModel):
    name: StrictStr = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    email: StrictStr = Field(max_length=MAX_EMAIL_LENGTH)
    age: StrictInt = Field(gt=0, le=MAX_AGE)

    @field_validator("email")
    @classmethod
    def validate_email_syntax(cls, v):
        return _check_email(v)

    @field_validator("age", mode="before")
    @classmethod
    def accept_integral_float(cls, v):
        return _integral_float_to_int(v)


class UserUpdateRequest(BaseModel):
    name: Optional[StrictStr] = Field(default=None, min_length=1, max_length=MAX_NAME_LENGTH)
    email: Optional[StrictStr] = Field(default=None, max_length=MAX_EMAIL_LENGTH)
    age: Optional[StrictInt] = Field(default=None, gt=0, le=MAX_AGE)

    @field_validator("name", "email", "age")
    @classmethod
    def reject_explicit_null(cls, v):
        # Defaults are not validated, so this only fires on a literal null
        if v is None:
            raise ValueError("field may be omitted but not null")
        return v

    @field_validator("email")
    @classmethod
    def validate_email_syntax(cls, v):
        return _check_email(v)

    @field_validator("age", mode="before")
    @classmethod
    def accept_integral_float(cls, v):
        return _integral_float_to_int(v)


def parse_user_id(raw: Any) -> ValidationResult[int]:
    """Parse a path id; only plain decimal digits in 1..MAX_USER_ID pass"""
    if isinstance(raw, str) and _USER_ID_PATTERN.fullmatch(raw):
        user_id = int(raw)
        if 1 <= user_id <= MAX_USER_ID:
            return ValidationResult.valid(user_id)
    return ValidationResult.invalid(
        ValidationError(
            "Invalid user ID format",
            [{"loc": ["id"], "msg": f"must be an integer between 1 and {MAX_USER_ID}", "input": raw}],
        )
    )


def _validate_body(model: type, body: Any, message: str) -> ValidationResult:
    if not isinstance(body, dict):
        return ValidationResult.invalid(ValidationError(message, [{"loc": ["body"], "msg": "must be a JSON object"}]))
    try:
        return ValidationResult.valid(model.model_validate(body))
    except PydanticValidationError as exc:
        return ValidationResult.invalid(ValidationError(message, exc.errors(include_url=False)))


def validate_create_body(body: Any) -> ValidationResult[UserCreateRequest]:
    return _validate_body(UserCreateRequest, body, "Invalid user data")


def validate_update_body(body: Any) -> ValidationResult[UserUpdateRequest]:
    """Partial update; a missing body counts as an empty one"""
    if body is None:
        body = {}
    return _validate_body(UserUpdateRequest, body, "Invalid request data")
