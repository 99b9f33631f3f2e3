"""
Environment Validation

Turns a raw {field: value} mapping into either a typed record or an
ordered list of field errors.

The loader only depends on the Validator contract below, so the
pydantic-backed implementation can be swapped for any callable that
returns a ValidationResult.
"""

from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, Field, ValidationError

from infra.logger import logger_validator


# Name used for errors that are not attached to a single field
ROOT_ERROR_KEY = "__root__"


# ═══════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ═══════════════════════════════════════════════════════════════════════════════

class FieldError(BaseModel):
    """All reasons a single field failed validation"""
    name: str
    reasons: List[str] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """
    Outcome of validating a raw environment.

    Exactly one of data / errors is meaningful, depending on success.
    """
    success: bool
    data: Optional[Any] = None
    errors: List[FieldError] = Field(default_factory=list)


Validator = Callable[[Dict[str, Any]], ValidationResult]


# ═══════════════════════════════════════════════════════════════════════════════
# PYDANTIC VALIDATOR
# ═══════════════════════════════════════════════════════════════════════════════

def flatten_validation_error(error: ValidationError) -> List[FieldError]:
    """
    Group pydantic error entries by top-level field.

    Reasons for the same field are merged into one FieldError, keeping
    the order in which fields first appear.
    """
    grouped: Dict[str, List[str]] = {}

    for entry in error.errors():
        loc = entry.get("loc") or ()
        name = str(loc[0]) if loc else ROOT_ERROR_KEY
        grouped.setdefault(name, []).append(entry.get("msg", "Invalid value"))

    return [FieldError(name=name, reasons=reasons) for name, reasons in grouped.items()]


class PydanticValidator:
    """
    Validator backed by a pydantic model.

    Validates the whole mapping in one call so every failing field is
    reported, not just the first one.
    """

    def __init__(self, schema: Type[BaseModel]):
        self.schema = schema

    def __call__(self, raw: Dict[str, Any]) -> ValidationResult:
        try:
            data = self.schema.model_validate(raw)
        except ValidationError as e:
            errors = flatten_validation_error(e)
            logger_validator.debug(
                f"VALIDATION_FAILED | schema={self.schema.__name__} | fields={len(errors)}"
            )
            return ValidationResult(success=False, errors=errors)

        return ValidationResult(success=True, data=data)
