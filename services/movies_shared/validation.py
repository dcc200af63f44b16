"""
Movie payload validation
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from .models import MovieCreate, MovieUpdate

REQUIRED_MESSAGE = "Required"

# (field, pydantic error type) -> message shown to API clients
FIELD_MESSAGES = {
    ("title", "string_type"): "Title must be a string",
    ("title", "missing"): "Title is required",
}


@dataclass
class ValidationResult:
    """Outcome of validating a movie payload"""
    success: bool
    data: Optional[Dict[str, Any]] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)


def _issue(error: Dict[str, Any]) -> Dict[str, Any]:
    path = list(error["loc"])
    code = error["type"]
    name = path[0] if path else None

    message = FIELD_MESSAGES.get((name, code))
    if message is None:
        if code == "missing":
            message = REQUIRED_MESSAGE
        elif code == "value_error":
            message = str(error["ctx"]["error"]) if "ctx" in error else error["msg"]
        else:
            message = error["msg"]

    return {"code": code, "path": path, "message": message}


def _validate(model: Type[BaseModel], payload: Any, partial: bool) -> ValidationResult:
    try:
        parsed = model.model_validate(payload)
    except ValidationError as e:
        return ValidationResult(success=False, errors=[_issue(error) for error in e.errors()])

    return ValidationResult(success=True, data=parsed.model_dump(exclude_unset=partial))


def validate_movie(payload: Any) -> ValidationResult:
    """Validate a complete movie, filling in defaults"""
    return _validate(MovieCreate, payload, partial=False)


def validate_partial_movie(payload: Any) -> ValidationResult:
    """Validate only the fields present in the payload"""
    return _validate(MovieUpdate, payload, partial=True)
