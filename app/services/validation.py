from typing import Any, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from app.core.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

def is_missing(value: Any) -> bool:
    """
    Absence check used for required input.
    Only None and blank strings count as missing, so 0 and [] are present.
    """
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()

def require_fields(**values: Any) -> None:
    missing = [to_camel(name) for name, value in values.items() if is_missing(value)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}.", fields=missing)

def describe_errors(errors: List[dict]) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)

def build_model(model: Type[ModelT], **values: Any) -> ModelT:
    """Constructs a model, reporting pydantic failures as a booking ValidationError."""
    try:
        return model(**values)
    except PydanticValidationError as e:
        fields = [str(err["loc"][0]) for err in e.errors() if err.get("loc")]
        raise ValidationError(describe_errors(e.errors()), fields=fields) from e
