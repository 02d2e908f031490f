"""Validate caller arguments against an operation's argument model."""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ValidationError

from .models import OperationHandler
from ..core.exceptions import MissingRequiredArgument, ToolValidationError
from ..core.logger import get_logger

logger = get_logger(__name__)

_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


def _strip_absent(raw_arguments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Drop None values; JSON null and an omitted key mean the same thing here."""
    if not raw_arguments:
        return {}
    if not isinstance(raw_arguments, Mapping):
        raise ToolValidationError("Tool arguments must be a JSON object.")
    return {key: value for key, value in raw_arguments.items() if value is not None}


def _field_names(errors: List[Dict[str, Any]]) -> List[str]:
    names = []
    for error in errors:
        loc = error.get("loc") or ("arguments",)
        name = str(loc[0])
        if name not in names:
            names.append(name)
    return names


def normalize(handler: OperationHandler, raw_arguments: Optional[Mapping[str, Any]]) -> BaseModel:
    """Turn raw caller arguments into the operation's normalized arguments.

    Args:
        handler: The operation being invoked.
        raw_arguments: The JSON object the caller sent, possibly None.

    Returns:
        An instance of ``handler.args_model`` with defaults applied and limits clamped.

    Raises:
        MissingRequiredArgument: If a required argument is absent or empty.
        ToolValidationError: If an argument cannot be coerced to its declared type.
    """
    arguments = _strip_absent(raw_arguments)
    try:
        normalized = handler.args_model.model_validate(arguments)
    except ValidationError as e:
        errors = e.errors()
        missing = [err for err in errors if err["type"] in _MISSING_ERROR_TYPES]
        if missing:
            fields = _field_names(missing)
            msg = handler.required_message or f"{', '.join(fields)} {'is' if len(fields) == 1 else 'are'} required"
            logger.warning("Operation '%s' called without %s.", handler.name, ", ".join(fields))
            raise MissingRequiredArgument(msg) from e

        details = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in errors)
        msg = f"Invalid arguments for {handler.name}: {details}"
        logger.warning(msg)
        raise ToolValidationError(msg) from e

    logger.debug("Normalized arguments for '%s': %s", handler.name, normalized.model_dump())
    return normalized
