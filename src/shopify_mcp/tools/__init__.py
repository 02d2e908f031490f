from .models import (
    OperationDefinition,
    ToolInvocation,
    OperationContext,
    ComposedRequest,
    ComposedPlan,
    OperationHandler,
)
from .registry import OperationRegistry
from .schema import SchemaValidator
from .normalizer import normalize
from .catalog import build_registry
from .dispatcher import Dispatcher, success_result, error_result

__all__ = [
    "OperationDefinition",
    "ToolInvocation",
    "OperationContext",
    "ComposedRequest",
    "ComposedPlan",
    "OperationHandler",
    "OperationRegistry",
    "SchemaValidator",
    "normalize",
    "build_registry",
    "Dispatcher",
    "success_result",
    "error_result",
]
