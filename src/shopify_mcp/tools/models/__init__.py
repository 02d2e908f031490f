"""Operation-related data models."""

from .models import (
    OperationDefinition,
    ToolInvocation,
    OperationContext,
    ComposedRequest,
    ComposedPlan,
    OperationHandler,
)

__all__ = [
    "OperationDefinition",
    "ToolInvocation",
    "OperationContext",
    "ComposedRequest",
    "ComposedPlan",
    "OperationHandler",
]
