"""Data models describing catalog operations and the values flowing through a call."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict


class OperationDefinition(BaseModel):
    """Immutable catalog entry advertised to MCP clients.

    Attributes:
        name: Unique operation identifier.
        description: Human-readable summary shown to the model.
        input_schema: JSON schema object describing the accepted arguments.
        read_only: False only for operations that mutate store data.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    input_schema: Dict[str, Any]
    read_only: bool = True


@dataclass(frozen=True)
class ToolInvocation:
    """A single named call with the caller's raw JSON arguments."""

    operation_name: str
    raw_arguments: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class OperationContext:
    """Per-call values that are not caller arguments.

    ``now`` is taken once per call so composition stays a pure function of
    its inputs.
    """

    shop_name: str
    now: datetime


class ComposedRequest(BaseModel):
    """One GraphQL document plus its variables, ready for the executor."""

    model_config = ConfigDict(frozen=True)

    query: str
    variables: Dict[str, Any] = {}


class ComposedPlan(BaseModel):
    """The upstream requests one operation needs, in order.

    Attributes:
        requests: Requests to execute; results are handed to the aggregator in this order.
        concurrent: Whether the requests are independent and may run together.
        stop_when: Checked against each response of a sequential plan; True skips
            the remaining requests.
    """

    model_config = ConfigDict(frozen=True)

    requests: Tuple[ComposedRequest, ...]
    concurrent: bool = False
    stop_when: Optional[Callable[[Dict[str, Any]], bool]] = None


ComposeFn = Callable[[Any, OperationContext], ComposedPlan]
AggregateFn = Callable[[Any, List[Dict[str, Any]], OperationContext], Any]


@dataclass(frozen=True)
class OperationHandler:
    """Everything the dispatcher needs to run one operation.

    Attributes:
        definition: The advertised catalog entry.
        args_model: Pydantic model that normalized arguments are instances of.
        compose: Builds the upstream plan from normalized arguments.
        aggregate: Turns upstream bodies into the payload returned to the caller.
        required_message: Message used when a required argument is missing.
    """

    definition: OperationDefinition
    args_model: Type[BaseModel]
    compose: ComposeFn
    aggregate: AggregateFn
    required_message: Optional[str] = None

    @property
    def name(self) -> str:
        return self.definition.name
