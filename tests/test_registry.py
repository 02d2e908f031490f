import pytest
from typing import Any, Optional
from pydantic import BaseModel, Field

from shopify_mcp.tools import ComposedPlan, ComposedRequest, OperationRegistry
from shopify_mcp.core.exceptions import ToolNotFoundError, ToolRegistrationError, ToolValidationError


class EchoArgs(BaseModel):
    text: str = Field(description="Text to echo")
    repeat: Optional[int] = Field(default=None, description="How many times")


def compose_echo(args: Any, context: Any) -> ComposedPlan:
    return ComposedPlan(requests=(ComposedRequest(query="{ shop { name } }"),))


def aggregate_echo(args: Any, results: Any, context: Any) -> Any:
    return results[0]


def test_register_builds_sanitized_schema() -> None:
    registry = OperationRegistry()
    handler = registry.register(
        "echo", description="Echo text.", args_model=EchoArgs, compose=compose_echo, aggregate=aggregate_echo
    )

    schema = handler.definition.input_schema
    assert schema["type"] == "object"
    assert schema["required"] == ["text"]
    assert schema["additionalProperties"] is False
    assert schema["properties"]["repeat"] == {"type": "integer", "description": "How many times"}
    assert "title" not in schema
    assert handler.definition.read_only is True


def test_register_duplicate_name_fails() -> None:
    registry = OperationRegistry()
    registry.register("echo", description="Echo.", args_model=EchoArgs, compose=compose_echo, aggregate=aggregate_echo)

    with pytest.raises(ToolRegistrationError, match="already registered"):
        registry.register(
            "echo", description="Again.", args_model=EchoArgs, compose=compose_echo, aggregate=aggregate_echo
        )


def test_register_requires_all_parts() -> None:
    registry = OperationRegistry()
    with pytest.raises(ToolRegistrationError, match="needs description"):
        registry.register("echo", description="Echo.", args_model=EchoArgs)


def test_register_accepts_ready_handler() -> None:
    source = OperationRegistry()
    handler = source.register(
        "echo", description="Echo.", args_model=EchoArgs, compose=compose_echo, aggregate=aggregate_echo
    )

    target = OperationRegistry()
    assert target.register(handler) is handler
    assert "echo" in target


def test_get_unknown_operation() -> None:
    registry = OperationRegistry()
    with pytest.raises(ToolNotFoundError, match="Unknown tool: nope"):
        registry.get("nope")


def test_list_keeps_registration_order() -> None:
    registry = OperationRegistry()
    for name in ["b_op", "a_op", "c_op"]:
        registry.register(name, description=name, args_model=EchoArgs, compose=compose_echo, aggregate=aggregate_echo)

    assert [d.name for d in registry.list()] == ["b_op", "a_op", "c_op"]
    assert [h.name for h in registry] == ["b_op", "a_op", "c_op"]


class Node(BaseModel):
    children: list["Node"] = []


class TreeArgs(BaseModel):
    root: Node


def test_recursive_argument_model_is_rejected() -> None:
    registry = OperationRegistry()
    with pytest.raises(ToolValidationError, match="Recursive structure detected"):
        registry.register(
            "tree", description="Tree.", args_model=TreeArgs, compose=compose_echo, aggregate=aggregate_echo
        )
