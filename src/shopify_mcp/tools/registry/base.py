"""Operation registry: maps operation names to their handlers."""

from typing import Any, Dict, Iterator, List, Optional, Type

import jsonref  # type: ignore
from pydantic import BaseModel

from ..models import OperationDefinition, OperationHandler
from ..models.models import AggregateFn, ComposeFn
from ..schema import SchemaValidator
from ...core.exceptions import ToolNotFoundError, ToolRegistrationError
from ...core.logger import get_logger

logger = get_logger(__name__)


class OperationRegistry:
    """
    A central registry of the operations exposed as MCP tools.

    Holds the definitions advertised to clients and maps each operation name
    to the handler (argument model, compose and aggregate functions) that
    implements it. Registration order is the order clients see.
    """

    def __init__(self) -> None:
        """Initialize an empty OperationRegistry."""
        self.handlers: Dict[str, OperationHandler] = {}

    def register(
        self,
        name_or_handler: OperationHandler | str,
        description: Optional[str] = None,
        args_model: Optional[Type[BaseModel]] = None,
        compose: Optional[ComposeFn] = None,
        aggregate: Optional[AggregateFn] = None,
        read_only: bool = True,
        required_message: Optional[str] = None,
    ) -> OperationHandler:
        """
        Register a new operation.

        Either pass a ready `OperationHandler`, or the individual parts from
        which one is built; the input schema is then generated from `args_model`.

        Args:
            name_or_handler: An `OperationHandler` or the operation name.
            description: What the operation does. Required when passing a name.
            args_model: Pydantic model normalizing the arguments. Required when passing a name.
            compose: Builds the upstream plan. Required when passing a name.
            aggregate: Post-processes upstream results. Required when passing a name.
            read_only: False for operations that mutate store data.
            required_message: Message for missing required arguments.

        Returns:
            The registered handler.

        Raises:
            ToolRegistrationError: If parts are missing or the name is already registered.
        """
        if isinstance(name_or_handler, OperationHandler):
            handler = name_or_handler
        else:
            if description is None or args_model is None or compose is None or aggregate is None:
                raise ToolRegistrationError(
                    f"Operation '{name_or_handler}' needs description, args_model, compose and aggregate."
                )
            definition = OperationDefinition(
                name=name_or_handler,
                description=description,
                input_schema=self.build_input_schema(args_model),
                read_only=read_only,
            )
            handler = OperationHandler(
                definition=definition,
                args_model=args_model,
                compose=compose,
                aggregate=aggregate,
                required_message=required_message,
            )

        if handler.name in self.handlers:
            msg = f"Operation '{handler.name}' is already registered."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        self.handlers[handler.name] = handler
        logger.info("Successfully registered operation: '%s'", handler.name)
        return handler

    def get(self, name: str) -> OperationHandler:
        """Look up the handler for an operation.

        Raises:
            ToolNotFoundError: If the operation is not registered.
        """
        try:
            return self.handlers[name]
        except KeyError:
            raise ToolNotFoundError(f"Unknown tool: {name}") from None

    def list(self) -> List[OperationDefinition]:
        """The catalog, in registration order."""
        return [handler.definition for handler in self.handlers.values()]

    def __contains__(self, name: object) -> bool:
        return name in self.handlers

    def __iter__(self) -> Iterator[OperationHandler]:
        return iter(self.handlers.values())

    def __len__(self) -> int:
        return len(self.handlers)

    @staticmethod
    def build_input_schema(args_model: Type[BaseModel]) -> Dict[str, Any]:
        """Generate the advertised JSON schema for an argument model.

        Args:
            args_model: The pydantic model describing the operation arguments.

        Returns:
            A self-contained, sanitized JSON schema object.

        Raises:
            ToolValidationError: If the model contains recursive references.
        """
        raw_schema = args_model.model_json_schema()
        # 1. Check for recursion
        SchemaValidator.assert_no_recursive_refs(raw_schema)

        # 2. Resolve refs; proxies=False gives a plain dict back
        schema = jsonref.replace_refs(raw_schema, proxies=False)

        # 3. Strip metadata ($defs, titles) and collapse Optional
        schema = SchemaValidator.sanitize_schema(schema)
        schema.setdefault("properties", {})
        return schema
