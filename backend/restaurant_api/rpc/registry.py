"""
Restaurant API — Procedure Registry
====================================

What:  Maps procedure names to async handlers, each either a query (read)
       or a mutation (write), with an optional typed input.
How:   Handlers are registered with the @router.query / @router.mutation
       decorators. `call()` resolves the name, checks the kind, validates
       the JSON input text with a pydantic TypeAdapter in strict mode, then
       awaits the handler with the request's database session.
Who:   procedures.py builds the application router; routes/rpc.py calls it.

Failure mapping (see exceptions.py):
    unknown name            → NotFoundError
    query called as mutation
    (or the reverse)        → MethodNotAllowedError
    input fails validation  → ValidationError with pydantic's error list

Example:
    router = ProcedureRouter()

    @router.query("getMenuItemById", input=int)
    async def get_menu_item_by_id(db, item_id):
        return await menu_service.get_menu_item(db, item_id)

    await router.call(db, "getMenuItemById", QUERY, "3")
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from typing_extensions import Annotated, get_args, get_origin

from restaurant_api.exceptions import (
    MethodNotAllowedError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

QUERY = "query"
MUTATION = "mutation"

Handler = Callable[..., Awaitable[Any]]


@dataclass(frozen=True)
class Procedure:
    """
    One registered procedure. `input_adapter` is None for no-argument procedures.

    `takes_text` is True when the input is a plain string, so routes may pass
    unquoted query text such as ?input=20240601 through as a string.
    """

    name: str
    kind: str
    handler: Handler
    input_adapter: Optional[TypeAdapter] = None
    takes_text: bool = False

    @property
    def takes_input(self) -> bool:
        return self.input_adapter is not None

    def parse_input(self, raw_json: Optional[Union[str, bytes]]) -> Any:
        """
        Validate JSON input text in strict mode.

        Strict JSON validation keeps `true` from becoming 1 and "12.50" from
        becoming 12.5; integers are still accepted where a float is expected.
        """
        if raw_json is None:
            raise ValidationError(
                message=f"Procedure '{self.name}' requires an input",
                context={"procedure": self.name},
            )
        try:
            return self.input_adapter.validate_json(raw_json, strict=True)
        except PydanticValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            raise ValidationError(
                message=f"Invalid input for procedure '{self.name}'",
                context={"procedure": self.name, "errors": errors},
            ) from e


def _is_text_type(input_type: Any) -> bool:
    if get_origin(input_type) is Annotated:
        input_type = get_args(input_type)[0]
    return input_type is str


class ProcedureRouter:
    """Registry of named procedures. Names are unique across both kinds."""

    def __init__(self) -> None:
        self._procedures: Dict[str, Procedure] = {}

    def query(self, name: str, input: Any = None) -> Callable[[Handler], Handler]:
        return self._register(name, QUERY, input)

    def mutation(self, name: str, input: Any = None) -> Callable[[Handler], Handler]:
        return self._register(name, MUTATION, input)

    def _register(self, name: str, kind: str, input_type: Any) -> Callable[[Handler], Handler]:
        if name in self._procedures:
            raise ValueError(f"Procedure '{name}' is already registered")

        adapter = TypeAdapter(input_type) if input_type is not None else None

        def decorator(handler: Handler) -> Handler:
            self._procedures[name] = Procedure(
                name=name,
                kind=kind,
                handler=handler,
                input_adapter=adapter,
                takes_text=_is_text_type(input_type),
            )
            return handler

        return decorator

    def get(self, name: str) -> Optional[Procedure]:
        return self._procedures.get(name)

    def describe(self) -> List[Dict[str, Any]]:
        """Name, kind and whether an input is expected, sorted by name."""
        return [
            {"name": p.name, "kind": p.kind, "takes_input": p.takes_input}
            for p in sorted(self._procedures.values(), key=lambda p: p.name)
        ]

    def __contains__(self, name: str) -> bool:
        return name in self._procedures

    def __len__(self) -> int:
        return len(self._procedures)

    async def call(
        self,
        db: AsyncSession,
        name: str,
        kind: str,
        raw_input: Optional[Union[str, bytes]] = None,
    ) -> Any:
        """
        Resolve and run a procedure.

        Args:
            db:        Request-scoped session, passed through to the handler
            name:      Procedure name as it appears in the URL
            kind:      QUERY for GET requests, MUTATION for POST
            raw_input: Input as JSON text (None when absent); ignored by
                       no-argument procedures

        Raises:
            NotFoundError, MethodNotAllowedError, ValidationError
        """
        procedure = self._procedures.get(name)
        if procedure is None:
            raise NotFoundError(resource="procedure", resource_id=name)
        if procedure.kind != kind:
            raise MethodNotAllowedError(procedure=name, kind=procedure.kind)

        if not procedure.takes_input:
            return await procedure.handler(db)

        value = procedure.parse_input(raw_input)
        logger.debug("Calling %s %s", procedure.kind, name)
        return await procedure.handler(db, value)
