"""Shared plumbing for typed operation parameters.

Each resource module declares one model per operation. The ``operation``
field is a ``Literal`` tag, so a resource's operations form a pydantic
discriminated union and the host's loose parameter dictionaries are
validated into exactly one model before any handler runs.
"""

from typing import Any, Callable, Dict, Iterable, Type, get_args

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from aztec_node.exceptions import UnknownOperationError

JSONDict = Dict[str, Any]


class OperationParams(BaseModel):
    """Base class for operation parameters (camelCase on the wire)."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"


def operation_name(params_type: Type[OperationParams]) -> str:
    """Return the ``operation`` tag of a parameter model."""
    return get_args(params_type.model_fields["operation"].annotation)[0]


def operation_names(params_types: Iterable[Type[OperationParams]]) -> tuple:
    return tuple(operation_name(t) for t in params_types)


def dispatch(
    handlers: Dict[Type[OperationParams], Callable[..., JSONDict]],
    client,
    params: OperationParams,
) -> JSONDict:
    """Run the handler registered for ``type(params)``."""
    handler = handlers.get(type(params))
    if handler is None:
        raise UnknownOperationError(
            f"No handler for operation {getattr(params, 'operation', type(params).__name__)!r}"
        )
    return handler(client, params)
