"""Resource operations exposed by the Aztec node.

Every resource maps to a discriminated union of parameter models and the
function that executes them. :func:`parse_operation` turns the host's
loose ``(resource, operation, parameters)`` triple into one validated
model, and :func:`execute_operation` runs it.
"""

from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from aztec_node.actions import (
    accounts,
    bridges,
    network,
    noir_contracts,
    notes,
    private_defi,
    private_tokens,
    proofs,
    public_tokens,
    transactions,
    utility,
)
from aztec_node.actions.base import JSONDict, OperationParams
from aztec_node.exceptions import (
    InvalidParameterError,
    UnknownOperationError,
    UnknownResourceError,
)
from aztec_node.models.schemas import Resource


class ResourceEntry(NamedTuple):
    adapter: TypeAdapter
    execute: Callable[..., JSONDict]
    operations: Tuple[str, ...]


RESOURCES: Dict[Resource, ResourceEntry] = {
    Resource.ACCOUNTS: ResourceEntry(
        TypeAdapter(accounts.AccountsOperation),
        accounts.execute_accounts_operation,
        accounts.OPERATIONS,
    ),
    Resource.PRIVATE_TOKENS: ResourceEntry(
        TypeAdapter(private_tokens.PrivateTokensOperation),
        private_tokens.execute_private_tokens_operation,
        private_tokens.OPERATIONS,
    ),
    Resource.PUBLIC_TOKENS: ResourceEntry(
        TypeAdapter(public_tokens.PublicTokensOperation),
        public_tokens.execute_public_tokens_operation,
        public_tokens.OPERATIONS,
    ),
    Resource.NOTES: ResourceEntry(
        TypeAdapter(notes.NotesOperation),
        notes.execute_notes_operation,
        notes.OPERATIONS,
    ),
    Resource.TRANSACTIONS: ResourceEntry(
        TypeAdapter(transactions.TransactionsOperation),
        transactions.execute_transactions_operation,
        transactions.OPERATIONS,
    ),
    Resource.PRIVATE_DEFI: ResourceEntry(
        TypeAdapter(private_defi.PrivateDeFiOperation),
        private_defi.execute_private_defi_operation,
        private_defi.OPERATIONS,
    ),
    Resource.PROOFS: ResourceEntry(
        TypeAdapter(proofs.ProofsOperation),
        proofs.execute_proofs_operation,
        proofs.OPERATIONS,
    ),
    Resource.NETWORK: ResourceEntry(
        TypeAdapter(network.NetworkOperation),
        network.execute_network_operation,
        network.OPERATIONS,
    ),
    Resource.BRIDGES: ResourceEntry(
        TypeAdapter(bridges.BridgesOperation),
        bridges.execute_bridges_operation,
        bridges.OPERATIONS,
    ),
    Resource.NOIR_CONTRACTS: ResourceEntry(
        TypeAdapter(noir_contracts.NoirContractsOperation),
        noir_contracts.execute_noir_contracts_operation,
        noir_contracts.OPERATIONS,
    ),
    Resource.UTILITY: ResourceEntry(
        TypeAdapter(utility.UtilityOperation),
        utility.execute_utility_operation,
        utility.OPERATIONS,
    ),
}


def get_resource(resource: str) -> ResourceEntry:
    """
    Look up a resource by its wire name.

    Raises:
        UnknownResourceError: If no resource has that name
    """
    try:
        return RESOURCES[Resource(resource)]
    except ValueError:
        raise UnknownResourceError(f"Unknown resource: {resource}")


def parse_operation(
    resource: str,
    operation: str,
    parameters: Optional[Mapping[str, Any]] = None,
) -> OperationParams:
    """
    Validate host parameters into the model for ``resource``/``operation``.

    Args:
        resource: Resource name, e.g. ``"privateTokens"``
        operation: Operation name, e.g. ``"shieldTokens"``
        parameters: camelCase parameter values; missing optional fields
            take their defaults

    Returns:
        OperationParams: The validated parameter model

    Raises:
        UnknownResourceError: If the resource does not exist
        UnknownOperationError: If the resource has no such operation
        InvalidParameterError: If the parameters fail validation
    """
    entry = get_resource(resource)
    if operation not in entry.operations:
        raise UnknownOperationError(f"Unknown operation for {resource}: {operation}")

    data = dict(parameters or {})
    data["operation"] = operation
    try:
        return entry.adapter.validate_python(data)
    except ValidationError as e:
        raise InvalidParameterError(f"Invalid parameters for {resource}.{operation}: {e}")


def execute_operation(client, resource: str, params: OperationParams) -> JSONDict:
    """Run an already validated operation against ``client``."""
    return get_resource(resource).execute(client, params)


__all__ = [
    "RESOURCES",
    "ResourceEntry",
    "get_resource",
    "parse_operation",
    "execute_operation",
]
