"""Private (shielded) token operations."""

from typing import Annotated, Literal, Union

from pydantic import Field

from aztec_node.actions.base import JSONDict, OperationParams, dispatch, operation_names


class GetPrivateBalance(OperationParams):
    operation: Literal["getPrivateBalance"]
    account_address: str
    token_address: str


class ShieldTokens(OperationParams):
    operation: Literal["shieldTokens"]
    token_address: str
    amount: str
    secret_hash: str = ""


class UnshieldTokens(OperationParams):
    operation: Literal["unshieldTokens"]
    token_address: str
    amount: str
    recipient: str


class PrivateTransfer(OperationParams):
    operation: Literal["privateTransfer"]
    token_address: str
    amount: str
    to_address: str


class GetPrivateHistory(OperationParams):
    operation: Literal["getPrivateHistory"]
    account_address: str
    token_address: str
    limit: int = Field(default=50, gt=0)
    offset: int = Field(default=0, ge=0)


PrivateTokensOperation = Annotated[
    Union[GetPrivateBalance, ShieldTokens, UnshieldTokens, PrivateTransfer, GetPrivateHistory],
    Field(discriminator="operation"),
]


def _get_private_balance(client, params: GetPrivateBalance) -> JSONDict:
    return client.request(
        "GET",
        f"/v1/tokens/private/balance/{params.account_address}",
        query={"tokenAddress": params.token_address},
    )


def _shield_tokens(client, params: ShieldTokens) -> JSONDict:
    body: JSONDict = {"tokenAddress": params.token_address, "amount": params.amount}
    if params.secret_hash:
        body["secretHash"] = params.secret_hash
    return client.request("POST", "/v1/tokens/private/shield", body)


def _unshield_tokens(client, params: UnshieldTokens) -> JSONDict:
    return client.request(
        "POST",
        "/v1/tokens/private/unshield",
        {"tokenAddress": params.token_address, "amount": params.amount, "recipient": params.recipient},
    )


def _private_transfer(client, params: PrivateTransfer) -> JSONDict:
    return client.request(
        "POST",
        "/v1/tokens/private/transfer",
        {"tokenAddress": params.token_address, "amount": params.amount, "to": params.to_address},
    )


def _get_private_history(client, params: GetPrivateHistory) -> JSONDict:
    return client.request(
        "GET",
        f"/v1/tokens/private/history/{params.account_address}",
        query={"tokenAddress": params.token_address, "limit": params.limit, "offset": params.offset},
    )


HANDLERS = {
    GetPrivateBalance: _get_private_balance,
    ShieldTokens: _shield_tokens,
    UnshieldTokens: _unshield_tokens,
    PrivateTransfer: _private_transfer,
    GetPrivateHistory: _get_private_history,
}

OPERATIONS = operation_names(HANDLERS)


def execute_private_tokens_operation(client, params: OperationParams) -> JSONDict:
    """Execute one private token operation."""
    return dispatch(HANDLERS, client, params)
