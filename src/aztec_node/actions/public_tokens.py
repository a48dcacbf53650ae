"""Public token operations and L1 deposits/withdrawals."""

from typing import Annotated, Literal, Union

from pydantic import Field

from aztec_node.actions.base import JSONDict, OperationParams, dispatch, operation_names


class GetPublicBalance(OperationParams):
    operation: Literal["getPublicBalance"]
    account_address: str
    token_address: str


class Deposit(OperationParams):
    operation: Literal["deposit"]
    token_address: str
    amount: str
    l1_address: str = Field(alias="l1Address")


class Withdraw(OperationParams):
    operation: Literal["withdraw"]
    token_address: str
    amount: str
    l1_recipient: str = Field(alias="l1Recipient")


class PublicTransfer(OperationParams):
    operation: Literal["publicTransfer"]
    token_address: str
    amount: str
    to_address: str


PublicTokensOperation = Annotated[
    Union[GetPublicBalance, Deposit, Withdraw, PublicTransfer],
    Field(discriminator="operation"),
]


def _get_public_balance(client, params: GetPublicBalance) -> JSONDict:
    return client.request(
        "GET",
        f"/v1/tokens/public/balance/{params.account_address}",
        query={"tokenAddress": params.token_address},
    )


def _deposit(client, params: Deposit) -> JSONDict:
    return client.request(
        "POST",
        "/v1/tokens/public/deposit",
        {"tokenAddress": params.token_address, "amount": params.amount, "l1Address": params.l1_address},
    )


def _withdraw(client, params: Withdraw) -> JSONDict:
    return client.request(
        "POST",
        "/v1/tokens/public/withdraw",
        {"tokenAddress": params.token_address, "amount": params.amount, "l1Recipient": params.l1_recipient},
    )


def _public_transfer(client, params: PublicTransfer) -> JSONDict:
    return client.request(
        "POST",
        "/v1/tokens/public/transfer",
        {"tokenAddress": params.token_address, "amount": params.amount, "to": params.to_address},
    )


HANDLERS = {
    GetPublicBalance: _get_public_balance,
    Deposit: _deposit,
    Withdraw: _withdraw,
    PublicTransfer: _public_transfer,
}

OPERATIONS = operation_names(HANDLERS)


def execute_public_tokens_operation(client, params: OperationParams) -> JSONDict:
    """Execute one public token operation."""
    return dispatch(HANDLERS, client, params)
