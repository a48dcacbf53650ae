"""Account operations."""

import logging
from typing import Annotated, Literal, Union

from pydantic import Field

from aztec_node.actions.base import JSONDict, OperationParams, dispatch, operation_names
from aztec_node.core.keys import KeyDerivation

logger = logging.getLogger(__name__)


class CreateAccount(OperationParams):
    operation: Literal["createAccount"]
    alias: str = ""
    recovery_key: str = ""


class GetAccountInfo(OperationParams):
    operation: Literal["getAccountInfo"]
    account_address: str


class GetAccountKeys(OperationParams):
    operation: Literal["getAccountKeys"]
    account_address: str


class RegisterAccount(OperationParams):
    operation: Literal["registerAccount"]
    account_address: str


class GetAccountAliases(OperationParams):
    operation: Literal["getAccountAliases"]


class RecoverAccount(OperationParams):
    operation: Literal["recoverAccount"]
    viewing_key_recover: str
    scan_from_block: int = Field(default=0, ge=0)


AccountsOperation = Annotated[
    Union[
        CreateAccount,
        GetAccountInfo,
        GetAccountKeys,
        RegisterAccount,
        GetAccountAliases,
        RecoverAccount,
    ],
    Field(discriminator="operation"),
]


def _create_account(client, params: CreateAccount) -> JSONDict:
    """
    Derive fresh account material locally and register it with the API.

    Only the public keys and partial address are sent in the request body;
    the master secret is returned to the caller and never transmitted.
    """
    material = KeyDerivation.create_account_material()
    keys = material.keys

    body: JSONDict = {
        "spendingPublicKey": keys.spending_key.public_key,
        "viewingPublicKey": keys.viewing_key.public_key,
        "partialAddress": material.partial_address,
    }
    if params.alias:
        body["alias"] = params.alias
    if params.recovery_key:
        body["recoveryKey"] = params.recovery_key

    api_response = client.request("POST", "/v1/accounts", body)
    logger.info(f"Created account {material.address}")

    return {
        "address": material.address,
        **keys.to_dict(),
        "partialAddress": material.partial_address,
        "masterSecret": material.master_secret,
        "alias": params.alias,
        "apiResponse": api_response,
    }


def _get_account_info(client, params: GetAccountInfo) -> JSONDict:
    return client.request("GET", f"/v1/accounts/{params.account_address}")


def _get_account_keys(client, params: GetAccountKeys) -> JSONDict:
    return client.request("GET", f"/v1/accounts/{params.account_address}/keys")


def _register_account(client, params: RegisterAccount) -> JSONDict:
    return client.request("POST", f"/v1/accounts/{params.account_address}/register")


def _get_account_aliases(client, params: GetAccountAliases) -> JSONDict:
    return client.request("GET", "/v1/accounts/aliases")


def _recover_account(client, params: RecoverAccount) -> JSONDict:
    return client.request(
        "POST",
        "/v1/accounts/recover",
        {"viewingKey": params.viewing_key_recover, "scanFromBlock": params.scan_from_block},
    )


HANDLERS = {
    CreateAccount: _create_account,
    GetAccountInfo: _get_account_info,
    GetAccountKeys: _get_account_keys,
    RegisterAccount: _register_account,
    GetAccountAliases: _get_account_aliases,
    RecoverAccount: _recover_account,
}

OPERATIONS = operation_names(HANDLERS)


def execute_accounts_operation(client, params: OperationParams) -> JSONDict:
    """Execute one account operation."""
    return dispatch(HANDLERS, client, params)
