"""Transaction lookup, submission and fee estimation."""

from typing import Annotated, Literal, Union

from pydantic import Field

from aztec_node.actions.base import JSONDict, OperationParams, dispatch, operation_names
from aztec_node.models.schemas import FeePriority, FeeTransactionType


class GetTransaction(OperationParams):
    operation: Literal["getTransaction"]
    tx_hash: str


class GetTransactionStatus(OperationParams):
    operation: Literal["getTransactionStatus"]
    tx_hash: str


class GetTransactionProof(OperationParams):
    operation: Literal["getTransactionProof"]
    tx_hash: str


class SubmitTransaction(OperationParams):
    operation: Literal["submitTransaction"]
    signed_tx: str
    proof_data: str


class EstimateFees(OperationParams):
    operation: Literal["estimateFees"]
    tx_type: FeeTransactionType = FeeTransactionType.PRIVATE_TRANSFER
    token_address: str = ""
    amount: str = ""
    priority: FeePriority = FeePriority.MEDIUM


TransactionsOperation = Annotated[
    Union[GetTransaction, GetTransactionStatus, GetTransactionProof, SubmitTransaction, EstimateFees],
    Field(discriminator="operation"),
]


def _get_transaction(client, params: GetTransaction) -> JSONDict:
    return client.request("GET", f"/v1/transactions/{params.tx_hash}")


def _get_transaction_status(client, params: GetTransactionStatus) -> JSONDict:
    return client.request("GET", f"/v1/transactions/{params.tx_hash}/status")


def _get_transaction_proof(client, params: GetTransactionProof) -> JSONDict:
    return client.request("GET", f"/v1/transactions/{params.tx_hash}/proof")


def _submit_transaction(client, params: SubmitTransaction) -> JSONDict:
    return client.request(
        "POST",
        "/v1/transactions",
        {"signedTx": params.signed_tx, "proofData": params.proof_data},
    )


def _estimate_fees(client, params: EstimateFees) -> JSONDict:
    body: JSONDict = {"txType": params.tx_type.value, "priority": params.priority.value}
    if params.token_address:
        body["tokenAddress"] = params.token_address
    if params.amount:
        body["amount"] = params.amount
    return client.request("POST", "/v1/transactions/estimate-fees", body)


HANDLERS = {
    GetTransaction: _get_transaction,
    GetTransactionStatus: _get_transaction_status,
    GetTransactionProof: _get_transaction_proof,
    SubmitTransaction: _submit_transaction,
    EstimateFees: _estimate_fees,
}

OPERATIONS = operation_names(HANDLERS)


def execute_transactions_operation(client, params: OperationParams) -> JSONDict:
    """Execute one transaction operation."""
    return dispatch(HANDLERS, client, params)
