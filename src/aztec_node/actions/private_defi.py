"""Private DeFi operations: swaps and cross-chain bridging."""

from typing import Annotated, Literal, Union

from pydantic import Field

from aztec_node.actions.base import JSONDict, OperationParams, dispatch, operation_names
from aztec_node.models.schemas import DestinationChain


class GetSwapQuote(OperationParams):
    operation: Literal["getSwapQuote"]
    input_token: str
    output_token: str
    input_amount: str


class PrivateSwap(OperationParams):
    operation: Literal["privateSwap"]
    input_token: str
    output_token: str
    input_amount: str
    min_output_amount: str
    deadline: int = Field(default=0, ge=0)


class PrivateBridge(OperationParams):
    operation: Literal["privateBridge"]
    bridge_id: str
    amount: str
    destination_chain: DestinationChain = DestinationChain.ETHEREUM
    destination_address: str


class GetSupportedPairs(OperationParams):
    operation: Literal["getSupportedPairs"]
    filter_token: str = ""


PrivateDeFiOperation = Annotated[
    Union[GetSwapQuote, PrivateSwap, PrivateBridge, GetSupportedPairs],
    Field(discriminator="operation"),
]


def _get_swap_quote(client, params: GetSwapQuote) -> JSONDict:
    return client.request(
        "POST",
        "/v1/defi/quote",
        {
            "inputToken": params.input_token,
            "outputToken": params.output_token,
            "inputAmount": params.input_amount,
        },
    )


def _private_swap(client, params: PrivateSwap) -> JSONDict:
    body: JSONDict = {
        "inputToken": params.input_token,
        "outputToken": params.output_token,
        "inputAmount": params.input_amount,
        "minOutputAmount": params.min_output_amount,
    }
    if params.deadline > 0:
        body["deadline"] = params.deadline
    return client.request("POST", "/v1/defi/swap", body)


def _private_bridge(client, params: PrivateBridge) -> JSONDict:
    return client.request(
        "POST",
        "/v1/defi/bridge",
        {
            "bridgeId": params.bridge_id,
            "amount": params.amount,
            "destinationChain": params.destination_chain.value,
            "destinationAddress": params.destination_address,
        },
    )


def _get_supported_pairs(client, params: GetSupportedPairs) -> JSONDict:
    query: JSONDict = {}
    if params.filter_token:
        query["token"] = params.filter_token
    return client.request("GET", "/v1/defi/pairs", query=query)


HANDLERS = {
    GetSwapQuote: _get_swap_quote,
    PrivateSwap: _private_swap,
    PrivateBridge: _private_bridge,
    GetSupportedPairs: _get_supported_pairs,
}

OPERATIONS = operation_names(HANDLERS)


def execute_private_defi_operation(client, params: OperationParams) -> JSONDict:
    """Execute one private DeFi operation."""
    return dispatch(HANDLERS, client, params)
