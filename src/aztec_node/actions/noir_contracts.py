"""Noir contract deployment, calls, state and events."""

from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import Field

from aztec_node.actions.base import JSONDict, OperationParams, dispatch, operation_names


class DeployContract(OperationParams):
    operation: Literal["deployContract"]
    bytecode: str
    constructor_args: List[Dict[str, Any]] = Field(default_factory=list)
    salt: str = ""


class CallContract(OperationParams):
    operation: Literal["callContract"]
    contract_address: str
    function_name: str
    function_args: List[Dict[str, Any]] = Field(default_factory=list)
    is_private: bool = True
    simulate_only: bool = False


class GetContractState(OperationParams):
    operation: Literal["getContractState"]
    contract_address: str
    storage_slot: str
    block_number: int = Field(default=0, ge=0)


class GetContractEvents(OperationParams):
    operation: Literal["getContractEvents"]
    contract_address: str
    event_name: str = ""
    from_block: int = Field(default=0, ge=0)
    to_block: int = Field(default=0, ge=0)
    limit: int = Field(default=100, gt=0)


NoirContractsOperation = Annotated[
    Union[DeployContract, CallContract, GetContractState, GetContractEvents],
    Field(discriminator="operation"),
]


def _deploy_contract(client, params: DeployContract) -> JSONDict:
    body: JSONDict = {"bytecode": params.bytecode, "args": params.constructor_args}
    if params.salt:
        body["salt"] = params.salt
    return client.request("POST", "/v1/contracts/deploy", body)


def _call_contract(client, params: CallContract) -> JSONDict:
    return client.request(
        "POST",
        "/v1/contracts/call",
        {
            "contractAddress": params.contract_address,
            "functionName": params.function_name,
            "args": params.function_args,
            "isPrivate": params.is_private,
            "simulateOnly": params.simulate_only,
        },
    )


def _get_contract_state(client, params: GetContractState) -> JSONDict:
    query: JSONDict = {"slot": params.storage_slot}
    if params.block_number > 0:
        query["blockNumber"] = params.block_number
    return client.request("GET", f"/v1/contracts/{params.contract_address}/state", query=query)


def _get_contract_events(client, params: GetContractEvents) -> JSONDict:
    query: JSONDict = {"limit": params.limit}
    if params.event_name:
        query["eventName"] = params.event_name
    if params.from_block > 0:
        query["fromBlock"] = params.from_block
    if params.to_block > 0:
        query["toBlock"] = params.to_block
    return client.request("GET", f"/v1/contracts/{params.contract_address}/events", query=query)


HANDLERS = {
    DeployContract: _deploy_contract,
    CallContract: _call_contract,
    GetContractState: _get_contract_state,
    GetContractEvents: _get_contract_events,
}

OPERATIONS = operation_names(HANDLERS)


def execute_noir_contracts_operation(client, params: OperationParams) -> JSONDict:
    """Execute one Noir contract operation."""
    return dispatch(HANDLERS, client, params)
