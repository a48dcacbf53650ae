"""Aztec Connect bridge operations."""

from typing import Annotated, Literal, Union

from pydantic import Field

from aztec_node.actions.base import JSONDict, OperationParams, dispatch, operation_names
from aztec_node.models.schemas import PositionStatus


class GetBridges(OperationParams):
    operation: Literal["getBridges"]
    protocol: str = ""
    active_only: bool = True


class GetBridgeInfo(OperationParams):
    operation: Literal["getBridgeInfo"]
    bridge_id: str


class CallBridge(OperationParams):
    operation: Literal["callBridge"]
    bridge_id: str
    input_asset: str
    input_amount: str
    output_asset: str = ""
    aux_data: int = 0


class GetBridgePositions(OperationParams):
    operation: Literal["getBridgePositions"]
    account_address: str
    bridge_id_filter: str = ""
    status_filter: PositionStatus = PositionStatus.ALL


BridgesOperation = Annotated[
    Union[GetBridges, GetBridgeInfo, CallBridge, GetBridgePositions],
    Field(discriminator="operation"),
]


def _get_bridges(client, params: GetBridges) -> JSONDict:
    query: JSONDict = {}
    if params.protocol:
        query["protocol"] = params.protocol
    if params.active_only:
        query["active"] = True
    return client.request("GET", "/v1/bridges", query=query)


def _get_bridge_info(client, params: GetBridgeInfo) -> JSONDict:
    return client.request("GET", f"/v1/bridges/{params.bridge_id}")


def _call_bridge(client, params: CallBridge) -> JSONDict:
    body: JSONDict = {
        "bridgeId": params.bridge_id,
        "inputAsset": params.input_asset,
        "inputAmount": params.input_amount,
    }
    if params.output_asset:
        body["outputAsset"] = params.output_asset
    if params.aux_data:
        body["auxData"] = params.aux_data
    return client.request("POST", "/v1/bridges/call", body)


def _get_bridge_positions(client, params: GetBridgePositions) -> JSONDict:
    query: JSONDict = {}
    if params.bridge_id_filter:
        query["bridgeId"] = params.bridge_id_filter
    if params.status_filter != PositionStatus.ALL:
        query["status"] = params.status_filter.value
    return client.request("GET", f"/v1/bridges/positions/{params.account_address}", query=query)


HANDLERS = {
    GetBridges: _get_bridges,
    GetBridgeInfo: _get_bridge_info,
    CallBridge: _call_bridge,
    GetBridgePositions: _get_bridge_positions,
}

OPERATIONS = operation_names(HANDLERS)


def execute_bridges_operation(client, params: OperationParams) -> JSONDict:
    """Execute one bridge operation."""
    return dispatch(HANDLERS, client, params)
