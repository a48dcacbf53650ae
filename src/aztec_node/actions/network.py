"""Network and rollup status operations."""

from typing import Annotated, Literal, Union

from pydantic import Field

from aztec_node.actions.base import JSONDict, OperationParams, dispatch, operation_names
from aztec_node.models.schemas import PendingTxFilter, TimeRange


class GetRollupStatus(OperationParams):
    operation: Literal["getRollupStatus"]


class GetFeeSchedule(OperationParams):
    operation: Literal["getFeeSchedule"]


class GetPendingTxs(OperationParams):
    operation: Literal["getPendingTxs"]
    limit: int = Field(default=50, gt=0)
    filter_type: PendingTxFilter = PendingTxFilter.ALL


class GetBridgeStats(OperationParams):
    operation: Literal["getBridgeStats"]
    bridge_id: str = ""
    time_range: TimeRange = TimeRange.LAST_24H


NetworkOperation = Annotated[
    Union[GetRollupStatus, GetFeeSchedule, GetPendingTxs, GetBridgeStats],
    Field(discriminator="operation"),
]


def _get_rollup_status(client, params: GetRollupStatus) -> JSONDict:
    return client.request("GET", "/v1/network/rollup/status")


def _get_fee_schedule(client, params: GetFeeSchedule) -> JSONDict:
    return client.request("GET", "/v1/network/fees")


def _get_pending_txs(client, params: GetPendingTxs) -> JSONDict:
    query: JSONDict = {"limit": params.limit}
    if params.filter_type != PendingTxFilter.ALL:
        query["type"] = params.filter_type.value
    return client.request("GET", "/v1/network/pending", query=query)


def _get_bridge_stats(client, params: GetBridgeStats) -> JSONDict:
    endpoint = "/v1/network/bridges/stats"
    if params.bridge_id:
        endpoint = f"/v1/network/bridges/{params.bridge_id}/stats"
    return client.request("GET", endpoint, query={"timeRange": params.time_range.value})


HANDLERS = {
    GetRollupStatus: _get_rollup_status,
    GetFeeSchedule: _get_fee_schedule,
    GetPendingTxs: _get_pending_txs,
    GetBridgeStats: _get_bridge_stats,
}

OPERATIONS = operation_names(HANDLERS)


def execute_network_operation(client, params: OperationParams) -> JSONDict:
    """Execute one network operation."""
    return dispatch(HANDLERS, client, params)
