"""Polling trigger for privacy-layer events.

Each poll asks the API for events since the previous poll, drops the ones
already emitted, and records what it saw in a :class:`PollState` that the
host persists between polls.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic.alias_generators import to_camel

from aztec_node.constants import DEFAULT_MAX_RESULTS, MAX_TRACKED_EVENT_IDS
from aztec_node.exceptions import TriggerError, UnknownEventError
from aztec_node.models.schemas import BridgeStatusFilter, NoteKind, ShieldType, TriggerEvent
from aztec_node.node import log_licensing_notice
from aztec_node.transport.client import AztecClient

logger = logging.getLogger(__name__)

Event = Dict[str, Any]


class TriggerParameters(BaseModel):
    """Trigger configuration (camelCase on the wire)."""

    event: TriggerEvent
    token_address: str = ""
    min_amount: str = ""
    shield_type: ShieldType = ShieldType.BOTH
    shield_token_address: str = ""
    note_type: NoteKind = NoteKind.ALL
    include_transactions: bool = False
    bridge_id: str = ""
    bridge_status: BridgeStatusFilter = BridgeStatusFilter.COMPLETED
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, gt=0)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"

    @classmethod
    def from_host(cls, parameters: Mapping[str, Any]) -> "TriggerParameters":
        """
        Validate host parameters.

        A ``maxResults`` of 0 or missing falls back to the default.

        Raises:
            UnknownEventError: If ``event`` is not a known trigger event
            TriggerError: If any other parameter is invalid
        """
        data = dict(parameters)
        try:
            TriggerEvent(data.get("event"))
        except ValueError:
            raise UnknownEventError(f"Unknown event type: {data.get('event')}")
        if not data.get("maxResults"):
            data.pop("maxResults", None)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise TriggerError(f"Invalid trigger parameters: {e}")


@dataclass
class PollState:
    """What the previous poll saw."""

    last_poll_time: Optional[str] = None
    last_processed_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lastPollTime": self.last_poll_time,
            "lastProcessedIds": list(self.last_processed_ids),
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "PollState":
        data = data or {}
        return cls(
            last_poll_time=data.get("lastPollTime"),
            last_processed_ids=list(data.get("lastProcessedIds") or []),
        )


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def event_id(event: Mapping[str, Any]) -> str:
    """Identity used for deduplication: ``id``, else ``txHash``, else ``commitment``."""
    return event.get("id") or event.get("txHash") or event.get("commitment") or ""


def extract_list(response: Any, key: str) -> List[Event]:
    """Pull the event list out of ``response[key]``, ``response["data"]`` or ``response``."""
    if isinstance(response, list):
        return response
    if isinstance(response, dict):
        for found in (response.get(key), response.get("data")):
            if isinstance(found, list):
                return found
    return []


def annotate(events: List[Event], event_type: TriggerEvent) -> List[Event]:
    triggered_at = utc_timestamp()
    return [{**e, "eventType": event_type.value, "triggeredAt": triggered_at} for e in events]


class AztecTrigger:
    """Polls the Aztec API for one configured event type."""

    def __init__(self, client: Optional[AztecClient] = None):
        self.client = client or AztecClient()
        self._pollers: Dict[TriggerEvent, Callable[[TriggerParameters, Dict[str, Any]], List[Event]]] = {
            TriggerEvent.NEW_PRIVATE_TRANSACTION: self._poll_private_transactions,
            TriggerEvent.SHIELD_UNSHIELD_EVENT: self._poll_shield_events,
            TriggerEvent.NOTE_RECEIVED: self._poll_notes,
            TriggerEvent.ROLLUP_PUBLISHED: self._poll_rollups,
            TriggerEvent.BRIDGE_COMPLETION: self._poll_bridge_events,
        }

    def _poll_private_transactions(self, params: TriggerParameters, query: Dict[str, Any]) -> List[Event]:
        query["type"] = "private"
        if params.token_address:
            query["token"] = params.token_address
        if params.min_amount:
            query["minAmount"] = params.min_amount
        response = self.client.request("GET", "/transactions", query=query)
        return extract_list(response, "transactions")

    def _poll_shield_events(self, params: TriggerParameters, query: Dict[str, Any]) -> List[Event]:
        if params.shield_type != ShieldType.BOTH:
            query["type"] = params.shield_type.value
        if params.shield_token_address:
            query["token"] = params.shield_token_address
        response = self.client.request("GET", "/events/shield", query=query)
        return extract_list(response, "events")

    def _poll_notes(self, params: TriggerParameters, query: Dict[str, Any]) -> List[Event]:
        query["status"] = "committed"
        if params.note_type != NoteKind.ALL:
            query["noteType"] = params.note_type.value
        response = self.client.request("GET", "/notes", query=query)
        return extract_list(response, "notes")

    def _poll_rollups(self, params: TriggerParameters, query: Dict[str, Any]) -> List[Event]:
        if params.include_transactions:
            query["includeTransactions"] = True
        response = self.client.request("GET", "/rollups", query=query)
        return extract_list(response, "rollups")

    def _poll_bridge_events(self, params: TriggerParameters, query: Dict[str, Any]) -> List[Event]:
        if params.bridge_id:
            query["bridgeId"] = params.bridge_id
        if params.bridge_status != BridgeStatusFilter.ALL:
            query["status"] = params.bridge_status.value
        response = self.client.request("GET", "/bridges/events", query=query)
        return extract_list(response, "events")

    def poll(self, params: TriggerParameters, state: PollState) -> Optional[List[Event]]:
        """
        Fetch events newer than the last poll.

        ``state`` is updated in place: the poll time becomes now and the
        tracked IDs become those of the events returned by this poll.

        Args:
            params: Trigger configuration
            state: State persisted from the previous poll

        Returns:
            list: New events, or None when there are none

        Raises:
            AztecNodeException: If the request fails (logged, then re-raised)
        """
        log_licensing_notice()

        now = utc_timestamp()
        query: Dict[str, Any] = {"limit": params.max_results}
        if state.last_poll_time:
            query["since"] = state.last_poll_time

        try:
            events = annotate(self._pollers[params.event](params, query), params.event)
        except Exception as e:
            logger.error(f"Aztec trigger poll error: {e}")
            raise

        seen = set(state.last_processed_ids)
        new_events = [e for e in events if event_id(e) not in seen]

        state.last_poll_time = now
        state.last_processed_ids = [event_id(e) for e in new_events][:MAX_TRACKED_EVENT_IDS]

        if not new_events:
            return None
        logger.debug(f"Trigger {params.event.value} emitted {len(new_events)} event(s)")
        return new_events
