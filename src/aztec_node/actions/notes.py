"""Private note operations."""

from typing import Annotated, Literal, Union

from pydantic import Field

from aztec_node.actions.base import JSONDict, OperationParams, dispatch, operation_names
from aztec_node.models.schemas import NoteStatus, NoteTransactionType


class _NoteListing(OperationParams):
    account_address: str
    token_address: str = ""
    limit: int = Field(default=50, gt=0)
    offset: int = Field(default=0, ge=0)

    def listing_query(self) -> JSONDict:
        query: JSONDict = {"limit": self.limit, "offset": self.offset}
        if self.token_address:
            query["tokenAddress"] = self.token_address
        return query


class GetNotes(_NoteListing):
    operation: Literal["getNotes"]


class GetPendingNotes(_NoteListing):
    operation: Literal["getPendingNotes"]


class GetNullifiedNotes(_NoteListing):
    operation: Literal["getNullifiedNotes"]


class GetNoteByCommitment(OperationParams):
    operation: Literal["getNoteByCommitment"]
    commitment: str


class SpendNote(OperationParams):
    operation: Literal["spendNote"]
    commitment: str
    transaction_type: NoteTransactionType = NoteTransactionType.TRANSFER
    recipient: str


NotesOperation = Annotated[
    Union[GetNotes, GetNoteByCommitment, SpendNote, GetPendingNotes, GetNullifiedNotes],
    Field(discriminator="operation"),
]


def _get_notes(client, params: GetNotes) -> JSONDict:
    return client.request(
        "GET", f"/v1/notes/{params.account_address}", query=params.listing_query()
    )


def _get_note_by_commitment(client, params: GetNoteByCommitment) -> JSONDict:
    return client.request("GET", f"/v1/notes/commitment/{params.commitment}")


def _spend_note(client, params: SpendNote) -> JSONDict:
    return client.request(
        "POST",
        "/v1/notes/spend",
        {
            "commitment": params.commitment,
            "transactionType": params.transaction_type.value,
            "recipient": params.recipient,
        },
    )


def _get_pending_notes(client, params: GetPendingNotes) -> JSONDict:
    query = params.listing_query()
    query["status"] = NoteStatus.PENDING.value
    return client.request("GET", f"/v1/notes/{params.account_address}/pending", query=query)


def _get_nullified_notes(client, params: GetNullifiedNotes) -> JSONDict:
    return client.request(
        "GET", f"/v1/notes/{params.account_address}/nullified", query=params.listing_query()
    )


HANDLERS = {
    GetNotes: _get_notes,
    GetNoteByCommitment: _get_note_by_commitment,
    SpendNote: _spend_note,
    GetPendingNotes: _get_pending_notes,
    GetNullifiedNotes: _get_nullified_notes,
}

OPERATIONS = operation_names(HANDLERS)


def execute_notes_operation(client, params: OperationParams) -> JSONDict:
    """Execute one note operation."""
    return dispatch(HANDLERS, client, params)
