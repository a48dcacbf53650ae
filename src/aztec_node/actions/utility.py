"""Local key and note utilities, plus the API health check.

Apart from ``getApiHealth`` these operations never touch the network.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from aztec_node.actions.base import JSONDict, OperationParams, dispatch, operation_names
from aztec_node.core.cipher import EncryptedNote, NoteCipher
from aztec_node.core.keys import KeyDerivation


class DeriveKeys(OperationParams):
    operation: Literal["deriveKeys"]
    master_secret: str = ""


class EncryptNote(OperationParams):
    operation: Literal["encryptNote"]
    note_data: str
    viewing_public_key: str


class DecryptNote(OperationParams):
    operation: Literal["decryptNote"]
    ciphertext: str
    ephemeral_public_key: str
    nonce: str
    viewing_private_key: str


class GetApiHealth(OperationParams):
    operation: Literal["getApiHealth"]


UtilityOperation = Annotated[
    Union[DeriveKeys, EncryptNote, DecryptNote, GetApiHealth],
    Field(discriminator="operation"),
]


def _derive_keys(client, params: DeriveKeys) -> JSONDict:
    master_secret = params.master_secret or KeyDerivation.generate_master_secret()
    keys = KeyDerivation.derive_keys(master_secret)
    return {"masterSecret": master_secret, **keys.to_dict()}


def _encrypt_note(client, params: EncryptNote) -> JSONDict:
    return NoteCipher.encrypt(params.note_data, params.viewing_public_key).to_dict()


def _decrypt_note(client, params: DecryptNote) -> JSONDict:
    note = EncryptedNote(
        ciphertext=params.ciphertext,
        ephemeral_public_key=params.ephemeral_public_key,
        nonce=params.nonce,
    )
    return {"noteData": NoteCipher.decrypt(note, params.viewing_private_key)}


def _get_api_health(client, params: GetApiHealth) -> JSONDict:
    return client.request("GET", "/health")


HANDLERS = {
    DeriveKeys: _derive_keys,
    EncryptNote: _encrypt_note,
    DecryptNote: _decrypt_note,
    GetApiHealth: _get_api_health,
}

OPERATIONS = operation_names(HANDLERS)


def execute_utility_operation(client, params: OperationParams) -> JSONDict:
    """Execute one utility operation."""
    return dispatch(HANDLERS, client, params)
