"""Zero-knowledge proof operations.

Proof generation and verification run on the remote API; these handlers
only submit requests and poll for status.
"""

from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import Field

from aztec_node.actions.base import JSONDict, OperationParams, dispatch, operation_names
from aztec_node.models.schemas import ProofType, VerifierType


class GenerateProof(OperationParams):
    operation: Literal["generateProof"]
    proof_type: ProofType = ProofType.TRANSFER
    proof_inputs: Dict[str, Any] = Field(default_factory=dict)
    async_: bool = Field(default=True, alias="async")


class VerifyProof(OperationParams):
    operation: Literal["verifyProof"]
    proof_data: str
    public_inputs: List[str] = Field(default_factory=list)
    verifier_type: VerifierType = VerifierType.STANDARD


class GetProofStatus(OperationParams):
    operation: Literal["getProofStatus"]
    proof_id: str


class GetProofSize(OperationParams):
    operation: Literal["getProofSize"]
    proof_id: str


ProofsOperation = Annotated[
    Union[GenerateProof, VerifyProof, GetProofStatus, GetProofSize],
    Field(discriminator="operation"),
]


def _generate_proof(client, params: GenerateProof) -> JSONDict:
    return client.request(
        "POST",
        "/v1/proofs/generate",
        {"type": params.proof_type.value, "inputs": params.proof_inputs, "async": params.async_},
    )


def _verify_proof(client, params: VerifyProof) -> JSONDict:
    return client.request(
        "POST",
        "/v1/proofs/verify",
        {
            "proofData": params.proof_data,
            "publicInputs": params.public_inputs,
            "verifierType": params.verifier_type.value,
        },
    )


def _get_proof_status(client, params: GetProofStatus) -> JSONDict:
    return client.request("GET", f"/v1/proofs/{params.proof_id}/status")


def _get_proof_size(client, params: GetProofSize) -> JSONDict:
    return client.request("GET", f"/v1/proofs/{params.proof_id}/size")


HANDLERS = {
    GenerateProof: _generate_proof,
    VerifyProof: _verify_proof,
    GetProofStatus: _get_proof_status,
    GetProofSize: _get_proof_size,
}

OPERATIONS = operation_names(HANDLERS)


def execute_proofs_operation(client, params: OperationParams) -> JSONDict:
    """Execute one proof operation."""
    return dispatch(HANDLERS, client, params)
