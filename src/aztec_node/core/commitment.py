"""Note commitment and nullifier computation."""

import secrets
from dataclasses import dataclass
from typing import Dict, Union

from aztec_node.exceptions import FormatError
from aztec_node.utils.encoding import bytes_to_hex, hex_to_bytes, number_to_hex, pad_hex
from aztec_node.utils.hash import hash_concatenate, sha256


@dataclass
class NoteData:
    """A freshly created private note."""
    
    value: str
    token_address: str
    owner: str
    randomness: str
    commitment: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary."""
        return {
            "value": self.value,
            "tokenAddress": self.token_address,
            "owner": self.owner,
            "randomness": self.randomness,
            "commitment": self.commitment,
        }


class NoteCommitment:
    """
    Note commitment and nullifier generation.
    
    commitment = H(pad32(value) || token_address || owner || randomness)
    nullifier  = H(commitment || nullifier_key || uint64_be(position))
    """
    
    # Constants
    FIELD_SIZE = 32  # bytes
    RANDOMNESS_SIZE = 32  # bytes
    POSITION_SIZE = 8  # bytes, big-endian
    MAX_POSITION = 2 ** 64 - 1
    
    @staticmethod
    def generate_randomness() -> str:
        """
        Generate note randomness.
        
        Must be called once per note; reusing randomness across notes with
        the same value, token and owner produces colliding commitments.
        
        Returns:
            str: 32 random bytes, hex
        """
        return bytes_to_hex(secrets.token_bytes(NoteCommitment.RANDOMNESS_SIZE))
    
    @staticmethod
    def encode_value(value: Union[int, str]) -> bytes:
        """
        Encode a note value as a 32-byte big-endian field.
        
        Args:
            value: Non-negative integer or hex string
            
        Raises:
            FormatError: If value is malformed or wider than 32 bytes
        """
        if not isinstance(value, str):
            value = number_to_hex(value)
        padded = pad_hex(value, NoteCommitment.FIELD_SIZE * 2)
        return hex_to_bytes(padded)
    
    @staticmethod
    def compute_commitment(
        value: Union[int, str],
        token_address: str,
        owner: str,
        randomness: str,
    ) -> str:
        """
        Compute a note commitment.
        
        Args:
            value: Note value (integer or hex), left-padded to 32 bytes
            token_address: Token address (32-byte hex)
            owner: Owner address (32-byte hex)
            randomness: Per-note randomness (32-byte hex)
            
        Returns:
            str: SHA-256 commitment (32-byte hex)
            
        Raises:
            FormatError: If any input is malformed
        """
        size = NoteCommitment.FIELD_SIZE
        digest = hash_concatenate(
            NoteCommitment.encode_value(value),
            hex_to_bytes(token_address, size),
            hex_to_bytes(owner, size),
            hex_to_bytes(randomness, size),
        )
        return bytes_to_hex(digest)
    
    @staticmethod
    def compute_nullifier(commitment: str, nullifier_key: str, position: int) -> str:
        """
        Compute the nullifier marking a note commitment as spent.
        
        Different positions over the same commitment and key always give
        different nullifiers.
        
        Args:
            commitment: Note commitment (32-byte hex)
            nullifier_key: Nullifier key material (32-byte hex)
            position: Ordinal position of the note, 0 <= position < 2**64
            
        Returns:
            str: SHA-256 nullifier (32-byte hex)
            
        Raises:
            FormatError: If inputs are malformed or position is out of range
        """
        if isinstance(position, bool) or not isinstance(position, int):
            raise FormatError(f"Position must be an integer, got {type(position).__name__}")
        if not 0 <= position <= NoteCommitment.MAX_POSITION:
            raise FormatError(f"Position {position} does not fit in 8 bytes")

        size = NoteCommitment.FIELD_SIZE
        digest = hash_concatenate(
            hex_to_bytes(commitment, size),
            hex_to_bytes(nullifier_key, size),
            position.to_bytes(NoteCommitment.POSITION_SIZE, "big"),
        )
        return bytes_to_hex(digest)
    
    @staticmethod
    def create_note(value: Union[int, str], token_address: str, owner: str) -> NoteData:
        """
        Create a note with fresh randomness and its commitment.
        
        Args:
            value: Note value
            token_address: Token address (32-byte hex)
            owner: Owner address (32-byte hex)
            
        Returns:
            NoteData: Note fields plus computed commitment
        """
        randomness = NoteCommitment.generate_randomness()
        commitment = NoteCommitment.compute_commitment(value, token_address, owner, randomness)
        return NoteData(
            value=bytes_to_hex(NoteCommitment.encode_value(value)),
            token_address=token_address,
            owner=owner,
            randomness=randomness,
            commitment=commitment,
        )
    
    @staticmethod
    def verify_commitment(
        value: Union[int, str],
        token_address: str,
        owner: str,
        randomness: str,
        expected_commitment: str,
    ) -> bool:
        """
        Verify that a commitment matches the given note fields.
        
        Returns:
            bool: True if commitment is valid, False otherwise
        """
        try:
            computed = NoteCommitment.compute_commitment(value, token_address, owner, randomness)
            return computed == expected_commitment.lower()
        except (FormatError, AttributeError):
            return False
    
    @staticmethod
    def verify_nullifier(
        commitment: str,
        nullifier_key: str,
        position: int,
        expected_nullifier: str,
    ) -> bool:
        """
        Verify that a nullifier matches the given commitment, key and position.
        
        Returns:
            bool: True if nullifier is valid, False otherwise
        """
        try:
            computed = NoteCommitment.compute_nullifier(commitment, nullifier_key, position)
            return computed == expected_nullifier.lower()
        except (FormatError, AttributeError):
            return False


def generate_shield_secret() -> str:
    """Generate a random 32-byte secret for a shield operation."""
    return bytes_to_hex(secrets.token_bytes(32))


def compute_secret_hash(secret: str) -> str:
    """
    Compute the secret hash H(secret) submitted with a shield operation.
    
    Raises:
        FormatError: If secret is malformed hex
    """
    return bytes_to_hex(sha256(hex_to_bytes(secret)))


def compute_commitment(value: Union[int, str], token_address: str, owner: str, randomness: str) -> str:
    """Module-level shortcut for :meth:`NoteCommitment.compute_commitment`."""
    return NoteCommitment.compute_commitment(value, token_address, owner, randomness)


def compute_nullifier(commitment: str, nullifier_key: str, position: int) -> str:
    """Module-level shortcut for :meth:`NoteCommitment.compute_nullifier`."""
    return NoteCommitment.compute_nullifier(commitment, nullifier_key, position)
