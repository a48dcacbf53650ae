"""Key hierarchy and account address derivation.

A single 32-byte master secret fans out into three role-specific key pairs
using domain-separated SHA-256:

    private = H(master || utf8(tag))      tag in {spending, viewing, nullifier}
    public  = H(private)

"Public" and "private" name the role of each value, not an elliptic-curve
relationship: the public half is a one-way image of the private half and
nothing more. Account addresses bind the spending and viewing public keys
to a partial-address salt:

    address = H(spending_public || viewing_public || partial_address)
"""

import secrets
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from aztec_node.utils.encoding import bytes_to_hex, hex_to_bytes
from aztec_node.utils.hash import HASH_SIZE, derive_tagged, hash_concatenate, sha256


class KeyType(str, Enum):
    """Role of a derived key pair."""
    SPENDING = "spending"
    VIEWING = "viewing"
    NULLIFIER = "nullifier"


@dataclass(frozen=True)
class KeyPair:
    """A derived key pair, hex encoded."""

    public_key: str
    private_key: str
    type: KeyType

    def to_dict(self) -> Dict[str, str]:
        """Convert to the camelCase wire representation."""
        return {
            "publicKey": self.public_key,
            "privateKey": self.private_key,
            "type": self.type.value,
        }


@dataclass(frozen=True)
class AccountKeys:
    """The three key pairs derived from one master secret."""

    spending_key: KeyPair
    viewing_key: KeyPair
    nullifier_key: KeyPair

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Convert to dictionary."""
        return {
            "spendingKey": self.spending_key.to_dict(),
            "viewingKey": self.viewing_key.to_dict(),
            "nullifierKey": self.nullifier_key.to_dict(),
        }


@dataclass(frozen=True)
class AccountMaterial:
    """Everything needed to register a fresh account."""

    master_secret: str
    keys: AccountKeys
    partial_address: str
    address: str


class KeyDerivation:
    """
    Deterministic key and address derivation.
    
    All methods are pure except the two generators, which draw from the
    operating system CSPRNG via :mod:`secrets`.
    """
    
    # Constants
    MASTER_SECRET_SIZE = 32  # bytes
    PARTIAL_ADDRESS_SIZE = 32  # bytes
    KEY_SIZE = HASH_SIZE
    
    @staticmethod
    def generate_master_secret() -> str:
        """
        Generate a random master secret.
        
        Returns:
            str: 32 random bytes, '0x'-prefixed hex
        """
        return bytes_to_hex(secrets.token_bytes(KeyDerivation.MASTER_SECRET_SIZE))
    
    @staticmethod
    def generate_partial_address() -> str:
        """Generate a random partial-address salt."""
        return bytes_to_hex(secrets.token_bytes(KeyDerivation.PARTIAL_ADDRESS_SIZE))
    
    @staticmethod
    def derive_key_pair(master_bytes: bytes, key_type: KeyType) -> KeyPair:
        """Derive one key pair for ``key_type`` from raw master secret bytes."""
        private = derive_tagged(master_bytes, key_type.value)
        public = sha256(private)
        return KeyPair(
            public_key=bytes_to_hex(public),
            private_key=bytes_to_hex(private),
            type=key_type,
        )
    
    @staticmethod
    def derive_keys(master_secret: str) -> AccountKeys:
        """
        Derive the spending, viewing and nullifier key pairs.
        
        Args:
            master_secret: 32-byte hex master secret
            
        Returns:
            AccountKeys: Identical output for identical input
            
        Raises:
            FormatError: If master_secret is not valid 32-byte hex
        """
        master_bytes = hex_to_bytes(master_secret, KeyDerivation.MASTER_SECRET_SIZE)
        return AccountKeys(
            spending_key=KeyDerivation.derive_key_pair(master_bytes, KeyType.SPENDING),
            viewing_key=KeyDerivation.derive_key_pair(master_bytes, KeyType.VIEWING),
            nullifier_key=KeyDerivation.derive_key_pair(master_bytes, KeyType.NULLIFIER),
        )
    
    @staticmethod
    def derive_address(
        spending_public_key: str,
        viewing_public_key: str,
        partial_address: str,
    ) -> str:
        """
        Derive an account address from public keys and a salt.
        
        The operands are decoded and concatenated as raw bytes, so swapping
        the two public keys yields a different address.
        
        Args:
            spending_public_key: Spending public key (hex)
            viewing_public_key: Viewing public key (hex)
            partial_address: Partial-address salt (hex)
            
        Returns:
            str: 32-byte address, hex
            
        Raises:
            FormatError: If any operand is malformed hex
        """
        digest = hash_concatenate(
            hex_to_bytes(spending_public_key),
            hex_to_bytes(viewing_public_key),
            hex_to_bytes(partial_address),
        )
        return bytes_to_hex(digest)
    
    @staticmethod
    def create_account_material() -> AccountMaterial:
        """
        Create a fresh master secret, its keys and a derived address.
        
        Returns:
            AccountMaterial: Secret, keys, partial address and address
        """
        master_secret = KeyDerivation.generate_master_secret()
        keys = KeyDerivation.derive_keys(master_secret)
        partial_address = KeyDerivation.generate_partial_address()
        address = KeyDerivation.derive_address(
            keys.spending_key.public_key,
            keys.viewing_key.public_key,
            partial_address,
        )
        return AccountMaterial(
            master_secret=master_secret,
            keys=keys,
            partial_address=partial_address,
            address=address,
        )


def derive_keys(master_secret: str) -> AccountKeys:
    """Module-level shortcut for :meth:`KeyDerivation.derive_keys`."""
    return KeyDerivation.derive_keys(master_secret)


def derive_address(spending_public_key: str, viewing_public_key: str, partial_address: str) -> str:
    """Module-level shortcut for :meth:`KeyDerivation.derive_address`."""
    return KeyDerivation.derive_address(spending_public_key, viewing_public_key, partial_address)


def generate_master_secret() -> str:
    """Module-level shortcut for :meth:`KeyDerivation.generate_master_secret`."""
    return KeyDerivation.generate_master_secret()
