"""Note encryption for viewing-key holders.

Scheme:

    encrypt:  e  <- random 32 bytes,  nonce <- random 12 bytes
              s  = H(e || recipient_viewing_public)
              ct = plaintext XOR repeat(s)
              publishes (ct, H(e), nonce)

    decrypt:  s' = H(ephemeral_public || viewing_private)
              pt = ct XOR repeat(s')

Limitations:
    - The encryptor and decryptor derive the keystream from different
      inputs (raw ephemeral key + recipient public key vs. hashed ephemeral
      key + recipient private key), so a note produced by ``encrypt`` does
      not in general decrypt back to its plaintext. Both halves keep the
      established note wire format; this is not a secure encryption
      scheme.
    - The nonce is carried and validated but never enters the keystream.
    - There is no authentication tag, so tampering goes undetected.
"""

import secrets
from dataclasses import dataclass
from typing import Dict, Union

from aztec_node.exceptions import DecryptionError, EncryptionError, FormatError
from aztec_node.utils.encoding import bytes_to_hex, hex_to_bytes
from aztec_node.utils.hash import hash_concatenate, sha256


@dataclass(frozen=True)
class EncryptedNote:
    """Output of a single encryption call."""

    ciphertext: str
    ephemeral_public_key: str
    nonce: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to the camelCase wire representation."""
        return {
            "ciphertext": self.ciphertext,
            "ephemeralPublicKey": self.ephemeral_public_key,
            "nonce": self.nonce,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "EncryptedNote":
        """Build from the camelCase wire representation."""
        try:
            return cls(
                ciphertext=data["ciphertext"],
                ephemeral_public_key=data["ephemeralPublicKey"],
                nonce=data["nonce"],
            )
        except KeyError as e:
            raise FormatError(f"Encrypted note is missing field {e}")


def xor_keystream(data: bytes, key: bytes) -> bytes:
    """XOR ``data`` with ``key`` repeated to its length."""
    key_len = len(key)
    return bytes(b ^ key[i % key_len] for i, b in enumerate(data))


class NoteCipher:
    """Symmetric note encryption keyed by an ephemeral shared secret."""
    
    # Constants
    EPHEMERAL_KEY_SIZE = 32  # bytes
    NONCE_SIZE = 12  # bytes
    KEY_SIZE = 32  # bytes
    
    @staticmethod
    def encrypt(plaintext: Union[str, bytes], recipient_viewing_public_key: str) -> EncryptedNote:
        """
        Encrypt note data for a recipient.
        
        Fresh ephemeral key and nonce per call, so two encryptions of the
        same plaintext for the same recipient never match.
        
        Args:
            plaintext: Note data (str is UTF-8 encoded)
            recipient_viewing_public_key: Recipient's viewing public key (hex)
            
        Returns:
            EncryptedNote: Ciphertext, hashed ephemeral key and nonce
            
        Raises:
            FormatError: If the public key is malformed hex
            EncryptionError: If plaintext is neither str nor bytes
        """
        recipient_key = hex_to_bytes(recipient_viewing_public_key)
        if isinstance(plaintext, str):
            plaintext = plaintext.encode("utf-8")
        elif not isinstance(plaintext, (bytes, bytearray)):
            raise EncryptionError(f"Note data must be str or bytes, got {type(plaintext).__name__}")

        nonce = secrets.token_bytes(NoteCipher.NONCE_SIZE)
        ephemeral_key = secrets.token_bytes(NoteCipher.EPHEMERAL_KEY_SIZE)

        shared_secret = hash_concatenate(ephemeral_key, recipient_key)
        ciphertext = xor_keystream(plaintext, shared_secret)

        return EncryptedNote(
            ciphertext=bytes_to_hex(ciphertext),
            ephemeral_public_key=bytes_to_hex(sha256(ephemeral_key)),
            nonce=bytes_to_hex(nonce),
        )
    
    @staticmethod
    def decrypt_bytes(note: EncryptedNote, viewing_private_key: str) -> bytes:
        """
        Decrypt note data to raw bytes.
        
        Args:
            note: Encrypted note
            viewing_private_key: Recipient's viewing private key (hex)
            
        Returns:
            bytes: XOR-decrypted payload
            
        Raises:
            FormatError: If any field is malformed hex
        """
        ciphertext = hex_to_bytes(note.ciphertext)
        ephemeral_public = hex_to_bytes(note.ephemeral_public_key)
        hex_to_bytes(note.nonce, NoteCipher.NONCE_SIZE)
        private_key = hex_to_bytes(viewing_private_key)

        shared_secret = hash_concatenate(ephemeral_public, private_key)
        return xor_keystream(ciphertext, shared_secret)
    
    @staticmethod
    def decrypt(note: EncryptedNote, viewing_private_key: str, strict: bool = False) -> str:
        """
        Decrypt note data to text.
        
        Invalid UTF-8 sequences are replaced with U+FFFD unless ``strict``
        is set.
        
        Raises:
            FormatError: If any field is malformed hex
            DecryptionError: If ``strict`` and the payload is not valid UTF-8
        """
        payload = NoteCipher.decrypt_bytes(note, viewing_private_key)
        if not strict:
            return payload.decode("utf-8", errors="replace")
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecryptionError(f"Decrypted note is not valid UTF-8: {e}")


def encrypt_note(plaintext: Union[str, bytes], viewing_public_key: str) -> EncryptedNote:
    """Module-level shortcut for :meth:`NoteCipher.encrypt`."""
    return NoteCipher.encrypt(plaintext, viewing_public_key)


def decrypt_note(note: EncryptedNote, viewing_private_key: str) -> str:
    """Module-level shortcut for :meth:`NoteCipher.decrypt`."""
    return NoteCipher.decrypt(note, viewing_private_key)
