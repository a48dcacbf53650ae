"""Tests for note encryption."""

import pytest

from aztec_node.core.cipher import (
    EncryptedNote,
    NoteCipher,
    decrypt_note,
    encrypt_note,
    xor_keystream,
)
from aztec_node.core.keys import derive_keys
from aztec_node.exceptions import DecryptionError, EncryptionError, FormatError
from aztec_node.utils.encoding import hex_to_bytes, is_valid_hex

EPHEMERAL_PUBLIC = "0x" + "aa" * 32
VIEWING_PRIVATE = "0x" + "bb" * 32
NONCE = "0x" + "00" * 12


class TestXorKeystream:

    def test_involution(self):
        key = bytes(range(32))
        data = b"some note payload that is longer than thirty-two bytes"
        assert xor_keystream(xor_keystream(data, key), key) == data

    def test_key_repeats(self):
        key = b"\x01\x02"
        assert xor_keystream(b"\x00" * 5, key) == b"\x01\x02\x01\x02\x01"

    def test_empty(self):
        assert xor_keystream(b"", b"\x01") == b""


class TestEncrypt:
    """Tests for note encryption."""

    def test_output_shape(self):
        keys = derive_keys("0x" + "1" * 64)
        note = NoteCipher.encrypt("hello", keys.viewing_key.public_key)

        assert is_valid_hex(note.ciphertext, 10)
        assert is_valid_hex(note.ephemeral_public_key, 64)
        assert is_valid_hex(note.nonce, 24)

    def test_ciphertext_length_matches_plaintext(self):
        note = encrypt_note("x" * 100, "0x" + "01" * 32)
        assert len(hex_to_bytes(note.ciphertext)) == 100

    def test_bytes_plaintext(self):
        note = encrypt_note(b"\x00\x01\x02", "0x" + "01" * 32)
        assert len(hex_to_bytes(note.ciphertext)) == 3

    def test_fresh_randomness(self):
        first = encrypt_note("same", "0x" + "01" * 32)
        second = encrypt_note("same", "0x" + "01" * 32)
        assert first.ciphertext != second.ciphertext
        assert first.ephemeral_public_key != second.ephemeral_public_key
        assert first.nonce != second.nonce

    def test_invalid_public_key(self):
        with pytest.raises(FormatError):
            encrypt_note("hello", "0xnot-hex")

    def test_invalid_plaintext_type(self):
        with pytest.raises(EncryptionError):
            NoteCipher.encrypt(12345, "0x" + "01" * 32)


class TestDecrypt:
    """Tests for note decryption."""

    def test_known_vector(self):
        note = EncryptedNote("0x8abd6314b8", EPHEMERAL_PUBLIC, NONCE)
        assert decrypt_note(note, VIEWING_PRIVATE) == "hello"

    def test_keystream_wraps(self):
        note = EncryptedNote(
            "0x83b96e19b6f146340c0778c0216764cadcab0ad78a4581e27f528db4270ec497"
            "83b96e19b6f14634",
            EPHEMERAL_PUBLIC,
            "0x" + "ff" * 12,
        )
        assert decrypt_note(note, VIEWING_PRIVATE) == "a" * 40

    def test_nonce_not_mixed_in(self):
        first = EncryptedNote("0x8abd6314b8", EPHEMERAL_PUBLIC, NONCE)
        second = EncryptedNote("0x8abd6314b8", EPHEMERAL_PUBLIC, "0x" + "12" * 12)
        assert decrypt_note(first, VIEWING_PRIVATE) == decrypt_note(second, VIEWING_PRIVATE)

    def test_wrong_nonce_length(self):
        note = EncryptedNote("0x8abd6314b8", EPHEMERAL_PUBLIC, "0x" + "00" * 11)
        with pytest.raises(FormatError):
            decrypt_note(note, VIEWING_PRIVATE)

    def test_malformed_ciphertext(self):
        note = EncryptedNote("0x8abd6314b", EPHEMERAL_PUBLIC, NONCE)
        with pytest.raises(FormatError):
            decrypt_note(note, VIEWING_PRIVATE)

    def test_empty_ciphertext(self):
        note = EncryptedNote("0x", EPHEMERAL_PUBLIC, NONCE)
        assert decrypt_note(note, VIEWING_PRIVATE) == ""

    def test_invalid_utf8_replaced(self):
        # first keystream byte is 0xe2, leaving a lone 0xe8 lead byte
        note = EncryptedNote("0x0a", EPHEMERAL_PUBLIC, NONCE)
        text = NoteCipher.decrypt(note, VIEWING_PRIVATE)
        assert text == "\ufffd"

    def test_invalid_utf8_strict(self):
        note = EncryptedNote("0x0a", EPHEMERAL_PUBLIC, NONCE)
        with pytest.raises(DecryptionError):
            NoteCipher.decrypt(note, VIEWING_PRIVATE, strict=True)

    def test_decrypt_bytes(self):
        note = EncryptedNote("0x8abd6314b8", EPHEMERAL_PUBLIC, NONCE)
        assert NoteCipher.decrypt_bytes(note, VIEWING_PRIVATE) == b"hello"


class TestEncryptedNoteSerialization:

    def test_to_dict(self):
        note = EncryptedNote("0x01", EPHEMERAL_PUBLIC, NONCE)
        assert note.to_dict() == {
            "ciphertext": "0x01",
            "ephemeralPublicKey": EPHEMERAL_PUBLIC,
            "nonce": NONCE,
        }

    def test_from_dict(self):
        note = EncryptedNote("0x01", EPHEMERAL_PUBLIC, NONCE)
        assert EncryptedNote.from_dict(note.to_dict()) == note

    def test_from_dict_missing_field(self):
        with pytest.raises(FormatError):
            EncryptedNote.from_dict({"ciphertext": "0x01"})
