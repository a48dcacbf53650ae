"""Tests for note commitments and nullifiers."""

import pytest

from aztec_node.core.commitment import (
    NoteCommitment,
    NoteData,
    compute_commitment,
    compute_nullifier,
    compute_secret_hash,
    generate_shield_secret,
)
from aztec_node.exceptions import FormatError
from aztec_node.utils.encoding import is_valid_hex

TOKEN = "0x" + "22" * 32
OWNER = "0x" + "33" * 32
RANDOMNESS = "0x" + "44" * 32
COMMITMENT = "0x" + "11" * 32
NULLIFIER_KEY = "0x" + "22" * 32

EXPECTED_COMMITMENT = "0x2ea9d8def3263827c2b5c8d1b8007b989cf3a06ef76aa2dbe878cf4b96245251"


class TestRandomnessGeneration:
    """Tests for secret and randomness generation."""

    def test_generate_randomness(self):
        rand1 = NoteCommitment.generate_randomness()
        rand2 = NoteCommitment.generate_randomness()

        assert is_valid_hex(rand1, 64)
        assert rand1 != rand2  # Should be random

    def test_generate_shield_secret(self):
        assert is_valid_hex(generate_shield_secret(), 64)

    def test_compute_secret_hash(self):
        assert compute_secret_hash(COMMITMENT) == (
            "0x02d449a31fbb267c8f352e9968a79e3e5fc95c1bbeaa502fd6454ebde5a4bedc"
        )


class TestValueEncoding:

    def test_int_and_hex_agree(self):
        assert NoteCommitment.encode_value(256) == NoteCommitment.encode_value("0x100")

    def test_padded_to_32_bytes(self):
        encoded = NoteCommitment.encode_value(1)
        assert len(encoded) == 32
        assert encoded[-1] == 1

    def test_too_wide(self):
        with pytest.raises(FormatError):
            NoteCommitment.encode_value(2 ** 256)

    def test_negative(self):
        with pytest.raises(FormatError):
            NoteCommitment.encode_value(-1)


class TestCommitmentComputation:
    """Tests for commitment computation."""

    def test_known_vector(self):
        assert compute_commitment("0x100", TOKEN, OWNER, RANDOMNESS) == EXPECTED_COMMITMENT

    def test_integer_value(self):
        assert compute_commitment(256, TOKEN, OWNER, RANDOMNESS) == EXPECTED_COMMITMENT

    def test_deterministic(self):
        first = NoteCommitment.compute_commitment(5, TOKEN, OWNER, RANDOMNESS)
        second = NoteCommitment.compute_commitment(5, TOKEN, OWNER, RANDOMNESS)
        assert first == second

    def test_randomness_hides_value(self):
        other = "0x" + "45" * 32
        assert compute_commitment(5, TOKEN, OWNER, RANDOMNESS) != compute_commitment(5, TOKEN, OWNER, other)

    def test_different_owner(self):
        other = "0x" + "34" * 32
        assert compute_commitment(5, TOKEN, OWNER, RANDOMNESS) != compute_commitment(5, TOKEN, other, RANDOMNESS)

    @pytest.mark.parametrize("field", ["token", "owner", "randomness"])
    def test_wrong_field_length(self, field):
        args = {"token": TOKEN, "owner": OWNER, "randomness": RANDOMNESS}
        args[field] = "0x" + "22" * 31
        with pytest.raises(FormatError):
            compute_commitment(1, args["token"], args["owner"], args["randomness"])

    def test_invalid_value(self):
        with pytest.raises(FormatError):
            compute_commitment("0xnothex", TOKEN, OWNER, RANDOMNESS)

    def test_value_with_trailing_newline(self):
        with pytest.raises(FormatError):
            compute_commitment("0x1\n", TOKEN, OWNER, RANDOMNESS)


class TestNullifierComputation:
    """Tests for nullifier computation."""

    def test_known_vectors(self):
        assert compute_nullifier(COMMITMENT, NULLIFIER_KEY, 0) == (
            "0x4c8289b842507979d1b7de9e398647b30eb2494aa203c68a3b8360481cb41822"
        )
        assert compute_nullifier(COMMITMENT, NULLIFIER_KEY, 1) == (
            "0x5e59699cff4b7ed5a90c39153df658cd2e008c306830ee96aa2308f709909a0a"
        )

    def test_position_changes_nullifier(self):
        nullifiers = {compute_nullifier(COMMITMENT, NULLIFIER_KEY, i) for i in range(50)}
        assert len(nullifiers) == 50

    def test_max_position(self):
        assert is_valid_hex(compute_nullifier(COMMITMENT, NULLIFIER_KEY, 2 ** 64 - 1), 64)

    @pytest.mark.parametrize("position", [-1, 2 ** 64, 1.5, "1", True])
    def test_invalid_position(self, position):
        with pytest.raises(FormatError):
            compute_nullifier(COMMITMENT, NULLIFIER_KEY, position)

    def test_invalid_commitment(self):
        with pytest.raises(FormatError):
            compute_nullifier("0x1234", NULLIFIER_KEY, 0)


class TestNoteCreation:

    def test_create_note(self):
        note = NoteCommitment.create_note(1000, TOKEN, OWNER)

        assert isinstance(note, NoteData)
        assert note.commitment == compute_commitment(1000, TOKEN, OWNER, note.randomness)
        assert note.value == "0x" + "0" * 61 + "3e8"

    def test_create_note_fresh_randomness(self):
        first = NoteCommitment.create_note(1, TOKEN, OWNER)
        second = NoteCommitment.create_note(1, TOKEN, OWNER)
        assert first.commitment != second.commitment

    def test_to_dict(self):
        data = NoteCommitment.create_note(1, TOKEN, OWNER).to_dict()
        assert set(data) == {"value", "tokenAddress", "owner", "randomness", "commitment"}


class TestVerification:

    def test_verify_commitment(self):
        assert NoteCommitment.verify_commitment(256, TOKEN, OWNER, RANDOMNESS, EXPECTED_COMMITMENT)
        assert NoteCommitment.verify_commitment(256, TOKEN, OWNER, RANDOMNESS, EXPECTED_COMMITMENT.upper().replace("0X", "0x"))

    def test_verify_commitment_mismatch(self):
        assert not NoteCommitment.verify_commitment(257, TOKEN, OWNER, RANDOMNESS, EXPECTED_COMMITMENT)

    def test_verify_commitment_malformed(self):
        assert not NoteCommitment.verify_commitment(256, "0xzz", OWNER, RANDOMNESS, EXPECTED_COMMITMENT)

    def test_verify_nullifier(self):
        nullifier = compute_nullifier(COMMITMENT, NULLIFIER_KEY, 7)
        assert NoteCommitment.verify_nullifier(COMMITMENT, NULLIFIER_KEY, 7, nullifier)
        assert not NoteCommitment.verify_nullifier(COMMITMENT, NULLIFIER_KEY, 8, nullifier)
        assert not NoteCommitment.verify_nullifier(COMMITMENT, NULLIFIER_KEY, -1, nullifier)
