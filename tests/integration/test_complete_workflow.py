"""Integration tests for complete account and note workflows."""

import pytest

from aztec_node import AztecNode, AztecTrigger, PollState, TriggerParameters
from aztec_node.core.commitment import NoteCommitment, compute_secret_hash
from aztec_node.core.keys import derive_keys


class TestCompleteAccountWorkflow:
    """Tests for complete account workflows."""

    @pytest.fixture
    def node(self, client):
        """Create a node for testing."""
        return AztecNode(client)

    def test_create_account_then_shield(self, node, session):
        """Create an account, shield tokens for it and find the resulting note."""
        token = "0x" + "00" * 31 + "01"

        # Step 1: Create the account locally and register it
        session.queue({"status": "registered"})
        account = node.execute("accounts", "createAccount", [{"alias": "alice"}])[0]["json"]
        keys = derive_keys(account["masterSecret"])
        assert account["viewingKey"]["publicKey"] == keys.viewing_key.public_key

        # Step 2: Shield with a fresh secret hash
        secret = NoteCommitment.generate_randomness()
        secret_hash = compute_secret_hash(secret)
        session.queue({"txHash": "0xabc"})
        shield = node.execute(
            "privateTokens",
            "shieldTokens",
            [{"tokenAddress": token, "amount": "100", "secretHash": secret_hash}],
        )[0]["json"]
        assert shield == {"txHash": "0xabc"}
        assert session.last_call["json"]["secretHash"] == secret_hash

        # Step 3: The note commitment the owner expects to see
        note = NoteCommitment.create_note(100, token, account["address"])
        nullifier = NoteCommitment.compute_nullifier(
            note.commitment, keys.nullifier_key.private_key, 0
        )
        assert NoteCommitment.verify_nullifier(
            note.commitment, keys.nullifier_key.private_key, 0, nullifier
        )

        # Step 4: The trigger reports the note once
        session.queue({"notes": [{"commitment": note.commitment}]})
        session.queue({"notes": [{"commitment": note.commitment}]})
        trigger = AztecTrigger(node.client)
        state = PollState()
        trigger_params = TriggerParameters.from_host({"event": "noteReceived"})

        first = trigger.poll(trigger_params, state)
        assert [e["commitment"] for e in first] == [note.commitment]
        assert trigger.poll(trigger_params, state) is None

    def test_mixed_batch_with_continue_on_fail(self, node, session):
        """Valid and invalid items in one batch."""
        results = node.execute(
            "utility",
            "deriveKeys",
            [{"masterSecret": "0x" + "1" * 64}, {"masterSecret": "0xbad"}, {}],
            continue_on_fail=True,
        )

        assert results[0]["json"]["nullifierKey"]["publicKey"] == (
            "0xcee21046b9a5f0e04aa536ad13c535182368ae334795762c78b360b4ffda9f2e"
        )
        assert "error" in results[1]["json"]
        assert results[2]["json"]["masterSecret"] != results[0]["json"]["masterSecret"]
        assert session.calls == []
